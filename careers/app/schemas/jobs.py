from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from careers.domain.models import JobType

# Wire (camelCase) name -> domain attribute name
_FIELD_NAMES = {
    "title": "title",
    "department": "department",
    "location": "location",
    "type": "type",
    "salary": "salary",
    "summary": "summary",
    "description": "description",
    "requirements": "requirements",
    "niceToHave": "nice_to_have",
}
_NULLABLE = {"niceToHave"}


def _to_domain_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    return {_FIELD_NAMES[name]: value for name, value in data.items()}


class JobCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    department: str
    location: str
    type: JobType
    salary: str
    summary: str
    description: str
    requirements: str
    niceToHave: Optional[str] = ""

    def to_fields(self) -> Dict[str, Any]:
        return _to_domain_fields(self.model_dump())


class JobUpdate(BaseModel):
    """Partial update: only the fields present in the request body are applied."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    type: Optional[JobType] = None
    salary: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    niceToHave: Optional[str] = None

    @model_validator(mode="after")
    def reject_nulls(self) -> "JobUpdate":
        nulls = sorted(
            name
            for name in self.model_fields_set - _NULLABLE
            if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"Field(s) cannot be null: {', '.join(nulls)}")
        return self

    def to_fields(self) -> Dict[str, Any]:
        return _to_domain_fields(self.model_dump(exclude_unset=True))


class JobOut(BaseModel):
    id: int
    title: str
    department: str
    location: str
    type: JobType
    salary: str
    summary: str
    description: str
    requirements: str
    niceToHave: Optional[str] = None
    postedDate: str
