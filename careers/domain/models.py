from dataclasses import dataclass
from enum import Enum
from typing import Optional


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


@dataclass
class Job:
    id: int
    title: str
    department: str
    location: str
    type: JobType
    salary: str
    summary: str
    description: str
    requirements: str  # newline-delimited bullets
    posted_date: str  # ISO date, fixed at creation
    nice_to_have: Optional[str] = ""


@dataclass
class User:
    id: int
    username: str
    password: str
    is_admin: str = "false"  # "true" / "false" literal

    @property
    def admin(self) -> bool:
        return self.is_admin == "true"
