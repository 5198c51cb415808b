from dataclasses import fields, replace
from datetime import date
from threading import Lock
from typing import Any, Callable, Dict, List, Mapping, Optional

from careers.domain.models import Job, JobType, User

_JOB_FIELDS = frozenset(f.name for f in fields(Job)) - {"id", "posted_date"}


class InMemoryRecordStore:
    """
    In-memory store for job postings and users.

    Data lives only for the lifetime of the process. Every read hands out
    copies, so callers can never mutate stored records behind the lock.
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._jobs: Dict[int, Job] = {}
        self._users: Dict[int, User] = {}
        self._next_job_id = 1
        self._next_user_id = 1
        self._today = today
        self._lock = Lock()

    # Jobs

    def create_job(self, job_fields: Mapping[str, Any]) -> Job:
        unknown = set(job_fields) - _JOB_FIELDS
        if unknown:
            raise ValueError(f"Unknown job field(s): {', '.join(sorted(unknown))}")
        with self._lock:
            job = Job(
                id=self._next_job_id,
                posted_date=self._today().isoformat(),
                **job_fields,
            )
            job.type = JobType(job.type)
            self._jobs[job.id] = job
            self._next_job_id += 1
            return replace(job)

    def get_job_by_id(self, job_id: int) -> Optional[Job]:
        with self._lock:
            job = self._jobs.get(job_id)
            return replace(job) if job else None

    def get_all_jobs(self) -> List[Job]:
        """Newest first (descending id)."""
        with self._lock:
            return [replace(self._jobs[k]) for k in sorted(self._jobs, reverse=True)]

    def update_job(self, job_id: int, job_fields: Mapping[str, Any]) -> Optional[Job]:
        unknown = set(job_fields) - _JOB_FIELDS
        if unknown:
            raise ValueError(f"Unknown job field(s): {', '.join(sorted(unknown))}")
        with self._lock:
            existing = self._jobs.get(job_id)
            if existing is None:
                return None
            updated = replace(existing, **job_fields)
            updated.type = JobType(updated.type)
            self._jobs[job_id] = updated
            return replace(updated)

    def delete_job(self, job_id: int) -> bool:
        with self._lock:
            return self._jobs.pop(job_id, None) is not None

    def get_jobs_by_filter(
        self,
        department: Optional[str] = None,
        location: Optional[str] = None,
        type: Optional[str] = None,
    ) -> List[Job]:
        """
        AND of exact-equality checks. A criterion that is None, empty or
        "all" places no constraint on its attribute.
        """
        supplied = {"department": department, "location": location, "type": type}
        criteria = {
            name: value
            for name, value in supplied.items()
            if value and value != "all"
        }
        return [
            job
            for job in self.get_all_jobs()
            if all(
                getattr(job, name) == value
                for name, value in criteria.items()
            )
        ]

    def count_jobs(self) -> int:
        with self._lock:
            return len(self._jobs)

    # Users

    def create_user(self, user_fields: Mapping[str, Any]) -> User:
        """Usernames are not checked for collisions."""
        with self._lock:
            user_id = self._next_user_id
            self._next_user_id += 1
            user = User(
                id=user_id,
                username=user_fields["username"],
                password=user_fields["password"],
                is_admin=user_fields.get("is_admin") or "false",
            )
            self._users[user_id] = user
            return replace(user)

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return replace(user)
        return None
