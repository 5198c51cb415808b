import logging
from typing import Any, List, Mapping, Optional

from careers.domain.models import Job
from careers.infrastructure.persistence.in_memory_repo import InMemoryRecordStore

logger = logging.getLogger(__name__)


def _criterion(value: Optional[str]) -> Optional[str]:
    """Blank or "all" means the caller does not want to filter on this field."""
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == "all":
        return None
    return value


def list_jobs(store: InMemoryRecordStore) -> List[Job]:
    return store.get_all_jobs()


def filter_jobs(
    store: InMemoryRecordStore,
    department: Optional[str] = None,
    location: Optional[str] = None,
    job_type: Optional[str] = None,
) -> List[Job]:
    return store.get_jobs_by_filter(
        department=_criterion(department),
        location=_criterion(location),
        type=_criterion(job_type),
    )


def get_job(store: InMemoryRecordStore, job_id: int) -> Optional[Job]:
    return store.get_job_by_id(job_id)


def create_job(store: InMemoryRecordStore, job_fields: Mapping[str, Any]) -> Job:
    """
    Store a new posting. Fields are expected to be validated already; the
    store assigns the id and posted date.
    """
    job = store.create_job(job_fields)
    logger.info("Created job %s (%s)", job.id, job.title)
    return job


def update_job(
    store: InMemoryRecordStore,
    job_id: int,
    job_fields: Mapping[str, Any],
) -> Optional[Job]:
    job = store.update_job(job_id, job_fields)
    if job is None:
        logger.info("Update skipped, job %s not found", job_id)
    else:
        logger.info("Updated job %s fields=%s", job_id, sorted(job_fields))
    return job


def delete_job(store: InMemoryRecordStore, job_id: int) -> bool:
    deleted = store.delete_job(job_id)
    if deleted:
        logger.info("Deleted job %s", job_id)
    return deleted
