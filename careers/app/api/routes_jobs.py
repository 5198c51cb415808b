import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from careers.app.api.deps import get_store
from careers.app.api.errors import internal_errors
from careers.app.schemas.jobs import JobCreate, JobOut, JobUpdate
from careers.domain.models import Job
from careers.domain.services import job_service
from careers.infrastructure.persistence.in_memory_repo import InMemoryRecordStore

router = APIRouter(prefix="/jobs", tags=["jobs"])


_JOB_ID_RE = re.compile(r"[+-]?[0-9]+")


def _parse_job_id(raw: str) -> int:
    """ASCII decimal digits only; no underscores or other Unicode digits."""
    raw = raw.strip()
    if not _JOB_ID_RE.fullmatch(raw):
        raise HTTPException(status_code=400, detail="Invalid job ID")
    return int(raw)


def _job_out(job: Job) -> JobOut:
    return JobOut(
        id=job.id,
        title=job.title,
        department=job.department,
        location=job.location,
        type=job.type,
        salary=job.salary,
        summary=job.summary,
        description=job.description,
        requirements=job.requirements,
        niceToHave=job.nice_to_have,
        postedDate=job.posted_date,
    )


@router.get("", response_model=List[JobOut])
async def list_jobs(store: InMemoryRecordStore = Depends(get_store)):
    """All postings, newest first."""
    with internal_errors("Failed to fetch jobs"):
        jobs = job_service.list_jobs(store)
    return [_job_out(j) for j in jobs]


@router.get("/filter", response_model=List[JobOut])
async def filter_jobs(
    department: Optional[str] = None,
    location: Optional[str] = None,
    job_type: Optional[str] = Query(None, alias="type"),
    store: InMemoryRecordStore = Depends(get_store),
):
    """
    Postings matching every supplied criterion. Omitted, empty or "all"
    criteria do not constrain the result.
    """
    with internal_errors("Failed to filter jobs"):
        jobs = job_service.filter_jobs(
            store,
            department=department,
            location=location,
            job_type=job_type,
        )
    return [_job_out(j) for j in jobs]


@router.get("/{job_id}", response_model=JobOut)
async def get_job(job_id: str, store: InMemoryRecordStore = Depends(get_store)):
    parsed_id = _parse_job_id(job_id)
    with internal_errors("Failed to fetch job"):
        job = job_service.get_job(store, parsed_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return _job_out(job)


@router.post("", response_model=JobOut, status_code=201)
async def create_job(body: JobCreate, store: InMemoryRecordStore = Depends(get_store)):
    with internal_errors("Failed to create job"):
        job = job_service.create_job(store, body.to_fields())
    return _job_out(job)


@router.put("/{job_id}", response_model=JobOut)
async def update_job(
    job_id: str,
    body: JobUpdate,
    store: InMemoryRecordStore = Depends(get_store),
):
    """Apply the fields present in the body; id and posted date never change."""
    parsed_id = _parse_job_id(job_id)
    with internal_errors("Failed to update job"):
        job = job_service.update_job(store, parsed_id, body.to_fields())
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return _job_out(job)


@router.delete("/{job_id}", status_code=204, response_class=Response)
async def delete_job(job_id: str, store: InMemoryRecordStore = Depends(get_store)):
    parsed_id = _parse_job_id(job_id)
    with internal_errors("Failed to delete job"):
        deleted = job_service.delete_job(store, parsed_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Job not found")
    return Response(status_code=204)
