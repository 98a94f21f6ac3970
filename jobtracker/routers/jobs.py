"""
JobTracker - CRUD API for job applications.

Endpoints for recording job postings and moving them through
Applied / Interviewing / Rejected / Offer.
"""
from fastapi import APIRouter, Depends, HTTPException, Request
from typing import List

from ..schemas import Job, JobCreate, JobUpdate, JobStats
from ..store import JobStore, get_store
from ..query_helpers import get_job_or_404
from ..rate_limit import limiter, RATE_LIMIT_GENERAL, RATE_LIMIT_READ

router = APIRouter()


@router.get("", response_model=List[Job])
@limiter.limit(RATE_LIMIT_READ)
def list_jobs(
    request: Request,
    store: JobStore = Depends(get_store)
):
    """List all jobs, newest first."""
    return store.list()


@router.post("", response_model=Job, status_code=201)
@limiter.limit(RATE_LIMIT_GENERAL)
def create_job(
    request: Request,
    job: JobCreate,
    store: JobStore = Depends(get_store)
):
    """Create a new job."""
    return store.create(job)


@router.get("/stats", response_model=JobStats)
@limiter.limit(RATE_LIMIT_READ)
def get_job_stats(
    request: Request,
    store: JobStore = Depends(get_store)
):
    """Get job counts for the dashboard."""
    return JobStats(total=store.count(), by_status=store.count_by_status())


@router.get("/{job_id}", response_model=Job)
@limiter.limit(RATE_LIMIT_READ)
def get_job(
    request: Request,
    job_id: str,
    store: JobStore = Depends(get_store)
):
    """Get a specific job."""
    return get_job_or_404(store, job_id)


@router.put("/{job_id}", response_model=Job)
@router.patch("/{job_id}", response_model=Job)
@limiter.limit(RATE_LIMIT_GENERAL)
def update_job(
    request: Request,
    job_id: str,
    job: JobUpdate,
    store: JobStore = Depends(get_store)
):
    """Update any subset of a job's title, company, link and status."""
    update_data = job.model_dump(exclude_unset=True, exclude_none=True)
    updated = store.update(job_id, update_data)
    if updated is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return updated


@router.delete("/{job_id}")
@limiter.limit(RATE_LIMIT_GENERAL)
def delete_job(
    request: Request,
    job_id: str,
    store: JobStore = Depends(get_store)
):
    """Delete a job."""
    if not store.delete(job_id):
        raise HTTPException(status_code=404, detail="Job not found")
    return {"message": "Job deleted successfully"}
