"""
Reusable lookup helpers for job routes.

These functions turn the store's not-found signal into HTTP errors.
"""
from fastapi import HTTPException

from .schemas import Job
from .store import JobStore


def get_job_or_404(store: JobStore, job_id: str, label: str = "Job") -> Job:
    """Fetch a job by id, or raise 404."""
    job = store.get(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return job
