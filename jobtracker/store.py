"""
Job storage: an in-memory, ordered collection of job records.

Jobs are held in a dict keyed by identifier and live only as long as
the process. Each FastAPI app owns one JobStore on ``app.state``;
tests build their own isolated instances.
"""
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from fastapi import Request

from .schemas import Job, JobCreate, JobStatus

logger = logging.getLogger("jobtracker.store")

# Fields a partial update may touch; id and created_at are never among them
UPDATABLE_FIELDS = ("title", "company", "application_link", "status")

SAMPLE_JOBS = [
    {
        "title": "Senior Frontend Developer",
        "company": "TechCorp",
        "application_link": "https://techcorp.com/careers/senior-frontend",
        "status": JobStatus.APPLIED,
    },
    {
        "title": "Full Stack Engineer",
        "company": "StartupXYZ",
        "application_link": "https://startupxyz.com/jobs/fullstack",
        "status": JobStatus.INTERVIEWING,
    },
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_job_id() -> str:
    """URL-safe random identifier, 22 characters."""
    return secrets.token_urlsafe(16)


class JobStore:
    """
    Authoritative set of job records for one process.

    Not thread-safe: operations are synchronous and assume a single
    writer, which is how the API server runs them.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = generate_job_id,
    ):
        self._clock = clock
        self._id_factory = id_factory
        self._jobs: Dict[str, Job] = {}
        self._sequence: Dict[str, int] = {}
        # Every id ever handed out, kept so deleted ids are never reused.
        # Grows by one short string per create for the life of the store.
        self._issued_ids = set()
        self._next_sequence = 0

    def __len__(self) -> int:
        return len(self._jobs)

    def _new_id(self) -> str:
        # Identifiers are never reused, not even after a delete
        job_id = self._id_factory()
        while job_id in self._issued_ids:
            job_id = self._id_factory()
        self._issued_ids.add(job_id)
        return job_id

    def list(self) -> List[Job]:
        """All jobs, most recently created first."""
        return sorted(
            self._jobs.values(),
            key=lambda job: (job.created_at, self._sequence[job.id]),
            reverse=True,
        )

    def get(self, job_id: str) -> Optional[Job]:
        """Return the job with this id, or None."""
        return self._jobs.get(job_id)

    def create(self, data: JobCreate) -> Job:
        """Store a new job with a fresh id and timestamps."""
        now = self._clock()
        job = Job(
            **data.model_dump(),
            id=self._new_id(),
            created_at=now,
            updated_at=now,
        )
        self._jobs[job.id] = job
        self._sequence[job.id] = self._next_sequence
        self._next_sequence += 1
        logger.info(f"Created job {job.id} ({job.title} at {job.company})")
        return job

    def update(self, job_id: str, updates: dict) -> Optional[Job]:
        """
        Merge a partial set of fields into an existing job.

        Unknown keys (including id and created_at) are ignored. Returns
        the updated job, or None if no job has this id.
        """
        existing = self._jobs.get(job_id)
        if existing is None:
            return None

        changes = {key: value for key, value in updates.items() if key in UPDATABLE_FIELDS}
        if "status" in changes:
            changes["status"] = JobStatus(changes["status"])

        updated_at = self._clock()
        if updated_at <= existing.updated_at:
            updated_at = existing.updated_at + timedelta(microseconds=1)
        changes["updated_at"] = updated_at

        job = existing.model_copy(update=changes)
        self._jobs[job_id] = job
        logger.info(f"Updated job {job_id}: {sorted(changes)}")
        return job

    def delete(self, job_id: str) -> bool:
        """Remove a job. Returns False if no job has this id."""
        if self._jobs.pop(job_id, None) is None:
            return False
        del self._sequence[job_id]
        logger.info(f"Deleted job {job_id}")
        return True

    def count(self) -> int:
        return len(self._jobs)

    def count_by_status(self) -> Dict[str, int]:
        """Number of jobs per status, every status present."""
        counts = {status.value: 0 for status in JobStatus}
        for job in self._jobs.values():
            counts[job.status.value] += 1
        return counts

    def clear(self) -> None:
        self._jobs.clear()
        self._sequence.clear()


def seed_sample_jobs(store: JobStore) -> int:
    """Insert the demo jobs into an empty store. Returns how many were added."""
    if len(store):
        return 0
    for sample in SAMPLE_JOBS:
        store.create(JobCreate(**sample))
    logger.info(f"Seeded {len(SAMPLE_JOBS)} sample jobs")
    return len(SAMPLE_JOBS)


def get_store(request: Request) -> JobStore:
    """FastAPI dependency returning the app's job store."""
    return request.app.state.job_store
