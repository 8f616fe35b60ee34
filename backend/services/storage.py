"""In-memory record storage for candidates, jobs and applications.

Records are resolved by id when a match is requested as ``{candidateId, jobId}``.
Stored records are copied on the way in and on the way out, so callers never
hold a reference into the store.
"""

import logging
import threading
import uuid

from models.schemas.application import Application
from models.schemas.candidate_snapshot import CandidateSnapshot
from models.schemas.job_snapshot import JobSnapshot

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    """No candidate, job or application exists with the requested id."""


class MemoryStorage:
    """Thread-safe dict-backed store. Ids are generated UUID strings."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._candidates: dict[str, CandidateSnapshot] = {}
        self._jobs: dict[str, JobSnapshot] = {}
        self._applications: dict[str, Application] = {}

    # --- Candidates ---

    def create_candidate(self, candidate: CandidateSnapshot) -> str:
        candidate_id = str(uuid.uuid4())
        with self._lock:
            self._candidates[candidate_id] = candidate.model_copy(deep=True)
        logger.info("Created candidate %s", candidate_id)
        return candidate_id

    def get_candidate_by_id(self, candidate_id: str) -> CandidateSnapshot | None:
        with self._lock:
            candidate = self._candidates.get(candidate_id)
            return candidate.model_copy(deep=True) if candidate is not None else None

    def get_all_candidates(self) -> list[tuple[str, CandidateSnapshot]]:
        with self._lock:
            return [(cid, c.model_copy(deep=True)) for cid, c in self._candidates.items()]

    # --- Jobs ---

    def create_job(self, job: JobSnapshot) -> str:
        job_id = str(uuid.uuid4())
        with self._lock:
            self._jobs[job_id] = job.model_copy(deep=True)
        logger.info("Created job %s", job_id)
        return job_id

    def get_job(self, job_id: str) -> JobSnapshot | None:
        with self._lock:
            job = self._jobs.get(job_id)
            return job.model_copy(deep=True) if job is not None else None

    def get_all_jobs(self) -> list[tuple[str, JobSnapshot]]:
        with self._lock:
            return [(jid, j.model_copy(deep=True)) for jid, j in self._jobs.items()]

    def update_job(self, job_id: str, job: JobSnapshot) -> None:
        with self._lock:
            if job_id not in self._jobs:
                raise RecordNotFoundError(f"Job {job_id} not found")
            self._jobs[job_id] = job.model_copy(deep=True)
        logger.info("Updated job %s", job_id)

    def delete_job(self, job_id: str) -> None:
        with self._lock:
            if self._jobs.pop(job_id, None) is None:
                raise RecordNotFoundError(f"Job {job_id} not found")
        logger.info("Deleted job %s", job_id)

    # --- Applications ---

    def create_application(
        self,
        candidate_id: str,
        job_id: str,
        match_score: int,
        cover_letter: str | None = None,
    ) -> Application:
        application = Application(
            id=str(uuid.uuid4()),
            candidate_id=candidate_id,
            job_id=job_id,
            match_score=match_score,
            cover_letter=cover_letter,
        )
        with self._lock:
            self._applications[application.id] = application
        logger.info(
            "Created application %s (candidate=%s job=%s score=%d)",
            application.id, candidate_id, job_id, match_score,
        )
        return application.model_copy(deep=True)

    def get_applications_by_job(self, job_id: str) -> list[Application]:
        with self._lock:
            return [
                a.model_copy(deep=True) for a in self._applications.values()
                if a.job_id == job_id
            ]

    def clear(self) -> None:
        with self._lock:
            self._candidates.clear()
            self._jobs.clear()
            self._applications.clear()


_storage: MemoryStorage | None = None


def get_storage() -> MemoryStorage:
    """Return the process-wide storage, creating it on first use."""
    global _storage
    if _storage is None:
        _storage = MemoryStorage()
    return _storage
