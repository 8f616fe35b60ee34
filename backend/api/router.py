import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_record_storage
from config import settings
from models.requests import ApplicationCreateRequest, JobCreateRequest, MatchScoreRequest
from models.responses import CandidateRecord, JobMatchesResponse, JobRecord, MessageResponse
from models.schemas.application import Application
from models.schemas.candidate_snapshot import CandidateSnapshot
from models.schemas.job_snapshot import JobSnapshot
from models.schemas.match_score import MatchScore
from services.matching import MissingJobSkillsError, compute_match_score, rank_candidates
from services.matching.vocabulary import get_vocabulary
from services.storage import MemoryStorage, RecordNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

ERROR_RESPONSES = {
    400: {"model": MessageResponse, "description": "Invalid request or job without required skills"},
    404: {"model": MessageResponse, "description": "Candidate or job not found"},
    500: {"model": MessageResponse, "description": "Unexpected scoring failure"},
}


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "canonical_skills": len(get_vocabulary().synonyms),
    }


@router.post("/match/score", response_model=MatchScore, responses=ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def match_score(
    request: Request,
    body: MatchScoreRequest,
    storage: MemoryStorage = Depends(get_record_storage),
):
    try:
        if body.uses_records:
            candidate = storage.get_candidate_by_id(body.candidate_id)
            job = storage.get_job(body.job_id)
            if candidate is None or job is None:
                raise RecordNotFoundError(f"candidate={body.candidate_id} job={body.job_id}")
        else:
            # Legacy payload: no profile data, so only skills are really scored
            candidate = CandidateSnapshot(skills=body.candidate_skills)
            job = JobSnapshot(required_skills=body.job_skills)

        return compute_match_score(candidate, job)
    except MissingJobSkillsError:
        raise HTTPException(status_code=400, detail="Job skills required")
    except RecordNotFoundError as e:
        logger.info("Match requested for unknown record: %s", e)
        raise HTTPException(status_code=404, detail="Candidate or job not found")
    except Exception:
        logger.exception("Match scoring error")
        raise HTTPException(status_code=500, detail="match error")


# --- Candidates ---

@router.post("/candidates", response_model=CandidateRecord, status_code=201)
async def create_candidate(
    body: CandidateSnapshot,
    storage: MemoryStorage = Depends(get_record_storage),
):
    candidate_id = storage.create_candidate(body)
    return CandidateRecord(id=candidate_id, candidate=body)


@router.get("/candidates/{candidate_id}", response_model=CandidateRecord)
async def get_candidate(
    candidate_id: str,
    storage: MemoryStorage = Depends(get_record_storage),
):
    candidate = storage.get_candidate_by_id(candidate_id)
    if candidate is None:
        raise HTTPException(status_code=404, detail="Candidate not found")
    return CandidateRecord(id=candidate_id, candidate=candidate)


# --- Jobs ---

@router.post("/jobs", response_model=JobRecord, status_code=201)
async def create_job(
    body: JobCreateRequest,
    storage: MemoryStorage = Depends(get_record_storage),
):
    job = JobSnapshot.model_validate(body.model_dump())
    job_id = storage.create_job(job)
    return JobRecord(id=job_id, job=job)


@router.get("/jobs", response_model=list[JobRecord])
async def list_jobs(storage: MemoryStorage = Depends(get_record_storage)):
    return [JobRecord(id=job_id, job=job) for job_id, job in storage.get_all_jobs()]


@router.get("/jobs/{job_id}", response_model=JobRecord)
async def get_job(
    job_id: str,
    storage: MemoryStorage = Depends(get_record_storage),
):
    job = storage.get_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return JobRecord(id=job_id, job=job)


@router.put("/jobs/{job_id}", response_model=JobRecord, responses=ERROR_RESPONSES)
async def update_job(
    job_id: str,
    body: JobCreateRequest,
    storage: MemoryStorage = Depends(get_record_storage),
):
    job = JobSnapshot.model_validate(body.model_dump())
    try:
        storage.update_job(job_id, job)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Job not found")
    return JobRecord(id=job_id, job=job)


@router.delete("/jobs/{job_id}", status_code=204)
async def delete_job(
    job_id: str,
    storage: MemoryStorage = Depends(get_record_storage),
):
    try:
        storage.delete_job(job_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Job not found")
    return Response(status_code=204)


@router.get("/jobs/{job_id}/matches", response_model=JobMatchesResponse)
async def job_matches(
    job_id: str,
    limit: int = Query(default=20, ge=1, le=settings.max_ranked_candidates),
    storage: MemoryStorage = Depends(get_record_storage),
):
    """Rank every stored candidate against one job, best match first."""
    job = storage.get_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")

    candidates = storage.get_all_candidates()
    try:
        matches = rank_candidates(job, candidates, limit=limit)
    except MissingJobSkillsError:
        raise HTTPException(status_code=400, detail="Job skills required")

    return JobMatchesResponse(
        job_id=job_id,
        total_candidates=len(candidates),
        matches=matches,
    )


# --- Applications ---

@router.post("/applications", response_model=Application, status_code=201, responses=ERROR_RESPONSES)
async def create_application(
    body: ApplicationCreateRequest,
    storage: MemoryStorage = Depends(get_record_storage),
):
    """Apply a candidate to a job, storing the match score at apply time."""
    candidate = storage.get_candidate_by_id(body.candidate_id)
    job = storage.get_job(body.job_id)
    if candidate is None or job is None:
        raise HTTPException(status_code=404, detail="Candidate or job not found")

    try:
        match = compute_match_score(candidate, job)
    except MissingJobSkillsError:
        raise HTTPException(status_code=400, detail="Job skills required")

    return storage.create_application(
        body.candidate_id, body.job_id, match.score, cover_letter=body.cover_letter,
    )


@router.get("/jobs/{job_id}/applications", response_model=list[Application], responses=ERROR_RESPONSES)
async def job_applications(
    job_id: str,
    min_score: int | None = Query(default=None, ge=0, le=100),
    max_score: int | None = Query(default=None, ge=0, le=100),
    storage: MemoryStorage = Depends(get_record_storage),
):
    """Applications to a job, optionally limited to a match-score band."""
    if storage.get_job(job_id) is None:
        raise HTTPException(status_code=404, detail="Job not found")

    applications = storage.get_applications_by_job(job_id)
    if min_score is not None:
        applications = [a for a in applications if a.match_score >= min_score]
    if max_score is not None:
        applications = [a for a in applications if a.match_score <= max_score]
    return applications
