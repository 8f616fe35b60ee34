from models.schemas.base import CamelModel
from models.schemas.candidate_snapshot import CandidateSnapshot
from models.schemas.job_snapshot import JobSnapshot
from models.schemas.match_score import RankedMatch


class MessageResponse(CamelModel):
    message: str


class CandidateRecord(CamelModel):
    id: str
    candidate: CandidateSnapshot


class JobRecord(CamelModel):
    id: str
    job: JobSnapshot


class JobMatchesResponse(CamelModel):
    job_id: str
    total_candidates: int = 0
    matches: list[RankedMatch] = []
