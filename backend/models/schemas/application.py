"""A candidate's application to a job, with the match score taken at apply time."""

from datetime import datetime, timezone

from pydantic import Field

from models.schemas.base import CamelModel


class Application(CamelModel):
    id: str
    candidate_id: str
    job_id: str
    status: str = "applied"  # applied, viewed, shortlisted, interview, rejected, offered
    match_score: int = Field(default=0, ge=0, le=100)
    cover_letter: str | None = None
    applied_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
