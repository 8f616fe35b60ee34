"""Candidate profile fields consumed by the match scorer."""

from pydantic import Field

from models.schemas.base import CamelModel


class CandidateSnapshot(CamelModel):
    """A candidate as the scorer sees it. Every field except skills is optional.

    ``experience`` is the legacy years-of-experience field; it is only read when
    ``years_of_experience`` is absent.
    """
    skills: list[str] = []
    years_of_experience: int | None = Field(default=None, ge=0)
    experience: int | None = Field(default=None, ge=0)
    education: str | None = None
    location: str | None = None
    job_search_status: str | None = None  # available, actively_looking, open, employed, not_available
    availability: str | None = None  # free text: "immediate", "2 weeks", "1 month", ...
    expected_salary: str | None = None  # "80k", "$75,000", "50000-60000"
