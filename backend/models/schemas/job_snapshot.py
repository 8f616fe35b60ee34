"""Job posting fields consumed by the match scorer."""

from pydantic import Field

from models.schemas.base import CamelModel


class JobSnapshot(CamelModel):
    """A job posting as the scorer sees it.

    ``must_have_skills`` are critical skills: double weight plus a penalty when
    missing. ``salary_min``/``salary_max`` keep their snake_case wire names.
    """
    required_skills: list[str] = []
    must_have_skills: list[str] = []
    experience: int | None = Field(default=None, ge=0)  # required years
    education: str | None = None
    location: str | None = None
    job_type: str | None = None  # full-time, part-time, contract, remote
    salary_min: int | None = Field(default=None, alias="salary_min", ge=0)
    salary_max: int | None = Field(default=None, alias="salary_max", ge=0)
