from pydantic import ConfigDict, Field, model_validator

from models.schemas.base import CamelModel
from models.schemas.job_snapshot import JobSnapshot


class MatchScoreRequest(CamelModel):
    """Either ``candidateId`` + ``jobId`` (records resolved from storage) or the
    legacy ``candidateSkills`` + ``jobSkills`` pair of raw skill lists."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    candidate_id: str | None = None
    job_id: str | None = None
    candidate_skills: list[str] = Field(default=[], max_length=500)
    job_skills: list[str] = Field(default=[], max_length=500)

    @property
    def uses_records(self) -> bool:
        return bool(self.candidate_id and self.job_id)

    @model_validator(mode="before")
    @classmethod
    def _lenient_payload(cls, data):
        # Anything that isn't an object carries no skills: scored as an empty legacy request
        if not isinstance(data, dict):
            return {}
        # Legacy clients sometimes send numbers or mixed values in skill lists
        for key in ("candidateSkills", "candidate_skills", "jobSkills", "job_skills"):
            if key not in data:
                continue
            value = data[key]
            data = {**data, key: [str(v) for v in value] if isinstance(value, list) else []}
        return data


class JobCreateRequest(JobSnapshot):
    """A job posting must list at least one required skill to be matchable."""
    required_skills: list[str] = Field(..., min_length=1)


class ApplicationCreateRequest(CamelModel):
    candidate_id: str
    job_id: str
    cover_letter: str | None = Field(default=None, max_length=10000)
