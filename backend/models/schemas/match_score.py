"""Scorer output: overall 0-100 score with a per-dimension breakdown."""

from typing import Literal

from models.schemas.base import CamelModel

MatchType = Literal["exact", "synonym", "related", "none"]


class RequiredSkill(CamelModel):
    name: str
    is_must_have: bool = False


class SkillMatchResult(CamelModel):
    """Outcome of matching one required skill against the candidate's skills."""
    skill: str
    matched: bool = False
    match_type: MatchType = "none"
    is_must_have: bool = False


class LocationDetails(CamelModel):
    location: int = 0
    availability: int = 0
    salary: int = 0


class ScoreBreakdown(CamelModel):
    skills: int = 0
    experience: int = 0
    education: int = 0
    location_and_fit: int = 0
    location_details: LocationDetails = LocationDetails()


class MatchScore(CamelModel):
    score: int = 0
    matched_skills: list[SkillMatchResult] = []
    must_haves_missing: int = 0
    breakdown: ScoreBreakdown = ScoreBreakdown()


class RankedMatch(CamelModel):
    """A candidate's match against one job, as listed on a ranking."""
    candidate_id: str
    rank: int
    match: MatchScore
