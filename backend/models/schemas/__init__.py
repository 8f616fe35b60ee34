"""Pydantic contracts for the match scorer."""

from models.schemas.application import Application
from models.schemas.candidate_snapshot import CandidateSnapshot
from models.schemas.job_snapshot import JobSnapshot
from models.schemas.match_score import (
    LocationDetails,
    MatchScore,
    RankedMatch,
    RequiredSkill,
    ScoreBreakdown,
    SkillMatchResult,
)

__all__ = [
    "Application",
    "CandidateSnapshot",
    "JobSnapshot",
    "LocationDetails",
    "MatchScore",
    "RankedMatch",
    "RequiredSkill",
    "ScoreBreakdown",
    "SkillMatchResult",
]
