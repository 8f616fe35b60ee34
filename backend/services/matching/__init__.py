"""Candidate/job match scoring."""

from services.matching.composite import compute_match_score, rank_candidates
from services.matching.dimensions import (
    parse_salary,
    score_availability,
    score_education,
    score_experience,
    score_location,
    score_salary,
)
from services.matching.errors import MatchingError, MissingJobSkillsError
from services.matching.skills import build_required_skills, has_skill, normalize_skill, score_skills
from services.matching.vocabulary import SkillVocabulary, get_vocabulary, load_vocabulary

__all__ = [
    "compute_match_score",
    "rank_candidates",
    "parse_salary",
    "score_availability",
    "score_education",
    "score_experience",
    "score_location",
    "score_salary",
    "MatchingError",
    "MissingJobSkillsError",
    "build_required_skills",
    "has_skill",
    "normalize_skill",
    "score_skills",
    "SkillVocabulary",
    "get_vocabulary",
    "load_vocabulary",
]
