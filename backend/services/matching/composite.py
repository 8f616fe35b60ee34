"""Composite match score: skills + experience + education + location & fit.

Flow:
    candidate + job
      ├─ score_skills()          → skills (must-have weighted, penalized)
      ├─ score_experience()      → experience
      ├─ score_education()       → education
      ├─ score_location()   ┐
      ├─ score_availability()├─→ location_and_fit (0.4 / 0.3 / 0.3)
      └─ score_salary()     ┘
                    ↓
      0.40 skills + 0.25 experience + 0.15 education + 0.20 location_and_fit
"""

import logging
from typing import Iterable

from models.schemas.candidate_snapshot import CandidateSnapshot
from models.schemas.job_snapshot import JobSnapshot
from models.schemas.match_score import LocationDetails, MatchScore, RankedMatch, ScoreBreakdown
from services.matching.dimensions import (
    score_availability,
    score_education,
    score_experience,
    score_location,
    score_salary,
)
from services.matching.errors import MissingJobSkillsError
from services.matching.skills import build_required_skills, round_half_up, score_skills
from services.matching.vocabulary import SkillVocabulary, get_vocabulary

logger = logging.getLogger(__name__)

# Weights for the final score
W_SKILLS = 0.40
W_EXPERIENCE = 0.25
W_EDUCATION = 0.15
W_LOCATION_AND_FIT = 0.20

# Weights inside the location & fit dimension
W_LOCATION = 0.4
W_AVAILABILITY = 0.3
W_SALARY = 0.3


def _clamp(score: int) -> int:
    return min(100, max(0, score))


def compute_match_score(
    candidate: CandidateSnapshot,
    job: JobSnapshot,
    vocabulary: SkillVocabulary | None = None,
) -> MatchScore:
    """Score how well a candidate fits a job. Deterministic and side-effect free.

    Raises MissingJobSkillsError if the job lists no required skills.
    """
    if not job.required_skills:
        raise MissingJobSkillsError()

    vocab = vocabulary or get_vocabulary()

    skills = score_skills(candidate.skills, build_required_skills(job, vocab), vocab)

    candidate_years = (
        candidate.years_of_experience
        if candidate.years_of_experience is not None
        else candidate.experience
    )
    experience = score_experience(candidate_years, job.experience)
    education = score_education(candidate.education, job.education)

    location = score_location(candidate.location, job.location, job.job_type)
    availability = score_availability(candidate.job_search_status, candidate.availability)
    salary = score_salary(candidate.expected_salary, job.salary_min, job.salary_max)

    location_and_fit = _clamp(round_half_up(
        location * W_LOCATION
        + availability * W_AVAILABILITY
        + salary * W_SALARY
    ))

    overall = _clamp(round_half_up(
        skills.skills_score * W_SKILLS
        + experience * W_EXPERIENCE
        + education * W_EDUCATION
        + location_and_fit * W_LOCATION_AND_FIT
    ))

    logger.debug(
        "Match score %d (skills=%d experience=%d education=%d location_and_fit=%d, %d must-haves missing)",
        overall, skills.skills_score, experience, education, location_and_fit,
        skills.must_haves_missing,
    )

    return MatchScore(
        score=overall,
        matched_skills=skills.matched_skills,
        must_haves_missing=skills.must_haves_missing,
        breakdown=ScoreBreakdown(
            skills=skills.skills_score,
            experience=experience,
            education=education,
            location_and_fit=location_and_fit,
            location_details=LocationDetails(
                location=location,
                availability=availability,
                salary=salary,
            ),
        ),
    )


def rank_candidates(
    job: JobSnapshot,
    candidates: Iterable[tuple[str, CandidateSnapshot]],
    limit: int | None = None,
    vocabulary: SkillVocabulary | None = None,
) -> list[RankedMatch]:
    """Score every ``(candidate_id, candidate)`` pair against one job, best first.

    Ties on score go to the candidate missing fewer must-haves, then to the
    lower candidate id, so the order is stable across calls.
    """
    if not job.required_skills:
        raise MissingJobSkillsError()

    vocab = vocabulary or get_vocabulary()
    scored = [
        (candidate_id, compute_match_score(candidate, job, vocab))
        for candidate_id, candidate in candidates
    ]
    scored.sort(key=lambda item: (-item[1].score, item[1].must_haves_missing, item[0]))

    if limit is not None:
        scored = scored[:limit]

    return [
        RankedMatch(candidate_id=candidate_id, rank=i + 1, match=match)
        for i, (candidate_id, match) in enumerate(scored)
    ]
