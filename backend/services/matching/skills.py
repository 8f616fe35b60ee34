"""Skill normalization, matching and weighted aggregation.

Matching is vocabulary-driven:
    - synonyms collapse to one canonical token ("ReactJS", "react.js" -> "react")
    - related skills earn half credit ("javascript" counts partially for "react")
    - must-have skills weigh 2x and cost a flat penalty when missing
"""

import math
from typing import NamedTuple, Sequence

from models.schemas.job_snapshot import JobSnapshot
from models.schemas.match_score import MatchType, RequiredSkill, SkillMatchResult
from services.matching.vocabulary import SkillVocabulary, get_vocabulary

MUST_HAVE_WEIGHT = 2
NICE_TO_HAVE_WEIGHT = 1
RELATED_CREDIT = 0.5
MISSING_MUST_HAVE_PENALTY = 15
MAX_MUST_HAVE_PENALTY = 50


class SkillMatch(NamedTuple):
    matched: bool
    match_type: MatchType


class SkillsScore(NamedTuple):
    skills_score: int
    matched_skills: list[SkillMatchResult]
    must_haves_missing: int


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def normalize_skill(skill: str, vocabulary: SkillVocabulary | None = None) -> str:
    """Canonicalize a raw skill name. Unknown skills come back lowercased and trimmed."""
    vocab = vocabulary or get_vocabulary()
    return vocab.canonical(skill)


def has_skill(
    candidate_skills: Sequence[str],
    required_skill: str,
    vocabulary: SkillVocabulary | None = None,
) -> SkillMatch:
    """Check whether a candidate covers one required skill.

    Synonyms are folded in by normalization, so any synonym hit is reported
    as "exact". "synonym" is part of the match-type vocabulary but never
    produced here.
    """
    vocab = vocabulary or get_vocabulary()
    required = vocab.canonical(required_skill)
    candidate = {vocab.canonical(s) for s in candidate_skills}

    if required in candidate:
        return SkillMatch(True, "exact")

    if candidate & vocab.related_to(required):
        return SkillMatch(True, "related")

    return SkillMatch(False, "none")


def build_required_skills(
    job: JobSnapshot, vocabulary: SkillVocabulary | None = None
) -> list[RequiredSkill]:
    """Flag each of the job's required skills as must-have or not.

    Must-have skills missing from ``required_skills`` are appended so they
    still count toward the score.
    """
    vocab = vocabulary or get_vocabulary()
    must_haves = {vocab.canonical(s) for s in job.must_have_skills if s.strip()}

    skills = [
        RequiredSkill(name=name, is_must_have=vocab.canonical(name) in must_haves)
        for name in job.required_skills
    ]

    listed = {vocab.canonical(name) for name in job.required_skills}
    for name in job.must_have_skills:
        token = vocab.canonical(name)
        if token and token not in listed:
            skills.append(RequiredSkill(name=name, is_must_have=True))
            listed.add(token)
    return skills


def score_skills(
    candidate_skills: Sequence[str],
    required_skills: Sequence[RequiredSkill],
    vocabulary: SkillVocabulary | None = None,
) -> SkillsScore:
    """Aggregate per-skill matches into a 0-100 skills score.

    Returns 0 when there are no required skills; callers are expected to
    reject that case before scoring.
    """
    vocab = vocabulary or get_vocabulary()

    matched_skills: list[SkillMatchResult] = []
    points = 0.0
    total_weight = 0
    must_haves_missing = 0

    for required in required_skills:
        weight = MUST_HAVE_WEIGHT if required.is_must_have else NICE_TO_HAVE_WEIGHT
        total_weight += weight

        result = has_skill(candidate_skills, required.name, vocab)
        if result.matched:
            credit = RELATED_CREDIT if result.match_type == "related" else 1.0
            points += weight * credit
        elif required.is_must_have:
            must_haves_missing += 1

        matched_skills.append(SkillMatchResult(
            skill=required.name,
            matched=result.matched,
            match_type=result.match_type,
            is_must_have=required.is_must_have,
        ))

    base_score = round_half_up(points / total_weight * 100) if total_weight > 0 else 0
    penalty = min(must_haves_missing * MISSING_MUST_HAVE_PENALTY, MAX_MUST_HAVE_PENALTY)

    return SkillsScore(
        skills_score=max(0, base_score - penalty),
        matched_skills=matched_skills,
        must_haves_missing=must_haves_missing,
    )
