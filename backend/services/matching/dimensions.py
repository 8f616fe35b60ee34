"""Independent 0-100 dimension scorers: experience, education, location,
availability and salary.

Profiles are usually only partly filled in. When either side lacks the data a
scorer needs, it returns that dimension's neutral default instead of
penalizing the candidate.
"""

import re

DEFAULT_EXPERIENCE_SCORE = 50
DEFAULT_EDUCATION_SCORE = 75
DEFAULT_LOCATION_SCORE = 75
DEFAULT_AVAILABILITY_SCORE = 75
DEFAULT_SALARY_SCORE = 75

# Assumed budget ceiling when a job only states a minimum salary.
SALARY_MAX_FROM_MIN = 1.5

_AVAILABLE_STATUSES = {"available", "actively_looking"}
_UNAVAILABLE_STATUSES = {"not_available", "employed"}

_SALARY_STRIP_RE = re.compile(r"[$€£,\s]")
_LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")


def _text(value: str | None) -> str:
    return (value or "").lower().strip()


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

def score_experience(candidate_years: int | None, required_years: int | None) -> int:
    """Compare years of experience against the job's requirement."""
    if candidate_years is None or required_years is None:
        return DEFAULT_EXPERIENCE_SCORE

    if candidate_years >= required_years:
        return 100
    elif candidate_years >= required_years * 0.7:
        return 75
    elif candidate_years >= required_years * 0.5:
        return 50
    return 25


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------

def score_education(candidate_education: str | None, job_education: str | None) -> int:
    candidate = _text(candidate_education)
    job = _text(job_education)
    if not candidate or not job:
        return DEFAULT_EDUCATION_SCORE

    if candidate in job or job in candidate:
        return 100
    elif "master" in candidate or "phd" in candidate:
        return 90
    elif "bachelor" in candidate:
        return 75
    return 50


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

def score_location(
    candidate_location: str | None,
    job_location: str | None,
    job_type: str | None = None,
) -> int:
    """Remote jobs fit everyone; otherwise compare the location strings."""
    candidate = _text(candidate_location)
    job = _text(job_location)

    if "remote" in job or "remote" in _text(job_type):
        return 100
    if not candidate or not job:
        return DEFAULT_LOCATION_SCORE

    if candidate == job:
        return 100
    elif candidate in job or job in candidate:
        return 75
    return 25


# ---------------------------------------------------------------------------
# Availability
# ---------------------------------------------------------------------------

def score_availability(job_search_status: str | None, availability: str | None) -> int:
    """Score how soon the candidate can start.

    The status is an enum-like value (``actively_looking``); availability is
    free text ("immediate", "2 weeks notice", "one month").
    """
    status = _text(job_search_status)
    text = _text(availability)

    if status in _AVAILABLE_STATUSES:
        return 100
    elif status == "open" or "immediate" in text:
        return 90
    elif "2 week" in text or "two week" in text:
        return 85
    elif "1 month" in text or "one month" in text:
        return 70
    elif status in _UNAVAILABLE_STATUSES:
        return 30
    return DEFAULT_AVAILABILITY_SCORE


# ---------------------------------------------------------------------------
# Salary
# ---------------------------------------------------------------------------

def _parse_amount(part: str) -> float:
    match = _LEADING_NUMBER_RE.match(part)
    if not match:
        return 0.0
    amount = float(match.group())
    if part[match.end():].startswith("k"):
        amount *= 1000
    return amount


def parse_salary(text: str | None) -> float:
    """Parse a free-text salary expectation into a number.

    Handles currency symbols and thousands separators ("$75,000"), a "k"
    suffix ("80k") and ranges, which are averaged ("50k-60k" -> 55000).
    Returns 0.0 when nothing numeric can be read.
    """
    cleaned = _SALARY_STRIP_RE.sub("", text or "").lower()
    if not cleaned:
        return 0.0

    parts = cleaned.split("-")
    low = _parse_amount(parts[0])
    if len(parts) > 1:
        high = _parse_amount(parts[1]) or low
        # "80-90k": the suffix on the upper bound applies to both ends
        if parts[1].rstrip().endswith("k") and "k" not in parts[0] and low < 1000:
            low *= 1000
        return (low + high) / 2
    return low


def score_salary(
    expected_salary: str | None,
    salary_min: int | None,
    salary_max: int | None,
) -> int:
    """Compare the candidate's expectation against the job's salary band.

    Asking for less than the band is a perfect fit from the employer's side.
    When only a minimum is posted, the ceiling is assumed to be 1.5x of it.
    """
    if not expected_salary or not (salary_min or salary_max):
        return DEFAULT_SALARY_SCORE

    expected = parse_salary(expected_salary)
    if expected <= 0:
        return DEFAULT_SALARY_SCORE

    min_salary = salary_min or 0
    max_salary = salary_max or min_salary * SALARY_MAX_FROM_MIN

    if expected <= max_salary:
        # within the band, or below it
        return 100
    elif expected <= max_salary * 1.1:
        return 80
    elif expected <= max_salary * 1.25:
        return 60
    return 30
