"""Tests for the experience, education, location, availability and salary scorers."""

import pytest

from services.matching.dimensions import (
    DEFAULT_AVAILABILITY_SCORE,
    DEFAULT_EDUCATION_SCORE,
    DEFAULT_EXPERIENCE_SCORE,
    DEFAULT_LOCATION_SCORE,
    DEFAULT_SALARY_SCORE,
    parse_salary,
    score_availability,
    score_education,
    score_experience,
    score_location,
    score_salary,
)


class TestExperience:
    @pytest.mark.parametrize(
        "candidate_years, required_years, expected",
        [
            (5, 3, 100),
            (3, 3, 100),
            (0, 0, 100),
            (8, 10, 75),
            (6, 10, 50),
            (4, 10, 25),
            (0, 5, 25),
        ],
    )
    def test_thresholds(self, candidate_years, required_years, expected):
        assert score_experience(candidate_years, required_years) == expected

    def test_missing_data_is_neutral(self):
        assert score_experience(None, 3) == DEFAULT_EXPERIENCE_SCORE
        assert score_experience(5, None) == DEFAULT_EXPERIENCE_SCORE
        assert score_experience(None, None) == 50


class TestEducation:
    def test_containment_either_direction(self):
        assert score_education("BSc Computer Science", "bsc computer science") == 100
        assert score_education("Bachelor", "Bachelor's degree in CS") == 100
        assert score_education("Master of Science in Physics", "master") == 100

    def test_advanced_degree(self):
        assert score_education("PhD Physics", "Bachelor's in CS") == 90
        assert score_education("Master of Engineering", "Bachelor's in CS") == 90

    def test_bachelor(self):
        assert score_education("Bachelor of Arts", "Master of Engineering") == 75

    def test_other(self):
        assert score_education("High school diploma", "Bachelor") == 50

    def test_missing_data_is_neutral(self):
        assert score_education(None, "Bachelor") == DEFAULT_EDUCATION_SCORE
        assert score_education("Bachelor", "") == DEFAULT_EDUCATION_SCORE
        assert score_education("   ", "Bachelor") == DEFAULT_EDUCATION_SCORE


class TestLocation:
    def test_remote_job_location_wins(self):
        assert score_location(None, "Remote") == 100
        assert score_location("Tokyo", "Remote (EU)") == 100

    def test_remote_job_type_wins(self):
        assert score_location("Berlin", "Munich", "Remote") == 100

    def test_exact(self):
        assert score_location("Berlin", "berlin") == 100

    def test_containment(self):
        assert score_location("Berlin, Germany", "Berlin") == 75

    def test_mismatch(self):
        assert score_location("Berlin", "Paris", "full-time") == 25

    def test_missing_data_is_neutral(self):
        assert score_location(None, "Paris") == DEFAULT_LOCATION_SCORE
        assert score_location("Paris", None) == DEFAULT_LOCATION_SCORE


class TestAvailability:
    @pytest.mark.parametrize(
        "status, availability, expected",
        [
            ("available", None, 100),
            ("ACTIVELY_LOOKING", None, 100),
            ("open", None, 90),
            (None, "Immediate start", 90),
            (None, "2 weeks notice", 85),
            (None, "Two weeks", 85),
            (None, "1 month", 70),
            (None, "One month notice period", 70),
            ("employed", None, 30),
            ("not_available", "", 30),
            ("employed", "2 weeks", 85),
            ("selected", None, 75),
            (None, None, 75),
        ],
    )
    def test_rules(self, status, availability, expected):
        assert score_availability(status, availability) == expected

    def test_default_constant(self):
        assert score_availability(None, "sometime") == DEFAULT_AVAILABILITY_SCORE


class TestParseSalary:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("80000", 80000),
            ("$75,000", 75000),
            ("80k", 80000),
            ("80K", 80000),
            ("€65k", 65000),
            ("50000-60000", 55000),
            ("50k - 60k", 55000),
            ("80-90k", 85000),
            ("72.5k", 72500),
            ("90000+", 90000),
        ],
    )
    def test_formats(self, text, expected):
        assert parse_salary(text) == expected

    @pytest.mark.parametrize("text", ["", None, "negotiable", "k", "-"])
    def test_unparseable_is_zero(self, text):
        assert parse_salary(text) == 0


class TestSalary:
    def test_within_range(self):
        assert score_salary("80k", 70000, 90000) == 100

    def test_below_range(self):
        assert score_salary("50000", 70000, 90000) == 100

    def test_slightly_over(self):
        assert score_salary("$95,000", 70000, 90000) == 80

    def test_over_but_negotiable(self):
        assert score_salary("110000", 70000, 90000) == 60

    def test_far_over(self):
        assert score_salary("150k", 70000, 90000) == 30

    def test_max_assumed_from_min(self):
        # ceiling assumed at 60000 * 1.5 = 90000
        assert score_salary("85k", 60000, None) == 100
        assert score_salary("100k", 60000, None) == 60

    def test_only_max(self):
        assert score_salary("40k", None, 90000) == 100

    def test_missing_data_is_neutral(self):
        assert score_salary(None, 70000, 90000) == DEFAULT_SALARY_SCORE
        assert score_salary("80k", None, None) == DEFAULT_SALARY_SCORE
        assert score_salary("80k", 0, 0) == DEFAULT_SALARY_SCORE

    def test_malformed_expectation_is_neutral(self):
        assert score_salary("competitive", 70000, 90000) == DEFAULT_SALARY_SCORE
