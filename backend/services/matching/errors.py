"""Exceptions raised by the match scorer."""


class MatchingError(Exception):
    """Base class for match-scoring failures."""


class MissingJobSkillsError(MatchingError, ValueError):
    """The job lists no required skills, so there is nothing to match against."""

    def __init__(self, message: str = "Job skills required") -> None:
        super().__init__(message)
