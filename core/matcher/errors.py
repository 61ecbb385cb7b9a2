"""Matching failures surfaced to the caller.

Scoring itself never raises for bad residence data; only profile
validation (before the engine runs) and the repository query can fail
a matching call. The HTTP layer decides the status code.
"""

from enum import Enum
from typing import Any, Optional


class MatchingErrorCode(str, Enum):
    INVALID_CRITERIA = "INVALID_CRITERIA"
    DATABASE_ERROR = "DATABASE_ERROR"
    # Reserved: an empty result is a successful response, never this error.
    NO_MATCHES_FOUND = "NO_MATCHES_FOUND"


class MatchingError(Exception):
    """Base exception for matching failures."""
    code: MatchingErrorCode = MatchingErrorCode.DATABASE_ERROR

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class ProfileValidationError(MatchingError):
    """Raised when the patient profile is missing or malformed."""
    code = MatchingErrorCode.INVALID_CRITERIA


class RepositoryError(MatchingError):
    """Raised when candidate retrieval fails. Never retried internally."""
    code = MatchingErrorCode.DATABASE_ERROR
