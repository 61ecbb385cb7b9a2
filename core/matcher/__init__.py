"""Matcher Module - candidate retrieval shaping, ranking and the matching engine.

MatchingEngine lives in core.matcher.service and is imported from there
directly; core.scorer depends on the records defined here.
"""
from core.matcher.profile import (
    PatientProfile, Autonomy, BudgetFlexibility, UrgencyLevel,
    Conditions, CareNeeds, Budget, Location, Urgency, Preferences, parse_profile
)
from core.matcher.dto import Candidate, AvailabilitySnapshot, candidate_from_row
from core.matcher.errors import (
    MatchingError, MatchingErrorCode, ProfileValidationError, RepositoryError
)
from core.matcher.filters import HardFilters, build_hard_filters

__all__ = [
    'PatientProfile', 'Autonomy', 'BudgetFlexibility', 'UrgencyLevel',
    'Conditions', 'CareNeeds', 'Budget', 'Location', 'Urgency', 'Preferences', 'parse_profile',
    'Candidate', 'AvailabilitySnapshot', 'candidate_from_row',
    'MatchingError', 'MatchingErrorCode', 'ProfileValidationError', 'RepositoryError',
    'HardFilters', 'build_hard_filters',
]
