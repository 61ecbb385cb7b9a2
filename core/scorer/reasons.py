#!/usr/bin/env python3
"""
Match Reasons - human-readable explanations for a scored match.

Rules are evaluated independently in a fixed order (budget, care,
location, availability, rating); each contributes at most one phrase.
An empty list is a valid outcome.
"""

from typing import List, Optional

from core.config_loader import ReasonThresholds
from core.matcher.dto import Candidate
from core.scorer.models import MatchDetails
from core.utils import clamp


def _budget_reason(score: int, t: ReasonThresholds) -> Optional[str]:
    if score >= t.budget_excellent:
        return "Excellent budget match"
    if score >= t.budget_good:
        return "Good budget match"
    return None


def _care_reason(score: int, t: ReasonThresholds) -> Optional[str]:
    if score >= t.care_specialized:
        return "Specialized care available"
    if score >= t.care_suitable:
        return "Suitable care level"
    return None


def _location_reason(score: int, t: ReasonThresholds) -> Optional[str]:
    if score >= t.location_perfect:
        return "Perfect location match"
    if score >= t.location_good:
        return "Good location match"
    return None


def _availability_reason(units: int, t: ReasonThresholds) -> Optional[str]:
    if units > t.units_many:
        return f"{units} units available now"
    if units > 0:
        return "1 unit available" if units == 1 else f"{units} units available"
    return None


def _rating_reason(rating: Optional[float], t: ReasonThresholds) -> Optional[str]:
    if rating is None:
        return None
    # Stored ratings are not range-checked
    rating = clamp(rating, 0.0, 5.0)
    if rating >= t.rating_high:
        return f"Highly rated ({rating:.1f}/5)"
    if rating >= t.rating_good:
        return f"Well rated ({rating:.1f}/5)"
    return None


def generate_reasons(
    details: MatchDetails,
    candidate: Candidate,
    thresholds: Optional[ReasonThresholds] = None
) -> List[str]:
    t = thresholds or ReasonThresholds()
    reasons = [
        _budget_reason(details.budget_match, t),
        _care_reason(details.care_match, t),
        _location_reason(details.location_match, t),
        _availability_reason(candidate.units_available, t),
        _rating_reason(candidate.rating, t),
    ]
    return [r for r in reasons if r]
