#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field, asdict
from datetime import datetime


@dataclass(frozen=True)
class MatchDetails:
    """The five sub-scores, each an integer in [0, 100]."""
    budget_match: int = 0
    care_match: int = 0
    location_match: int = 0
    availability_match: int = 0
    responsiveness_match: int = 0


@dataclass(frozen=True)
class AvailabilityInfo:
    units_available: int = 0
    last_updated: Optional[datetime] = None


@dataclass(frozen=True)
class ResidenceInfo:
    """Display fields of the matched residence."""
    name: str
    city: Optional[str] = None
    region: Optional[str] = None
    pricing_min: Optional[float] = None
    pricing_max: Optional[float] = None
    rating: Optional[float] = None


@dataclass
class MatchResult:
    """Complete scored match for one residence."""
    rpa_id: str
    score: int
    match_details: MatchDetails
    rpa_info: ResidenceInfo
    availability: AvailabilityInfo = field(default_factory=AvailabilityInfo)
    reasons: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        last_updated = self.availability.last_updated
        data['availability']['last_updated'] = last_updated.isoformat() if last_updated else None
        return data
