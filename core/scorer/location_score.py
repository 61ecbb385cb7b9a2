#!/usr/bin/env python3
"""
Location Score - tiered city/region matching.

Distance-based scoring (profile.location.max_distance_km against residence
coordinates) is not implemented; `distance_score` is the extension point and
currently always defers to the tiers.
"""

from typing import Optional

from core.config_loader import LocationScoringConfig
from core.matcher.dto import Candidate
from core.matcher.profile import PatientProfile
from core.utils import normalize_place


def distance_score(profile: PatientProfile, candidate: Candidate) -> Optional[float]:
    """Score from geographic distance, or None to fall back to tiers."""
    return None


def calculate_location_score(
    profile: PatientProfile,
    candidate: Candidate,
    config: Optional[LocationScoringConfig] = None
) -> float:
    config = config or LocationScoringConfig()

    by_distance = distance_score(profile, candidate)
    if by_distance is not None:
        return by_distance

    wanted_city = normalize_place(profile.location.city) if profile.location else None
    wanted_region = normalize_place(profile.location.region) if profile.location else None

    if wanted_city is None and wanted_region is None:
        return config.unspecified

    if wanted_city is not None and wanted_city == normalize_place(candidate.city):
        return config.city_match
    if wanted_region is not None and wanted_region == normalize_place(candidate.region):
        return config.region_match
    return config.mismatch
