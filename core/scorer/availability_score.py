#!/usr/bin/env python3
"""
Availability Score - open units plus freshness of the latest report.

units part: min(units / 5, 1) * 60
freshness part: <24h -> 40, <48h -> 30, <7d -> 20, older -> 10
No availability history at all scores 0.
"""

from datetime import datetime
from typing import Optional

from core.config_loader import AvailabilityScoringConfig
from core.matcher.dto import Candidate
from core.utils import as_utc


def freshness_points(
    reported_at: Optional[datetime],
    now: datetime,
    config: AvailabilityScoringConfig
) -> float:
    if reported_at is None:
        return config.freshness_stale

    age_hours = (as_utc(now) - as_utc(reported_at)).total_seconds() / 3600
    # Clock skew can put a report in the future; count it as fresh
    age_hours = max(age_hours, 0.0)

    for max_age_hours, points in config.freshness_steps:
        if age_hours < max_age_hours:
            return points
    return config.freshness_stale


def calculate_availability_score(
    candidate: Candidate,
    now: datetime,
    config: Optional[AvailabilityScoringConfig] = None
) -> float:
    config = config or AvailabilityScoringConfig()

    latest = candidate.latest_availability
    if latest is None:
        return 0.0

    units = max(0, latest.units_available)
    units_score = min(units / config.units_saturation, 1.0) * config.units_max
    return units_score + freshness_points(latest.reported_at, now, config)
