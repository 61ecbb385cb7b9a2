#!/usr/bin/env python3
"""
Responsiveness Score - public rating and typical response time.
"""

from typing import Optional

from core.config_loader import ResponsivenessScoringConfig
from core.matcher.dto import Candidate
from core.utils import clamp


def calculate_responsiveness_score(
    candidate: Candidate,
    config: Optional[ResponsivenessScoringConfig] = None
) -> float:
    config = config or ResponsivenessScoringConfig()

    if candidate.rating is not None:
        rating_part = (clamp(candidate.rating, 0.0, 5.0) / 5) * config.rating_max
    else:
        rating_part = config.rating_neutral

    hours = candidate.response_time_hours
    if hours is None:
        response_part = config.response_neutral
    else:
        response_part = config.response_slow
        for max_hours, points in config.response_steps:
            if max(hours, 0.0) <= max_hours:
                response_part = points
                break

    return rating_part + response_part
