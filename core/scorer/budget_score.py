#!/usr/bin/env python3
"""
Budget Score - how well a residence's price range fits the stated budget.

Bands:
- within [pricing_min, pricing_max]: 80..100, peaking at the midpoint
- under pricing_min: 50 down to 0 at 30% short (hard miss surfaced softly)
- over pricing_max: 60 down to 40 at 50% over, floor of 30 beyond that

Missing or contradictory residence pricing degrades to the neutral score.
"""

from typing import Optional, Tuple
import logging

from core.config_loader import BudgetScoringConfig
from core.matcher.dto import Candidate
from core.matcher.profile import PatientProfile
from core.utils import clamp

logger = logging.getLogger(__name__)


def _price_range(candidate: Candidate) -> Optional[Tuple[float, float]]:
    lo, hi = candidate.pricing_min, candidate.pricing_max
    if lo is None and hi is None:
        return None
    # Single published price point
    if lo is None:
        lo = hi
    if hi is None:
        hi = lo
    if lo > hi:
        logger.warning(
            "Residence %s has pricing_min %.2f > pricing_max %.2f; using neutral budget score",
            candidate.id, lo, hi
        )
        return None
    return lo, hi


def calculate_budget_score(
    profile: PatientProfile,
    candidate: Candidate,
    config: Optional[BudgetScoringConfig] = None
) -> float:
    config = config or BudgetScoringConfig()

    budget = profile.budget_amount
    if budget is None:
        return config.neutral

    price_range = _price_range(candidate)
    if price_range is None:
        return config.neutral
    pricing_min, pricing_max = price_range

    if pricing_min <= budget <= pricing_max:
        half_range = (pricing_max - pricing_min) / 2
        if half_range == 0:
            return config.in_range_base + config.in_range_span
        midpoint = (pricing_min + pricing_max) / 2
        proximity = 1 - abs(budget - midpoint) / half_range
        return config.in_range_base + config.in_range_span * clamp(proximity, 0.0, 1.0)

    if budget < pricing_min:
        percent_diff = (pricing_min - budget) / budget
        if percent_diff > config.under_max_ratio:
            return 0.0
        return config.under_base * (1 - percent_diff / config.under_max_ratio)

    percent_diff = (budget - pricing_max) / budget
    if percent_diff > config.over_max_ratio:
        return config.over_floor
    return config.over_base - percent_diff * config.over_slope
