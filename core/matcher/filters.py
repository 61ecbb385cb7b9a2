#!/usr/bin/env python3
"""
Hard Filters - translate a patient profile into the candidate query shape.

Only structural eligibility is decided here (active, budget, place).
Everything else is left to soft scoring. The budget ceiling used here is
deliberately wider than the score-stage penalty bands: the query casts a
wide net and scoring ranks within it.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from core.config_loader import FilterConfig
from core.matcher.profile import BudgetFlexibility, PatientProfile
from core.utils import normalize_place

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HardFilters:
    """Constraints pushed down to the repository."""
    active_only: bool = True

    # Residence pricing_min must be <= budget_floor_max
    budget_floor_max: Optional[float] = None
    # Residence pricing_max must be >= budget_ceiling_min (strict budgets only)
    budget_ceiling_min: Optional[float] = None

    city_key: Optional[str] = None
    region_key: Optional[str] = None


def build_hard_filters(profile: PatientProfile, config: Optional[FilterConfig] = None) -> HardFilters:
    """
    Build the repository filters for a profile.

    - strict budget: pricing_min <= budget <= pricing_max
    - flexible/negotiable (or unspecified) budget: pricing_min <= budget * 1.2
    - city wins over region; neither means no location filter
    """
    config = config or FilterConfig()

    budget_floor_max = None
    budget_ceiling_min = None
    amount = profile.budget_amount
    if amount is not None:
        if profile.budget.flexibility == BudgetFlexibility.STRICT:
            budget_floor_max = amount
            budget_ceiling_min = amount
        else:
            budget_floor_max = amount * config.flexible_budget_multiplier

    city_key = None
    region_key = None
    if profile.location is not None:
        city_key = normalize_place(profile.location.city)
        if city_key is None:
            region_key = normalize_place(profile.location.region)

    filters = HardFilters(
        budget_floor_max=budget_floor_max,
        budget_ceiling_min=budget_ceiling_min,
        city_key=city_key,
        region_key=region_key,
    )
    logger.debug("Hard filters: %s", filters)
    return filters
