#!/usr/bin/env python3
"""
Care Score - acuity alignment plus condition-specific capabilities.

Base 50, +30 when the residence category fits the autonomy tier (+10
otherwise, including when either side is unknown), then up to +20 for
the share of stated conditions the residence can care for.
"""

from typing import List, Optional
import logging

from core.config_loader import CareScoringConfig
from core.matcher.dto import Candidate
from core.matcher.profile import PatientProfile
from core.utils import round_half_up

logger = logging.getLogger(__name__)


def stated_conditions(profile: PatientProfile, config: CareScoringConfig) -> List[str]:
    """Condition flags set on the profile that map to a capability."""
    if profile.conditions is None:
        return []
    return [
        name for name in config.condition_capabilities
        if getattr(profile.conditions, name, False)
    ]


def _category_aligned(profile: PatientProfile, candidate: Candidate, config: CareScoringConfig) -> bool:
    if profile.autonomy is None or candidate.category is None:
        return False
    allowed = config.autonomy_categories.get(profile.autonomy.value, [])
    return candidate.category in allowed


def calculate_care_score(
    profile: PatientProfile,
    candidate: Candidate,
    config: Optional[CareScoringConfig] = None
) -> float:
    config = config or CareScoringConfig()

    aligned = _category_aligned(profile, candidate, config)
    score = config.base + (config.aligned_bonus if aligned else config.misaligned_bonus)

    # No stated conditions: no bonus, no penalty
    conditions = stated_conditions(profile, config)
    if conditions:
        covered = [
            c for c in conditions
            if config.condition_capabilities[c] in candidate.care_capabilities
        ]
        score += round_half_up(len(covered) / len(conditions) * config.capability_bonus_max)
        logger.debug(
            "Residence %s covers %d/%d stated conditions",
            candidate.id, len(covered), len(conditions)
        )

    return min(score, 100.0)
