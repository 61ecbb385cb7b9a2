#!/usr/bin/env python3
"""
Scoring Service - compatibility score for one (profile, residence) pair.

Computes five independent sub-scores, combines them with the configured
weights into a single 0-100 score and attaches match reasons.

Pure and deterministic: no I/O, and the only time dependency is the
`now` used for availability freshness, which callers pass in.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional
import logging

from core.config_loader import ScoringConfig, ScoringWeights
from core.matcher.dto import Candidate
from core.matcher.profile import PatientProfile
from core.utils import clamp, round_half_up

from core.scorer.models import AvailabilityInfo, MatchDetails, MatchResult, ResidenceInfo
from core.scorer.budget_score import calculate_budget_score
from core.scorer.care_score import calculate_care_score
from core.scorer.location_score import calculate_location_score
from core.scorer.availability_score import calculate_availability_score
from core.scorer.responsiveness_score import calculate_responsiveness_score
from core.scorer.reasons import generate_reasons

logger = logging.getLogger(__name__)


def _subscore(value: float) -> int:
    return int(clamp(round_half_up(value), 0, 100))


def calculate_composite_score(details: MatchDetails, weights: ScoringWeights) -> int:
    """round(sum(subscore * weight)), clamped to [0, 100]."""
    total = (
        details.budget_match * weights.budget
        + details.care_match * weights.care
        + details.location_match * weights.location
        + details.availability_match * weights.availability
        + details.responsiveness_match * weights.responsiveness
    )
    return int(clamp(round_half_up(total), 0, 100))


class ScoringService:
    """Scores residences against a patient profile."""

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.config = config or ScoringConfig()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def calculate_match_details(
        self,
        profile: PatientProfile,
        candidate: Candidate,
        now: datetime
    ) -> MatchDetails:
        cfg = self.config
        return MatchDetails(
            budget_match=_subscore(calculate_budget_score(profile, candidate, cfg.budget)),
            care_match=_subscore(calculate_care_score(profile, candidate, cfg.care)),
            location_match=_subscore(calculate_location_score(profile, candidate, cfg.location)),
            availability_match=_subscore(calculate_availability_score(candidate, now, cfg.availability)),
            responsiveness_match=_subscore(calculate_responsiveness_score(candidate, cfg.responsiveness)),
        )

    def score_candidate(
        self,
        profile: PatientProfile,
        candidate: Candidate,
        now: Optional[datetime] = None
    ) -> MatchResult:
        now = now or self.clock()
        details = self.calculate_match_details(profile, candidate, now)
        score = calculate_composite_score(details, self.config.weights)

        latest = candidate.latest_availability
        result = MatchResult(
            rpa_id=candidate.id,
            score=score,
            match_details=details,
            reasons=generate_reasons(details, candidate, self.config.reasons),
            availability=AvailabilityInfo(
                units_available=latest.units_available if latest else 0,
                last_updated=latest.reported_at if latest else None,
            ),
            rpa_info=ResidenceInfo(
                name=candidate.name,
                city=candidate.city,
                region=candidate.region,
                pricing_min=candidate.pricing_min,
                pricing_max=candidate.pricing_max,
                rating=candidate.rating,
            ),
        )
        logger.debug("Scored residence %s: %d %s", candidate.id, score, details)
        return result

    def score_candidates(
        self,
        profile: PatientProfile,
        candidates: List[Candidate],
        now: Optional[datetime] = None
    ) -> List[MatchResult]:
        """Score in input order; one `now` for the whole batch."""
        now = now or self.clock()
        return [self.score_candidate(profile, c, now) for c in candidates]
