#!/usr/bin/env python3
"""
Matching Engine - rank residences for a patient profile.

Flow:
1. Shape hard filters from the profile (budget, place, active only)
2. Query candidates once from the repository
3. Score every candidate (pure, synchronous)
4. Filter unavailable residences, sort, paginate

The repository is the only failure point; its RepositoryError propagates
unchanged and no partial results are returned. Nothing is retried here.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional
import logging
import time

from core.config_loader import MatchingConfig
from core.matcher.filters import build_hard_filters
from core.matcher.interfaces import CandidateSource
from core.matcher.profile import PatientProfile
from core.matcher.ranking import MatchPage, rank_matches
from core.scorer.service import ScoringService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchOptions:
    limit: int = 10
    offset: int = 0
    require_availability: bool = True


class MatchingEngine:
    """
    Finds and ranks residences for a patient profile.

    Stateless between calls; one instance can serve concurrent requests
    as long as each call gets its own repository session.
    """

    def __init__(
        self,
        repository: CandidateSource,
        config: Optional[MatchingConfig] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Args:
            repository: Candidate source for the hard-filtered query
            config: MatchingConfig with scoring weights and filter settings
            clock: Returns "now" for availability freshness (fixed in tests)
        """
        self.repository = repository
        self.config = config or MatchingConfig()
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.scorer = ScoringService(self.config.scoring, clock=self.clock)

    def find_matches(
        self,
        profile: PatientProfile,
        options: Optional[MatchOptions] = None
    ) -> MatchPage:
        options = options or MatchOptions(limit=self.config.default_limit)
        start = time.time()

        filters = build_hard_filters(profile, self.config.filters)
        candidates = self.repository.query_candidates(filters)

        if not candidates:
            logger.info("No candidate residences for profile")
            return MatchPage(matches=[], total=0, has_more=False)

        results = self.scorer.score_candidates(profile, candidates, now=self.clock())
        page = rank_matches(
            results,
            limit=options.limit,
            offset=options.offset,
            require_availability=options.require_availability,
        )

        elapsed_ms = (time.time() - start) * 1000
        logger.info(
            f"Matched {len(candidates)} candidates -> {page.total} results "
            f"(offset={options.offset}, limit={options.limit}) in {elapsed_ms:.1f}ms"
        )
        return page
