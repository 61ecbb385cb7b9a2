#!/usr/bin/env python3
"""
Match service - business logic for residence search.
"""

import logging
from dataclasses import asdict
from typing import Callable, Optional
from datetime import datetime

from sqlalchemy.orm import Session

from core.config_loader import MatchingConfig
from core.matcher.profile import parse_profile
from core.matcher.service import MatchingEngine, MatchOptions
from database.repositories import ResidenceRepository
from ..exceptions import InvalidRequestException
from ..models.requests import MatchRequest
from ..models.responses import MatchResponse, MatchResultOut

logger = logging.getLogger(__name__)


class MatchService:
    """Service for ranking residences against a patient profile."""

    def __init__(
        self,
        db: Session,
        config: Optional[MatchingConfig] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.db = db
        self.config = config or MatchingConfig()
        self.engine = MatchingEngine(ResidenceRepository(db), config=self.config, clock=clock)

    def search(self, request: MatchRequest) -> MatchResponse:
        """
        Run one matching call.

        Args:
            request: Validated request body.

        Returns:
            A page of ranked matches.

        Raises:
            InvalidRequestException: Page size above the configured maximum.
            ProfileValidationError: Profile missing or malformed.
            RepositoryError: Candidate query failed.
        """
        limit = request.limit if request.limit is not None else self.config.default_limit
        if limit > self.config.max_limit:
            raise InvalidRequestException(
                f"limit must be between 1 and {self.config.max_limit}"
            )

        profile = parse_profile(request.patientProfile)
        page = self.engine.find_matches(
            profile,
            MatchOptions(
                limit=limit,
                offset=request.offset,
                require_availability=request.requireAvailability
            )
        )
        return MatchResponse(
            matches=[MatchResultOut.model_validate(asdict(m)) for m in page.matches],
            total=page.total,
            hasMore=page.has_more
        )
