#!/usr/bin/env python3
"""
Search endpoints - rank residences for a patient profile.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.config_loader import MatchingConfig
from ..dependencies import get_db, get_matching_config
from ..services.match_service import MatchService
from ..models.requests import MatchRequest
from ..models.responses import MatchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/search", tags=["search"])


@router.post("/match", response_model=MatchResponse)
def match_residences(
    request: MatchRequest,
    db: Session = Depends(get_db),
    config: MatchingConfig = Depends(get_matching_config)
):
    """
    Rank active residences for the given patient profile.

    Returns an empty page (not an error) when nothing matches.
    `total` counts the returned page; `hasMore` is true whenever the page is full.
    """
    service = MatchService(db, config=config)
    return service.search(request)
