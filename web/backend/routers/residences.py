#!/usr/bin/env python3
"""
Residence endpoints - availability reporting.
"""

import uuid
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.availability_service import AvailabilityService
from ..models.requests import AvailabilityUpdate
from ..models.responses import AvailabilityUpdateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/residences", tags=["residences"])


def validate_uuid(rpa_id: str) -> uuid.UUID:
    """Validate that rpa_id is a valid UUID format."""
    try:
        return uuid.UUID(rpa_id)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid rpa_id format: {rpa_id}. Must be a valid UUID."
        )


@router.post("/{rpa_id}/availability", response_model=AvailabilityUpdateResponse)
def update_availability(
    rpa_id: str,
    update: AvailabilityUpdate,
    db: Session = Depends(get_db)
):
    """
    Record how many units a residence has free right now.

    Each report is appended to the history; matching reads the most recent one.
    """
    residence_id = validate_uuid(rpa_id)
    return AvailabilityService(db).record(residence_id, update)
