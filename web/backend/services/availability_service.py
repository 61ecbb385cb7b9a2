#!/usr/bin/env python3
"""
Availability service - residences reporting their free units.
"""

import logging
import uuid
from typing import Optional

from sqlalchemy.orm import Session

from database.repositories import AvailabilityRepository, ResidenceRepository
from ..exceptions import InvalidRequestException, ResidenceNotFoundException
from ..models.requests import AvailabilityUpdate
from ..models.responses import AvailabilityRecordOut, AvailabilityUpdateResponse

logger = logging.getLogger(__name__)

MAX_UNITS = 99
VALID_SOURCES = ('web', 'sms', 'phone', 'admin')


class AvailabilityService:
    """Service for recording availability reports."""

    def __init__(self, db: Session):
        self.db = db
        self.residences = ResidenceRepository(db)
        self.availability = AvailabilityRepository(db)

    def record(
        self,
        rpa_id: uuid.UUID,
        update: AvailabilityUpdate,
        reported_by: Optional[str] = None
    ) -> AvailabilityUpdateResponse:
        """
        Append an availability report for an active residence.

        Raises:
            InvalidRequestException: units outside 0-99 or unknown source.
            ResidenceNotFoundException: Residence unknown or inactive.
        """
        if update.units < 0 or update.units > MAX_UNITS:
            raise InvalidRequestException(f"Units must be between 0 and {MAX_UNITS}")
        if update.source not in VALID_SOURCES:
            raise InvalidRequestException(
                f"Invalid source: {update.source}. Must be one of {', '.join(VALID_SOURCES)}"
            )

        residence = self.residences.get_active_by_id(rpa_id)
        if residence is None:
            raise ResidenceNotFoundException(f"Residence not found: {rpa_id}")

        try:
            record = self.availability.record_availability(
                residence,
                units=update.units,
                source=update.source,
                notes=update.notes,
                reported_by=reported_by
            )
            self.availability.commit()
        except Exception:
            self.availability.rollback()
            raise

        return AvailabilityUpdateResponse(
            success=True,
            data=AvailabilityRecordOut(
                id=str(record.id),
                rpa_id=str(record.rpa_id),
                units_available=record.units_available,
                source=record.source,
                notes=record.notes,
                reported_at=record.reported_at
            )
        )
