#!/usr/bin/env python3
"""
Contact service - turn a family's selection into a care request and
one contact per chosen residence.
"""

import logging
import math
import uuid
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from core.matcher.errors import ProfileValidationError
from core.matcher.profile import PatientProfile, parse_profile
from database.repositories import RequestRepository, ResidenceRepository
from ..exceptions import (
    ContactSubmissionException,
    InvalidRequestException,
    ResidenceNotFoundException
)
from ..models.requests import ContactSubmission
from ..models.responses import ContactSubmissionResponse

logger = logging.getLogger(__name__)

BUDGET_LOW_FACTOR = Decimal("0.8")
BUDGET_HIGH_FACTOR = Decimal("1.2")


def budget_bounds(profile: PatientProfile) -> Tuple[Optional[int], Optional[int]]:
    """Stored request range: floor(amount * 0.8) to ceil(amount * 1.2), unset without a positive budget."""
    if profile.budget_amount is None:
        return None, None
    amount = Decimal(profile.budget.amount)
    return math.floor(amount * BUDGET_LOW_FACTOR), math.ceil(amount * BUDGET_HIGH_FACTOR)


def location_preference(profile: PatientProfile) -> Optional[str]:
    if profile.location is None:
        return None
    return profile.location.city or profile.location.region


def _parse_ids(raw_ids: List[str]) -> List[uuid.UUID]:
    parsed = []
    for raw in raw_ids:
        try:
            parsed.append(uuid.UUID(str(raw)))
        except ValueError:
            raise InvalidRequestException(f"Invalid residence id: {raw}")
    # Keep first occurrence order, drop duplicates
    return list(dict.fromkeys(parsed))


class ContactService:
    """Service for contact submissions."""

    def __init__(self, db: Session):
        self.db = db
        self.residences = ResidenceRepository(db)
        self.requests = RequestRepository(db)

    def submit(self, submission: ContactSubmission) -> ContactSubmissionResponse:
        """
        Persist a care request and its contacts in one transaction.

        Raises:
            InvalidRequestException: Missing residences, requester or message, or a malformed profile.
            ResidenceNotFoundException: None of the residences are active.
            ContactSubmissionException: No contact could be stored.
        """
        if not submission.rpaIds:
            raise InvalidRequestException("At least one residence must be selected")
        requester = submission.requesterInfo
        if requester is None or not requester.name or not requester.email:
            raise InvalidRequestException("Requester name and email are required")
        if not submission.message or not submission.message.strip():
            raise InvalidRequestException("Message is required")
        # The profile is optional here; an empty one stores no budget or place
        try:
            raw = submission.patientProfile
            profile = parse_profile(raw if raw is not None else {})
        except ProfileValidationError as e:
            raise InvalidRequestException(str(e)) from e

        requested_ids = _parse_ids(submission.rpaIds)
        active_ids = set(self.residences.get_active_ids(requested_ids))
        target_ids = [rid for rid in requested_ids if rid in active_ids]
        if not target_ids:
            raise ResidenceNotFoundException("None of the selected residences are available")
        skipped = len(requested_ids) - len(target_ids)
        if skipped:
            logger.warning(f"Skipping {skipped} unknown or inactive residences")

        budget_min, budget_max = budget_bounds(profile)
        urgency = profile.urgency.level.value if profile.urgency else 'normal'

        try:
            request = self.requests.create_request(
                requester_contact=requester.model_dump(),
                patient_profile=profile.model_dump(mode='json', exclude_none=True),
                location_preference=location_preference(profile),
                budget_min=budget_min,
                budget_max=budget_max,
                urgency_level=urgency
            )
            contacts = self.requests.create_contacts(
                request,
                target_ids,
                message=submission.message.strip(),
                requester_email=requester.email,
                requester_phone=requester.phone
            )
            self.requests.commit()
        except Exception as e:
            self.requests.rollback()
            raise ContactSubmissionException("Failed to submit contact request") from e

        count = len(contacts)
        logger.info(f"Request {request.id} sent to {count} residences")
        return ContactSubmissionResponse(
            success=True,
            requestId=str(request.id),
            contactsCreated=count,
            message=f"Request sent to {count} residence{'s' if count > 1 else ''}"
        )
