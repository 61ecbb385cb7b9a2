#!/usr/bin/env python3
"""
Contact endpoints - families reaching out to residences.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.contact_service import ContactService
from ..models.requests import ContactSubmission
from ..models.responses import ContactSubmissionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("/submit", response_model=ContactSubmissionResponse)
def submit_contact(
    submission: ContactSubmission,
    db: Session = Depends(get_db)
):
    """Create a care request and one contact per selected residence."""
    return ContactService(db).submit(submission)
