#!/usr/bin/env python3
"""
Request models for API endpoints.

Field names follow the public JSON contract (camelCase).
"""

from pydantic import BaseModel, Field
from typing import Any, List, Optional


class MatchRequest(BaseModel):
    """Request to rank residences for a patient profile."""
    patientProfile: Optional[Any] = Field(
        None,
        description="Structured patient profile; required"
    )
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        description="Page size; defaults to matching.default_limit, capped at matching.max_limit"
    )
    offset: int = Field(default=0, ge=0, description="Number of ranked results to skip")
    requireAvailability: bool = Field(
        default=True,
        description="Drop residences reporting zero available units"
    )


class AvailabilityUpdate(BaseModel):
    """Request to report available units for a residence."""
    units: int = Field(..., description="Units currently available (0-99)")
    source: str = Field(default="web", description="Report channel: web, sms, phone, admin")
    notes: Optional[str] = None


class RequesterInfo(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class ContactSubmission(BaseModel):
    """Request to contact one or more residences."""
    rpaIds: List[str] = Field(default_factory=list)
    requesterInfo: Optional[RequesterInfo] = None
    message: Optional[str] = None
    patientProfile: Optional[Any] = None
