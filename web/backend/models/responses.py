#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class MatchDetailsOut(BaseModel):
    """The five sub-scores behind a match."""
    budget_match: int = Field(ge=0, le=100)
    care_match: int = Field(ge=0, le=100)
    location_match: int = Field(ge=0, le=100)
    availability_match: int = Field(ge=0, le=100)
    responsiveness_match: int = Field(ge=0, le=100)


class AvailabilityOut(BaseModel):
    units_available: int = Field(ge=0)
    last_updated: Optional[datetime] = None


class ResidenceInfoOut(BaseModel):
    """Display fields of a matched residence."""
    name: str
    city: Optional[str] = None
    region: Optional[str] = None
    pricing_min: Optional[float] = None
    pricing_max: Optional[float] = None
    rating: Optional[float] = None


class MatchResultOut(BaseModel):
    """One ranked residence."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "rpa_id": "550e8400-e29b-41d4-a716-446655440000",
                "score": 93,
                "match_details": {
                    "budget_match": 100,
                    "care_match": 80,
                    "location_match": 100,
                    "availability_match": 88,
                    "responsiveness_match": 95
                },
                "reasons": [
                    "Excellent budget match",
                    "Specialized care available",
                    "Perfect location match",
                    "4 units available now",
                    "Highly rated (4.6/5)"
                ],
                "availability": {
                    "units_available": 4,
                    "last_updated": "2026-02-01T12:00:00+00:00"
                },
                "rpa_info": {
                    "name": "Résidence du Parc",
                    "city": "Gatineau",
                    "region": "Outaouais",
                    "pricing_min": 2000.0,
                    "pricing_max": 3000.0,
                    "rating": 4.6
                }
            }
        }
    )

    rpa_id: str
    score: int = Field(ge=0, le=100)
    match_details: MatchDetailsOut
    reasons: List[str] = Field(default_factory=list)
    availability: AvailabilityOut
    rpa_info: ResidenceInfoOut


class MatchResponse(BaseModel):
    """A page of ranked matches. hasMore is a hint: true whenever the page is full."""
    matches: List[MatchResultOut]
    total: int = Field(ge=0)
    hasMore: bool


class AvailabilityRecordOut(BaseModel):
    id: str
    rpa_id: str
    units_available: int
    source: str
    notes: Optional[str] = None
    reported_at: Optional[datetime] = None


class AvailabilityUpdateResponse(BaseModel):
    """Response after recording availability."""
    success: bool
    data: AvailabilityRecordOut


class ContactSubmissionResponse(BaseModel):
    """Response after contacting residences."""
    success: bool
    requestId: str
    contactsCreated: int
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: Any
    type: str
    code: Optional[str] = None
