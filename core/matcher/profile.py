#!/usr/bin/env python3
"""
Patient Profile - structured needs of a family looking for a residence.

Produced upstream by the conversational extraction step and consumed
here as an immutable input. Every field is optional: scoring falls back
to neutral values for anything that was not stated.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.matcher.errors import ProfileValidationError


class Autonomy(str, Enum):
    AUTONOMOUS = "autonomous"
    SEMI_AUTONOMOUS = "semi_autonomous"
    LOSS_OF_INDEPENDENCE = "loss_of_independence"


class BudgetFlexibility(str, Enum):
    STRICT = "strict"
    FLEXIBLE = "flexible"
    NEGOTIABLE = "negotiable"


class UrgencyLevel(str, Enum):
    NORMAL = "normal"
    URGENT_48H = "urgent_48h"
    URGENT_24H = "urgent_24h"


class _ProfilePart(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Conditions(_ProfilePart):
    alzheimers: bool = False
    parkinsons: bool = False
    diabetes: bool = False
    mobility_issues: bool = False
    cognitive_decline: bool = False
    other: List[str] = Field(default_factory=list)


class CareNeeds(_ProfilePart):
    nursing: bool = False
    medication_management: bool = False
    adl_assistance: bool = False
    specialized_care: List[str] = Field(default_factory=list)


class Budget(_ProfilePart):
    amount: Optional[Decimal] = None
    flexibility: Optional[BudgetFlexibility] = None
    currency: str = "CAD"


class Location(_ProfilePart):
    city: Optional[str] = None
    region: Optional[str] = None
    proximity_to: Optional[str] = None
    max_distance_km: Optional[float] = None


class Urgency(_ProfilePart):
    level: UrgencyLevel = UrgencyLevel.NORMAL
    reason: Optional[str] = None
    deadline: Optional[str] = None


class Preferences(_ProfilePart):
    languages: List[str] = Field(default_factory=list)
    religion: Optional[str] = None
    activities: List[str] = Field(default_factory=list)
    dietary_restrictions: List[str] = Field(default_factory=list)
    pet_friendly: Optional[bool] = None
    smoking_allowed: Optional[bool] = None


class PatientProfile(_ProfilePart):
    """Structured patient profile; read-only for the duration of a match."""
    age: Optional[int] = None
    gender: Optional[str] = None
    relation: Optional[str] = None
    autonomy: Optional[Autonomy] = None
    conditions: Optional[Conditions] = None
    care_needs: Optional[CareNeeds] = None
    budget: Optional[Budget] = None
    location: Optional[Location] = None
    urgency: Optional[Urgency] = None
    preferences: Optional[Preferences] = None
    notes: Optional[str] = None
    raw_input: Optional[str] = None

    @property
    def budget_amount(self) -> Optional[float]:
        """Stated monthly budget, None when absent or not positive."""
        if self.budget is None or self.budget.amount is None:
            return None
        amount = float(self.budget.amount)
        return amount if amount > 0 else None


def parse_profile(raw: Any) -> PatientProfile:
    """
    Validate a raw profile payload at the boundary.

    Raises:
        ProfileValidationError: If the profile is missing or malformed.
    """
    if raw is None:
        raise ProfileValidationError("Patient profile required")
    try:
        return PatientProfile.model_validate(raw)
    except ValidationError as e:
        raise ProfileValidationError("Invalid patient profile", details=e.errors()) from e
