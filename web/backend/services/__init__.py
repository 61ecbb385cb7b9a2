"""Business logic services."""

from .match_service import MatchService
from .availability_service import AvailabilityService
from .contact_service import ContactService
