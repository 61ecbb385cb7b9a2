import logging
from typing import Any, Dict, List, Optional

from database.models import CareRequest, Contact
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class RequestRepository(BaseRepository):
    def create_request(
        self,
        requester_contact: Dict[str, Any],
        patient_profile: Dict[str, Any],
        location_preference: Optional[str],
        budget_min: Optional[int],
        budget_max: Optional[int],
        urgency_level: str = 'normal',
        requester_type: str = 'family'
    ) -> CareRequest:
        with self._guard("request insert"):
            request = CareRequest(
                requester_type=requester_type,
                requester_id=None,
                requester_contact=requester_contact,
                patient_profile=patient_profile,
                location_preference=location_preference,
                budget_min=budget_min,
                budget_max=budget_max,
                urgency_level=urgency_level,
                status='open'
            )
            self.db.add(request)
            self.db.flush()  # Generate ID
        return request

    def create_contacts(
        self,
        request: CareRequest,
        rpa_ids: List[Any],
        message: str,
        requester_email: str,
        requester_phone: Optional[str] = None
    ) -> List[Contact]:
        with self._guard("contact insert"):
            contacts = [
                Contact(
                    request_id=request.id,
                    rpa_id=rpa_id,
                    contact_type='message',
                    message=message,
                    requester_email=requester_email,
                    requester_phone=requester_phone
                )
                for rpa_id in rpa_ids
            ]
            self.db.add_all(contacts)
            self.db.flush()

        logger.info(f"Created {len(contacts)} contacts for request {request.id}")
        return contacts
