import logging
from datetime import datetime
from typing import List, Optional, Any
from sqlalchemy import select

from database.models import Availability, Residence, utcnow
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class AvailabilityRepository(BaseRepository):
    def record_availability(
        self,
        residence: Residence,
        units: int,
        source: str = 'web',
        notes: Optional[str] = None,
        reported_by: Optional[str] = None,
        reported_at: Optional[datetime] = None
    ) -> Availability:
        """Append a report and stamp the residence's last update time."""
        reported_at = reported_at or utcnow()
        with self._guard("availability insert"):
            availability = Availability(
                rpa_id=residence.id,
                units_available=units,
                source=source,
                notes=notes,
                reported_by=reported_by,
                reported_at=reported_at
            )
            self.db.add(availability)
            residence.last_availability_update = reported_at
            self.db.flush()

        logger.info(f"Recorded {units} units for residence {residence.id} (source={source})")
        return availability

    def get_history(self, rpa_id: Any, limit: int = 30) -> List[Availability]:
        with self._guard("availability history"):
            stmt = select(Availability).where(
                Availability.rpa_id == rpa_id
            ).order_by(Availability.reported_at.desc()).limit(limit)
            return list(self.db.execute(stmt).scalars().all())
