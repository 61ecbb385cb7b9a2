import logging
from typing import List, Optional, Any
from sqlalchemy import select, or_
from sqlalchemy.orm import selectinload

from core.matcher.dto import Candidate, candidate_from_row
from core.matcher.filters import HardFilters
from core.matcher.interfaces import CandidateSource
from database.models import Residence
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ResidenceRepository(BaseRepository, CandidateSource):
    def build_candidate_query(self, filters: HardFilters):
        """SELECT for residences passing the hard filters, retrieval-ordered by name."""
        stmt = select(Residence).options(selectinload(Residence.availability))

        if filters.active_only:
            stmt = stmt.where(or_(Residence.is_active.is_(True), Residence.is_active.is_(None)))

        # Unknown pricing passes; soft scoring ranks it neutrally
        if filters.budget_floor_max is not None:
            stmt = stmt.where(or_(
                Residence.pricing_min.is_(None),
                Residence.pricing_min <= filters.budget_floor_max
            ))
        if filters.budget_ceiling_min is not None:
            stmt = stmt.where(or_(
                Residence.pricing_max.is_(None),
                Residence.pricing_max >= filters.budget_ceiling_min
            ))

        if filters.city_key:
            stmt = stmt.where(Residence.city_key == filters.city_key)
        elif filters.region_key:
            stmt = stmt.where(Residence.region_key == filters.region_key)

        return stmt.order_by(Residence.name, Residence.id)

    def query_candidates(self, filters: HardFilters) -> List[Candidate]:
        with self._guard("candidate query"):
            rows = self.db.execute(self.build_candidate_query(filters)).scalars().all()
            candidates = [candidate_from_row(r) for r in rows]
        logger.info(f"Candidate query returned {len(candidates)} residences")
        return candidates

    def get_active_by_id(self, rpa_id: Any) -> Optional[Residence]:
        with self._guard("residence lookup"):
            stmt = select(Residence).where(
                Residence.id == rpa_id,
                or_(Residence.is_active.is_(True), Residence.is_active.is_(None))
            )
            return self.db.execute(stmt).scalar_one_or_none()

    def get_active_ids(self, rpa_ids: List[Any]) -> List[Any]:
        if not rpa_ids:
            return []
        with self._guard("residence lookup"):
            stmt = select(Residence.id).where(
                Residence.id.in_(rpa_ids),
                or_(Residence.is_active.is_(True), Residence.is_active.is_(None))
            )
            return list(self.db.execute(stmt).scalars().all())
