"""Data Transfer Objects for the matching engine.

DTOs are built from ORM rows inside the repository session so that the
scoring code works on plain, immutable records and never touches the
database. Every sub-score function takes the same Candidate type.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, FrozenSet, Optional, Tuple

from core.utils import as_utc, to_float


@dataclass(frozen=True)
class AvailabilitySnapshot:
    """One availability report from a residence."""
    units_available: int
    reported_at: Optional[datetime] = None


@dataclass(frozen=True)
class Candidate:
    """A residence eligible for scoring, with its availability history."""
    id: str
    name: str
    city: Optional[str] = None
    region: Optional[str] = None
    pricing_min: Optional[float] = None
    pricing_max: Optional[float] = None
    rating: Optional[float] = None
    response_time_hours: Optional[float] = None
    category: Optional[int] = None
    care_capabilities: FrozenSet[str] = field(default_factory=frozenset)
    availability_snapshots: Tuple[AvailabilitySnapshot, ...] = ()

    @property
    def latest_availability(self) -> Optional[AvailabilitySnapshot]:
        """Most recent snapshot by reported_at; undated reports rank oldest."""
        if not self.availability_snapshots:
            return None
        return max(
            self.availability_snapshots,
            key=lambda s: (s.reported_at is not None, as_utc(s.reported_at) or datetime.min),
        )

    @property
    def units_available(self) -> int:
        latest = self.latest_availability
        return latest.units_available if latest else 0


def normalize_capabilities(raw: Any) -> FrozenSet[str]:
    """Stored capabilities are JSON: a list of names or a name -> bool mapping."""
    if not raw:
        return frozenset()
    if isinstance(raw, dict):
        names = [k for k, v in raw.items() if v]
    elif isinstance(raw, (list, tuple, set, frozenset)):
        names = [str(v) for v in raw if v]
    elif isinstance(raw, str):
        names = [raw]
    else:
        return frozenset()
    return frozenset(n.strip().lower() for n in names if str(n).strip())


def candidate_from_row(residence: Any) -> Candidate:
    """Build a Candidate from a Residence ORM row with loaded availability."""
    snapshots = tuple(
        AvailabilitySnapshot(
            units_available=max(0, int(a.units_available or 0)),
            reported_at=as_utc(a.reported_at),
        )
        for a in (residence.availability or [])
    )
    category = residence.category
    return Candidate(
        id=str(residence.id),
        name=residence.name,
        city=residence.city,
        region=residence.region,
        pricing_min=to_float(residence.pricing_min),
        pricing_max=to_float(residence.pricing_max),
        rating=to_float(residence.rating),
        response_time_hours=to_float(residence.response_time_hours),
        category=int(category) if category is not None else None,
        care_capabilities=normalize_capabilities(residence.care_capabilities),
        availability_snapshots=snapshots,
    )
