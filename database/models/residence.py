import uuid

from sqlalchemy import Column, Text, Boolean, Integer, Numeric, TIMESTAMP, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship, validates

from core.utils import normalize_place
from .base import Base, JsonType, utcnow


class Residence(Base):
    """
    A residence (RPA) listed in the marketplace.

    city_key / region_key hold accent- and case-folded copies of city and
    region so place filters can be pushed down as plain equality.
    """
    __tablename__ = 'rpas'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    k10_id = Column(Text, nullable=False, unique=True)  # Registry identifier

    # Identity / display
    name = Column(Text, nullable=False)
    address = Column(Text)
    city = Column(Text)
    region = Column(Text)
    postal_code = Column(Text)
    phone = Column(Text)
    email = Column(Text)
    website = Column(Text)
    description = Column(Text)

    city_key = Column(Text)
    region_key = Column(Text)

    # Matching inputs
    category = Column(Integer)  # Licensed acuity level 1..4
    pricing_min = Column(Numeric(10, 2))
    pricing_max = Column(Numeric(10, 2))
    rating = Column(Numeric(3, 2))
    total_reviews = Column(Integer, default=0)
    response_time_hours = Column(Numeric(6, 2))
    total_units = Column(Integer)
    care_capabilities = Column(JsonType, default=list)
    languages_spoken = Column(JsonType, default=list)
    amenities = Column(JsonType, default=list)

    is_active = Column(Boolean, default=True)
    last_availability_update = Column(TIMESTAMP(timezone=True))
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    availability = relationship(
        "Availability",
        back_populates="residence",
        cascade="all, delete-orphan",
        order_by="Availability.reported_at.desc()",
    )
    contacts = relationship("Contact", back_populates="residence")

    __table_args__ = (
        Index('idx_rpas_city_key', 'city_key'),
        Index('idx_rpas_region_key', 'region_key'),
        Index('idx_rpas_active', 'is_active'),
        Index('idx_rpas_pricing', 'pricing_min', 'pricing_max'),
    )

    @validates('city')
    def _set_city_key(self, key, value):
        self.city_key = normalize_place(value)
        return value

    @validates('region')
    def _set_region_key(self, key, value):
        self.region_key = normalize_place(value)
        return value


class Availability(Base):
    """
    Availability report: units open at a residence at a point in time.
    Append-only; the latest report by reported_at is authoritative.
    """
    __tablename__ = 'availability'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    rpa_id = Column(Uuid(as_uuid=True), ForeignKey('rpas.id', ondelete='CASCADE'), nullable=False)

    units_available = Column(Integer, nullable=False)
    source = Column(Text, nullable=False, default='web')  # web|sms|phone|admin
    notes = Column(Text)
    unit_types = Column(JsonType)
    reported_by = Column(Text)
    reported_at = Column(TIMESTAMP(timezone=True), default=utcnow)

    residence = relationship("Residence", back_populates="availability")

    __table_args__ = (
        Index('idx_availability_rpa_reported', 'rpa_id', 'reported_at'),
    )
