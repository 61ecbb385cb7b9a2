import uuid

from sqlalchemy import Column, Text, Integer, TIMESTAMP, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship

from .base import Base, JsonType, utcnow


class CareRequest(Base):
    """
    A family's placement request, created when they contact residences.
    """
    __tablename__ = 'requests'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    requester_type = Column(Text, nullable=False, default='family')  # family|healthcare_worker
    requester_id = Column(Uuid(as_uuid=True), nullable=True)  # Null for anonymous public searches
    requester_contact = Column(JsonType, nullable=False, default=dict)
    patient_profile = Column(JsonType, nullable=False, default=dict)

    location_preference = Column(Text)
    budget_min = Column(Integer)
    budget_max = Column(Integer)
    urgency_level = Column(Text, nullable=False, default='normal')
    status = Column(Text, nullable=False, default='open')  # open|matched|closed

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    contacts = relationship("Contact", back_populates="request", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_requests_status', 'status'),
        Index('idx_requests_created', 'created_at'),
    )


class Contact(Base):
    """
    One message from a request to one residence (an inquiry).
    """
    __tablename__ = 'contacts'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    request_id = Column(Uuid(as_uuid=True), ForeignKey('requests.id', ondelete='CASCADE'), nullable=False)
    rpa_id = Column(Uuid(as_uuid=True), ForeignKey('rpas.id', ondelete='CASCADE'), nullable=False)
    requester_id = Column(Uuid(as_uuid=True), nullable=True)

    contact_type = Column(Text, nullable=False, default='message')
    message = Column(Text)
    requester_phone = Column(Text)
    requester_email = Column(Text)
    status = Column(Text, nullable=False, default='pending')  # pending|responded|declined
    responded_at = Column(TIMESTAMP(timezone=True))
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    request = relationship("CareRequest", back_populates="contacts")
    residence = relationship("Residence", back_populates="contacts")

    __table_args__ = (
        Index('idx_contacts_rpa', 'rpa_id'),
        Index('idx_contacts_request', 'request_id'),
    )
