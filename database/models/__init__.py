from .base import Base, utcnow
from .residence import Residence, Availability
from .request import CareRequest, Contact

__all__ = [
    'Base',
    'utcnow',
    'Residence',
    'Availability',
    'CareRequest',
    'Contact',
]
