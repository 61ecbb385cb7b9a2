from database.repositories.base import BaseRepository
from database.repositories.residence import ResidenceRepository
from database.repositories.availability import AvailabilityRepository
from database.repositories.request import RequestRepository

__all__ = [
    'BaseRepository',
    'ResidenceRepository',
    'AvailabilityRepository',
    'RequestRepository',
]
