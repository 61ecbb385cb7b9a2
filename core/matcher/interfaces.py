"""
Candidate Source Interface - what the matching engine needs from storage.

The production implementation is database.repositories.ResidenceRepository.
"""
from abc import ABC, abstractmethod
from typing import List

from core.matcher.dto import Candidate
from core.matcher.filters import HardFilters


class CandidateSource(ABC):
    """
    Abstract interface for candidate retrieval.
    """

    @abstractmethod
    def query_candidates(self, filters: HardFilters) -> List[Candidate]:
        """
        Return structurally eligible residences with their availability history.

        Must return [] (not raise) when nothing matches, and raise
        RepositoryError when the underlying store fails.
        """
        pass
