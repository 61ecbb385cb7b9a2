import contextlib
import logging

from database.database import session_scope
from database.repositories import ResidenceRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def residence_uow():
    """Yield a ResidenceRepository on a fresh session for one matching call.

    Usage:
        with residence_uow() as repo:
            page = MatchingEngine(repo).find_matches(profile)
    """
    with session_scope() as session:
        yield ResidenceRepository(session)
