import contextlib
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.matcher.errors import RepositoryError

logger = logging.getLogger(__name__)


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    @contextlib.contextmanager
    def _guard(self, operation: str):
        """Surface driver/ORM failures as RepositoryError. No retry."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Repository failure during {operation}: {e}", exc_info=True)
            raise RepositoryError(f"Database error during {operation}", details=str(e)) from e
