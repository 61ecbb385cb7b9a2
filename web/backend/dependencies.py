#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

The engine is built on first use, so importing the app (tests, docs
generation) never opens a database connection.
"""

from functools import lru_cache
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from core.config_loader import MatchingConfig, get_config


class DatabaseManager:
    """Engine and session factory for the API process."""

    def __init__(self, url: str):
        pool_args = {}
        if url.startswith("postgresql"):
            pool_args = {"pool_size": 10, "max_overflow": 20}
        self.engine = create_engine(url, pool_pre_ping=True, **pool_args)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)


@lru_cache()
def get_db_manager() -> DatabaseManager:
    return DatabaseManager(get_config().database.url)


def get_db() -> Generator[Session, None, None]:
    """
    Yield a request-scoped session; services commit their own writes.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...
    """
    session = get_db_manager().session_factory()
    try:
        yield session
    finally:
        session.close()


def get_matching_config() -> MatchingConfig:
    """Matching weights and thresholds, overridable in tests."""
    return get_config().matching
