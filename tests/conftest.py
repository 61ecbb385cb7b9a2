"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring a database engine (deselect with '-m \"not db\"')"
    )


@pytest.fixture(autouse=True)
def reset_config_cache():
    """get_config() is cached per process; keep env overrides from leaking between tests."""
    from core.config_loader import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def db_session():
    """Session on a fresh schema, dropped after the test."""
    from tests import create_test_engine, create_test_session_factory, teardown_test_database

    engine = create_test_engine()
    session = create_test_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        teardown_test_database(engine)
