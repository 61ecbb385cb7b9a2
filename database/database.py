import contextlib
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from core.config_loader import get_config

engine = create_engine(get_config().database.url, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextlib.contextmanager
def session_scope():
    """Session committed on success, rolled back on error, always closed."""
    session: Session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
