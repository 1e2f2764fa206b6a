from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from tool_rental.infra.db.config import database_url, max_overflow, pool_size

# Built on first use so importing the app never requires DATABASE_URL
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine.

    Pool sizing comes from DB_POOL_SIZE / DB_MAX_OVERFLOW. Connections are
    pinged before checkout and recycled hourly.
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            database_url(),
            pool_size=pool_size(),
            max_overflow=max_overflow(),
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
