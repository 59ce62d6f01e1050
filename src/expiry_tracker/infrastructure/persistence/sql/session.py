"""Engine and session factory configuration."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from expiry_tracker.infrastructure.persistence.sql.models import Base

logger = logging.getLogger(__name__)


def create_engine_for(database_url: str) -> Engine:
    """Build an engine; pre-ping keeps long-lived CLI sessions off stale connections."""
    return create_engine(database_url, echo=False, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    """Create any missing tables."""
    Base.metadata.create_all(engine)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Yield a transactional session: commit on success, roll back on error.

    Integrity errors are left for the caller to translate into domain
    errors; other database failures are logged here.
    """
    session = factory()
    try:
        yield session
        session.commit()
    except IntegrityError:
        session.rollback()
        raise
    except SQLAlchemyError:
        logger.exception("Database transaction failed, rolled back")
        session.rollback()
        raise
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
