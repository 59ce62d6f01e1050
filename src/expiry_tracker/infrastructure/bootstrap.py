"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

With ``EXPIRY_TRACKER_DATABASE_URL`` set the repositories share one
SQLAlchemy engine; otherwise they are JSON files under ``data_dir``.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy.orm import Session, sessionmaker

from expiry_tracker.domain.repository.product_repository import ProductRepository
from expiry_tracker.domain.repository.user_repository import UserRepository
from expiry_tracker.infrastructure.config import get_settings
from expiry_tracker.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from expiry_tracker.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from expiry_tracker.infrastructure.persistence.sql.session import (
    create_engine_for,
    create_schema,
    create_session_factory,
)
from expiry_tracker.infrastructure.persistence.sql.sql_product_repository import (
    SqlProductRepository,
)
from expiry_tracker.infrastructure.persistence.sql.sql_user_repository import (
    SqlUserRepository,
)


@lru_cache
def _session_factory(database_url: str) -> sessionmaker[Session]:
    engine = create_engine_for(database_url)
    create_schema(engine)
    return create_session_factory(engine)


def product_repository() -> ProductRepository:
    settings = get_settings()
    if settings.database_url:
        return SqlProductRepository(_session_factory(settings.database_url))
    return JsonProductRepository(settings.data_dir / "products.json")


def user_repository() -> UserRepository:
    settings = get_settings()
    if settings.database_url:
        return SqlUserRepository(_session_factory(settings.database_url))
    return JsonUserRepository(settings.data_dir / "users.json")
