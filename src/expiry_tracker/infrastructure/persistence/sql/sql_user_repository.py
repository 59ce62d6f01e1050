"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from expiry_tracker.domain.exceptions import DuplicateUserError
from expiry_tracker.domain.model.user import User
from expiry_tracker.domain.repository.user_repository import UserRepository
from expiry_tracker.infrastructure.persistence.sql.models import UserRecord
from expiry_tracker.infrastructure.persistence.sql.session import session_scope


class SqlUserRepository(UserRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def save(self, user: User) -> User:
        try:
            with session_scope(self._session_factory) as session:
                session.merge(
                    UserRecord(
                        id=user.id,
                        username=user.username,
                        email=user.email,
                        password_hash=user.password_hash,
                    )
                )
        except IntegrityError as exc:
            raise DuplicateUserError(
                f"Username '{user.username}' or email {user.email} is already registered"
            ) from exc
        return user

    def get_by_id(self, user_id: UUID) -> User | None:
        with session_scope(self._session_factory) as session:
            record = session.get(UserRecord, user_id)
            return self._to_domain(record) if record is not None else None

    def get_by_username(self, username: str) -> User | None:
        stmt = select(UserRecord).where(UserRecord.username == username)
        with session_scope(self._session_factory) as session:
            record = session.scalars(stmt).first()
            return self._to_domain(record) if record is not None else None

    def exists_by_email(self, email: str) -> bool:
        stmt = select(UserRecord.id).where(
            func.lower(UserRecord.email) == email.strip().lower()
        )
        with session_scope(self._session_factory) as session:
            return session.scalars(stmt).first() is not None

    def exists_by_username(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    @staticmethod
    def _to_domain(record: UserRecord) -> User:
        return User(
            id=record.id,
            username=record.username,
            email=record.email,
            password_hash=record.password_hash,
        )
