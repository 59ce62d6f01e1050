"""Abstract repository for User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from expiry_tracker.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def save(self, user: User) -> User:
        """Persist a new or updated user and return it."""

    @abstractmethod
    def get_by_id(self, user_id: UUID) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Return a user by exact username, or None if not found."""

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """True if the email is already registered (case-insensitive)."""

    @abstractmethod
    def exists_by_username(self, username: str) -> bool:
        """True if the username is already taken."""
