"""User aggregate: the minimal registry of people operating the tracker."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

import bcrypt

from expiry_tracker.domain.exceptions import ValidationError
from expiry_tracker.domain.model.identity import new_id

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72


def hash_password(raw: str) -> str:
    """Return a salted bcrypt hash of ``raw``."""
    return bcrypt.hashpw(raw.encode("utf-8"), bcrypt.gensalt()).decode("ascii")


@dataclass
class User:

    id: UUID
    username: str
    email: str
    password_hash: str

    def __post_init__(self) -> None:
        if not self.username or not self.username.strip():
            raise ValidationError("Username is required")
        if not self.email or "@" not in self.email:
            raise ValidationError(f"Invalid email address: {self.email!r}")
        if not self.password_hash:
            raise ValidationError("Password is required")

    @staticmethod
    def register(username: str, email: str, password: str) -> User:
        """Create a new user, hashing the raw password."""
        if password is None or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )
        return User(
            id=new_id(),
            username=(username or "").strip(),
            email=(email or "").strip().lower(),
            password_hash=hash_password(password),
        )
