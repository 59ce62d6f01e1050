"""Integration tests for the RegisterUser use case."""

import bcrypt
import pytest

from expiry_tracker.application.dto import UserRegistration
from expiry_tracker.application.register_user import RegisterUserHandler
from expiry_tracker.domain.exceptions import DuplicateUserError, ValidationError
from tests.fakes import FakeUserRepository


def _setup() -> tuple[RegisterUserHandler, FakeUserRepository]:
    repo = FakeUserRepository()
    return RegisterUserHandler(repo), repo


class TestRegisterUser:

    def test_registers_user_with_hashed_password(self):
        handler, repo = _setup()
        user = handler.handle(UserRegistration("ana", "Ana@Example.com", "s3cret-pass"))
        assert repo.get_by_username("ana") == user
        assert user.email == "ana@example.com"
        assert "s3cret-pass" not in user.password_hash
        assert bcrypt.checkpw(b"s3cret-pass", user.password_hash.encode())
        assert not bcrypt.checkpw(b"wrong-pass", user.password_hash.encode())

    def test_duplicate_email_rejected(self):
        handler, _ = _setup()
        handler.handle(UserRegistration("ana", "ana@example.com", "s3cret-pass"))
        with pytest.raises(DuplicateUserError, match="already registered"):
            handler.handle(UserRegistration("bob", "ANA@example.com", "s3cret-pass"))

    def test_duplicate_username_rejected(self):
        handler, _ = _setup()
        handler.handle(UserRegistration("ana", "ana@example.com", "s3cret-pass"))
        with pytest.raises(DuplicateUserError, match="already taken"):
            handler.handle(UserRegistration("ana", "other@example.com", "s3cret-pass"))

    def test_short_password_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="at least 8"):
            handler.handle(UserRegistration("ana", "ana@example.com", "short"))

    def test_invalid_email_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid email"):
            handler.handle(UserRegistration("ana", "not-an-email", "s3cret-pass"))

    def test_blank_username_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Username is required"):
            handler.handle(UserRegistration("  ", "ana@example.com", "s3cret-pass"))

    def test_overlong_password_rejected(self):
        handler, repo = _setup()
        with pytest.raises(ValidationError, match="at most 72 bytes"):
            handler.handle(UserRegistration("ana", "ana@example.com", "ñ" * 40))
        assert not repo.exists_by_username("ana")
