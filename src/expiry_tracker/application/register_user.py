"""Application service: Register User use case."""

from __future__ import annotations

import logging

from expiry_tracker.application.dto import UserRegistration
from expiry_tracker.domain.exceptions import DuplicateUserError
from expiry_tracker.domain.model.user import User
from expiry_tracker.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, registration: UserRegistration) -> User:
        email = (registration.email or "").strip().lower()
        username = (registration.username or "").strip()

        if email and self._user_repo.exists_by_email(email):
            raise DuplicateUserError(f"Email {email} is already registered")
        if username and self._user_repo.exists_by_username(username):
            raise DuplicateUserError(f"Username '{username}' is already taken")

        user = User.register(username, email, registration.password)
        saved = self._user_repo.save(user)
        logger.info("Registered user %s (%s)", saved.username, saved.id)
        return saved
