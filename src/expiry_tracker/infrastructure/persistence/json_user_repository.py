"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

import json
from pathlib import Path
from uuid import UUID

from expiry_tracker.domain.model.user import User
from expiry_tracker.domain.repository.user_repository import UserRepository


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- UserRepository interface ---------------------------------------------

    def save(self, user: User) -> User:
        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == str(user.id):
                records[i] = self._to_raw(user)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(user))
        self._persist_raw(records)
        return user

    def get_by_id(self, user_id: UUID) -> User | None:
        for raw in self._load_raw():
            if raw["id"] == str(user_id):
                return self._to_domain(raw)
        return None

    def get_by_username(self, username: str) -> User | None:
        for raw in self._load_raw():
            if raw["username"] == username:
                return self._to_domain(raw)
        return None

    def exists_by_email(self, email: str) -> bool:
        wanted = email.strip().lower()
        return any(raw["email"].lower() == wanted for raw in self._load_raw())

    def exists_by_username(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": str(user.id),
            "username": user.username,
            "email": user.email,
            "password_hash": user.password_hash,
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=UUID(raw["id"]),
            username=raw["username"],
            email=raw["email"],
            password_hash=raw["password_hash"],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
