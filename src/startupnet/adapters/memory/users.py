"""In-memory UserRepository implementation for testing purposes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from startupnet.domain.errors import UnsavedEntityError
from startupnet.domain.users import User
from startupnet.domain.validation import normalize_email
from startupnet.interfaces.errors import DuplicateEmailError
from startupnet.interfaces.users import UserRepository

from .store import InMemoryData, utcnow


class InMemoryUserRepository(UserRepository):
    """In-memory UserRepository backed by a shared `InMemoryData`.

    Note: This implementation is not thread-safe and is intended
    solely for use in single-threaded test scenarios
    """

    def __init__(self, data: InMemoryData):
        self._data = data

    # --- writes ---

    def add(self, user: User) -> User:
        email = normalize_email(user.email)
        if self.email_taken(email):
            raise DuplicateEmailError(email)

        user.id = self._data.next_id("users")
        user.email = email
        if user.created_at is None:
            user.created_at = utcnow()
        self._data.users[user.id] = self._bare(user)
        return user

    def update(self, user: User) -> User:
        if user.id is None:
            raise UnsavedEntityError("User")
        email = normalize_email(user.email)
        if self.email_taken(email, exclude_id=user.id):
            raise DuplicateEmailError(email)

        user.email = email
        if user.id in self._data.users:
            stored = self._data.users[user.id]
            self._data.users[user.id] = replace(
                stored,
                name=user.name,
                email=email,
                password_hash=user.password_hash,
                is_admin=user.is_admin,
            )
        return user

    # --- reads ---

    def get(self, user_id: int) -> User | None:
        stored = self._data.users.get(user_id)
        if stored is None:
            return None
        startups = [
            replace(self._data.startups[startup_id])
            for uid, startup_id in self._data.entrepreneurs
            if uid == user_id
        ]
        investor = self._data.investors.get(user_id)
        return replace(
            stored,
            startups=startups,
            investor=None if investor is None else replace(investor),
        )

    def get_by_email(self, email: str) -> User | None:
        wanted = normalize_email(email)
        for user_id, stored in self._data.users.items():
            if stored.email == wanted:
                return self.get(user_id)
        return None

    def get_many(self, user_ids: Sequence[int]) -> list[User]:
        return [self.get(uid) for uid in user_ids if uid in self._data.users]  # type: ignore[misc]

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        wanted = normalize_email(email)
        return any(
            stored.email == wanted and user_id != exclude_id
            for user_id, stored in self._data.users.items()
        )

    @staticmethod
    def _bare(user: User) -> User:
        return replace(user, startups=[], investor=None)
