"""Interface for the user repository.

Defines the `UserRepository` port: persistence of `User` entities together
with the associations their roles are derived from (founded startups and the
investor profile).

Email handling is part of the contract, not of validation: every
implementation stores the email stripped and lowercased on *every* write, and
looks emails up case-insensitively.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from startupnet.domain.users import User


class UserRepository(abc.ABC):
    """Storage for users."""

    @abc.abstractmethod
    def add(self, user: User) -> User:
        """Insert a new user.

        The email is normalized before it is written. On success the passed
        object is updated in place (``id``, ``created_at`` and the normalized
        ``email``) and returned.

        Args:
            user: A user without an ``id``.

        Returns:
            The same user object, now persisted.

        Raises:
            DuplicateEmailError: If another user already has the email
                (compared case-insensitively).
        """

    @abc.abstractmethod
    def update(self, user: User) -> User:
        """Write the mutable fields of an existing user (name, email, password hash, admin flag).

        The email is normalized before it is written and on the passed object.

        Raises:
            DuplicateEmailError: If the new email belongs to another user.
            UnsavedEntityError: If ``user.id`` is None.
        """

    @abc.abstractmethod
    def get(self, user_id: int) -> User | None:
        """Load a user with its startups and investor profile, or None."""

    @abc.abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Load a user by email (case-insensitive), or None."""

    @abc.abstractmethod
    def get_many(self, user_ids: Sequence[int]) -> list[User]:
        """Load several users, in the order of ``user_ids``; unknown ids are skipped.

        Each user carries its startups and investor profile, as with `get`.
        """

    @abc.abstractmethod
    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        """Return True if any user other than ``exclude_id`` has the email.

        Comparison is case-insensitive.
        """
