"""Interfaces for startups and investor profiles."""

from __future__ import annotations

import abc
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from startupnet.domain.startups import Investor, Startup


class StartupRepository(abc.ABC):
    """Storage for startups and the users who founded them.

    The founder relation is many-to-many (the ``entrepreneurs`` join table).
    """

    @abc.abstractmethod
    def add(self, startup: Startup, founder_id: int) -> Startup:
        """Insert a startup and record ``founder_id`` as its first founder.

        The passed object gets its ``id`` and ``created_at`` and is returned.
        """

    @abc.abstractmethod
    def get(self, startup_id: int) -> Startup | None:
        """Load a startup, or None."""

    @abc.abstractmethod
    def get_many(self, startup_ids: Sequence[int]) -> list[Startup]:
        """Load several startups in the order of ``startup_ids``; unknown ids are skipped."""

    @abc.abstractmethod
    def add_founder(self, startup_id: int, user_id: int) -> bool:
        """Record ``user_id`` as a founder of the startup.

        Returns:
            True if the relation was created, False if it already existed.
        """

    @abc.abstractmethod
    def founded_by(self, user_id: int) -> list[Startup]:
        """Return the startups founded by ``user_id``, oldest first."""

    @abc.abstractmethod
    def founders(self, startup_id: int) -> list[int]:
        """Return the ids of the users who founded the startup, in join order."""


class InvestorRepository(abc.ABC):
    """Storage for investor profiles (at most one per user)."""

    @abc.abstractmethod
    def add(self, investor: Investor) -> Investor:
        """Insert an investor profile for ``investor.user_id``.

        Raises:
            InvestorProfileExistsError: If the user already has one.
        """

    @abc.abstractmethod
    def for_user(self, user_id: int) -> Investor | None:
        """Return the user's investor profile, or None."""
