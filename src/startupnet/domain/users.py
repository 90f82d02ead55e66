"""The User entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .errors import UnsavedEntityError
from .startups import Investor, Startup
from .value_objects import FollowableKind, TargetRef


@dataclass(eq=False)
class User:
    """A registered member of the network.

    Roles are not stored: ``is_entrepreneur`` and ``is_investor`` are read off
    the associations loaded with the user (``startups`` and ``investor``), so
    they can never disagree with them. ``is_admin`` is the only stored flag.

    ``email`` is kept as given on the object; repositories store and return
    it lowercased.
    """

    name: str
    email: str
    password_hash: str | None = None
    is_admin: bool = False
    id: int | None = None
    created_at: datetime | None = None
    startups: list[Startup] = field(default_factory=list)
    investor: Investor | None = None

    # --- roles ---

    @property
    def is_entrepreneur(self) -> bool:
        """True when the user founded at least one startup."""
        return bool(self.startups)

    @property
    def is_investor(self) -> bool:
        """True when the user has an investor profile."""
        return self.investor is not None

    # --- capabilities ---

    def _ref(self) -> TargetRef:
        if self.id is None:
            raise UnsavedEntityError("User")
        return TargetRef(FollowableKind.USER, self.id)

    def follow_target(self) -> TargetRef:
        return self._ref()

    def comment_target(self) -> TargetRef:
        return self._ref()

    # --- identity ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(("User", self.id)) if self.id is not None else id(self)

    def __repr__(self) -> str:
        # never render password_hash
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r})"
