"""Startups and investor profiles, the two things a user's role derives from."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .errors import UnsavedEntityError
from .value_objects import FollowableKind, TargetRef


@dataclass(eq=False)
class Startup:
    """A company founded by one or more users (its entrepreneurs).

    Followable and commentable.
    """

    name: str
    id: int | None = None
    created_at: datetime | None = None

    def _ref(self) -> TargetRef:
        if self.id is None:
            raise UnsavedEntityError("Startup")
        return TargetRef(FollowableKind.STARTUP, self.id)

    def follow_target(self) -> TargetRef:
        return self._ref()

    def comment_target(self) -> TargetRef:
        return self._ref()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Startup):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(("Startup", self.id)) if self.id is not None else id(self)


@dataclass(eq=False)
class Investor:
    """Investor profile attached one-to-one to a user."""

    name: str = ""
    user_id: int | None = None
    id: int | None = None
    created_at: datetime | None = None
