"""Records produced by social activity: follow edges, micro-posts, comments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .value_objects import TargetRef


@dataclass(frozen=True, slots=True)
class Follow:
    """Directional edge: ``follower_id`` follows ``target``."""

    follower_id: int
    target: TargetRef
    created_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class MicroPost:
    """A short status update authored by a user."""

    user_id: int
    content: str
    created_at: datetime
    id: int | None = None


@dataclass(frozen=True, slots=True)
class Comment:
    """A comment left by a user on a commentable entity."""

    user_id: int
    target: TargetRef
    content: str
    created_at: datetime
    id: int | None = None
