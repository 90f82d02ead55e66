"""In-memory shared data store for the in-memory adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from startupnet.domain.social import Comment, Follow, MicroPost
from startupnet.domain.startups import Investor, Startup
from startupnet.domain.users import User


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class InMemoryData:
    """Shared in-memory backing store for the in-memory adapters.

    A single shared instance is passed to every adapter of one unit of work
    (``InMemoryUserRepository``, ``InMemorySocialGraph``, ...) so that
    cross-port lookups behave like joins on the database: the feed consults
    ``follows``, a loaded user sees its ``entrepreneurs`` rows, and so on.

    Entities are stored without associations and handed out as copies, so a
    caller mutating a loaded object never changes the store behind the
    repository's back.
    """

    # keyed by id
    users: dict[int, User] = field(default_factory=dict)
    startups: dict[int, Startup] = field(default_factory=dict)
    micro_posts: dict[int, MicroPost] = field(default_factory=dict)
    comments: dict[int, Comment] = field(default_factory=dict)

    # keyed by user_id (at most one profile per user)
    investors: dict[int, Investor] = field(default_factory=dict)

    # (user_id, startup_id) in insertion order
    entrepreneurs: list[tuple[int, int]] = field(default_factory=list)

    # insertion order; unique on (follower_id, target)
    follows: list[Follow] = field(default_factory=list)

    # last id handed out, per table
    sequences: dict[str, int] = field(default_factory=dict)

    def next_id(self, table: str) -> int:
        """Return the next id for ``table``, starting at 1."""
        value = self.sequences.get(table, 0) + 1
        self.sequences[table] = value
        return value
