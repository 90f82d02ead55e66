"""SQLAlchemy-backed SocialGraph.

``follow`` never raises on duplicates. It issues a dialect-specific
``INSERT ... ON CONFLICT DO NOTHING`` against the unique
``(follower_id, followed_type, followed_id)`` constraint and reads the
outcome from the row count: 1 means this call created the edge, 0 means the
edge was already there (possibly inserted a moment ago by a concurrent
request).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, exists, func, select

from startupnet.adapters.db.dialects import DialectName, insert_ignoring_conflicts
from startupnet.adapters.db.schema import follows
from startupnet.domain.value_objects import FollowableKind, TargetRef
from startupnet.interfaces.social_graph import SocialGraph

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection
    from sqlalchemy.sql.elements import ColumnElement


def _edge(follower_id: int, target: TargetRef) -> ColumnElement[bool]:
    return (
        (follows.c.follower_id == follower_id)
        & (follows.c.followed_type == target.kind.value)
        & (follows.c.followed_id == target.id)
    )


def _targeting(target: TargetRef) -> ColumnElement[bool]:
    return (follows.c.followed_type == target.kind.value) & (
        follows.c.followed_id == target.id
    )


class SqlAlchemySocialGraph(SocialGraph):
    """SocialGraph over the ``follows`` table (PostgreSQL and SQLite)."""

    def __init__(self, connection: Connection):
        self.connection = connection
        self.dialect = DialectName.from_sqlalchemy(connection)

    # --- writes ---

    def follow(self, follower_id: int, target: TargetRef) -> bool:
        values = {
            "follower_id": follower_id,
            "followed_type": target.kind.value,
            "followed_id": target.id,
        }
        stmt = insert_ignoring_conflicts(follows, values, self.dialect)
        return self.connection.execute(stmt).rowcount == 1

    def unfollow(self, follower_id: int, target: TargetRef) -> bool:
        result = self.connection.execute(delete(follows).where(_edge(follower_id, target)))
        return result.rowcount > 0

    # --- reads ---

    def is_following(self, follower_id: int, target: TargetRef) -> bool:
        stmt = select(exists().where(_edge(follower_id, target)))
        return bool(self.connection.execute(stmt).scalar())

    def followed(
        self, follower_id: int, kind: FollowableKind | None = None
    ) -> list[TargetRef]:
        stmt = (
            select(follows.c.followed_type, follows.c.followed_id)
            .where(follows.c.follower_id == follower_id)
            .order_by(follows.c.created_at.desc(), follows.c.id.desc())
        )
        if kind is not None:
            stmt = stmt.where(follows.c.followed_type == kind.value)
        return [
            TargetRef(FollowableKind(row.followed_type), row.followed_id)
            for row in self.connection.execute(stmt)
        ]

    def count_followed(self, follower_id: int, kind: FollowableKind) -> int:
        stmt = select(func.count()).select_from(follows).where(
            follows.c.follower_id == follower_id,
            follows.c.followed_type == kind.value,
        )
        return int(self.connection.execute(stmt).scalar_one())

    def followers(self, target: TargetRef) -> list[int]:
        stmt = (
            select(follows.c.follower_id)
            .where(_targeting(target))
            .order_by(follows.c.created_at.desc(), follows.c.id.desc())
        )
        return list(self.connection.execute(stmt).scalars())

    def count_followers(self, target: TargetRef) -> int:
        stmt = select(func.count()).select_from(follows).where(_targeting(target))
        return int(self.connection.execute(stmt).scalar_one())
