"""SQLAlchemy-backed MicroPostStore and CommentStore.

The feed is one statement:

    SELECT * FROM micro_posts
    WHERE user_id = :me
       OR user_id IN (SELECT followed_id FROM follows
                      WHERE follower_id = :me AND followed_type = 'User')
    ORDER BY created_at DESC, id DESC
    [LIMIT :n]

so it always sees the follow edges committed at query time and never
materializes the followed set in Python.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import insert, or_, select

from startupnet.adapters.db.schema import comments, follows, micro_posts
from startupnet.domain.social import Comment, MicroPost
from startupnet.domain.value_objects import FollowableKind, TargetRef
from startupnet.interfaces.micro_posts import CommentStore, MicroPostStore

if TYPE_CHECKING:
    from sqlalchemy import RowMapping, Select
    from sqlalchemy.engine import Connection


def _row_to_post(row: RowMapping) -> MicroPost:
    return MicroPost(
        id=row["id"],
        user_id=row["user_id"],
        content=row["content"],
        created_at=row["created_at"],
    )


def _newest_first(stmt: Select) -> Select:
    return stmt.order_by(micro_posts.c.created_at.desc(), micro_posts.c.id.desc())


class SqlAlchemyMicroPostStore(MicroPostStore):
    """MicroPostStore over ``micro_posts`` (feed joins against ``follows``)."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, post: MicroPost) -> MicroPost:
        post_id = self.connection.execute(
            insert(micro_posts)
            .values(
                user_id=post.user_id,
                content=post.content,
                created_at=post.created_at,
            )
            .returning(micro_posts.c.id)
        ).scalar_one()
        return MicroPost(
            id=post_id,
            user_id=post.user_id,
            content=post.content,
            created_at=post.created_at,
        )

    def by_author(self, user_id: int) -> list[MicroPost]:
        stmt = _newest_first(select(micro_posts).where(micro_posts.c.user_id == user_id))
        return [_row_to_post(row) for row in self.connection.execute(stmt).mappings()]

    def feed_for(self, user_id: int, limit: int | None = None) -> list[MicroPost]:
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")

        followed_users = select(follows.c.followed_id).where(
            follows.c.follower_id == user_id,
            follows.c.followed_type == FollowableKind.USER.value,
        )
        stmt = _newest_first(
            select(micro_posts).where(
                or_(
                    micro_posts.c.user_id == user_id,
                    micro_posts.c.user_id.in_(followed_users),
                )
            )
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return [_row_to_post(row) for row in self.connection.execute(stmt).mappings()]


class SqlAlchemyCommentStore(CommentStore):
    """CommentStore over ``comments``."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, comment: Comment) -> Comment:
        comment_id = self.connection.execute(
            insert(comments)
            .values(
                user_id=comment.user_id,
                commentable_type=comment.target.kind.value,
                commentable_id=comment.target.id,
                content=comment.content,
                created_at=comment.created_at,
            )
            .returning(comments.c.id)
        ).scalar_one()
        return Comment(
            id=comment_id,
            user_id=comment.user_id,
            target=comment.target,
            content=comment.content,
            created_at=comment.created_at,
        )

    def for_target(self, target: TargetRef) -> list[Comment]:
        stmt = (
            select(comments)
            .where(
                comments.c.commentable_type == target.kind.value,
                comments.c.commentable_id == target.id,
            )
            .order_by(comments.c.created_at.asc(), comments.c.id.asc())
        )
        return [
            Comment(
                id=row["id"],
                user_id=row["user_id"],
                target=TargetRef(FollowableKind(row["commentable_type"]), row["commentable_id"]),
                content=row["content"],
                created_at=row["created_at"],
            )
            for row in self.connection.execute(stmt).mappings()
        ]
