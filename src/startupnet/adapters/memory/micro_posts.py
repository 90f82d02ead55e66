"""In-memory MicroPostStore and CommentStore for testing purposes."""

from __future__ import annotations

from dataclasses import replace

from startupnet.domain.social import Comment, MicroPost
from startupnet.domain.value_objects import FollowableKind, TargetRef
from startupnet.interfaces.micro_posts import CommentStore, MicroPostStore

from .store import InMemoryData


def _newest_first(posts: list[MicroPost]) -> list[MicroPost]:
    return sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)


class InMemoryMicroPostStore(MicroPostStore):
    """In-memory MicroPostStore; the feed reads the shared follow edges."""

    def __init__(self, data: InMemoryData):
        self._data = data

    def add(self, post: MicroPost) -> MicroPost:
        saved = replace(post, id=self._data.next_id("micro_posts"))
        self._data.micro_posts[saved.id] = saved  # type: ignore[index]
        return saved

    def by_author(self, user_id: int) -> list[MicroPost]:
        return _newest_first(
            [p for p in self._data.micro_posts.values() if p.user_id == user_id]
        )

    def feed_for(self, user_id: int, limit: int | None = None) -> list[MicroPost]:
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")

        authors = {user_id}
        authors.update(
            edge.target.id
            for edge in self._data.follows
            if edge.follower_id == user_id and edge.target.kind is FollowableKind.USER
        )
        feed = _newest_first(
            [p for p in self._data.micro_posts.values() if p.user_id in authors]
        )
        return feed if limit is None else feed[:limit]


class InMemoryCommentStore(CommentStore):
    """In-memory CommentStore backed by a shared `InMemoryData`."""

    def __init__(self, data: InMemoryData):
        self._data = data

    def add(self, comment: Comment) -> Comment:
        saved = replace(comment, id=self._data.next_id("comments"))
        self._data.comments[saved.id] = saved  # type: ignore[index]
        return saved

    def for_target(self, target: TargetRef) -> list[Comment]:
        return sorted(
            (c for c in self._data.comments.values() if c.target == target),
            key=lambda c: (c.created_at, c.id),
        )
