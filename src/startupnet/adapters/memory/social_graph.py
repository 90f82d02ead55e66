"""In-memory SocialGraph implementation for testing purposes."""

from __future__ import annotations

from startupnet.domain.social import Follow
from startupnet.domain.value_objects import FollowableKind, TargetRef
from startupnet.interfaces.social_graph import SocialGraph

from .store import InMemoryData, utcnow


class InMemorySocialGraph(SocialGraph):
    """In-memory SocialGraph backed by a shared `InMemoryData`.

    Note: This implementation is not thread-safe and is intended
    solely for use in single-threaded test scenarios
    """

    def __init__(self, data: InMemoryData):
        self._data = data

    # --- writes ---

    def follow(self, follower_id: int, target: TargetRef) -> bool:
        if self.is_following(follower_id, target):
            return False
        self._data.follows.append(Follow(follower_id, target, created_at=utcnow()))
        return True

    def unfollow(self, follower_id: int, target: TargetRef) -> bool:
        before = len(self._data.follows)
        self._data.follows = [
            edge
            for edge in self._data.follows
            if not (edge.follower_id == follower_id and edge.target == target)
        ]
        return len(self._data.follows) < before

    # --- reads ---

    def _newest_first(self) -> list[Follow]:
        # stable sort: among equal timestamps the later insert stays first
        return sorted(
            reversed(self._data.follows),
            key=lambda edge: edge.created_at,  # type: ignore[arg-type,return-value]
            reverse=True,
        )

    def is_following(self, follower_id: int, target: TargetRef) -> bool:
        return any(
            edge.follower_id == follower_id and edge.target == target
            for edge in self._data.follows
        )

    def followed(
        self, follower_id: int, kind: FollowableKind | None = None
    ) -> list[TargetRef]:
        return [
            edge.target
            for edge in self._newest_first()
            if edge.follower_id == follower_id
            and (kind is None or edge.target.kind is kind)
        ]

    def count_followed(self, follower_id: int, kind: FollowableKind) -> int:
        return sum(
            1
            for edge in self._data.follows
            if edge.follower_id == follower_id and edge.target.kind is kind
        )

    def followers(self, target: TargetRef) -> list[int]:
        return [
            edge.follower_id for edge in self._newest_first() if edge.target == target
        ]

    def count_followers(self, target: TargetRef) -> int:
        return sum(1 for edge in self._data.follows if edge.target == target)
