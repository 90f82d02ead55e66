"""Interface for the follow graph.

A follow edge is the triple ``(follower_id, target.kind, target.id)``. The
follower is always a user; the target is any followable entity. Edges are
unique, so both mutating operations are idempotent and report whether they
changed anything.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from startupnet.domain.value_objects import FollowableKind, TargetRef


class SocialGraph(abc.ABC):
    """Directed follow edges from users to followable entities."""

    @abc.abstractmethod
    def follow(self, follower_id: int, target: TargetRef) -> bool:
        """Create the edge if it does not exist yet.

        A concurrent insert of the same edge must not raise: the storage
        uniqueness guarantee decides the winner and the loser sees False.

        Returns:
            True if an edge was created, False if it already existed.
        """

    @abc.abstractmethod
    def unfollow(self, follower_id: int, target: TargetRef) -> bool:
        """Delete the edge if it exists.

        Returns:
            True if an edge was removed, False if there was none.
        """

    @abc.abstractmethod
    def is_following(self, follower_id: int, target: TargetRef) -> bool:
        """Return True if the edge exists."""

    @abc.abstractmethod
    def followed(
        self, follower_id: int, kind: FollowableKind | None = None
    ) -> list[TargetRef]:
        """Return what ``follower_id`` follows, newest edge first.

        Args:
            follower_id: The following user.
            kind: Restrict to one target kind; None returns every kind.
        """

    @abc.abstractmethod
    def count_followed(self, follower_id: int, kind: FollowableKind) -> int:
        """Count the targets of ``kind`` that ``follower_id`` follows."""

    @abc.abstractmethod
    def followers(self, target: TargetRef) -> list[int]:
        """Return the ids of the users following ``target``, newest edge first."""

    @abc.abstractmethod
    def count_followers(self, target: TargetRef) -> int:
        """Count the users following ``target``."""
