"""Interfaces for micro-posts and comments."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from startupnet.domain.social import Comment, MicroPost
    from startupnet.domain.value_objects import TargetRef


class MicroPostStore(abc.ABC):
    """Storage and feed queries for micro-posts.

    Ordering everywhere is ``created_at`` descending, then ``id`` descending.
    """

    @abc.abstractmethod
    def add(self, post: MicroPost) -> MicroPost:
        """Insert a post and return it with its ``id`` assigned."""

    @abc.abstractmethod
    def by_author(self, user_id: int) -> list[MicroPost]:
        """Return the posts written by ``user_id``, newest first."""

    @abc.abstractmethod
    def feed_for(self, user_id: int, limit: int | None = None) -> list[MicroPost]:
        """Return the feed of ``user_id``, newest first.

        The feed is every post whose author is ``user_id`` itself or a *user*
        that ``user_id`` currently follows. Followed startups contribute
        nothing. The result reflects the follow edges at call time.

        Args:
            user_id: The reader.
            limit: Maximum number of posts to return; None for all.

        Raises:
            ValueError: If ``limit`` is given and < 1.
        """


class CommentStore(abc.ABC):
    """Storage for comments attached to commentable entities."""

    @abc.abstractmethod
    def add(self, comment: Comment) -> Comment:
        """Insert a comment and return it with its ``id`` assigned."""

    @abc.abstractmethod
    def for_target(self, target: TargetRef) -> list[Comment]:
        """Return the comments on ``target``, oldest first."""
