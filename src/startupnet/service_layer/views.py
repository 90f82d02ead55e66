"""Read-side views.

Queries do not go through the message bus: each view opens the unit of work,
reads, and lets it roll back on exit. All of them reflect storage at call
time (nothing is cached), so the feed follows follow/unfollow immediately.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from startupnet.domain.value_objects import FollowableKind, TargetRef

if TYPE_CHECKING:
    from startupnet.domain.social import Comment, MicroPost
    from startupnet.domain.startups import Startup
    from startupnet.domain.users import User
    from startupnet.interfaces.password_hasher import PasswordHasher
    from startupnet.interfaces.unit_of_work import AbstractUnitOfWork


def _ref(kind: FollowableKind | str, target_id: int) -> TargetRef:
    return TargetRef(FollowableKind.from_string(kind), target_id)


# --- users ---


def get_user(uow: AbstractUnitOfWork, user_id: int) -> User | None:
    """Load a user with the startups and investor profile its roles derive from."""
    with uow:
        return uow.users.get(user_id)


def authenticate(
    uow: AbstractUnitOfWork, hasher: PasswordHasher, email: str, password: str
) -> User | None:
    """Return the user owning ``email`` if ``password`` matches its stored hash.

    The email is matched case-insensitively. Users without a password hash
    (registered with validation skipped) never authenticate.
    """
    with uow:
        user = uow.users.get_by_email(email)
    if user is None or not user.password_hash:
        return None
    return user if hasher.verify(password, user.password_hash) else None


# --- follow graph ---


def users_followed(uow: AbstractUnitOfWork, user_id: int) -> list[User]:
    """Users followed by ``user_id``, most recently followed first."""
    with uow:
        refs = uow.social_graph.followed(user_id, FollowableKind.USER)
        return uow.users.get_many([ref.id for ref in refs])


def startups_followed(uow: AbstractUnitOfWork, user_id: int) -> list[Startup]:
    """Startups followed by ``user_id``, most recently followed first."""
    with uow:
        refs = uow.social_graph.followed(user_id, FollowableKind.STARTUP)
        return uow.startups.get_many([ref.id for ref in refs])


def count_users_followed(uow: AbstractUnitOfWork, user_id: int) -> int:
    with uow:
        return uow.social_graph.count_followed(user_id, FollowableKind.USER)


def count_startups_followed(uow: AbstractUnitOfWork, user_id: int) -> int:
    with uow:
        return uow.social_graph.count_followed(user_id, FollowableKind.STARTUP)


def is_following(
    uow: AbstractUnitOfWork, user_id: int, kind: FollowableKind | str, target_id: int
) -> bool:
    with uow:
        return uow.social_graph.is_following(user_id, _ref(kind, target_id))


def followers(
    uow: AbstractUnitOfWork, kind: FollowableKind | str, target_id: int
) -> list[User]:
    """Users following the given user or startup, most recent first."""
    with uow:
        ids = uow.social_graph.followers(_ref(kind, target_id))
        return uow.users.get_many(ids)


def count_followers(
    uow: AbstractUnitOfWork, kind: FollowableKind | str, target_id: int
) -> int:
    with uow:
        return uow.social_graph.count_followers(_ref(kind, target_id))


# --- activity ---


def followed_micro_posts(
    uow: AbstractUnitOfWork, user_id: int, limit: int | None = None
) -> list[MicroPost]:
    """The feed of ``user_id``: own posts and those of followed users, newest first.

    Args:
        uow: Unit of work to read through.
        user_id: The reader.
        limit: Maximum number of posts; None for all.

    Raises:
        ValueError: If ``limit`` is given and < 1.
    """
    with uow:
        return uow.micro_posts.feed_for(user_id, limit=limit)


def micro_posts_by(uow: AbstractUnitOfWork, user_id: int) -> list[MicroPost]:
    """Posts written by ``user_id``, newest first."""
    with uow:
        return uow.micro_posts.by_author(user_id)


def comments_for(
    uow: AbstractUnitOfWork, kind: FollowableKind | str, target_id: int
) -> list[Comment]:
    """Comments on the given user or startup, oldest first."""
    with uow:
        return uow.comments.for_target(_ref(kind, target_id))
