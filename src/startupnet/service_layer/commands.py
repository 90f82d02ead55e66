"""Module defining Commands."""

from dataclasses import dataclass, field

from startupnet.domain.value_objects import FollowableKind

from .unsettable import UNSET, Unsettable

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# ============================================================================
#                           Users
# ============================================================================


@dataclass(frozen=True)
class RegisterUser(Command):
    """Command to register a new user.

    ``skip_validation`` writes the user without running the field rules. The
    email is still normalized and the storage unique index still applies.
    """

    name: str
    email: str
    password: str | None = field(default=None, repr=False)
    password_confirmation: str | None = field(default=None, repr=False)
    is_admin: bool = False
    skip_validation: bool = False


@dataclass(frozen=True)
class UpdateUser(Command):
    """Command to change some fields of an existing user.

    Fields left as ``UNSET`` keep their stored value. The password is only
    validated (and re-hashed) when one is given.
    """

    user_id: int
    name: Unsettable[str] = UNSET
    email: Unsettable[str] = UNSET
    password: Unsettable[str] = field(default=UNSET, repr=False)
    password_confirmation: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class SetAdmin(Command):
    """Command to grant or revoke the admin flag."""

    user_id: int
    is_admin: bool


# ============================================================================
#                           Social graph
# ============================================================================


@dataclass(frozen=True)
class Follow(Command):
    """Command for ``follower_id`` to follow the ``kind`` entity ``target_id``.

    ``kind`` accepts a `FollowableKind` or its name in any case ("user").
    """

    follower_id: int
    kind: FollowableKind | str
    target_id: int


@dataclass(frozen=True)
class Unfollow(Command):
    """Command for ``follower_id`` to stop following the ``kind`` entity ``target_id``."""

    follower_id: int
    kind: FollowableKind | str
    target_id: int


# ============================================================================
#                           Activity
# ============================================================================


@dataclass(frozen=True)
class PostMicroPost(Command):
    """Command to publish a micro-post."""

    author_id: int
    content: str


@dataclass(frozen=True)
class AddComment(Command):
    """Command to comment on a user or a startup."""

    author_id: int
    kind: FollowableKind | str
    target_id: int
    content: str


# ============================================================================
#                           Roles
# ============================================================================


@dataclass(frozen=True)
class RegisterStartup(Command):
    """Command to create a startup founded by ``founder_id``."""

    founder_id: int
    name: str


@dataclass(frozen=True)
class JoinStartup(Command):
    """Command to add ``user_id`` as a co-founder of an existing startup."""

    user_id: int
    startup_id: int


@dataclass(frozen=True)
class RegisterInvestor(Command):
    """Command to create the investor profile of ``user_id``."""

    user_id: int
    name: str = ""
