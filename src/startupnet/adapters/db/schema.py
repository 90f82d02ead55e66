"""Table definitions for the user domain.

Constraints (enforced here):

| Table          | Constraint                                        | Purpose                               |
|----------------|---------------------------------------------------|---------------------------------------|
| users          | UNIQUE(email)                                     | case-insensitive uniqueness (emails are stored lowercased) |
| entrepreneurs  | UNIQUE(user_id, startup_id)                       | a user founds a startup once          |
| investors      | UNIQUE(user_id)                                   | one investor profile per user         |
| follows        | UNIQUE(follower_id, followed_type, followed_id)   | no duplicate edges; resolves races    |
| follows        | CHECK(followed_type IN ('User', 'Startup'))       | one known target type per row         |
| comments       | CHECK(commentable_type IN ('User', 'Startup'))    | one known target type per row         |

``followed_id`` / ``commentable_id`` are polymorphic and therefore carry no
foreign key; the discriminant column says which table they point into.
"""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    String,
    Table,
    Text,
    UniqueConstraint,
    false,
    text,
)

from .metadata import metadata
from .sa_types import BIGINT_PK, UTCDateTime

__all__ = [
    "users",
    "startups",
    "entrepreneurs",
    "investors",
    "follows",
    "micro_posts",
    "comments",
]

KNOWN_TARGET_TYPES = "('User', 'Startup')"


def _id_column() -> Column:
    return Column("id", BIGINT_PK, Identity(start=1), primary_key=True)


def _created_at_column() -> Column:
    return Column(
        "created_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )


def _user_fk(name: str) -> Column:
    return Column(
        name,
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )


users = Table(
    "users",
    metadata,
    _id_column(),
    Column("name", String(99), nullable=False),
    Column(
        "email",
        String(255),
        nullable=False,
        comment="Always stored stripped and lowercased.",
    ),
    Column("password_hash", String(255), nullable=True, comment="bcrypt hash."),
    Column("is_admin", Boolean, nullable=False, server_default=false()),
    _created_at_column(),
    UniqueConstraint("email"),
    comment="Registered users.",
)

startups = Table(
    "startups",
    metadata,
    _id_column(),
    Column("name", String(99), nullable=False),
    _created_at_column(),
    comment="Startups; founders are linked through `entrepreneurs`.",
)

entrepreneurs = Table(
    "entrepreneurs",
    metadata,
    _id_column(),
    _user_fk("user_id"),
    Column(
        "startup_id",
        BigInteger,
        ForeignKey("startups.id", ondelete="CASCADE"),
        nullable=False,
    ),
    _created_at_column(),
    UniqueConstraint("user_id", "startup_id"),
    Index(None, "startup_id"),
    comment="Founder relation between users and startups.",
)

investors = Table(
    "investors",
    metadata,
    _id_column(),
    _user_fk("user_id"),
    Column("name", String(255), nullable=False, server_default=""),
    _created_at_column(),
    UniqueConstraint("user_id"),
    comment="Investor profiles, at most one per user.",
)

follows = Table(
    "follows",
    metadata,
    _id_column(),
    _user_fk("follower_id"),
    Column("followed_type", String(20), nullable=False),
    Column("followed_id", BigInteger, nullable=False),
    _created_at_column(),
    UniqueConstraint("follower_id", "followed_type", "followed_id"),
    CheckConstraint(
        f"followed_type IN {KNOWN_TARGET_TYPES}", name="followed_type_known"
    ),
    Index(None, "followed_type", "followed_id"),
    comment="Directed follow edges from users to users or startups.",
)

micro_posts = Table(
    "micro_posts",
    metadata,
    _id_column(),
    _user_fk("user_id"),
    Column("content", String(140), nullable=False),
    _created_at_column(),
    Index(None, "user_id", "created_at"),
    comment="Short status updates; the feed reads from here.",
)

comments = Table(
    "comments",
    metadata,
    _id_column(),
    _user_fk("user_id"),
    Column("commentable_type", String(20), nullable=False),
    Column("commentable_id", BigInteger, nullable=False),
    Column("content", Text, nullable=False),
    _created_at_column(),
    CheckConstraint(
        f"commentable_type IN {KNOWN_TARGET_TYPES}", name="commentable_type_known"
    ),
    Index(None, "commentable_type", "commentable_id"),
    comment="Comments on users and startups.",
)
