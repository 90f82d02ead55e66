"""create user domain tables

Revision ID: 3f1c2a9d8e71
Revises:
Create Date: 2026-10-17 09:12:44.318204

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from startupnet.adapters.db.sa_types import BIGINT_PK, UTCDateTime

# pylint: disable=no-member,invalid-name

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d8e71"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _id() -> sa.Column:
    return sa.Column("id", BIGINT_PK, sa.Identity(always=False, start=1), nullable=False)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        UTCDateTime(),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def _user_fk(name: str, table: str) -> tuple[sa.Column, sa.ForeignKeyConstraint]:
    return (
        sa.Column(name, sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(
            [name],
            ["users.id"],
            name=op.f(f"fk_{table}_{name}_users"),
            ondelete="CASCADE",
        ),
    )


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "users",
        _id(),
        sa.Column("name", sa.String(length=99), nullable=False),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Always stored stripped and lowercased.",
        ),
        sa.Column(
            "password_hash", sa.String(length=255), nullable=True, comment="bcrypt hash."
        ),
        sa.Column("is_admin", sa.Boolean(), server_default=sa.false(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
        sa.UniqueConstraint("email", name=op.f("uq_users_email")),
        comment="Registered users.",
    )

    op.create_table(
        "startups",
        _id(),
        sa.Column("name", sa.String(length=99), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_startups")),
        comment="Startups; founders are linked through `entrepreneurs`.",
    )

    op.create_table(
        "entrepreneurs",
        _id(),
        *_user_fk("user_id", "entrepreneurs"),
        sa.Column("startup_id", sa.BigInteger(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(
            ["startup_id"],
            ["startups.id"],
            name=op.f("fk_entrepreneurs_startup_id_startups"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_entrepreneurs")),
        sa.UniqueConstraint(
            "user_id", "startup_id", name=op.f("uq_entrepreneurs_user_id_startup_id")
        ),
        comment="Founder relation between users and startups.",
    )
    op.create_index(
        op.f("ix_entrepreneurs_entrepreneurs_startup_id"),
        "entrepreneurs",
        ["startup_id"],
    )

    op.create_table(
        "investors",
        _id(),
        *_user_fk("user_id", "investors"),
        sa.Column("name", sa.String(length=255), server_default="", nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_investors")),
        sa.UniqueConstraint("user_id", name=op.f("uq_investors_user_id")),
        comment="Investor profiles, at most one per user.",
    )

    op.create_table(
        "follows",
        _id(),
        *_user_fk("follower_id", "follows"),
        sa.Column("followed_type", sa.String(length=20), nullable=False),
        sa.Column("followed_id", sa.BigInteger(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_follows")),
        sa.UniqueConstraint(
            "follower_id",
            "followed_type",
            "followed_id",
            name=op.f("uq_follows_follower_id_followed_type_followed_id"),
        ),
        sa.CheckConstraint(
            "followed_type IN ('User', 'Startup')",
            name=op.f("ck_follows_followed_type_known"),
        ),
        comment="Directed follow edges from users to users or startups.",
    )
    op.create_index(
        op.f("ix_follows_follows_followed_type_follows_followed_id"),
        "follows",
        ["followed_type", "followed_id"],
    )

    op.create_table(
        "micro_posts",
        _id(),
        *_user_fk("user_id", "micro_posts"),
        sa.Column("content", sa.String(length=140), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_micro_posts")),
        comment="Short status updates; the feed reads from here.",
    )
    op.create_index(
        op.f("ix_micro_posts_micro_posts_user_id_micro_posts_created_at"),
        "micro_posts",
        ["user_id", "created_at"],
    )

    op.create_table(
        "comments",
        _id(),
        *_user_fk("user_id", "comments"),
        sa.Column("commentable_type", sa.String(length=20), nullable=False),
        sa.Column("commentable_id", sa.BigInteger(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_comments")),
        sa.CheckConstraint(
            "commentable_type IN ('User', 'Startup')",
            name=op.f("ck_comments_commentable_type_known"),
        ),
        comment="Comments on users and startups.",
    )
    op.create_index(
        op.f("ix_comments_comments_commentable_type_comments_commentable_id"),
        "comments",
        ["commentable_type", "commentable_id"],
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(
        op.f("ix_comments_comments_commentable_type_comments_commentable_id"),
        table_name="comments",
    )
    op.drop_table("comments")
    op.drop_index(
        op.f("ix_micro_posts_micro_posts_user_id_micro_posts_created_at"),
        table_name="micro_posts",
    )
    op.drop_table("micro_posts")
    op.drop_index(
        op.f("ix_follows_follows_followed_type_follows_followed_id"),
        table_name="follows",
    )
    op.drop_table("follows")
    op.drop_table("investors")
    op.drop_index(
        op.f("ix_entrepreneurs_entrepreneurs_startup_id"), table_name="entrepreneurs"
    )
    op.drop_table("entrepreneurs")
    op.drop_table("startups")
    op.drop_table("users")
