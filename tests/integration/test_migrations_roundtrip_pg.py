"""Alembic round-trip smoke test for PostgreSQL.

This test validates that our migrations can *upgrade to head* and *downgrade to base*
cleanly on a real PostgreSQL 17 instance. The unmigrated `pg_url_base` fixture
provides a fresh container per test, then:

  1) runs `alembic upgrade head`,
  2) asserts the domain tables exist and the follow-kind CHECK is enforced,
  3) runs `alembic downgrade base`,
  4) asserts the tables are dropped.
"""

import pytest
from alembic import command
from sqlalchemy import create_engine, insert, inspect, text
from sqlalchemy.exc import IntegrityError

from startupnet import config
from startupnet.adapters.db.schema import follows, users

# mypy: disable-error-code=no-untyped-def
# pylint: disable=magic-value-comparison


@pytest.mark.slow
def test_alembic_downgrade_upgrade_roundtrip_postgres(pg_url_base: str):
    """Upgrade → assert → Downgrade → assert on a scratch Postgres database."""
    command.upgrade(config.build_alembic_config(pg_url_base), "head")
    eng = create_engine(pg_url_base, future=True, pool_pre_ping=True)

    assert {"users", "follows", "micro_posts", "comments"} <= set(
        inspect(eng).get_table_names()
    )

    with eng.begin() as c:
        user_id = c.execute(
            insert(users)
            .values(name="Ann", email="ann@example.com", password_hash="x")
            .returning(users.c.id)
        ).scalar_one()

    with pytest.raises(IntegrityError, match="ck_follows_followed_type_known"):
        with eng.begin() as c:
            c.execute(
                insert(follows).values(
                    follower_id=user_id, followed_type="Investor", followed_id=1
                )
            )

    command.downgrade(config.build_alembic_config(pg_url_base), "base")
    with eng.begin() as c:
        exists = c.execute(text("SELECT to_regclass('public.users') IS NOT NULL")).scalar()
        assert not exists

    eng.dispose()
