"""Unit tests for startupnet.adapters.db.sa_types.UTCDateTime.

Feed order depends on timestamps comparing the same on every backend, so
values must go in as UTC and come back timezone-aware.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import insert, select
from sqlalchemy.dialects.postgresql import dialect as PostgresDialect
from sqlalchemy.dialects.sqlite import dialect as SQLiteDialect

from startupnet.adapters.db.sa_types import UTCDateTime
from startupnet.adapters.db.schema import micro_posts, users

PLUS_TWO = timezone(timedelta(hours=2))


def test_bind_sqlite_stores_naive_utc():
    """SQLite receives naive UTC, whatever zone the value was in."""
    out = UTCDateTime().process_bind_param(
        datetime(2026, 1, 15, 14, 0, tzinfo=PLUS_TWO), SQLiteDialect()
    )
    assert out == datetime(2026, 1, 15, 12, 0)
    assert out.tzinfo is None


def test_bind_postgres_keeps_aware_utc():
    """PostgreSQL receives an aware UTC value; naive input is taken as UTC."""
    out = UTCDateTime().process_bind_param(datetime(2026, 1, 15, 12, 0), PostgresDialect())
    assert out == datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("dialect", [SQLiteDialect(), PostgresDialect()], ids=["sqlite", "pg"])
def test_result_is_aware_utc(dialect):
    """Results are always aware UTC; None passes through."""
    sa_type = UTCDateTime()
    assert sa_type.process_result_value(None, dialect) is None
    naive = sa_type.process_result_value(datetime(2026, 1, 15, 12, 0), dialect)
    aware = sa_type.process_result_value(
        datetime(2026, 1, 15, 14, 0, tzinfo=PLUS_TWO), dialect
    )
    assert naive == aware == datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
    assert aware.tzinfo == timezone.utc


def test_roundtrip_orders_across_zones(sqlite_engine_memory):
    """Two instants written in different zones sort by the real instant."""
    earlier = datetime(2026, 1, 15, 13, 30, tzinfo=PLUS_TWO)  # 11:30 UTC
    later = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
    with sqlite_engine_memory.begin() as cxn:
        user_id = cxn.execute(
            insert(users).values(name="Tz", email="tz@example.com").returning(users.c.id)
        ).scalar_one()
        cxn.execute(
            insert(micro_posts),
            [
                {"user_id": user_id, "content": "later", "created_at": later},
                {"user_id": user_id, "content": "earlier", "created_at": earlier},
            ],
        )
        rows = cxn.execute(
            select(micro_posts.c.content, micro_posts.c.created_at).order_by(
                micro_posts.c.created_at.desc()
            )
        ).all()
    assert [r.content for r in rows] == ["later", "earlier"]
    assert rows[1].created_at == earlier
