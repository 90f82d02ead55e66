"""Unit tests for dialect names and conflict-ignoring inserts."""

import pytest
from sqlalchemy.dialects import postgresql, sqlite

from startupnet.adapters.db.dialects import (
    DialectName,
    UnsupportedDialect,
    insert_ignoring_conflicts,
)
from startupnet.adapters.db.schema import follows

# pylint: disable=too-few-public-methods


@pytest.mark.parametrize(
    "input_str,expected",
    [
        ("postgresql", DialectName.POSTGRES),
        ("postgres", DialectName.POSTGRES),
        ("pg", DialectName.POSTGRES),
        ("postgresql+psycopg", DialectName.POSTGRES),
        ("sqlite", DialectName.SQLITE),
        ("sqlite+pysqlite", DialectName.SQLITE),
    ],
)
def test_from_string_aliases(input_str, expected):
    """Test that various dialect string aliases map correctly to DialectName."""
    assert DialectName.from_string(input_str) is expected


@pytest.mark.parametrize("bad", [None, "", "  ", "mysql", "duckdb"])
def test_from_string_rejects_unsupported(bad):
    """Test that unsupported or invalid dialect strings raise UnsupportedDialect."""
    with pytest.raises(UnsupportedDialect):
        DialectName.from_string(bad)


def test_from_sqlalchemy_raises_when_missing_attribute():
    """Objects without .dialect.name are rejected."""

    class NotAnEngine:  # no .dialect.name
        """A class that does not have a dialect attribute."""

    with pytest.raises(UnsupportedDialect):
        DialectName.from_sqlalchemy(NotAnEngine())  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("dialect", "sa_dialect"),
    [
        (DialectName.POSTGRES, postgresql.dialect()),
        (DialectName.SQLITE, sqlite.dialect()),
    ],
    ids=["postgres", "sqlite"],
)
def test_insert_ignoring_conflicts_renders_on_conflict(dialect, sa_dialect):
    """Both backends get ``ON CONFLICT DO NOTHING``."""
    stmt = insert_ignoring_conflicts(
        follows,
        {"follower_id": 1, "followed_type": "User", "followed_id": 2},
        dialect,
    )
    sql = str(stmt.compile(dialect=sa_dialect))
    assert sql.startswith("INSERT INTO follows")
    assert "ON CONFLICT DO NOTHING" in sql
