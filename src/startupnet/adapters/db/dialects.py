"""Dialect names and dialect-specific statement builders.

STARTUPNET runs on PostgreSQL and SQLite. Both support
``INSERT ... ON CONFLICT DO NOTHING``, which the follow graph and founder
tables use so that racing duplicate inserts resolve at the storage layer
instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Connection, Engine
    from sqlalchemy.sql.dml import Insert


class UnsupportedDialect(Exception):
    """Raised when an unsupported database dialect is encountered."""


class DialectName(str, Enum):
    """Enumeration of supported SQLAlchemy dialect names.

    Attributes:
        POSTGRES: PostgreSQL dialect (``"postgresql"``).
        SQLITE:   SQLite dialect (``"sqlite"``).
    """

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Normalize and convert an arbitrary dialect string to DialectName.

        Accepts common aliases and driver-qualified names (e.g., 'postgres',
        'postgresql+psycopg', 'sqlite', 'sqlite+pysqlite').

        Raises:
            UnsupportedDialect: if the dialect is not recognized or supported.
        """

        raw = (dialect_str or "").strip().lower()
        base = raw.split("+", 1)[0]

        if base in {"postgres", "postgresql", "pg"}:
            return cls.POSTGRES
        if base in {"sqlite"}:
            return cls.SQLITE

        raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")

    @classmethod
    def from_sqlalchemy(cls, obj: Engine | Connection) -> DialectName:
        """Extract dialect from a SQLAlchemy Engine or Connection.

        Raises:
            UnsupportedDialect: if the dialect is not recognized or supported.
        """
        try:
            name = obj.dialect.name
        except AttributeError as e:
            raise UnsupportedDialect(
                f"Object {type(obj).__name__} does not expose .dialect.name"
            ) from e
        return cls.from_string(name)


def insert_ignoring_conflicts(
    table: Table, values: Mapping[str, Any], dialect: DialectName
) -> Insert:
    """Build an INSERT that silently skips rows violating any unique constraint.

    Callers inspect ``result.rowcount`` (1 inserted, 0 skipped).

    Args:
        table: Target table.
        values: Column values for the single row.
        dialect: Backend the statement will run on.

    Raises:
        UnsupportedDialect: for backends without ``ON CONFLICT`` support here.
    """
    if dialect is DialectName.POSTGRES:
        return pg_insert(table).values(**values).on_conflict_do_nothing()
    if dialect is DialectName.SQLITE:
        return sqlite_insert(table).values(**values).on_conflict_do_nothing()
    raise UnsupportedDialect(f"Unsupported dialect: {dialect!r}")  # pragma: no cover
