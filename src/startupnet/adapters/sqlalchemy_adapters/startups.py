"""SQLAlchemy-backed repositories for startups and investor profiles."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError

from startupnet.adapters.db.dialects import DialectName, insert_ignoring_conflicts
from startupnet.adapters.db.schema import entrepreneurs, investors, startups
from startupnet.domain.startups import Investor, Startup
from startupnet.interfaces.errors import InvestorProfileExistsError
from startupnet.interfaces.startups import InvestorRepository, StartupRepository

if TYPE_CHECKING:
    from sqlalchemy import RowMapping
    from sqlalchemy.engine import Connection


def _row_to_startup(row: RowMapping) -> Startup:
    return Startup(id=row["id"], name=row["name"], created_at=row["created_at"])


def _row_to_investor(row: RowMapping) -> Investor:
    return Investor(
        id=row["id"],
        user_id=row["user_id"],
        name=row["name"],
        created_at=row["created_at"],
    )


def load_founded_startups(
    connection: Connection, user_ids: Sequence[int]
) -> dict[int, list[Startup]]:
    """Startups founded by each of ``user_ids``, in joining order.

    One query for the whole batch; users without startups are absent from
    the result.
    """
    if not user_ids:
        return {}
    stmt = (
        select(entrepreneurs.c.user_id, startups)
        .join(entrepreneurs, entrepreneurs.c.startup_id == startups.c.id)
        .where(entrepreneurs.c.user_id.in_(user_ids))
        .order_by(entrepreneurs.c.id.asc())
    )
    founded: dict[int, list[Startup]] = {}
    for row in connection.execute(stmt).mappings():
        founded.setdefault(row["user_id"], []).append(_row_to_startup(row))
    return founded


def load_investor_profiles(
    connection: Connection, user_ids: Sequence[int]
) -> dict[int, Investor]:
    """Investor profile of each of ``user_ids`` that has one (one query)."""
    if not user_ids:
        return {}
    rows = connection.execute(
        select(investors).where(investors.c.user_id.in_(user_ids))
    ).mappings()
    return {row["user_id"]: _row_to_investor(row) for row in rows}


class SqlAlchemyStartupRepository(StartupRepository):
    """StartupRepository over the ``startups`` and ``entrepreneurs`` tables."""

    def __init__(self, connection: Connection):
        self.connection = connection
        self.dialect = DialectName.from_sqlalchemy(connection)

    def add(self, startup: Startup, founder_id: int) -> Startup:
        values: dict[str, object] = {"name": startup.name}
        if startup.created_at is not None:
            values["created_at"] = startup.created_at
        row = self.connection.execute(
            insert(startups)
            .values(**values)
            .returning(startups.c.id, startups.c.created_at)
        ).one()
        startup.id = row.id
        startup.created_at = row.created_at
        self.add_founder(row.id, founder_id)
        return startup

    def get(self, startup_id: int) -> Startup | None:
        row = (
            self.connection.execute(select(startups).where(startups.c.id == startup_id))
            .mappings()
            .one_or_none()
        )
        return None if row is None else _row_to_startup(row)

    def get_many(self, startup_ids: Sequence[int]) -> list[Startup]:
        if not startup_ids:
            return []
        rows = (
            self.connection.execute(
                select(startups).where(startups.c.id.in_(startup_ids))
            )
            .mappings()
            .all()
        )
        by_id = {row["id"]: _row_to_startup(row) for row in rows}
        return [by_id[sid] for sid in startup_ids if sid in by_id]

    def add_founder(self, startup_id: int, user_id: int) -> bool:
        stmt = insert_ignoring_conflicts(
            entrepreneurs,
            {"user_id": user_id, "startup_id": startup_id},
            self.dialect,
        )
        return self.connection.execute(stmt).rowcount == 1

    def founded_by(self, user_id: int) -> list[Startup]:
        return load_founded_startups(self.connection, [user_id]).get(user_id, [])

    def founders(self, startup_id: int) -> list[int]:
        stmt = (
            select(entrepreneurs.c.user_id)
            .where(entrepreneurs.c.startup_id == startup_id)
            .order_by(entrepreneurs.c.id.asc())
        )
        return list(self.connection.execute(stmt).scalars())


class SqlAlchemyInvestorRepository(InvestorRepository):
    """InvestorRepository over the ``investors`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def add(self, investor: Investor) -> Investor:
        values: dict[str, object] = {"user_id": investor.user_id, "name": investor.name}
        if investor.created_at is not None:
            values["created_at"] = investor.created_at
        stmt = (
            insert(investors)
            .values(**values)
            .returning(investors.c.id, investors.c.created_at)
        )
        try:
            with self.connection.begin_nested():
                row = self.connection.execute(stmt).one()
        except IntegrityError as e:
            if self.for_user(investor.user_id) is not None:  # type: ignore[arg-type]
                raise InvestorProfileExistsError(investor.user_id) from e  # type: ignore[arg-type]
            raise
        investor.id = row.id
        investor.created_at = row.created_at
        return investor

    def for_user(self, user_id: int) -> Investor | None:
        return load_investor_profiles(self.connection, [user_id]).get(user_id)
