"""SQLAlchemy-backed Unit of Work for STARTUPNET.

Provides a context-managed UnitOfWork using one SQLAlchemy Connection
shared by every SQLAlchemy storage adapter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from startupnet.adapters.sqlalchemy_adapters import (
    SqlAlchemyCommentStore,
    SqlAlchemyInvestorRepository,
    SqlAlchemyMicroPostStore,
    SqlAlchemySocialGraph,
    SqlAlchemyStartupRepository,
    SqlAlchemyUserRepository,
)
from startupnet.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.users = SqlAlchemyUserRepository(self.connection)
        self.startups = SqlAlchemyStartupRepository(self.connection)
        self.investors = SqlAlchemyInvestorRepository(self.connection)
        self.social_graph = SqlAlchemySocialGraph(self.connection)
        self.micro_posts = SqlAlchemyMicroPostStore(self.connection)
        self.comments = SqlAlchemyCommentStore(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()
