"""Default marks and shared fixtures for tests under `tests/contract/`.

Every contract test runs against each storage backend through the `uow`
fixture: the in-memory adapters, SQLite in memory (schema from
`metadata.create_all`), SQLite on file (schema from Alembic) and PostgreSQL
(skipped when Docker is unavailable).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from startupnet.adapters.memory import InMemoryUnitOfWork
from startupnet.adapters.unit_of_work import SqlAlchemyUnitOfWork
from startupnet.interfaces.unit_of_work import AbstractUnitOfWork

# pylint: disable=unused-argument

CONTRACT_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "contract"

BACKENDS = ["memory", "sqlite_memory", "sqlite_file", "postgres"]
SQL_ENGINES = {
    "sqlite_memory": "sqlite_engine_memory",
    "sqlite_file": "sqlite_engine_file",
    "postgres": "postgres_engine",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `contract` marks to items in `tests/contract/`."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if CONTRACT_ROOT in path.parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.contract)


@pytest.fixture(params=BACKENDS)
def uow(request: pytest.FixtureRequest) -> AbstractUnitOfWork:
    """A fresh, empty unit of work on each backend."""
    if request.param == "memory":
        return InMemoryUnitOfWork()
    engine = request.getfixturevalue(SQL_ENGINES[request.param])
    return SqlAlchemyUnitOfWork(engine)
