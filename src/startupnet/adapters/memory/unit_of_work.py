"""In-memory Unit of Work with snapshot-based rollback."""

from __future__ import annotations

import copy
from dataclasses import fields

from startupnet.interfaces.unit_of_work import AbstractUnitOfWork

from .micro_posts import InMemoryCommentStore, InMemoryMicroPostStore
from .social_graph import InMemorySocialGraph
from .startups import InMemoryInvestorRepository, InMemoryStartupRepository
from .store import InMemoryData
from .users import InMemoryUserRepository


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of Work over a shared `InMemoryData`.

    Entering the context snapshots the store; ``rollback`` restores the last
    snapshot and ``commit`` moves the snapshot forward. This gives the same
    "nothing sticks unless committed" behaviour as the SQLAlchemy unit of
    work, which keeps handler tests honest about calling ``commit``.
    """

    def __init__(self, data: InMemoryData | None = None):
        self.data = data if data is not None else InMemoryData()
        self.committed = False
        self._snapshot: InMemoryData | None = None
        self.users = InMemoryUserRepository(self.data)
        self.startups = InMemoryStartupRepository(self.data)
        self.investors = InMemoryInvestorRepository(self.data)
        self.social_graph = InMemorySocialGraph(self.data)
        self.micro_posts = InMemoryMicroPostStore(self.data)
        self.comments = InMemoryCommentStore(self.data)

    def __enter__(self):
        self._snapshot = copy.deepcopy(self.data)
        return super().__enter__()

    def commit(self):
        self._snapshot = copy.deepcopy(self.data)
        self.committed = True

    def rollback(self):
        if self._snapshot is None:
            return
        for f in fields(self.data):
            setattr(self.data, f.name, copy.deepcopy(getattr(self._snapshot, f.name)))
