"""In-memory StartupRepository and InvestorRepository for testing purposes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from startupnet.domain.startups import Investor, Startup
from startupnet.interfaces.errors import InvestorProfileExistsError
from startupnet.interfaces.startups import InvestorRepository, StartupRepository

from .store import InMemoryData, utcnow


class InMemoryStartupRepository(StartupRepository):
    """In-memory StartupRepository backed by a shared `InMemoryData`."""

    def __init__(self, data: InMemoryData):
        self._data = data

    def add(self, startup: Startup, founder_id: int) -> Startup:
        startup.id = self._data.next_id("startups")
        if startup.created_at is None:
            startup.created_at = utcnow()
        self._data.startups[startup.id] = replace(startup)
        self.add_founder(startup.id, founder_id)
        return startup

    def get(self, startup_id: int) -> Startup | None:
        stored = self._data.startups.get(startup_id)
        return None if stored is None else replace(stored)

    def get_many(self, startup_ids: Sequence[int]) -> list[Startup]:
        return [
            replace(self._data.startups[sid])
            for sid in startup_ids
            if sid in self._data.startups
        ]

    def add_founder(self, startup_id: int, user_id: int) -> bool:
        row = (user_id, startup_id)
        if row in self._data.entrepreneurs:
            return False
        self._data.entrepreneurs.append(row)
        return True

    def founded_by(self, user_id: int) -> list[Startup]:
        return [
            replace(self._data.startups[startup_id])
            for uid, startup_id in self._data.entrepreneurs
            if uid == user_id
        ]

    def founders(self, startup_id: int) -> list[int]:
        return [uid for uid, sid in self._data.entrepreneurs if sid == startup_id]


class InMemoryInvestorRepository(InvestorRepository):
    """In-memory InvestorRepository backed by a shared `InMemoryData`."""

    def __init__(self, data: InMemoryData):
        self._data = data

    def add(self, investor: Investor) -> Investor:
        if investor.user_id in self._data.investors:
            raise InvestorProfileExistsError(investor.user_id)  # type: ignore[arg-type]
        investor.id = self._data.next_id("investors")
        if investor.created_at is None:
            investor.created_at = utcnow()
        self._data.investors[investor.user_id] = replace(investor)  # type: ignore[index]
        return investor

    def for_user(self, user_id: int) -> Investor | None:
        stored = self._data.investors.get(user_id)
        return None if stored is None else replace(stored)
