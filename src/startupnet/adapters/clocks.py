"""Clock implementations."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from startupnet.interfaces.clock import Clock


class SystemClock(Clock):
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class ManualClock(Clock):
    """A clock that only moves when told to.

    Used by tests and demos that need posts "written an hour ago".
    Naive datetimes passed in are taken to be UTC.
    """

    def __init__(self, start: datetime | None = None):
        self._now = _as_utc(start) if start is not None else datetime.now(UTC)

    def now(self) -> datetime:
        return self._now

    def travel_to(self, moment: datetime) -> None:
        """Jump to an absolute moment (forwards or backwards)."""
        self._now = _as_utc(moment)

    def advance(self, delta: timedelta) -> None:
        """Move the clock by ``delta`` (negative deltas move it back)."""
        self._now = self._now + delta


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)
