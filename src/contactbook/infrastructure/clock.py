"""Clock adapters."""

from datetime import datetime, timedelta


class SystemClock:
    """Local wall-clock time, naive, matching the day-precision dates in the document."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """A clock that only moves when told to. Used in tests and scripted sessions."""

    def __init__(self, now: datetime) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        self._now = now

    def advance(self, delta: timedelta) -> None:
        self._now = self._now + delta
