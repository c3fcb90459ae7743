"""
Clocks the library reads "now" from.

``SystemClock`` is for real use; ``FixedClock`` and ``MoveableClock`` make
borrow timestamps and overdue checks deterministic in tests and demos.
"""

from __future__ import annotations
from datetime import date, datetime, timedelta, timezone, tzinfo
from threading import Lock
from typing import Optional, Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        ...

    def today(self) -> date:
        ...


class SystemClock:
    def __init__(self, tz: tzinfo = timezone.utc) -> None:
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def today(self) -> date:
        return self.now().date()


class FixedClock:
    def __init__(self, instant: datetime) -> None:
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def today(self) -> date:
        return self.instant.date()


class MoveableClock:
    """A clock that only moves when told to."""

    def __init__(self, start: Optional[datetime] = None) -> None:
        self._now = start or datetime.now(timezone.utc)
        self._lock = Lock()

    def now(self) -> datetime:
        return self._now

    def today(self) -> date:
        return self._now.date()

    def advance(self, delta: Optional[timedelta] = None, *, days: int = 0) -> datetime:
        step = (delta or timedelta()) + timedelta(days=days)
        with self._lock:
            self._now = self._now + step
            return self._now
