"""Clock abstraction for testable time-dependent logic.

Components that need the current time accept an injected :class:`Clock`.
When none is injected they fall back to the process-wide
:class:`ClockManager`, whose clock may only be swapped during test setup.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime, timedelta
from typing import Protocol

from due_date_manager.datetimes import require_aware
from due_date_manager.exceptions import InvalidClockError


class Clock(Protocol):
    """Protocol for getting the current time.  Inject a fake in tests."""

    def now(self) -> datetime: ...


class SystemClock:
    """Default clock backed by the real system time."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock:
    """Clock frozen at a given instant.  Move it with ``set`` or ``advance``."""

    def __init__(self, instant: datetime) -> None:
        self._now = require_aware(instant, "instant")

    def now(self) -> datetime:
        return self._now

    def set(self, instant: datetime) -> None:
        self._now = require_aware(instant, "instant")

    def advance(self, delta: timedelta) -> None:
        self._now = self._now + delta


class ClockManager:
    """Holder for the clock shared by the whole process.

    Production code only ever calls :meth:`now`.  Swapping the clock is a
    single reference replacement, taken under a lock so that concurrent
    readers always see either the old or the new clock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._clock: Clock = SystemClock()

    def now(self) -> datetime:
        return self._clock.now()

    def get_clock(self) -> Clock:
        return self._clock

    def set_clock(self, clock: Clock | None) -> None:
        """Replace the process-wide clock.  ``None`` is rejected."""
        if clock is None:
            raise InvalidClockError()
        with self._lock:
            self._clock = clock

    def set_default_clock(self) -> None:
        """Go back to real system time (UTC)."""
        with self._lock:
            self._clock = SystemClock()

    @contextmanager
    def overridden(self, clock: Clock) -> Iterator[Clock]:
        """Install *clock* for the duration of the block, then restore the default.

        The default clock is restored even when the block raises.
        """
        self.set_clock(clock)
        try:
            yield clock
        finally:
            self.set_default_clock()


_manager = ClockManager()


def clock_manager() -> ClockManager:
    return _manager


def now() -> datetime:
    return _manager.now()


def get_clock() -> Clock:
    return _manager.get_clock()


def set_clock(clock: Clock | None) -> None:
    _manager.set_clock(clock)


def set_default_clock() -> None:
    _manager.set_default_clock()


def resolve(clock: Clock | None) -> Clock:
    """Return *clock*, or the process-wide clock when none was injected."""
    return clock if clock is not None else _manager
