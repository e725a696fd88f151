"""Interval — an immutable, timezone-aware half-open time range."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta, tzinfo
from typing import TYPE_CHECKING

from due_date_manager._internal import clock as _clock
from due_date_manager.datetimes import (
    from_epoch_millis,
    is_after_millis,
    is_before_millis,
    is_same_millis,
    require_aware,
    to_epoch_millis,
)

if TYPE_CHECKING:
    from due_date_manager._internal.clock import Clock

_ZERO = timedelta(0)


@dataclass(frozen=True)
class Interval:
    """A time range ``[begin, begin + duration)``.

    The begin is inclusive and the end is exclusive.  The duration is
    never negative: building an interval whose end is not strictly after
    its begin yields a zero-length interval at ``begin`` rather than an
    error.  Durations are kept at millisecond granularity.

    Attributes:
        begin:    Inclusive, timezone-aware start.  Its zone is the
                  interval's zone.
        duration: Length of the interval.
    """

    begin: datetime
    duration: timedelta = field(default=_ZERO)

    def __post_init__(self) -> None:
        require_aware(self.begin, "begin")
        millis = self.duration // timedelta(milliseconds=1)
        object.__setattr__(self, "duration", timedelta(milliseconds=max(millis, 0)))

    # ── construction ─────────────────────────────────────────

    @classmethod
    def between(cls, begin: datetime, end: datetime) -> Interval:
        """Interval from an inclusive *begin* to an exclusive *end*."""
        require_aware(end, "end")
        if is_before_millis(begin, end):
            return cls(begin, timedelta(milliseconds=to_epoch_millis(end) - to_epoch_millis(begin)))
        return cls(begin)

    @classmethod
    def between_local(
        cls,
        begin: datetime,
        end: datetime,
        zone: tzinfo | None = None,
    ) -> Interval:
        """Interval from naive date-times, read in *zone*.

        Without *zone* each value is read with the system local zone's
        rules for its own date, so winter and summer times get their own
        offsets.
        """
        if zone is None:
            return cls.between(begin.astimezone(), end.astimezone())
        return cls.between(begin.replace(tzinfo=zone), end.replace(tzinfo=zone))

    @classmethod
    def from_epoch_millis(cls, begin: int, end: int, zone: tzinfo = UTC) -> Interval:
        start = from_epoch_millis(begin, zone)
        if begin < end:
            return cls(start, timedelta(milliseconds=end - begin))
        return cls(start)

    @classmethod
    def starting_now(cls, clock: Clock | None = None) -> Interval:
        """Zero-length interval at the current time."""
        return cls(_clock.resolve(clock).now())

    # ── accessors ────────────────────────────────────────────

    @property
    def start(self) -> datetime:
        return self.begin

    @property
    def end(self) -> datetime:
        # aware "+" is wall-clock arithmetic inside one ZoneInfo zone
        return (self.begin.astimezone(UTC) + self.duration).astimezone(self.zone)

    @property
    def zone(self) -> tzinfo:
        return self.begin.tzinfo  # type: ignore[return-value]

    # ── queries ──────────────────────────────────────────────

    def contains(self, point: datetime) -> bool:
        """True when *point* is at ``begin`` or strictly between begin and end."""
        require_aware(point, "point")
        return is_same_millis(self.begin, point) or (
            is_after_millis(point, self.begin) and is_before_millis(point, self.end)
        )

    def abuts(self, other: Interval | None = None, clock: Clock | None = None) -> bool:
        """True when one interval ends exactly where the other begins.

        With *other* omitted, checks whether the current time sits exactly
        on this interval's begin or end.
        """
        start = to_epoch_millis(self.begin)
        end = to_epoch_millis(self.end)
        if other is None:
            current = to_epoch_millis(_clock.resolve(clock).now())
            return current in (start, end)
        return to_epoch_millis(other.end) == start or to_epoch_millis(other.begin) == end

    def overlaps(self, other: Interval) -> bool:
        """True when both intervals share at least one millisecond."""
        return is_before_millis(self.begin, other.end) and is_before_millis(other.begin, self.end)

    def gap(self, other: Interval) -> Interval | None:
        """The interval strictly separating *self* and *other*.

        Returns ``None`` when the intervals overlap or abut.  The gap is
        expressed in the zone of whichever interval comes first.
        """
        if is_after_millis(self.begin, other.end):
            return Interval.between(other.end, self.begin)
        if is_after_millis(other.begin, self.end):
            return Interval.between(self.end, other.begin)
        return None

    def span(self, other: Interval) -> Interval:
        """Smallest interval covering both, in the zone of the earlier one."""
        first, second = (self, other) if not is_after_millis(self.begin, other.begin) else (other, self)
        end = first.end if not is_before_millis(first.end, second.end) else second.end
        return Interval.between(first.begin, end)
