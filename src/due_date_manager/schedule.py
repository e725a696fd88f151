"""Opening schedule — the service point timetable supplied by the caller."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo

from due_date_manager.datetimes import at_start_of_day
from due_date_manager.interval import Interval

#: An opening hour closing at this time runs on to the following midnight.
LAST_MINUTE_OF_DAY = time(23, 59)

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class OpeningHour:
    """One open stretch of a day, in the service point's local time."""

    start_time: time
    end_time: time

    def to_interval(self, day: date, zone: tzinfo) -> Interval:
        begin = datetime.combine(day, self.start_time, tzinfo=zone)
        if self.end_time >= LAST_MINUTE_OF_DAY:
            end = at_start_of_day(day + _ONE_DAY, zone)
        else:
            end = datetime.combine(day, self.end_time, tzinfo=zone)
        return Interval.between(begin, end)


@dataclass(frozen=True)
class OpeningDay:
    """Opening information for a single calendar date.

    Attributes:
        date:          The calendar date.
        open:          ``False`` marks the whole day closed.
        all_day:       Open from midnight to midnight.
        opening_hours: Open stretches when not ``all_day``.
    """

    date: date
    open: bool = True
    all_day: bool = False
    opening_hours: tuple[OpeningHour, ...] = ()

    @property
    def is_open(self) -> bool:
        return self.open and (self.all_day or bool(self.opening_hours))

    def intervals(self, zone: tzinfo) -> list[Interval]:
        """Open intervals of this day in *zone*, earliest first."""
        if not self.is_open:
            return []
        if self.all_day:
            return [
                Interval.between(
                    at_start_of_day(self.date, zone),
                    at_start_of_day(self.date + _ONE_DAY, zone),
                )
            ]
        hours = sorted(self.opening_hours, key=lambda h: h.start_time)
        intervals = (h.to_interval(self.date, zone) for h in hours)
        return [i for i in intervals if i.duration]


class OpeningSchedule:
    """Read-only, date-ordered sequence of :class:`OpeningDay` entries.

    Dates missing from the schedule are treated as closed.  Later entries
    for a date already present replace earlier ones.
    """

    def __init__(self, days: Iterable[OpeningDay] = ()) -> None:
        by_date = {d.date: d for d in days}
        self._days: tuple[OpeningDay, ...] = tuple(by_date[k] for k in sorted(by_date))
        self._index = {d.date: d for d in self._days}

    def __iter__(self) -> Iterator[OpeningDay]:
        return iter(self._days)

    def __len__(self) -> int:
        return len(self._days)

    def __repr__(self) -> str:
        return f"OpeningSchedule({len(self._days)} days)"

    def day(self, on: date) -> OpeningDay | None:
        return self._index.get(on)

    def is_open_on(self, on: date) -> bool:
        entry = self._index.get(on)
        return entry is not None and entry.is_open

    def open_days_before(self, on: date, earliest: date) -> Iterator[OpeningDay]:
        """Open days strictly before *on* and not before *earliest*, nearest first."""
        for entry in reversed(self._days):
            if entry.date >= on:
                continue
            if entry.date < earliest:
                return
            if entry.is_open:
                yield entry

    def open_days_after(self, on: date, latest: date) -> Iterator[OpeningDay]:
        """Open days strictly after *on* and not after *latest*, nearest first."""
        for entry in self._days:
            if entry.date <= on:
                continue
            if entry.date > latest:
                return
            if entry.is_open:
                yield entry

    def open_periods(self, zone: tzinfo) -> list[Interval]:
        """Continuous open periods in *zone*.

        Intervals that touch or overlap, including across midnight, are
        merged, so a service point open around the clock for three days
        yields a single period.
        """
        periods: list[Interval] = []
        for entry in self._days:
            for interval in entry.intervals(zone):
                if periods and (periods[-1].overlaps(interval) or periods[-1].abuts(interval)):
                    periods[-1] = periods[-1].span(interval)
                else:
                    periods.append(interval)
        return periods

    def period_containing(self, point: datetime, zone: tzinfo) -> Interval | None:
        for period in self.open_periods(zone):
            if period.contains(point):
                return period
        return None
