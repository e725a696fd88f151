"""Shared test fixtures."""

from datetime import UTC, date, datetime, time, timedelta

import pytest

from due_date_manager import FixedClock, OpeningDay, OpeningHour, OpeningSchedule
from due_date_manager._internal.clock import clock_manager

# Tuesday
NOW = datetime(2020, 11, 17, 9, 47, tzinfo=UTC)

NINE_TO_FIVE = (OpeningHour(time(9, 0), time(17, 0)),)


def business_days(first: date, count: int, hours=NINE_TO_FIVE) -> list[OpeningDay]:
    """*count* consecutive days from *first*: weekdays open, weekends closed."""
    days = []
    for offset in range(count):
        day = first + timedelta(days=offset)
        if day.weekday() < 5:
            days.append(OpeningDay(day, opening_hours=hours))
        else:
            days.append(OpeningDay(day, open=False))
    return days


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def global_clock(clock):
    """Install the fixed clock process-wide for one test, then restore real time."""
    with clock_manager().overridden(clock):
        yield clock


@pytest.fixture
def weekday_schedule():
    """Mon 2020-11-16 .. Fri 2020-11-27, 09:00-17:00 on weekdays, weekends closed."""
    return OpeningSchedule(business_days(date(2020, 11, 16), 12))


@pytest.fixture
def always_open_schedule():
    return OpeningSchedule(
        OpeningDay(date(2020, 11, 16) + timedelta(days=i), all_day=True) for i in range(7)
    )
