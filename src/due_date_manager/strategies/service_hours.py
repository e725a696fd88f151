"""Hour-level rollover strategies for short-term loans.

Both strategies leave a due date that falls inside open hours untouched.
Open hours are the schedule's continuous open periods in the strategy's
zone (see :meth:`OpeningSchedule.open_periods`), so a period running
past midnight into the next day counts as a single period.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, tzinfo
from typing import TYPE_CHECKING

from due_date_manager._internal import clock as _clock
from due_date_manager.datetimes import is_after_millis
from due_date_manager.result import Result
from due_date_manager.strategies.base import (
    DEFAULT_HORIZON,
    DueDateManagement,
    ScheduleStrategy,
)

if TYPE_CHECKING:
    from due_date_manager._internal.clock import Clock
    from due_date_manager.interval import Interval
    from due_date_manager.schedule import OpeningSchedule

logger = logging.getLogger(__name__)


def _first_period_after(
    periods: list[Interval], point: datetime, horizon: timedelta
) -> Interval | None:
    """Earliest period starting after *point* and no later than *point + horizon*."""
    limit = point + horizon
    for period in periods:
        if is_after_millis(period.begin, point):
            return None if is_after_millis(period.begin, limit) else period
    return None


class BeginningOfNextOpenHoursStrategy(ScheduleStrategy):
    """Move a due date outside open hours to the moment the service point next opens."""

    _strategy_type = DueDateManagement.MOVE_TO_BEGINNING_OF_NEXT_OPEN_SERVICE_POINT_HOURS
    _strategy_description = "Move a closed-hours due date to the start of the next open hours"

    def _calculate(self, requested_date: datetime, schedule: OpeningSchedule) -> Result[datetime]:
        periods = schedule.open_periods(self.zone)
        if any(p.contains(requested_date) for p in periods):
            return Result.succeed(requested_date)

        following = _first_period_after(periods, requested_date, self.horizon)
        if following is None:
            return self._nothing_open("following open hours", requested_date)

        logger.debug("Due date %s moved to opening at %s", requested_date, following.begin)
        return Result.succeed(following.begin)


class EndOfCurrentHoursStrategy(ScheduleStrategy):
    """Move a due date outside open hours to the close of the *current* open hours.

    "Current" is judged against the clock, not the requested date: when
    the service point is open right now the loan is due when it closes;
    when it is closed right now, when it closes after next opening.

    Parameters:
        zone:    Service point timezone.
        horizon: How far past the current time to look for open hours.
        clock:   Injectable clock; defaults to the process-wide clock.
    """

    _strategy_type = DueDateManagement.MOVE_TO_END_OF_CURRENT_SERVICE_POINT_HOURS
    _strategy_description = "Move a closed-hours due date to the end of the current open hours"

    def __init__(
        self,
        zone: tzinfo | None,
        *,
        horizon: timedelta = DEFAULT_HORIZON,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(zone, horizon=horizon)
        self._clock = _clock.resolve(clock)

    def _calculate(self, requested_date: datetime, schedule: OpeningSchedule) -> Result[datetime]:
        periods = schedule.open_periods(self.zone)
        if any(p.contains(requested_date) for p in periods):
            return Result.succeed(requested_date)

        current_time = self._clock.now()
        current = next((p for p in periods if p.contains(current_time)), None)
        if current is None:
            current = _first_period_after(periods, current_time, self.horizon)
        if current is None:
            return self._nothing_open("current or following open hours", current_time)

        logger.debug("Due date %s moved to closing at %s", requested_date, current.end)
        return Result.succeed(current.end)
