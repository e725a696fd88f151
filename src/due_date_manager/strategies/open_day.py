"""Day-level rollover strategies for long-term loans.

When the requested calendar day is open the loan is due at the end of
that day.  Otherwise it moves to the end (23:59:59) of the nearest open
day before or after, searched no further than the strategy's horizon.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from due_date_manager.datetimes import at_end_of_day, local_date
from due_date_manager.result import Result
from due_date_manager.strategies.base import DueDateManagement, ScheduleStrategy

if TYPE_CHECKING:
    from due_date_manager.schedule import OpeningSchedule

logger = logging.getLogger(__name__)


class EndOfPreviousOpenDayStrategy(ScheduleStrategy):
    _strategy_type = DueDateManagement.MOVE_TO_THE_END_OF_THE_PREVIOUS_OPEN_DAY
    _strategy_description = "Move a closed-day due date to the end of the previous open day"

    def _calculate(self, requested_date: datetime, schedule: OpeningSchedule) -> Result[datetime]:
        day = local_date(requested_date, self.zone)
        if schedule.is_open_on(day):
            return Result.succeed(at_end_of_day(day, self.zone))

        earliest = day - timedelta(days=self.horizon.days)
        previous = next(schedule.open_days_before(day, earliest), None)
        if previous is None:
            return self._nothing_open("previous open day", requested_date)

        logger.debug("Due date moved back from %s to open day %s", day, previous.date)
        return Result.succeed(at_end_of_day(previous.date, self.zone))


class EndOfNextOpenDayStrategy(ScheduleStrategy):
    _strategy_type = DueDateManagement.MOVE_TO_THE_END_OF_THE_NEXT_OPEN_DAY
    _strategy_description = "Move a closed-day due date to the end of the next open day"

    def _calculate(self, requested_date: datetime, schedule: OpeningSchedule) -> Result[datetime]:
        day = local_date(requested_date, self.zone)
        if schedule.is_open_on(day):
            return Result.succeed(at_end_of_day(day, self.zone))

        latest = day + timedelta(days=self.horizon.days)
        following = next(schedule.open_days_after(day, latest), None)
        if following is None:
            return self._nothing_open("next open day", requested_date)

        logger.debug("Due date moved forward from %s to open day %s", day, following.date)
        return Result.succeed(at_end_of_day(following.date, self.zone))
