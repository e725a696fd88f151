"""Strategies that keep the requested due date (or its calendar day)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from due_date_manager.datetimes import at_end_of_day, require_aware
from due_date_manager.result import Result
from due_date_manager.strategies.base import ClosedLibraryStrategy, DueDateManagement, ZonedStrategy

if TYPE_CHECKING:
    from due_date_manager.schedule import OpeningSchedule


class KeepCurrentDateStrategy(ZonedStrategy):
    """Keep the requested calendar date, due at 23:59:59 in the target zone.

    The year, month and day of the requested date are kept exactly as they
    read in the requested date's own zone; they are *not* shifted by the
    conversion to the target zone.  ``2020-11-17T09:47Z`` with a ``-05:00``
    target becomes ``2020-11-17T23:59:59-05:00``.

    The schedule is not consulted and may be ``None``.
    """

    _strategy_type = DueDateManagement.KEEP_THE_CURRENT_DUE_DATE
    _strategy_description = "Due at the end of the requested calendar day"

    def calculate_due_date(
        self,
        requested_date: datetime,
        schedule: OpeningSchedule | None,
    ) -> Result[datetime]:
        require_aware(requested_date, "requested_date")
        return Result.succeed(at_end_of_day(requested_date.date(), self.zone))


class KeepCurrentDateTimeStrategy(ClosedLibraryStrategy):
    """Identity: the requested due date is returned unchanged.

    Used for service points without closed periods, e.g. 24-hour access.
    """

    _strategy_type = DueDateManagement.KEEP_THE_CURRENT_DUE_DATE_TIME
    _strategy_description = "Due exactly at the requested date and time"

    def calculate_due_date(
        self,
        requested_date: datetime,
        schedule: OpeningSchedule | None,
    ) -> Result[datetime]:
        return Result.succeed(require_aware(requested_date, "requested_date"))
