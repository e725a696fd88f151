"""Renewal validation — a renewal must move the due date forward."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from due_date_manager.datetimes import format_date_time, is_after_millis, require_aware
from due_date_manager.result import Result

if TYPE_CHECKING:
    from due_date_manager.loan import HasDueDate

RENEWAL_WOULD_NOT_CHANGE_DUE_DATE = "renewal would not change the due date"


def error_when_earlier_or_same_due_date(
    loan: HasDueDate,
    proposed_due_date: datetime,
) -> Result[datetime]:
    """Fail unless *proposed_due_date* is strictly after the loan's current due date.

    Equality is judged at millisecond precision, so a proposal that only
    differs from the current due date below a millisecond is rejected.
    """
    require_aware(proposed_due_date, "proposed_due_date")
    if is_after_millis(proposed_due_date, loan.due_date):
        return Result.succeed(proposed_due_date)
    return Result.fail_validation(
        RENEWAL_WOULD_NOT_CHANGE_DUE_DATE,
        dueDate=format_date_time(proposed_due_date),
    )
