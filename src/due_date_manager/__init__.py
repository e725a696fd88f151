"""due_date_manager — closed-library due-date calculation.

Timezone-aware intervals, a closed set of strategies that move a due date
out of a service point's closed periods, and the rule that a renewal must
move the due date forward.  Expected failures come back as
:class:`Result` values; only misuse raises.
"""

import logging

from due_date_manager._internal.clock import (
    Clock,
    ClockManager,
    FixedClock,
    SystemClock,
    get_clock,
    now,
    set_clock,
    set_default_clock,
)
from due_date_manager.exceptions import (
    DueDateError,
    InvalidClockError,
    NaiveDateTimeError,
    ResultFailedError,
    StrategyConfigError,
)
from due_date_manager.interval import Interval
from due_date_manager.loan import Loan
from due_date_manager.manager import DueDateManager
from due_date_manager.renewal import error_when_earlier_or_same_due_date
from due_date_manager.result import Failure, FailureKind, Result
from due_date_manager.schedule import OpeningDay, OpeningHour, OpeningSchedule

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Clock",
    "ClockManager",
    "DueDateError",
    "DueDateManager",
    "Failure",
    "FailureKind",
    "FixedClock",
    "Interval",
    "InvalidClockError",
    "Loan",
    "NaiveDateTimeError",
    "OpeningDay",
    "OpeningHour",
    "OpeningSchedule",
    "Result",
    "ResultFailedError",
    "StrategyConfigError",
    "SystemClock",
    "error_when_earlier_or_same_due_date",
    "get_clock",
    "now",
    "set_clock",
    "set_default_clock",
]
