"""Built-in closed-library strategy implementations."""

from due_date_manager.strategies.base import (
    ABSENT_TIMETABLE,
    DEFAULT_HORIZON,
    ClosedLibraryStrategy,
    DueDateManagement,
)
from due_date_manager.strategies.keep_current import (
    KeepCurrentDateStrategy,
    KeepCurrentDateTimeStrategy,
)
from due_date_manager.strategies.open_day import (
    EndOfNextOpenDayStrategy,
    EndOfPreviousOpenDayStrategy,
)
from due_date_manager.strategies.service_hours import (
    BeginningOfNextOpenHoursStrategy,
    EndOfCurrentHoursStrategy,
)

__all__ = [
    "ABSENT_TIMETABLE",
    "DEFAULT_HORIZON",
    "BeginningOfNextOpenHoursStrategy",
    "ClosedLibraryStrategy",
    "DueDateManagement",
    "EndOfCurrentHoursStrategy",
    "EndOfNextOpenDayStrategy",
    "EndOfPreviousOpenDayStrategy",
    "KeepCurrentDateStrategy",
    "KeepCurrentDateTimeStrategy",
]
