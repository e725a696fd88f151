"""ClosedLibraryStrategy ABC — the single abstraction every due-date policy implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, tzinfo
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from due_date_manager.datetimes import format_date_time, require_aware
from due_date_manager.exceptions import StrategyConfigError
from due_date_manager.result import Result

if TYPE_CHECKING:
    from due_date_manager.schedule import OpeningSchedule

DEFAULT_HORIZON = timedelta(days=365)

ABSENT_TIMETABLE = "Calendar timetable is absent for requested date"


class DueDateManagement(str, Enum):
    """How a due date landing on a closed period is handled.

    Every member maps to exactly one strategy class; see
    :class:`~due_date_manager.config.factory.StrategyFactory`.
    """

    KEEP_THE_CURRENT_DUE_DATE = "KEEP_THE_CURRENT_DUE_DATE"
    KEEP_THE_CURRENT_DUE_DATE_TIME = "KEEP_THE_CURRENT_DUE_DATE_TIME"
    MOVE_TO_THE_END_OF_THE_PREVIOUS_OPEN_DAY = "MOVE_TO_THE_END_OF_THE_PREVIOUS_OPEN_DAY"
    MOVE_TO_THE_END_OF_THE_NEXT_OPEN_DAY = "MOVE_TO_THE_END_OF_THE_NEXT_OPEN_DAY"
    MOVE_TO_BEGINNING_OF_NEXT_OPEN_SERVICE_POINT_HOURS = (
        "MOVE_TO_BEGINNING_OF_NEXT_OPEN_SERVICE_POINT_HOURS"
    )
    MOVE_TO_END_OF_CURRENT_SERVICE_POINT_HOURS = "MOVE_TO_END_OF_CURRENT_SERVICE_POINT_HOURS"


class ClosedLibraryStrategy(ABC):
    """Base class for every closed-library strategy.

    Strategies are stateless: they read only their constructor
    configuration and the arguments of :meth:`calculate_due_date`, and
    are thrown away after use.

    Class Variables:
        _strategy_type:        The :class:`DueDateManagement` member this
                               class implements.
        _strategy_description: Human-readable description.
    """

    _strategy_type: ClassVar[DueDateManagement]
    _strategy_description: ClassVar[str] = ""

    @property
    def name(self) -> str:
        return self._strategy_type.value

    @abstractmethod
    def calculate_due_date(
        self,
        requested_date: datetime,
        schedule: OpeningSchedule | None,
    ) -> Result[datetime]:
        """Return the adjusted due date, or a configuration failure."""
        ...

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of this strategy.

        Subclasses call ``super().export()`` and fill in ``"config"``.
        """
        return {
            "type": self._strategy_type.value,
            "description": self._strategy_description,
            "config": {},
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.export()['config']})"


class ZonedStrategy(ClosedLibraryStrategy):
    """Strategy that needs the service point's timezone."""

    def __init__(self, zone: tzinfo | None) -> None:
        if zone is None:
            raise StrategyConfigError(self.name, "zone is required")
        self.zone = zone

    def export(self) -> dict[str, Any]:
        data = super().export()
        data["config"] = {"zone": str(self.zone)}
        return data


class ScheduleStrategy(ZonedStrategy):
    """Strategy that searches the opening schedule, bounded by a horizon."""

    def __init__(self, zone: tzinfo | None, *, horizon: timedelta = DEFAULT_HORIZON) -> None:
        super().__init__(zone)
        if horizon <= timedelta(0):
            raise StrategyConfigError(self.name, f"horizon must be positive, got {horizon}")
        self.horizon = horizon

    def calculate_due_date(
        self,
        requested_date: datetime,
        schedule: OpeningSchedule | None,
    ) -> Result[datetime]:
        require_aware(requested_date, "requested_date")
        if not schedule:
            return Result.fail_configuration(ABSENT_TIMETABLE, strategy=self.name)
        return self._calculate(requested_date, schedule)

    @abstractmethod
    def _calculate(self, requested_date: datetime, schedule: OpeningSchedule) -> Result[datetime]:
        ...

    def _nothing_open(self, what: str, since: datetime) -> Result[datetime]:
        return Result.fail_configuration(
            f"No {what} within {self.horizon.days} days of {format_date_time(since)}",
            strategy=self.name,
            horizon_days=self.horizon.days,
        )

    def export(self) -> dict[str, Any]:
        data = super().export()
        data["config"]["horizon_days"] = self.horizon.days
        return data
