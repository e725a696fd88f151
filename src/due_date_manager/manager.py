"""DueDateManager — applies a loan policy's closed-library handling to due dates."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

from due_date_manager.config.factory import StrategyFactory
from due_date_manager.datetimes import local_date
from due_date_manager.renewal import error_when_earlier_or_same_due_date
from due_date_manager.result import Result

if TYPE_CHECKING:
    from due_date_manager._internal.clock import Clock
    from due_date_manager.config.schema import ClosedLibraryConfigSchema
    from due_date_manager.loan import Loan
    from due_date_manager.schedule import OpeningSchedule
    from due_date_manager.strategies.base import ClosedLibraryStrategy

logger = logging.getLogger(__name__)


class DueDateManager:
    """Turns a requested due date into the one a loan actually gets.

    The configured strategy adjusts the requested date for closed
    periods.  When a fixed due-date limit applies and the adjusted date
    falls on a later calendar day, the backward strategy is applied to
    the limit instead.  Renewals are additionally required to move the
    due date forward.

    Nothing here mutates a loan: every operation returns a new snapshot
    wrapped in a :class:`Result` for the caller to persist.

    Parameters:
        config: Closed-library configuration (validated schema or mapping).
        clock:  Injectable clock for strategies that read the current time.
    """

    def __init__(
        self,
        config: ClosedLibraryConfigSchema | Mapping[str, Any],
        *,
        clock: Clock | None = None,
    ) -> None:
        factory = StrategyFactory(clock=clock)
        self._config = factory.validate(config)
        self._strategy = factory.create(self._config)
        self._backward_strategy = factory.create_backward(self._config)

    # ── calculation ──────────────────────────────────────────

    def calculate_due_date(
        self,
        requested_date: datetime,
        schedule: OpeningSchedule | None,
        *,
        due_date_limit: datetime | None = None,
    ) -> Result[datetime]:
        """Apply the strategy, then the fixed due-date limit if one is given."""
        return self._strategy.calculate_due_date(requested_date, schedule).next(
            lambda due_date: self._apply_due_date_limit(due_date, due_date_limit, schedule)
        )

    def apply_to_loan(
        self,
        loan: Loan,
        schedule: OpeningSchedule | None,
        *,
        due_date_limit: datetime | None = None,
    ) -> Result[Loan]:
        """Recalculate *loan*'s own due date and return the updated snapshot."""
        return self.calculate_due_date(
            loan.due_date, schedule, due_date_limit=due_date_limit
        ).map(loan.change_due_date)

    def renew(
        self,
        loan: Loan,
        proposed_due_date: datetime,
        schedule: OpeningSchedule | None,
        *,
        due_date_limit: datetime | None = None,
    ) -> Result[Loan]:
        """Calculate the renewal due date and reject it unless it moves forward."""
        return (
            self.calculate_due_date(proposed_due_date, schedule, due_date_limit=due_date_limit)
            .next(lambda due_date: error_when_earlier_or_same_due_date(loan, due_date))
            .map(loan.renew)
        )

    def _apply_due_date_limit(
        self,
        due_date: datetime,
        due_date_limit: datetime | None,
        schedule: OpeningSchedule | None,
    ) -> Result[datetime]:
        if due_date_limit is None:
            return Result.succeed(due_date)

        zone = self._config.zone
        if local_date(due_date, zone) <= local_date(due_date_limit, zone):
            return Result.succeed(due_date)

        logger.debug("Due date %s exceeds limit %s, moving back", due_date, due_date_limit)
        return self._backward_strategy.calculate_due_date(due_date_limit, schedule)

    # ── introspection ────────────────────────────────────────

    @property
    def config(self) -> ClosedLibraryConfigSchema:
        return self._config

    @property
    def strategy(self) -> ClosedLibraryStrategy:
        return self._strategy

    @property
    def backward_strategy(self) -> ClosedLibraryStrategy:
        return self._backward_strategy

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of the configured strategies."""
        return {
            "strategy": self._strategy.export(),
            "backward_strategy": self._backward_strategy.export(),
        }
