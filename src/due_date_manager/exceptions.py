"""Custom exceptions for the due_date_manager package.

Only programmer or configuration misuse is raised.  Data-dependent
outcomes (a renewal that would not move the due date, a schedule with no
open period) are returned as :class:`~due_date_manager.result.Result`
failures instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from due_date_manager.result import Failure


class DueDateError(Exception):
    """Base exception for all due-date related errors."""


class InvalidClockError(DueDateError, ValueError):
    """Raised when an absent clock is installed as the process-wide clock."""

    def __init__(self, message: str = "clock cannot be None") -> None:
        super().__init__(message)


class NaiveDateTimeError(DueDateError, ValueError):
    """Raised when a datetime without timezone information is supplied."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"'{argument}' must be timezone-aware")


class StrategyConfigError(DueDateError):
    """Raised when a closed-library strategy is misconfigured."""

    def __init__(self, strategy_name: str, message: str) -> None:
        self.strategy_name = strategy_name
        super().__init__(f"Strategy '{strategy_name}' misconfigured: {message}")


class ResultFailedError(DueDateError):
    """Raised when the value of a failed result is requested."""

    def __init__(self, failure: Failure) -> None:
        self.failure = failure
        super().__init__(f"Result failed ({failure.kind.value}): {failure.message}")
