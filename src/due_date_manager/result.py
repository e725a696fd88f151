"""Result — the outcome of a due-date calculation or validation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from due_date_manager.exceptions import ResultFailedError

T = TypeVar("T")
U = TypeVar("U")


class FailureKind(str, Enum):
    """Recoverable failure categories."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"


@dataclass(frozen=True)
class Failure:
    """Structured description of why a result failed.

    Attributes:
        kind:       Whether the input data was invalid or the setup
                    (schedule, policy) could not produce an answer.
        message:    Human-readable explanation.
        parameters: Extra data the caller may surface (offending value,
                    search horizon, etc.).
    """

    kind: FailureKind
    message: str
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Immutable success-or-failure value.

    A result is successful when it carries no failures.  Failed results
    may hold several failures so that callers can run a batch of
    validations and report them together (see :meth:`combine`).
    """

    value: T | None = None
    failures: tuple[Failure, ...] = ()

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def succeed(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def fail(failure: Failure) -> Result[Any]:
        return Result(failures=(failure,))

    @staticmethod
    def fail_validation(message: str, **parameters: Any) -> Result[Any]:
        return Result.fail(Failure(FailureKind.VALIDATION, message, parameters))

    @staticmethod
    def fail_configuration(message: str, **parameters: Any) -> Result[Any]:
        return Result.fail(Failure(FailureKind.CONFIGURATION, message, parameters))

    @staticmethod
    def combine(*results: Result[Any]) -> Result[tuple[Any, ...]]:
        """Join several results.

        Succeeds with the tuple of all values when every result succeeded,
        otherwise fails with every failure, in order.
        """
        failures = tuple(f for r in results for f in r.failures)
        if failures:
            return Result(failures=failures)
        return Result(value=tuple(r.value for r in results))

    # ── Inspection ───────────────────────────────────────────

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    @property
    def failure(self) -> Failure | None:
        """First failure, or ``None`` on success."""
        return self.failures[0] if self.failures else None

    def unwrap(self) -> T:
        """Return the value, raising :class:`ResultFailedError` on failure."""
        if self.failures:
            raise ResultFailedError(self.failures[0])
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return default if self.failures else self.value  # type: ignore[return-value]

    # ── Composition ──────────────────────────────────────────

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        """Transform the value of a successful result."""
        if self.failures:
            return Result(failures=self.failures)
        return Result(value=fn(self.value))  # type: ignore[arg-type]

    def next(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        """Chain another result-producing step after a successful one."""
        if self.failures:
            return Result(failures=self.failures)
        return fn(self.value)  # type: ignore[arg-type]
