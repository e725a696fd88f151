"""Loan — the read-only loan snapshot that due-date calculations work on."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Protocol

from due_date_manager.datetimes import require_aware


class HasDueDate(Protocol):
    """Anything exposing a loan's current due date."""

    @property
    def due_date(self) -> datetime: ...


@dataclass(frozen=True)
class Loan:
    """Immutable view of a loan owned by the calling layer.

    Changing the due date never touches this object; it returns a new
    snapshot that the caller persists if it wants to.

    Attributes:
        id:            Loan identifier, opaque to this package.
        due_date:      Current due date.
        loan_date:     When the item was checked out, if known.
        renewal_count: How many times the loan has been renewed.
    """

    id: str
    due_date: datetime
    loan_date: datetime | None = None
    renewal_count: int = 0

    def __post_init__(self) -> None:
        require_aware(self.due_date, "due_date")
        if self.loan_date is not None:
            require_aware(self.loan_date, "loan_date")

    def change_due_date(self, due_date: datetime) -> Loan:
        return replace(self, due_date=due_date)

    def renew(self, due_date: datetime) -> Loan:
        return replace(self, due_date=due_date, renewal_count=self.renewal_count + 1)
