"""Tests for DueDateManager."""

from datetime import UTC, datetime, timedelta

import pytest

from due_date_manager import DueDateManager, FailureKind, Loan
from due_date_manager.config import ClosedLibraryConfigSchema, StrategyFactoryError
from due_date_manager.renewal import RENEWAL_WOULD_NOT_CHANGE_DUE_DATE
from due_date_manager.strategies import (
    ABSENT_TIMETABLE,
    EndOfCurrentHoursStrategy,
    EndOfNextOpenDayStrategy,
    EndOfPreviousOpenDayStrategy,
)

SATURDAY = datetime(2020, 11, 21, 12, 0, tzinfo=UTC)


def end_of(day):
    return datetime(2020, 11, day, 23, 59, 59, tzinfo=UTC)


@pytest.fixture
def next_open_day(clock):
    return DueDateManager(
        {
            "closedLibraryDueDateManagementId": "MOVE_TO_THE_END_OF_THE_NEXT_OPEN_DAY",
            "timezone": "UTC",
        },
        clock=clock,
    )


@pytest.fixture
def next_open_hours(clock):
    config = ClosedLibraryConfigSchema(
        due_date_management="MOVE_TO_BEGINNING_OF_NEXT_OPEN_SERVICE_POINT_HOURS",
        timezone="UTC",
        short_term=True,
    )
    return DueDateManager(config, clock=clock)


# ── construction ─────────────────────────────────────────────


def test_builds_strategies(next_open_day, next_open_hours):
    assert isinstance(next_open_day.strategy, EndOfNextOpenDayStrategy)
    assert isinstance(next_open_day.backward_strategy, EndOfPreviousOpenDayStrategy)
    assert isinstance(next_open_hours.backward_strategy, EndOfCurrentHoursStrategy)


def test_invalid_config_rejected():
    with pytest.raises(StrategyFactoryError):
        DueDateManager({"closedLibraryDueDateManagementId": "SOMETHING_ELSE"})


def test_export(next_open_day):
    exported = next_open_day.export()
    assert exported["strategy"]["type"] == "MOVE_TO_THE_END_OF_THE_NEXT_OPEN_DAY"
    assert exported["backward_strategy"]["type"] == "MOVE_TO_THE_END_OF_THE_PREVIOUS_OPEN_DAY"


# ── calculation ──────────────────────────────────────────────


def test_calculate_due_date(next_open_day, weekday_schedule):
    assert next_open_day.calculate_due_date(SATURDAY, weekday_schedule).unwrap() == end_of(23)


def test_strategy_failure_propagates(next_open_day):
    result = next_open_day.calculate_due_date(SATURDAY, None)
    assert result.failure.kind == FailureKind.CONFIGURATION
    assert result.failure.message == ABSENT_TIMETABLE


def test_due_date_limit_moves_back(next_open_day, weekday_schedule):
    limit = datetime(2020, 11, 20, 12, 0, tzinfo=UTC)
    result = next_open_day.calculate_due_date(SATURDAY, weekday_schedule, due_date_limit=limit)
    assert result.unwrap() == end_of(20)


def test_due_date_limit_on_same_day_is_not_applied(next_open_day, weekday_schedule):
    limit = datetime(2020, 11, 23, 8, 0, tzinfo=UTC)
    result = next_open_day.calculate_due_date(SATURDAY, weekday_schedule, due_date_limit=limit)
    assert result.unwrap() == end_of(23)


def test_short_term_limit_uses_current_hours(next_open_hours, weekday_schedule):
    requested = datetime(2020, 11, 17, 18, 0, tzinfo=UTC)
    assert next_open_hours.calculate_due_date(requested, weekday_schedule).unwrap() == (
        datetime(2020, 11, 18, 9, 0, tzinfo=UTC)
    )
    closed_limit = datetime(2020, 11, 17, 20, 0, tzinfo=UTC)
    result = next_open_hours.calculate_due_date(
        requested, weekday_schedule, due_date_limit=closed_limit
    )
    # closed at the limit, so the loan closes with the hours open at NOW
    assert result.unwrap() == datetime(2020, 11, 17, 17, 0, tzinfo=UTC)


# ── loans ────────────────────────────────────────────────────


def test_apply_to_loan(next_open_day, weekday_schedule):
    loan = Loan("loan-1", SATURDAY)
    updated = next_open_day.apply_to_loan(loan, weekday_schedule).unwrap()
    assert updated.due_date == end_of(23)
    assert updated.renewal_count == 0
    assert loan.due_date == SATURDAY


def test_renew_moves_due_date_forward(next_open_day, weekday_schedule):
    loan = Loan("loan-1", end_of(17))
    renewed = next_open_day.renew(loan, SATURDAY, weekday_schedule).unwrap()
    assert renewed.due_date == end_of(23)
    assert renewed.renewal_count == 1


def test_renew_rejected_when_due_date_would_not_change(next_open_day, weekday_schedule):
    loan = Loan("loan-1", end_of(23))
    result = next_open_day.renew(loan, SATURDAY, weekday_schedule)
    assert result.failure.kind == FailureKind.VALIDATION
    assert result.failure.message == RENEWAL_WOULD_NOT_CHANGE_DUE_DATE


def test_renew_rejected_when_earlier(next_open_day, weekday_schedule):
    loan = Loan("loan-1", end_of(27))
    assert next_open_day.renew(loan, SATURDAY - timedelta(days=3), weekday_schedule).failed
