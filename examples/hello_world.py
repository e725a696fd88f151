"""
due_date_manager — Hello World

A loan policy picks how due dates landing on closed days or hours are
handled. The manager applies it, enforces a fixed due-date limit and
refuses renewals that would not move the due date forward.
"""

from datetime import UTC, date, datetime, time, timedelta

from due_date_manager import (
    DueDateManager,
    FixedClock,
    Loan,
    OpeningDay,
    OpeningHour,
    OpeningSchedule,
)

# ─── A service point open 09:00-17:00 on weekdays ───


def weekday_schedule(first: date, days: int) -> OpeningSchedule:
    hours = (OpeningHour(time(9, 0), time(17, 0)),)
    return OpeningSchedule(
        OpeningDay(d, opening_hours=hours) if d.weekday() < 5 else OpeningDay(d, open=False)
        for d in (first + timedelta(days=i) for i in range(days))
    )


def show(label: str, result) -> None:
    if result.succeeded:
        print(f"  {label}: {result.value}")
    else:
        print(f"  {label}: FAILED ({result.failure.kind.value}) {result.failure.message}")


def main():
    schedule = weekday_schedule(date(2020, 11, 16), 14)
    clock = FixedClock(datetime(2020, 11, 17, 9, 47, tzinfo=UTC))
    saturday = datetime(2020, 11, 21, 12, 0, tzinfo=UTC)

    # ──────────────────────────────────────
    #  1. Long-term loan, move to next open day
    # ──────────────────────────────────────
    print("=== Next open day ===\n")

    manager = DueDateManager(
        {
            "closedLibraryDueDateManagementId": "MOVE_TO_THE_END_OF_THE_NEXT_OPEN_DAY",
            "timezone": "UTC",
        },
        clock=clock,
    )
    show("Saturday", manager.calculate_due_date(saturday, schedule))
    show(
        "Limited to Friday",
        manager.calculate_due_date(
            saturday, schedule, due_date_limit=datetime(2020, 11, 20, tzinfo=UTC)
        ),
    )

    # ──────────────────────────────────────
    #  2. Short-term loan, next opening hours
    # ──────────────────────────────────────
    print("\n=== Next open hours ===\n")

    hourly = DueDateManager(
        {
            "closedLibraryDueDateManagementId": "MOVE_TO_BEGINNING_OF_NEXT_OPEN_SERVICE_POINT_HOURS",
            "short_term": True,
        },
        clock=clock,
    )
    tuesday_evening = datetime(2020, 11, 17, 18, 0, tzinfo=UTC)
    show("Tuesday 18:00", hourly.calculate_due_date(tuesday_evening, schedule))

    # ──────────────────────────────────────
    #  3. Renewals
    # ──────────────────────────────────────
    print("\n=== Renewals ===\n")

    loan = Loan("loan-1", datetime(2020, 11, 23, 23, 59, 59, tzinfo=UTC))
    show("Renew to Saturday", manager.renew(loan, saturday, schedule))
    show("Renew a week on", manager.renew(loan, saturday + timedelta(days=7), schedule))

    # ──────────────────────────────────────
    #  4. No calendar
    # ──────────────────────────────────────
    print("\n=== No calendar ===\n")

    show("Saturday", manager.calculate_due_date(saturday, None))

    print("\nStrategy JSON: ", manager.export())


if __name__ == "__main__":
    main()
