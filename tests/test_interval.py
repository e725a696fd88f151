"""Tests for Interval."""

import time
from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from due_date_manager import FixedClock, Interval, NaiveDateTimeError
from due_date_manager.datetimes import format_date_time, parse_date_time

T0 = datetime(2020, 11, 17, 9, 0, tzinfo=UTC)
HOUR = timedelta(hours=1)


# ── construction ─────────────────────────────────────────────


@pytest.mark.parametrize("length", [timedelta(milliseconds=1), HOUR, timedelta(days=400)])
def test_between_duration(length):
    interval = Interval.between(T0, T0 + length)
    assert interval.duration == length
    assert interval.start == T0
    assert interval.end == T0 + length


@pytest.mark.parametrize("end", [T0, T0 - timedelta(milliseconds=1), T0 - HOUR])
def test_inverted_or_equal_collapses_to_zero(end):
    interval = Interval.between(T0, end)
    assert interval.duration == timedelta(0)
    assert interval.begin == T0
    assert interval.end == T0


def test_negative_duration_collapses():
    assert Interval(T0, -HOUR).duration == timedelta(0)


def test_sub_millisecond_end_collapses():
    assert Interval.between(T0, T0 + timedelta(microseconds=900)).duration == timedelta(0)


def test_between_local_uses_zone():
    zone = timezone(timedelta(hours=-5))
    interval = Interval.between_local(datetime(2020, 11, 17, 9), datetime(2020, 11, 17, 17), zone)
    assert interval.zone is zone
    assert interval.duration == 8 * HOUR
    assert interval.begin == datetime(2020, 11, 17, 14, tzinfo=UTC)


@pytest.fixture
def new_york_local(monkeypatch):
    """Run with the process-local zone set to America/New_York."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.mark.parametrize("month, offset", [(1, -5), (7, -4)])
def test_between_local_default_zone_follows_dst(new_york_local, month, offset):
    interval = Interval.between_local(datetime(2021, month, 15, 9), datetime(2021, month, 15, 10))
    assert interval.begin.utcoffset() == timedelta(hours=offset)
    assert interval.begin == datetime(2021, month, 15, 9 - offset, tzinfo=UTC)
    assert interval.duration == HOUR


def test_between_local_default_zone_across_dst_change(new_york_local):
    interval = Interval.between_local(datetime(2021, 3, 13, 12), datetime(2021, 3, 14, 12))
    assert interval.duration == timedelta(hours=23)


def test_from_epoch_millis():
    interval = Interval.from_epoch_millis(1_000, 5_000)
    assert interval.begin == datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC)
    assert interval.duration == timedelta(seconds=4)
    assert Interval.from_epoch_millis(5_000, 1_000).duration == timedelta(0)


def test_from_epoch_millis_with_zone():
    zone = timezone(timedelta(hours=2))
    interval = Interval.from_epoch_millis(0, 1_000, zone)
    assert interval.zone == zone
    assert interval.begin.hour == 2


def test_starting_now_reads_clock():
    interval = Interval.starting_now(FixedClock(T0))
    assert interval.begin == T0
    assert interval.duration == timedelta(0)


def test_naive_begin_rejected():
    with pytest.raises(NaiveDateTimeError):
        Interval(datetime(2020, 1, 1))
    with pytest.raises(NaiveDateTimeError):
        Interval.between(T0, datetime(2020, 1, 1))


def test_immutable():
    interval = Interval.between(T0, T0 + HOUR)
    with pytest.raises(AttributeError):
        interval.begin = T0 + HOUR  # type: ignore[misc]


def test_end_across_dst_change():
    zone = ZoneInfo("America/New_York")
    begin = datetime(2021, 3, 14, 0, 0, tzinfo=zone)
    end = datetime(2021, 3, 15, 0, 0, tzinfo=zone)
    interval = Interval.between(begin, end)
    assert interval.duration == timedelta(hours=23)
    assert interval.end == end
    assert interval.end.hour == 0


# ── contains ─────────────────────────────────────────────────


def test_contains_begin_not_end():
    interval = Interval.between(T0, T0 + HOUR)
    assert interval.contains(T0)
    assert not interval.contains(T0 + HOUR)


@pytest.mark.parametrize(
    "offset", [timedelta(milliseconds=1), timedelta(minutes=30), HOUR - timedelta(milliseconds=1)]
)
def test_contains_inner_points(offset):
    assert Interval.between(T0, T0 + HOUR).contains(T0 + offset)


def test_contains_outside_points():
    interval = Interval.between(T0, T0 + HOUR)
    assert not interval.contains(T0 - timedelta(milliseconds=1))
    assert not interval.contains(T0 + 2 * HOUR)


def test_zero_duration_contains_only_begin():
    interval = Interval(T0)
    assert interval.contains(T0)
    assert not interval.contains(T0 + timedelta(milliseconds=1))


def test_contains_in_other_offset():
    interval = Interval.between(T0, T0 + HOUR)
    assert interval.contains(T0.astimezone(timezone(timedelta(hours=-5))))


# ── abuts ────────────────────────────────────────────────────


def test_abuts_is_symmetric():
    a = Interval.between(T0, T0 + HOUR)
    b = Interval.between(T0 + HOUR, T0 + 2 * HOUR)
    c = Interval.between(T0 + 3 * HOUR, T0 + 4 * HOUR)
    assert a.abuts(b) and b.abuts(a)
    assert not a.abuts(c) and not c.abuts(a)


def test_overlapping_intervals_do_not_abut():
    a = Interval.between(T0, T0 + 2 * HOUR)
    b = Interval.between(T0 + HOUR, T0 + 3 * HOUR)
    assert not a.abuts(b)


def test_abuts_after_text_round_trip():
    precise_end = T0 + HOUR + timedelta(microseconds=123_456)
    a = Interval.between(T0, precise_end)
    b = Interval.between(parse_date_time(format_date_time(precise_end)), precise_end + HOUR)
    assert a.abuts(b)
    assert b.abuts(a)


def test_abuts_current_time_when_other_missing():
    interval = Interval.between(T0, T0 + HOUR)
    assert interval.abuts(None, clock=FixedClock(T0))
    assert interval.abuts(clock=FixedClock(T0 + HOUR))
    assert not interval.abuts(clock=FixedClock(T0 + timedelta(minutes=5)))


def test_abuts_current_time_uses_global_clock(global_clock):
    interval = Interval.between(global_clock.now() - HOUR, global_clock.now())
    assert interval.abuts()


# ── gap / overlaps ───────────────────────────────────────────


def test_gap_spans_separation_either_order():
    a = Interval.between(T0, T0 + HOUR)
    b = Interval.between(T0 + 3 * HOUR, T0 + 4 * HOUR)
    for gap in (a.gap(b), b.gap(a)):
        assert gap is not None
        assert gap.start == T0 + HOUR
        assert gap.end == T0 + 3 * HOUR


def test_gap_none_when_touching_or_overlapping():
    a = Interval.between(T0, T0 + HOUR)
    assert a.gap(Interval.between(T0 + HOUR, T0 + 2 * HOUR)) is None
    assert a.gap(Interval.between(T0 + timedelta(minutes=30), T0 + 2 * HOUR)) is None
    assert a.gap(a) is None


def test_gap_zone_follows_earlier_interval():
    zone = timezone(timedelta(hours=-5))
    early = Interval.between(T0.astimezone(zone), (T0 + HOUR).astimezone(zone))
    late = Interval.between(T0 + 2 * HOUR, T0 + 3 * HOUR)
    assert late.gap(early).zone == zone


def test_overlaps():
    a = Interval.between(T0, T0 + 2 * HOUR)
    assert a.overlaps(Interval.between(T0 + HOUR, T0 + 3 * HOUR))
    assert not a.overlaps(Interval.between(T0 + 2 * HOUR, T0 + 3 * HOUR))


def test_span():
    a = Interval.between(T0, T0 + HOUR)
    b = Interval.between(T0 + HOUR, T0 + 3 * HOUR)
    assert b.span(a) == Interval.between(T0, T0 + 3 * HOUR)
