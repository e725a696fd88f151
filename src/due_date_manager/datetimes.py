"""Date and time helpers shared by intervals, strategies and validators.

Every comparison here is made at **millisecond** granularity.  Due dates
routinely travel through text that carries at most three fractional
digits, so two values that differ only below a millisecond are the same
instant as far as this package is concerned.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from due_date_manager.exceptions import NaiveDateTimeError

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_MILLISECOND = timedelta(milliseconds=1)

#: Time of day a "keep the date" due date is pinned to.
END_OF_DAY = time(23, 59, 59)

_OFFSET_RE = re.compile(r"^(?:UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2}))?$")


def require_aware(value: datetime, name: str = "value") -> datetime:
    """Return *value* unchanged, or raise if it carries no timezone."""
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        raise NaiveDateTimeError(name)
    return value


# ── millisecond comparisons ──────────────────────────────────


def to_epoch_millis(value: datetime) -> int:
    """Milliseconds since the Unix epoch, truncated toward the past."""
    return (require_aware(value) - EPOCH) // ONE_MILLISECOND


def from_epoch_millis(millis: int, zone: tzinfo = UTC) -> datetime:
    return (EPOCH + timedelta(milliseconds=millis)).astimezone(zone)


def compare_millis(left: datetime, right: datetime) -> int:
    """Return -1, 0 or 1 comparing *left* with *right* at millisecond precision."""
    lm, rm = to_epoch_millis(left), to_epoch_millis(right)
    return (lm > rm) - (lm < rm)


def is_before_millis(left: datetime, right: datetime) -> bool:
    return to_epoch_millis(left) < to_epoch_millis(right)


def is_after_millis(left: datetime, right: datetime) -> bool:
    return to_epoch_millis(left) > to_epoch_millis(right)


def is_same_millis(left: datetime, right: datetime) -> bool:
    return to_epoch_millis(left) == to_epoch_millis(right)


# ── calendar helpers ─────────────────────────────────────────


def at_end_of_day(day: date, zone: tzinfo) -> datetime:
    """23:59:59 on *day* in *zone*."""
    return datetime.combine(day, END_OF_DAY, tzinfo=zone)


def at_start_of_day(day: date, zone: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=zone)


def local_date(value: datetime, zone: tzinfo) -> date:
    """Calendar date of *value* as seen from *zone*."""
    return require_aware(value).astimezone(zone).date()


# ── zones ────────────────────────────────────────────────────


def parse_zone(name: str) -> tzinfo:
    """Turn ``"UTC"``, ``"Z"``, ``"-05:00"``, ``"+0530"`` or an IANA name into a tzinfo.

    Raises:
        ValueError: If *name* is neither a valid offset nor a known zone.
    """
    text = name.strip()
    if text.upper() in ("UTC", "Z", "GMT"):
        return UTC

    match = _OFFSET_RE.match(text)
    if match:
        sign, hours, minutes = match.groups()
        if int(minutes or 0) > 59:
            raise ValueError(f"Offset minutes out of range: '{name}'")
        delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
        if delta > timedelta(hours=14):
            raise ValueError(f"Offset out of range: '{name}'")
        return timezone(-delta if sign == "-" else delta)

    try:
        return ZoneInfo(text)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: '{name}'") from e


# ── canonical text form ──────────────────────────────────────


def format_date_time(value: datetime) -> str:
    """Canonical exchange form: UTC, millisecond precision, explicit offset.

    >>> format_date_time(datetime(2020, 11, 17, 4, 47, tzinfo=timezone(timedelta(hours=-5))))
    '2020-11-17T09:47:00.000+00:00'
    """
    utc = require_aware(value).astimezone(UTC)
    return utc.isoformat(timespec="milliseconds")


def parse_date_time(text: str, zone: tzinfo | None = None) -> datetime:
    """Parse ISO-8601 *text*.  Values without an offset are read in *zone* (UTC)."""
    parsed = datetime.fromisoformat(text.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone or UTC)
    return parsed


def is_equivalent(left: datetime | str, right: datetime | str) -> bool:
    """Whether two datetimes (or their text forms) name the same millisecond."""
    if isinstance(left, str):
        left = parse_date_time(left)
    if isinstance(right, str):
        right = parse_date_time(right)
    return is_same_millis(left, right)
