"""Strict ISO-8601 detection and epoch-millisecond conversion.

Only well-formed ISO-8601 strings are recognised, in the profile of
moment's strict ``ISO_8601`` parser. Reduced forms (``2018``, ``2018-06``)
are dates; lenient ones (``2018-6-1``, ``2018-02-30``) are not and are
compared as plain strings.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone
from functools import lru_cache
from typing import Any

__all__ = [
    "EPOCH",
    "is_iso_date",
    "normalize_date",
    "parse_iso_date",
    "to_epoch_millis",
]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)
_ONE_DAY = timedelta(days=1)

_ZONE = r"(?P<zone>Z|[+-]\d\d(?::?\d\d)?)?"
_FRACTION = r"(?:[.,](?P<fraction>\d+))?"

# An extended date takes an extended time, a basic date a basic time.
_ISO_PATTERNS = tuple(
    re.compile(pattern, re.ASCII)
    for pattern in (
        r"(?P<date>(?:[+-]\d{6}|\d{4})-(?:\d\d-\d\d|W\d\d-\d|W\d\d|\d{3}|\d\d))"
        r"(?:[T ](?P<hour>\d\d)(?::(?P<minute>\d\d)(?::(?P<second>\d\d)"
        + _FRACTION
        + r")?)?"
        + _ZONE
        + r")?",
        r"(?P<date>(?:[+-]\d{6}|\d{4})(?:\d{4}|W\d{3}|W\d\d|\d{3}|\d\d)?)"
        r"(?:[T ](?P<hour>\d\d)(?:(?P<minute>\d\d)(?:(?P<second>\d\d)"
        + _FRACTION
        + r")?)?"
        + _ZONE
        + r")?",
    )
)

# (kind, pattern, accepts a time part)
_DATE_FORMATS = tuple(
    (kind, re.compile(pattern, re.ASCII), with_time)
    for kind, pattern, with_time in (
        (
            "calendar",
            r"(?P<year>[+-]\d{6}|\d{4})-(?P<month>\d\d)-(?P<day>\d\d)",
            True,
        ),
        ("week", r"(?P<year>\d{4})-W(?P<week>\d\d)-(?P<weekday>\d)", True),
        ("week", r"(?P<year>\d{4})-W(?P<week>\d\d)", False),
        ("ordinal", r"(?P<year>\d{4})-(?P<yday>\d{3})", True),
        ("calendar", r"(?P<year>\d{4})-(?P<month>\d\d)", False),
        (
            "calendar",
            r"(?P<year>[+-]\d{6}|\d{4})(?P<month>\d\d)(?P<day>\d\d)",
            True,
        ),
        ("week", r"(?P<year>\d{4})W(?P<week>\d\d)(?P<weekday>\d)", True),
        ("week", r"(?P<year>\d{4})W(?P<week>\d\d)", False),
        ("ordinal", r"(?P<year>\d{4})(?P<yday>\d{3})", True),
        ("calendar", r"(?P<year>\d{4})(?P<month>\d\d)", False),
        ("calendar", r"(?P<year>\d{4})", False),
    )
)


def _parse_date_part(text: str, with_time: bool) -> date | None:
    for kind, pattern, accepts_time in _DATE_FORMATS:
        match = pattern.fullmatch(text)
        if match is None:
            continue
        if with_time and not accepts_time:
            return None
        fields = match.groupdict()
        year = int(fields["year"])
        if kind == "calendar":
            month = int(fields.get("month") or 1)
            return date(year, month, int(fields.get("day") or 1))
        if kind == "week":
            return date.fromisocalendar(
                year, int(fields["week"]), int(fields.get("weekday") or 1)
            )
        yday = int(fields["yday"])
        if not 1 <= yday <= 366:
            return None
        result = date(year, 1, 1) + timedelta(days=yday - 1)
        return result if result.year == year else None
    return None


def _parse_zone(zone: str | None) -> timezone | None:
    if not zone:
        return None
    if zone == "Z":
        return timezone.utc
    sign = -1 if zone[0] == "-" else 1
    digits = zone[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:4] or 0)
    if hours > 23 or minutes > 59:
        raise ValueError(f"Invalid UTC offset: {zone}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _parse_clock(fields: dict[str, str | None]) -> tuple[time, timedelta]:
    """Time of day plus the day rollover ``24:00`` implies."""
    hour = int(fields["hour"] or 0)
    minute = int(fields["minute"] or 0)
    second = int(fields["second"] or 0)
    microsecond = int(((fields["fraction"] or "") + "000000")[:6])
    if hour == 24 and not (minute or second or microsecond):
        return time(), _ONE_DAY
    return time(hour, minute, second, microsecond), timedelta()


@lru_cache(maxsize=1024)
def parse_iso_date(text: str) -> datetime | None:
    """Parse a strict ISO-8601 string, returning None when it is not one."""
    for pattern in _ISO_PATTERNS:
        match = pattern.fullmatch(text)
        if match is not None:
            break
    else:
        return None

    fields = match.groupdict()
    try:
        day = _parse_date_part(fields["date"], with_time=fields["hour"] is not None)
        if day is None:
            return None
        if fields["hour"] is None:
            return datetime.combine(day, time(), timezone.utc)
        clock, rollover = _parse_clock(fields)
        zone = _parse_zone(fields["zone"]) or timezone.utc
        return datetime.combine(day, clock, zone) + rollover
    except (ValueError, OverflowError):
        return None


def is_iso_date(value: Any) -> bool:
    """True only for strings holding a valid ISO-8601 date."""
    return isinstance(value, str) and parse_iso_date(value) is not None


def to_epoch_millis(value: str | date) -> int:
    """Milliseconds since the Unix epoch.

    Naive values are read as UTC. Precision below one millisecond is
    truncated.
    """
    if isinstance(value, str):
        parsed = parse_iso_date(value)
        if parsed is None:
            raise ValueError(f"Not an ISO-8601 date: {value!r}")
        value = parsed
    if not isinstance(value, datetime):
        value = datetime.combine(value, time(), timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // _ONE_MS


def normalize_date(value: Any) -> Any:
    """Replace an ISO-8601 string by its epoch milliseconds."""
    if is_iso_date(value):
        return to_epoch_millis(value)
    return value
