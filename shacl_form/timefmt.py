"""Normalisation of ``xsd:date`` / ``xsd:dateTime`` lexical values."""
from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Optional

DATE_LENGTH = 10  # YYYY-MM-DD
DATE_TIME_LENGTH = 19  # YYYY-MM-DDTHH:MM:SS

_DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})(Z|[+-]\d{2}:\d{2})?$")
_FRACTION_RE = re.compile(r"\.(\d+)")


def _try_isoformat(value: str) -> Optional[datetime]:
    try:
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        # fromisoformat only takes up to microsecond precision
        value = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1)
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def _try_date(value: str) -> Optional[datetime]:
    match = _DATE_RE.match(value)
    if match is None:
        return None
    try:
        day = date.fromisoformat(match.group(1))
    except ValueError:
        return None
    # a bare date is the start of that day in UTC
    return datetime(day.year, day.month, day.day)


def parse_xsd_datetime(value: str) -> Optional[datetime]:
    """Best-effort parse of a date or date-time lexical form.

    Offset-aware values are converted to UTC and returned naive; values without
    an offset are taken as they are.
    """

    text = (value or "").strip()
    if not text:
        return None
    for candidate in (_try_date, _try_isoformat):
        dt = candidate(text)
        if dt is not None:
            break
    else:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def to_iso_string(value: str) -> Optional[str]:
    """Full ``YYYY-MM-DDTHH:MM:SS.mmmZ`` form of ``value`` or ``None``."""

    dt = parse_xsd_datetime(value)
    if dt is None:
        return None
    return dt.isoformat(timespec="milliseconds") + "Z"


def truncate_iso(value: str, *, date_time: bool) -> Optional[str]:
    """Whole-second date-time or date-only ISO string for an editor."""

    iso = to_iso_string(value)
    if iso is None:
        return None
    return iso[: DATE_TIME_LENGTH if date_time else DATE_LENGTH]


__all__ = ["parse_xsd_datetime", "to_iso_string", "truncate_iso", "DATE_LENGTH", "DATE_TIME_LENGTH"]
