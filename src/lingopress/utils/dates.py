from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Final, Optional

from lingopress.domain.errors import InvalidDateError

# Tried in order, the first one that parses the whole string wins.
ALLOWED_DATETIME_FORMATS: Final[tuple[str, ...]] = (
    "%Y%m%dT%H%M%S%z",
    "%Y%m%dT%H%M%S%Z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S.%f%Z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S%Z",
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M:%S %Z",
    "%Y-%m-%d %H:%M:%S.%f %z",
    "%Y-%m-%d %H:%M:%S.%f %Z",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%d/%m/%Y %H:%M:%S.%f",
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y %H:%M",
    "%d/%m/%Y",
)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_string(text: str) -> datetime:
    for fmt in ALLOWED_DATETIME_FORMATS:
        try:
            return _as_utc(datetime.strptime(text, fmt))
        except ValueError:
            continue
    raise InvalidDateError(f"Unrecognized date: {text!r}")


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Convert a date-like value into a UTC-aware datetime.

    - None or a blank string -> None
    - datetime -> converted to UTC (naive values are taken as UTC)
    - date -> midnight UTC
    - int/float -> epoch seconds, only when > 0 (otherwise None)
    - anything else is stringified and matched against ALLOWED_DATETIME_FORMATS

    Raises InvalidDateError when a non-blank value matches no format.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return _as_utc(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if value <= 0:
            return None
        return datetime.fromtimestamp(value, tz=timezone.utc)

    text = value.strip() if isinstance(value, str) else str(value)
    if not text:
        return None

    return _parse_string(text)
