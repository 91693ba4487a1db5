"""
Timestamp helpers.

All instants handled by the analyzer are timezone-aware UTC.
"""
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

# RFC 3339 with or without fractional seconds; the offset is mandatory
RFC3339_PATTERN = re.compile(
    r"^([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?(Z|[+-][0-9]{2}:[0-9]{2})$"
)


def utc_now() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to aware UTC.

    A value without an offset is read as UTC; offset-aware values
    are converted.
    """
    if value is None:
        return None
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_offset(text: str) -> Optional[timezone]:
    if text == "Z":
        return timezone.utc
    hours, minutes = int(text[1:3]), int(text[4:6])
    if hours > 23 or minutes > 59:
        return None
    offset = timedelta(hours=hours, minutes=minutes)
    return timezone(-offset if text[0] == "-" else offset)


def parse_timestamp(text: Optional[str]) -> Optional[datetime]:
    """
    Parse a GPX <time> value into aware UTC.

    Surrounding whitespace is ignored. Only offset-aware RFC 3339
    values are accepted (fractional seconds optional, truncated to
    microseconds); anything else, including times without an offset
    or with a space instead of 'T', gives None.

    Args:
        text: Raw element text

    Returns:
        UTC datetime, or None when the value is absent or unparsable
    """
    if text is None:
        return None
    match = RFC3339_PATTERN.match(text.strip())
    if match is None:
        return None

    year, month, day, hour, minute, second = (int(g) for g in match.group(1, 2, 3, 4, 5, 6))
    fraction = match.group(7) or ""
    microsecond = int(fraction[:6].ljust(6, "0"))
    tz = _parse_offset(match.group(8))
    if tz is None:
        return None

    try:
        value = datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)
    except ValueError:
        return None
    return value.astimezone(timezone.utc)
