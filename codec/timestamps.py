"""RFC 3339 codec for google-datetime fields.

Wire timestamps look like '2024-01-15T10:30:00.500Z'. Native values are
timezone-aware datetimes in UTC.
"""

import re
from datetime import datetime, timedelta, timezone

from codec.errors import DecodeError, EncodeError

_RFC3339_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"[Tt](?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?:(?P<utc>[Zz])|(?P<sign>[+-])(?P<off_hour>[0-9]{2}):(?P<off_minute>[0-9]{2}))"
)


def format_timestamp(value: datetime) -> str:
    """Render a datetime as an RFC 3339 UTC string.

    Naive datetimes are taken to be UTC. Milliseconds are always written;
    six fractional digits are used when the value has sub-millisecond
    precision.

    Raises:
        EncodeError: If value is not a datetime or cannot be shifted to UTC.
    """
    if not isinstance(value, datetime):
        raise EncodeError("expected datetime", value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    try:
        value = value.astimezone(timezone.utc)
    except (OverflowError, ValueError) as e:
        raise EncodeError(f"timestamp not representable in UTC: {e}", value) from e

    base = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond % 1000:
        return f"{base}.{value.microsecond:06d}Z"
    return f"{base}.{value.microsecond // 1000:03d}Z"


def parse_timestamp(text: str) -> datetime:
    """Parse an RFC 3339 string into an aware UTC datetime.

    Fractional digits past microseconds are truncated.

    Raises:
        DecodeError: If text is not a valid RFC 3339 timestamp.
    """
    if not isinstance(text, str):
        raise DecodeError("expected timestamp string", text)
    match = _RFC3339_RE.fullmatch(text)
    if not match:
        raise DecodeError("not an RFC 3339 timestamp", text)

    fraction = (match.group("fraction") or "")[:6].ljust(6, "0")
    if match.group("utc"):
        tz = timezone.utc
    else:
        offset = timedelta(
            hours=int(match.group("off_hour")),
            minutes=int(match.group("off_minute")),
        )
        if match.group("sign") == "-":
            offset = -offset
        try:
            tz = timezone(offset)
        except ValueError as e:
            raise DecodeError(f"invalid UTC offset: {e}", text) from e

    try:
        parsed = datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            int(fraction),
            tzinfo=tz,
        )
        return parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError) as e:
        raise DecodeError(f"invalid timestamp: {e}", text) from e
