from datetime import datetime, timezone
from typing import NamedTuple, Optional, Union
import re

# Seconds fraction of any length; fromisoformat before 3.11 only accepts 3 or 6 digits.
_FRACTION_RE = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class DateParts(NamedTuple):
    day: str
    month: str
    year: str


def parse_date_parts(
    day: Optional[str] = None,
    month: Optional[str] = None,
    year: Optional[str] = None,
) -> Optional[str]:
    """Join split day/month/year inputs into an ISO datetime string.

    Returns None if any component is missing. Day and month are zero-padded;
    calendar validity is not checked here.

    >>> parse_date_parts("5", "3", "2024")
    '2024-03-05T00:00:00'
    """
    if not day or not month or not year:
        return None

    return f"{year}-{month.zfill(2)}-{day.zfill(2)}T00:00:00"


def parse_timestamp(iso_string: str) -> datetime:
    """Parse an ISO 8601 timestamp from the API into an aware UTC datetime.

    Strings without 'Z' or an offset are treated as UTC so the displayed day
    does not drift with the server's local timezone. Fractional seconds of
    any length are accepted and truncated to microseconds.
    """
    normalized = _FRACTION_RE.sub(
        lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}",
        iso_string.replace("Z", "+00:00"),
    )
    return as_utc(datetime.fromisoformat(normalized))


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_utc(value: Union[str, datetime]) -> datetime:
    return parse_timestamp(value) if isinstance(value, str) else as_utc(value)


def extract_date_parts(value: Union[str, datetime]) -> DateParts:
    """Split a due date back into form inputs.

    >>> extract_date_parts("2024-03-05T00:00:00")
    DateParts(day='5', month='3', year='2024')
    """
    if isinstance(value, str):
        year, month, day = value.split("T")[0].split("-")
        return DateParts(day=str(int(day)), month=str(int(month)), year=year)

    value = as_utc(value)
    return DateParts(day=str(value.day), month=str(value.month), year=f"{value.year:04d}")


def format_date(value: Union[str, datetime]) -> str:
    """Format as a UK date without time, e.g. '15 March 2024'.

    Use for date-only fields like the due date.
    """
    value = _to_utc(value)
    return f"{value.day} {_MONTH_NAMES[value.month - 1]} {value.year}"


def format_date_time(value: Union[str, datetime]) -> str:
    """Format as a UK date with 24-hour time, e.g. '15 March 2024, 10:30:00'.

    Use for timestamps like createdAt and updatedAt.
    """
    value = _to_utc(value)
    return f"{value.day} {_MONTH_NAMES[value.month - 1]} {value.year}, {value:%H:%M:%S}"
