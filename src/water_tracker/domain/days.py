"""Calendar-day helpers computed in a fixed reference time zone."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

DAY_FORMAT = "%Y-%m-%d"


def _localize(instant: datetime, tz: ZoneInfo) -> datetime:
    """Convert to the reference zone; naive instants are read as already in it."""
    if instant.tzinfo is None or instant.utcoffset() is None:
        return instant.replace(tzinfo=tz)
    return instant.astimezone(tz)


def day_identifier(instant: datetime, tz: ZoneInfo) -> str:
    """Return the ``YYYY-MM-DD`` identifier of the instant's local date."""
    return _localize(instant, tz).strftime(DAY_FORMAT)


def time_label(instant: datetime, tz: ZoneInfo) -> str:
    """Return an ``HH:MM`` label for the instant's local time."""
    return _localize(instant, tz).strftime("%H:%M")


def parse_day_identifier(value: str) -> date | None:
    """Parse a zero-padded day identifier, returning None when it is malformed."""
    try:
        parsed = datetime.strptime(value, DAY_FORMAT).date()
    except ValueError:
        return None
    if parsed.strftime(DAY_FORMAT) != value:
        return None
    return parsed


def day_title(value: str) -> str:
    """Return a readable title such as ``Oct 27, 2025`` for a day identifier."""
    parsed = parse_day_identifier(value)
    if parsed is None:
        return value
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"
