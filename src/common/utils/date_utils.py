"""Utility functions for date manipulation."""

from datetime import date, datetime, time

import pytz


def parse_iso_datetime(dt_str: str) -> datetime:
    """Parses an ISO-8601 timestamp into an aware UTC datetime.

    Accepts both the ``Z`` suffix and explicit offsets. Naive values are taken as UTC.
    Raises ValueError or TypeError on anything that is not an ISO timestamp string.
    """
    if not isinstance(dt_str, str):
        raise TypeError(f"Expected ISO timestamp string, got {type(dt_str).__name__}")
    dt_obj = datetime.fromisoformat(dt_str.strip().replace("Z", "+00:00"))
    if dt_obj.tzinfo is None:
        return pytz.utc.localize(dt_obj)
    return dt_obj.astimezone(pytz.utc)


def format_iso_datetime(dt: datetime) -> str:
    """Formats a datetime as a UTC ISO string with millisecond precision, e.g. 2025-10-30T12:30:00.000Z."""
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def day_bounds(start_day: date, end_day: date, tz_name: str = "UTC") -> tuple[datetime, datetime]:
    """Returns the first and last instant of a span of calendar days in the given timezone."""
    if isinstance(start_day, datetime):
        start_day = start_day.date()
    if isinstance(end_day, datetime):
        end_day = end_day.date()

    tz = pytz.timezone(tz_name)
    start = tz.localize(datetime.combine(start_day, time.min))
    end = tz.localize(datetime.combine(end_day, time.max))
    return start, end


def format_report_date(dt: datetime, tz_name: str = "UTC") -> str:
    """Formats a timestamp for report listings, e.g. 'Oct 30, 2025, 12:30 PM'."""
    local_dt = dt.astimezone(pytz.timezone(tz_name))
    return f"{local_dt.strftime('%b')} {local_dt.day}, {local_dt.year}, {local_dt.strftime('%I:%M %p')}"


def truncate_to_milliseconds(dt: datetime) -> datetime:
    """Drops sub-millisecond precision, matching what format_iso_datetime persists."""
    return dt.replace(microsecond=dt.microsecond - dt.microsecond % 1000)
