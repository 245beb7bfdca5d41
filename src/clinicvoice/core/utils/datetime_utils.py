"""
Date and time utility functions for Clinic Voice.
"""

import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple

DATE_FORMAT = "%Y-%m-%d"

_CLOCK_12H = re.compile(r"^\s*(\d{1,2})(?::(\d{2}))?\s*([AaPp][Mm])\s*$")
_CLOCK_24H = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")
_HOUR_LABEL = re.compile(r"(\d+)\s*(AM|PM)", re.IGNORECASE)


def get_current_timestamp() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with a trailing Z."""
    moment = moment or get_current_timestamp()
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today_str(today: Optional[date] = None) -> str:
    return (today or date.today()).strftime(DATE_FORMAT)


def parse_date(date_str: str) -> Optional[date]:
    """Parse a YYYY-MM-DD string; None when malformed."""
    try:
        return datetime.strptime(date_str.strip(), DATE_FORMAT).date()
    except (ValueError, AttributeError):
        return None


def is_valid_date(date_str: str) -> bool:
    """Check if date string is valid."""
    return parse_date(date_str) is not None


def week_bounds(day: date) -> Tuple[date, date]:
    """Monday and Sunday of the week containing ``day``."""
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)


def parse_clock_time(value: str) -> Optional[time]:
    """Parse '10:30 AM', '2 PM' or '14:00' into a time; None when malformed."""
    if not value:
        return None
    match = _CLOCK_12H.match(value)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2) or 0)
        meridiem = match.group(3).upper()
        if not 1 <= hour <= 12 or minute > 59:
            return None
        if meridiem == "PM" and hour != 12:
            hour += 12
        if meridiem == "AM" and hour == 12:
            hour = 0
        return time(hour, minute)
    match = _CLOCK_24H.match(value)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour > 23 or minute > 59:
            return None
        return time(hour, minute)
    return None


def format_clock_time(value: time) -> str:
    """Render a time the way the calendar shows it, e.g. '9:30 AM'."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {meridiem}"


def hour_label(value: str) -> str:
    """Bucket label for a clock time, e.g. '10:30 AM' -> '10 AM'."""
    parsed = parse_clock_time(value)
    if parsed is None:
        return value.strip()
    hour = parsed.hour % 12 or 12
    return f"{hour} {'AM' if parsed.hour < 12 else 'PM'}"


def hour_label_sort_key(label: str) -> int:
    """24h hour for an hour label; unparseable labels sort first."""
    match = _HOUR_LABEL.search(label)
    if not match:
        return 0
    hour = int(match.group(1))
    meridiem = match.group(2).upper()
    if meridiem == "PM" and hour != 12:
        hour += 12
    if meridiem == "AM" and hour == 12:
        hour = 0
    return hour
