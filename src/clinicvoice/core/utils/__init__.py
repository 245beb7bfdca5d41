"""
Utility functions package for Clinic Voice.
"""

from .datetime_utils import (
    format_clock_time,
    get_current_timestamp,
    hour_label,
    iso_timestamp,
    is_valid_date,
    parse_clock_time,
    parse_date,
    today_str,
    week_bounds,
)

__all__ = [
    "format_clock_time",
    "get_current_timestamp",
    "hour_label",
    "iso_timestamp",
    "is_valid_date",
    "parse_clock_time",
    "parse_date",
    "today_str",
    "week_bounds",
]
