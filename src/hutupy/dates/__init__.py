"""Timestamp arithmetic and date-time helpers."""

from .timestamps import (
    current_timestamp, current_timestamp_millis, format_timestamp, current_date,
    diff_seconds, is_future, is_past, add_seconds, subtract_seconds,
    get_minutes, get_hours, get_days,
)
from .datetimes import (
    DateTimeOffsetUnit, DateTimeParseError, expand_format, is_valid_pattern,
    format_datetime, format_current, parse, reformat, is_am, is_pm,
    start_time_of_day, end_time_of_day, start_time_of_week, end_time_of_week,
    start_time_of_month, end_time_of_month, start_time_of_year, end_time_of_year,
    offset, between,
)

__all__ = [
    "current_timestamp", "current_timestamp_millis", "format_timestamp", "current_date",
    "diff_seconds", "is_future", "is_past", "add_seconds", "subtract_seconds",
    "get_minutes", "get_hours", "get_days",
    "DateTimeOffsetUnit", "DateTimeParseError", "expand_format", "is_valid_pattern",
    "format_datetime", "format_current", "parse", "reformat", "is_am", "is_pm",
    "start_time_of_day", "end_time_of_day", "start_time_of_week", "end_time_of_week",
    "start_time_of_month", "end_time_of_month", "start_time_of_year", "end_time_of_year",
    "offset", "between",
]
