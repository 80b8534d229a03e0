"""
Date-time formatting, parsing, range boundaries and offsets.

Patterns follow ``strftime`` with a few extra shorthand tokens that
``datetime.strptime`` does not understand on its own:

    %F -> %Y-%m-%d      %T -> %H:%M:%S
    %D -> %m/%d/%y      %R -> %H:%M

Boundary helpers keep the ``tzinfo`` of their input. Datetimes carry
microsecond resolution, so "end of" a period is ``23:59:59.999999``.
"""

import calendar
import re
from datetime import datetime, timedelta, tzinfo
from enum import Enum
from typing import Optional

_SHORTHAND_TOKENS = {
    "F": "%Y-%m-%d",
    "T": "%H:%M:%S",
    "D": "%m/%d/%y",
    "R": "%H:%M",
}
_TOKEN_RE = re.compile(r"%(.)", re.DOTALL)

# C89/C99 strftime directives, Python's %f, and the shorthands above
_FORMAT_DIRECTIVES = frozenset("aAbBcCdDeFgGhHIjmMnpRStTuUVwWxXyYzZf%")

_START_OF_DAY = dict(hour=0, minute=0, second=0, microsecond=0)
_END_OF_DAY = dict(hour=23, minute=59, second=59, microsecond=999_999)

class DateTimeParseError(ValueError):
    """Raised when content does not match a pattern or names an impossible date."""

class DateTimeOffsetUnit(Enum):
    SECOND = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

def expand_format(fmt: str) -> str:
    """Replace shorthand tokens with their strftime equivalents.

    ``%%`` is left untouched so a literal percent sign survives.
    """
    return _TOKEN_RE.sub(lambda m: _SHORTHAND_TOKENS.get(m.group(1), m.group(0)), fmt)

def is_valid_pattern(fmt: str) -> bool:
    """True if every ``%`` directive in ``fmt`` is a known one.

    The C library passes unknown directives through or drops them
    depending on the platform, so they are rejected up front. A
    trailing lone ``%`` is rejected too.
    """
    if "%" in _TOKEN_RE.sub("", fmt):
        return False
    return all(token in _FORMAT_DIRECTIVES for token in _TOKEN_RE.findall(fmt))

def format_datetime(date_time: datetime, fmt: str) -> Optional[str]:
    """Format a datetime, or return None if the pattern is rejected.

    Unknown directives such as ``%Q`` are rejected rather than passed
    through to the output.
    """
    if not is_valid_pattern(fmt):
        return None
    try:
        return date_time.strftime(expand_format(fmt))
    except ValueError:
        return None

def format_current(fmt: str) -> Optional[str]:
    """Format the current local time."""
    return format_datetime(datetime.now().astimezone(), fmt)

def parse(content: str, fmt: str, tz: Optional[tzinfo] = None) -> datetime:
    """Parse a date-time string into an aware datetime.

    Args:
        content: Date-time text
        fmt: Pattern the text is expected to match
        tz: Time zone to attach; None means the local zone

    Returns:
        Timezone-aware datetime

    Raises:
        DateTimeParseError: if the content does not match the pattern
    """
    try:
        naive = datetime.strptime(content, expand_format(fmt))
    except ValueError as e:
        raise DateTimeParseError(f"Cannot parse {content!r} with {fmt!r}: {e}") from e

    if tz is None:
        return naive.astimezone()
    return naive.replace(tzinfo=tz)

def reformat(content: str, original_fmt: str, new_fmt: str) -> Optional[str]:
    """Re-render a date-time string in another pattern.

    >>> reformat("2023-04-01 12:00:00", "%F %T", "%F")
    '2023-04-01'

    Returns None when ``content`` does not match ``original_fmt``.
    """
    try:
        parsed = datetime.strptime(content, expand_format(original_fmt))
    except ValueError:
        return None
    return format_datetime(parsed, new_fmt)

def is_am(date_time: datetime) -> bool:
    return date_time.hour < 12

def is_pm(date_time: datetime) -> bool:
    return date_time.hour >= 12

def start_time_of_day(date_time: datetime) -> datetime:
    return date_time.replace(**_START_OF_DAY)

def end_time_of_day(date_time: datetime) -> datetime:
    return date_time.replace(**_END_OF_DAY)

def start_time_of_week(date_time: datetime) -> datetime:
    """Monday 00:00 of the week containing ``date_time``."""
    monday = date_time - timedelta(days=date_time.weekday())
    return start_time_of_day(monday)

def end_time_of_week(date_time: datetime) -> datetime:
    """Sunday 23:59:59.999999 of the week containing ``date_time``."""
    sunday = date_time + timedelta(days=6 - date_time.weekday())
    return end_time_of_day(sunday)

def start_time_of_month(date_time: datetime) -> datetime:
    return date_time.replace(day=1, **_START_OF_DAY)

def end_time_of_month(date_time: datetime) -> datetime:
    last_day = calendar.monthrange(date_time.year, date_time.month)[1]
    return date_time.replace(day=last_day, **_END_OF_DAY)

def start_time_of_year(date_time: datetime) -> datetime:
    return date_time.replace(month=1, day=1, **_START_OF_DAY)

def end_time_of_year(date_time: datetime) -> datetime:
    return date_time.replace(month=12, day=31, **_END_OF_DAY)

def offset(date_time: datetime, value: int, unit: DateTimeOffsetUnit) -> datetime:
    """Shift ``date_time`` by a signed amount of ``unit``."""
    return date_time + timedelta(**{unit.value: value})

def between(date_time1: datetime, date_time2: datetime) -> int:
    """Whole wall-clock seconds from ``date_time1`` to ``date_time2``.

    Offsets are ignored, so a DST transition between the two does not
    change the result. Fractions are truncated toward zero.
    """
    delta = date_time2.replace(tzinfo=None) - date_time1.replace(tzinfo=None)
    return int(delta.total_seconds())
