"""Unix timestamp arithmetic, in whole seconds."""

import time

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

def current_timestamp() -> int:
    """Seconds since the Unix epoch."""
    return int(time.time())

def current_timestamp_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000

def format_timestamp(timestamp: int) -> str:
    return str(timestamp)

def current_date() -> str:
    """Current timestamp as a decimal string."""
    return format_timestamp(current_timestamp())

def diff_seconds(timestamp1: int, timestamp2: int) -> int:
    """Absolute difference between two timestamps."""
    return abs(timestamp1 - timestamp2)

def is_future(timestamp: int) -> bool:
    return timestamp > current_timestamp()

def is_past(timestamp: int) -> bool:
    return timestamp < current_timestamp()

def add_seconds(timestamp: int, seconds: int) -> int:
    return timestamp + seconds

def subtract_seconds(timestamp: int, seconds: int) -> int:
    """Subtract seconds, saturating at the epoch."""
    return max(timestamp - seconds, 0)

def get_minutes(timestamp: int) -> int:
    return timestamp // SECONDS_PER_MINUTE

def get_hours(timestamp: int) -> int:
    return timestamp // SECONDS_PER_HOUR

def get_days(timestamp: int) -> int:
    return timestamp // SECONDS_PER_DAY
