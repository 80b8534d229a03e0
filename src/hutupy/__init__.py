"""
hutupy

Small, independent helpers: strings, hex, timestamps, date-times,
arithmetic and statistics, files, pagination, and a stopwatch.
"""

__version__ = "0.1.0"

from .utils.logging import get_logger
from .utils.timers import Stopwatch, Timer
from .dates.datetimes import DateTimeOffsetUnit, DateTimeParseError, reformat
from .fs.files import InvalidPathError
from .paging.pagination import page_to_range, total_pages, page_rainbow
from .text.hex_codec import hex_encoding, hex_decoding

__all__ = [
    "get_logger",
    "Stopwatch",
    "Timer",
    "DateTimeOffsetUnit",
    "DateTimeParseError",
    "reformat",
    "InvalidPathError",
    "page_to_range",
    "total_pages",
    "page_rainbow",
    "hex_encoding",
    "hex_decoding",
]
