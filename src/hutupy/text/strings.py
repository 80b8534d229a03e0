"""String predicates and transforms."""

from typing import Iterable, List

def is_empty(s: str) -> bool:
    """True if the string has length 0."""
    return len(s) == 0

def is_empty_str(s: str) -> bool:
    return len(s) == 0

def is_not_empty(s: str) -> bool:
    return len(s) > 0

def is_blank(s: str) -> bool:
    """True if the string is empty or holds only whitespace."""
    return s.strip() == ""

def to_uppercase(s: str) -> str:
    return s.upper()

def to_lowercase(s: str) -> str:
    return s.lower()

def trim(s: str) -> str:
    return s.strip()

def trim_start(s: str) -> str:
    return s.lstrip()

def trim_end(s: str) -> str:
    return s.rstrip()

def reverse(s: str) -> str:
    """Reverse by code point."""
    return s[::-1]

def contains(s: str, pattern: str) -> bool:
    return pattern in s

def starts_with(s: str, prefix: str) -> bool:
    return s.startswith(prefix)

def ends_with(s: str, suffix: str) -> bool:
    return s.endswith(suffix)

def length(s: str) -> int:
    """Length in UTF-8 bytes, not characters.

    >>> length("你好")
    6
    """
    return len(s.encode("utf-8"))

def replace(s: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old`` with ``new``."""
    return s.replace(old, new)

def split(s: str, delimiter: str) -> List[str]:
    """Split on an exact delimiter, keeping empty fields.

    Args:
        s: String to split
        delimiter: Non-empty separator

    Returns:
        List of fields
    """
    if delimiter == "":
        raise ValueError("delimiter must not be empty")
    return s.split(delimiter)

def join(strings: Iterable[str], delimiter: str) -> str:
    return delimiter.join(strings)

def repeat(s: str, count: int) -> str:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return s * count

def substring(s: str, start: int, end: int) -> str:
    """Characters from ``start`` (inclusive) to ``end`` (exclusive).

    Unlike slicing, out-of-range bounds are rejected rather than clamped.

    Args:
        s: Source string
        start: First character index
        end: Index one past the last character

    Returns:
        The substring
    """
    if not 0 <= start <= end <= len(s):
        raise ValueError(
            f"invalid substring bounds [{start}, {end}) for string of length {len(s)}"
        )
    return s[start:end]
