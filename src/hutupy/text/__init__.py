"""String helpers and hex codec."""

from .strings import (
    is_empty, is_empty_str, is_not_empty, is_blank,
    to_uppercase, to_lowercase, trim, trim_start, trim_end, reverse,
    contains, starts_with, ends_with, length,
    replace, split, join, repeat, substring,
)
from .hex_codec import hex_encoding, hex_decoding

__all__ = [
    "is_empty", "is_empty_str", "is_not_empty", "is_blank",
    "to_uppercase", "to_lowercase", "trim", "trim_start", "trim_end", "reverse",
    "contains", "starts_with", "ends_with", "length",
    "replace", "split", "join", "repeat", "substring",
    "hex_encoding", "hex_decoding",
]
