"""File system helpers."""

from .files import (
    InvalidPathError, read_file, write_file, append_file, delete_file, read_dirs,
)

__all__ = ["InvalidPathError", "read_file", "write_file", "append_file",
           "delete_file", "read_dirs"]
