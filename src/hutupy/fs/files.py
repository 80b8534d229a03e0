"""File read/write/append/delete and directory listing.

Paths are validated before touching the filesystem: a blank path raises
InvalidPathError. Anything the platform reports (missing file, permission
denied, ...) propagates unchanged as an OSError subclass.
"""

from pathlib import Path
from typing import List, Union

from ..utils.logging import get_logger

logger = get_logger("hutupy_files")

PathLike = Union[str, Path]

class InvalidPathError(ValueError):
    """Raised for an empty or whitespace-only path."""

def _check_path(path: PathLike) -> Path:
    if isinstance(path, str) and path.strip() == "":
        raise InvalidPathError("Path must not be blank")
    return Path(path)

def read_file(path: PathLike, encoding: str = "utf-8") -> str:
    """Read a whole text file.

    Args:
        path: File path
        encoding: Text encoding

    Returns:
        File contents
    """
    file_path = _check_path(path)
    with open(file_path, "r", encoding=encoding) as f:
        return f.read()

def write_file(path: PathLike, contents: str, encoding: str = "utf-8") -> None:
    """Create or truncate a file and write ``contents`` to it."""
    file_path = _check_path(path)
    with open(file_path, "w", encoding=encoding) as f:
        f.write(contents)
    logger.debug(f"Wrote {file_path}")

def append_file(path: PathLike, contents: str, encoding: str = "utf-8") -> int:
    """Append to a file, creating it if needed.

    Returns:
        Number of bytes appended
    """
    file_path = _check_path(path)
    data = contents.encode(encoding)
    with open(file_path, "ab") as f:
        written = f.write(data)
    logger.debug(f"Appended {written} bytes to {file_path}")
    return written

def delete_file(path: PathLike) -> None:
    file_path = _check_path(path)
    file_path.unlink()
    logger.debug(f"Deleted {file_path}")

def read_dirs(path: PathLike) -> List[Path]:
    """List the immediate entries of a directory, sorted by name."""
    dir_path = _check_path(path)
    return sorted(dir_path.iterdir())
