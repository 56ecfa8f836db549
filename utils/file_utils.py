import os
from typing import Any

__all__ = [
    "get_file_size",
    "format_file_size",
]

_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")


def get_file_size(path: str) -> int:
    """Return file size in bytes, or 0 if the file vanished or is unreadable."""
    try:
        return os.path.getsize(path)
    except OSError:
        return 0


def format_file_size(num_bytes: Any) -> str:
    """Size for the estimate and summary lines, in binary units.

    Whole bytes print as an integer, larger units with one decimal.
    Anything that is not a non-negative number prints as ``0 B``.
    """
    try:
        size = float(num_bytes)
    except (TypeError, ValueError):
        return "0 B"
    if not size >= 0 or size == float("inf"):
        return "0 B"

    unit = _UNITS[0]
    for unit in _UNITS:
        if size < 1024 or unit == _UNITS[-1]:
            break
        size /= 1024
    if unit == "B":
        return f"{int(size)} B"
    return f"{size:.1f} {unit}"
