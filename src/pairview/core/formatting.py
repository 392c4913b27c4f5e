"""Human-readable number, size and time formatting for directory listings."""

from __future__ import annotations

from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_UNIT = 1024
# Largest unit first; the first threshold the size reaches wins
SIZE_UNITS: tuple[tuple[int, str], ...] = (
    (_UNIT ** 4, "TB"),
    (_UNIT ** 3, "GB"),
    (_UNIT ** 2, "MB"),
    (_UNIT, "KB"),
)


def comma_separated_number(num: int) -> str:
    """Insert a comma every three digits counting from the right.

    >>> comma_separated_number(1234567)
    '1,234,567'
    """
    digits = str(num)
    groups = []
    while len(digits) > 3:
        groups.append(digits[-3:])
        digits = digits[:-3]
    groups.append(digits)
    return ",".join(reversed(groups))


def human_readable_size(size: int) -> str:
    """Render a byte count with a 1024-based unit and two truncated decimals.

    Sizes below 1 KB stay in plain bytes without decimals:

    >>> human_readable_size(1023)
    '1,023 bytes'
    >>> human_readable_size(1536)
    '1.50 KB'
    """
    for threshold, unit in SIZE_UNITS:
        if size >= threshold:
            # Integer arithmetic keeps the truncation exact for large sizes
            integer, remainder = divmod(size, threshold)
            hundredths = remainder * 100 // threshold
            return f"{comma_separated_number(integer)}.{hundredths:02d} {unit}"
    return f"{comma_separated_number(size)} bytes"


def format_timestamp(mtime: float, fmt: str = TIMESTAMP_FORMAT) -> str:
    """Format a POSIX modification time in local time."""
    return datetime.fromtimestamp(mtime).strftime(fmt)
