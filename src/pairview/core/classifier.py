"""Decide how a path can take part in a comparison.

The text check is deliberately shallow: a path is "text-like" when its first
line reads as UTF-8. Files that pass but carry NUL bytes further in are
caught later by the charset decoder and rendered as hex.
"""

from __future__ import annotations

import os

from pairview.utils.error_handling import FileAccessError
from pairview.utils.io import read_first_line
from pairview.utils.logger import log

SPREADSHEET_EXTENSION = ".xlsx"

# Formats no line or cell diff can make sense of
BINARY_ONLY_EXTENSIONS: frozenset[str] = frozenset({
    # images
    ".bmp", ".gif", ".ico", ".jpeg", ".jpg", ".png", ".psd", ".tif", ".tiff", ".webp",
    # audio / video
    ".avi", ".flac", ".mkv", ".mov", ".mp3", ".mp4", ".ogg", ".wav", ".webm", ".wmv",
    # archives
    ".7z", ".bz2", ".gz", ".jar", ".rar", ".tar", ".xz", ".zip",
    # executables and libraries
    ".a", ".bin", ".class", ".dll", ".dylib", ".exe", ".o", ".pyc", ".so",
    # documents without a structured diff
    ".doc", ".docx", ".pdf", ".ppt", ".pptx", ".xls",
    # fonts and databases
    ".otf", ".ttf", ".woff", ".woff2", ".db", ".sqlite", ".sqlite3",
})


def is_textfile(filepath: str) -> bool:
    """Return True if the first line of ``filepath`` can be read as UTF-8."""
    try:
        line = read_first_line(filepath)
    except FileAccessError:
        return False
    try:
        line.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def is_spreadsheet(filepath: str) -> bool:
    return filepath.endswith(SPREADSHEET_EXTENSION)


def validate_filepath(filepath: str) -> bool | None:
    """Check whether ``filepath`` can be compared.

    Returns None when the path does not exist, otherwise whether it is
    text-like or a spreadsheet.
    """
    if not os.path.exists(filepath):
        log.debug(f"[CLASSIFY] {filepath!r} does not exist")
        return None
    return is_textfile(filepath) or is_spreadsheet(filepath)


def binary_comparison_only(filepath: str) -> bool:
    """Return True for file types only a raw byte comparison makes sense for."""
    _, ext = os.path.splitext(filepath)
    return ext.lower() in BINARY_ONLY_EXTENSIONS
