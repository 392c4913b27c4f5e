"""Resolve a pair of paths into displayable content for both sides.

The comparison mode is computed once per call, first match wins:

- TEXT_TEXT: both paths are text-like
- TEXT_EMPTY / EMPTY_TEXT: one side is text-like, the other path is ""
- SPREADSHEET_SPREADSHEET: both paths end with ".xlsx"
- BINARY_BINARY: everything else, including mixed pairs such as text vs
  spreadsheet, which degrade to a hex comparison
"""

from __future__ import annotations

from enum import Enum

from pairview.core.charset import textfile_content
from pairview.core.classifier import is_spreadsheet, is_textfile
from pairview.core.hexdump import bytes_to_hex_dump
from pairview.core.spreadsheet import Segment, SheetsDiffer, split_unified_diff
from pairview.core.types import BINARY_CHARSET, EXCEL_CHARSET, ReadContent
from pairview.utils.io import read_bytes
from pairview.utils.logger import log


class ComparisonMode(Enum):
    TEXT_TEXT = "text/text"
    TEXT_EMPTY = "text/empty"
    EMPTY_TEXT = "empty/text"
    SPREADSHEET_SPREADSHEET = "spreadsheet/spreadsheet"
    BINARY_BINARY = "binary/binary"


def comparison_mode(old: str, new: str) -> ComparisonMode:
    """Classify the pair of paths."""
    old_is_textfile = is_textfile(old)
    new_is_textfile = is_textfile(new)

    if old_is_textfile and new_is_textfile:
        return ComparisonMode.TEXT_TEXT
    if old_is_textfile and not new:
        return ComparisonMode.TEXT_EMPTY
    if not old and new_is_textfile:
        return ComparisonMode.EMPTY_TEXT
    if is_spreadsheet(old) and is_spreadsheet(new):
        return ComparisonMode.SPREADSHEET_SPREADSHEET
    return ComparisonMode.BINARY_BINARY


def filepaths_content(old: str, new: str, sheets_differ: SheetsDiffer | None = None) -> list[ReadContent]:
    """Return the old and new side of a comparison, in that order.

    Args:
        old: Path of the old file, or "" when comparing against nothing
        new: Path of the new file, or "" when comparing against nothing
        sheets_differ: Spreadsheet comparison to use instead of the built-in one

    Raises:
        FileAccessError: If a file cannot be read or a spreadsheet cannot be parsed
    """
    mode = comparison_mode(old, new)
    log.debug(f"[RESOLVE] {old!r} vs {new!r}: {mode.value}")

    if mode is ComparisonMode.TEXT_TEXT:
        return [textfile_content(old), textfile_content(new)]
    if mode is ComparisonMode.TEXT_EMPTY:
        return [textfile_content(old), ReadContent()]
    if mode is ComparisonMode.EMPTY_TEXT:
        return [ReadContent(), textfile_content(new)]
    if mode is ComparisonMode.SPREADSHEET_SPREADSHEET:
        split = (sheets_differ or split_unified_diff)(old, new)
        return [excel_content(split.old), excel_content(split.new)]
    return [binary_content(old), binary_content(new)]


def excel_content(segments: list[Segment]) -> ReadContent:
    """Flatten spreadsheet diff segments into one block of text."""
    blocks = []
    for segment in segments:
        lines = [segment.title]
        for line in segment.lines:
            if line.pos is not None:
                lines.append(line.pos)
            if line.text is not None:
                lines.append(line.text)
        blocks.append("\n".join(lines))
    return ReadContent(charset=EXCEL_CHARSET, content="\n".join(blocks))


def binary_content(filepath: str) -> ReadContent:
    """Hex-render a file for raw byte comparison."""
    return ReadContent(charset=BINARY_CHARSET, content=bytes_to_hex_dump(read_bytes(filepath)))
