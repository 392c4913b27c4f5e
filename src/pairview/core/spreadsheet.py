"""Row-level spreadsheet comparison.

Workbooks are read with openpyxl (values only, no formulas) and each sheet is
turned into a list of row strings. Rows are aligned per sheet with
difflib's SequenceMatcher; only changed rows are reported.

The result goes through three stages so front ends can stop where they need:

- ``diff(old, new)`` -> ``SheetsDiff`` (raw opcodes per sheet)
- ``unified_diff(d)`` -> ``UnifiedDiffContent`` (one hunk per changed sheet)
- ``UnifiedDiffContent.split()`` -> ``SplitUnifiedDiff`` (old/new segments)
"""

from __future__ import annotations

import zipfile
from dataclasses import dataclass, field
from difflib import SequenceMatcher
from typing import Callable, Optional

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from pairview.utils.error_handling import FileAccessError
from pairview.utils.logger import log

CELL_SEPARATOR = "\t"


@dataclass(frozen=True)
class SegmentLine:
    """A changed row: its position marker and its rendered text."""

    pos: Optional[str] = None
    text: Optional[str] = None


@dataclass(frozen=True)
class Segment:
    title: str
    lines: list[SegmentLine] = field(default_factory=list)


@dataclass(frozen=True)
class SplitUnifiedDiff:
    """Per-sheet segments for each side of the comparison."""

    old: list[Segment] = field(default_factory=list)
    new: list[Segment] = field(default_factory=list)


@dataclass
class SheetDiff:
    """Opcodes for one sheet. A sheet missing on one side has no rows there."""

    name: str
    old_rows: list[str]
    new_rows: list[str]
    opcodes: list[tuple]

    @property
    def has_changes(self) -> bool:
        return any(tag != "equal" for tag, *_ in self.opcodes)


@dataclass
class SheetsDiff:
    old_path: str
    new_path: str
    sheets: list[SheetDiff] = field(default_factory=list)


@dataclass(frozen=True)
class UnifiedLine:
    """A changed row in unified form. ``side`` is "-" for old, "+" for new."""

    side: str
    row: int
    text: str


@dataclass
class UnifiedHunk:
    title: str
    lines: list[UnifiedLine] = field(default_factory=list)


@dataclass
class UnifiedDiffContent:
    hunks: list[UnifiedHunk] = field(default_factory=list)

    def split(self) -> SplitUnifiedDiff:
        """Separate each hunk into an old segment and a new segment."""
        old_segments: list[Segment] = []
        new_segments: list[Segment] = []
        for hunk in self.hunks:
            old_segments.append(Segment(hunk.title, _segment_lines(hunk, "-")))
            new_segments.append(Segment(hunk.title, _segment_lines(hunk, "+")))
        return SplitUnifiedDiff(old=old_segments, new=new_segments)


def _segment_lines(hunk: UnifiedHunk, side: str) -> list[SegmentLine]:
    return [SegmentLine(pos=f"R{line.row}", text=line.text) for line in hunk.lines if line.side == side]


def _cell_text(value) -> str:
    if value is None:
        return ""
    return str(value)


def _row_text(values: tuple) -> str:
    cells = [_cell_text(v) for v in values]
    while cells and cells[-1] == "":
        cells.pop()
    return CELL_SEPARATOR.join(cells)


def read_sheets(path: str) -> dict[str, list[str]]:
    """Read every sheet of a workbook as rendered row strings, in sheet order.

    Raises:
        FileAccessError: If the workbook cannot be opened or parsed
    """
    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as e:
        raise FileAccessError(f"Failed to open spreadsheet {path!r}: {e}", path) from e

    try:
        sheets = {}
        for worksheet in workbook.worksheets:
            sheets[worksheet.title] = [_row_text(row) for row in worksheet.iter_rows(values_only=True)]
        return sheets
    finally:
        workbook.close()


def diff(old_path: str, new_path: str) -> SheetsDiff:
    """Align the rows of every sheet present in either workbook."""
    old_sheets = read_sheets(old_path)
    new_sheets = read_sheets(new_path)

    names = list(old_sheets)
    names.extend(name for name in new_sheets if name not in old_sheets)

    result = SheetsDiff(old_path=old_path, new_path=new_path)
    for name in names:
        old_rows = old_sheets.get(name, [])
        new_rows = new_sheets.get(name, [])
        matcher = SequenceMatcher(None, old_rows, new_rows, autojunk=False)
        result.sheets.append(SheetDiff(name, old_rows, new_rows, matcher.get_opcodes()))
    log.debug(f"[XLSX] Compared {len(names)} sheets: {old_path} vs {new_path}")
    return result


def unified_diff(sheets_diff: SheetsDiff) -> UnifiedDiffContent:
    """Collect the changed rows of each sheet into one hunk per changed sheet."""
    content = UnifiedDiffContent()
    for sheet in sheets_diff.sheets:
        if not sheet.has_changes:
            continue
        hunk = UnifiedHunk(title=f"[{sheet.name}]")
        for opcode in sheet.opcodes:
            _process_opcode(opcode, sheet, hunk)
        content.hunks.append(hunk)
    return content


def _process_opcode(opcode: tuple, sheet: SheetDiff, hunk: UnifiedHunk) -> None:
    """Dispatch a single opcode to the matching handler."""
    tag, i1, i2, j1, j2 = opcode

    if tag == 'replace':
        _handle_old_rows(i1, i2, sheet, hunk)
        _handle_new_rows(j1, j2, sheet, hunk)
    elif tag == 'delete':
        _handle_old_rows(i1, i2, sheet, hunk)
    elif tag == 'insert':
        _handle_new_rows(j1, j2, sheet, hunk)


def _handle_old_rows(i1: int, i2: int, sheet: SheetDiff, hunk: UnifiedHunk) -> None:
    for index in range(i1, i2):
        hunk.lines.append(UnifiedLine("-", index + 1, sheet.old_rows[index]))


def _handle_new_rows(j1: int, j2: int, sheet: SheetDiff, hunk: UnifiedHunk) -> None:
    for index in range(j1, j2):
        hunk.lines.append(UnifiedLine("+", index + 1, sheet.new_rows[index]))


SheetsDiffer = Callable[[str, str], SplitUnifiedDiff]


def split_unified_diff(old_path: str, new_path: str) -> SplitUnifiedDiff:
    """Run the full pipeline; the default differ used by the content resolver."""
    return unified_diff(diff(old_path, new_path)).split()
