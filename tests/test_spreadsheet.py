"""Tests for the row-level spreadsheet comparison."""

import pytest

from pairview.core.spreadsheet import (
    Segment,
    SegmentLine,
    UnifiedDiffContent,
    UnifiedHunk,
    UnifiedLine,
    diff,
    read_sheets,
    split_unified_diff,
    unified_diff,
)
from pairview.utils.error_handling import FileAccessError


class TestReadSheets:
    """Test workbook reading."""

    def test_rows_rendered_with_tabs(self, make_workbook):
        path = make_workbook("a.xlsx", {"Data": [("name", "qty"), ("apple", 3), ("pear", None, "x")]})
        assert read_sheets(path) == {"Data": ["name\tqty", "apple\t3", "pear\t\tx"]}

    def test_sheet_order_kept(self, make_workbook):
        path = make_workbook("a.xlsx", {"B": [("1",)], "A": [("2",)]})
        assert list(read_sheets(path)) == ["B", "A"]

    def test_not_a_workbook(self, write_file):
        path = write_file("broken.xlsx", b"this is not a zip file")
        with pytest.raises(FileAccessError, match="Failed to open spreadsheet"):
            read_sheets(path)

    def test_missing_workbook(self, tmp_path):
        with pytest.raises(FileAccessError):
            read_sheets(str(tmp_path / "missing.xlsx"))


class TestSpreadsheetDiff:
    """Test the diff -> unified -> split pipeline."""

    def test_changed_row(self, make_workbook):
        old = make_workbook("old.xlsx", {"Sheet1": [("id", "qty"), ("a", 1), ("b", 2)]})
        new = make_workbook("new.xlsx", {"Sheet1": [("id", "qty"), ("a", 1), ("b", 5)]})

        split = split_unified_diff(old, new)

        assert split.old == [Segment("[Sheet1]", [SegmentLine("R3", "b\t2")])]
        assert split.new == [Segment("[Sheet1]", [SegmentLine("R3", "b\t5")])]

    def test_inserted_row_only_on_new_side(self, make_workbook):
        old = make_workbook("old.xlsx", {"S": [("a",), ("c",)]})
        new = make_workbook("new.xlsx", {"S": [("a",), ("b",), ("c",)]})

        split = split_unified_diff(old, new)

        assert split.old == [Segment("[S]", [])]
        assert split.new == [Segment("[S]", [SegmentLine("R2", "b")])]

    def test_unchanged_sheets_are_omitted(self, make_workbook):
        old = make_workbook("old.xlsx", {"Same": [("x",)], "Changed": [("1",)]})
        new = make_workbook("new.xlsx", {"Same": [("x",)], "Changed": [("2",)]})

        split = split_unified_diff(old, new)

        assert [s.title for s in split.old] == ["[Changed]"]
        assert [s.title for s in split.new] == ["[Changed]"]

    def test_sheet_only_in_new_workbook(self, make_workbook):
        old = make_workbook("old.xlsx", {"Main": [("x",)]})
        new = make_workbook("new.xlsx", {"Main": [("x",)], "Extra": [("e1",), ("e2",)]})

        sheets = diff(old, new)
        assert [s.name for s in sheets.sheets] == ["Main", "Extra"]

        split = unified_diff(sheets).split()
        assert split.old == [Segment("[Extra]", [])]
        assert split.new == [Segment("[Extra]", [SegmentLine("R1", "e1"), SegmentLine("R2", "e2")])]

    def test_identical_workbooks(self, make_workbook):
        old = make_workbook("old.xlsx", {"S": [("a", 1)]})
        new = make_workbook("new.xlsx", {"S": [("a", 1)]})

        split = split_unified_diff(old, new)
        assert split.old == [] and split.new == []


class TestUnifiedDiffContentSplit:
    def test_split_by_side(self):
        content = UnifiedDiffContent(
            hunks=[
                UnifiedHunk("[S]", [UnifiedLine("-", 4, "old"), UnifiedLine("+", 4, "new"), UnifiedLine("+", 5, "more")])
            ]
        )
        split = content.split()
        assert split.old == [Segment("[S]", [SegmentLine("R4", "old")])]
        assert split.new == [Segment("[S]", [SegmentLine("R4", "new"), SegmentLine("R5", "more")])]
