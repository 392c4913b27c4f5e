"""Tests for the content resolver and its comparison modes."""

from unittest.mock import Mock

import pytest

from pairview.core.hexdump import bytes_to_hex_dump
from pairview.core.resolver import (
    ComparisonMode,
    binary_content,
    comparison_mode,
    excel_content,
    filepaths_content,
)
from pairview.core.spreadsheet import Segment, SegmentLine, SplitUnifiedDiff
from pairview.core.types import ReadContent
from pairview.utils.error_handling import FileAccessError

BINARY_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


class TestComparisonMode:
    """The first matching rule decides the mode."""

    def test_text_text(self, write_file):
        old = write_file("a.txt", b"a\n")
        new = write_file("b.txt", b"b\n")
        assert comparison_mode(old, new) is ComparisonMode.TEXT_TEXT

    def test_text_empty(self, write_file):
        assert comparison_mode(write_file("a.txt", b"a\n"), "") is ComparisonMode.TEXT_EMPTY

    def test_empty_text(self, write_file):
        assert comparison_mode("", write_file("b.txt", b"b\n")) is ComparisonMode.EMPTY_TEXT

    def test_spreadsheets(self):
        """Spreadsheet mode only looks at the extension."""
        assert comparison_mode("a.xlsx", "b.xlsx") is ComparisonMode.SPREADSHEET_SPREADSHEET

    def test_text_files_named_xlsx_are_text(self, write_file):
        """Text-like wins over the spreadsheet extension."""
        old = write_file("a.xlsx", b"not really a workbook\n")
        new = write_file("b.xlsx", b"me neither\n")
        assert comparison_mode(old, new) is ComparisonMode.TEXT_TEXT

    def test_mixed_text_and_spreadsheet_degrades_to_binary(self, write_file):
        old = write_file("a.txt", b"text\n")
        new = write_file("b.xlsx", b"PK\x03\x04\xff\xfe")
        assert comparison_mode(old, new) is ComparisonMode.BINARY_BINARY

    def test_binary_pair(self, write_file):
        old = write_file("a.png", BINARY_BYTES)
        new = write_file("b.png", BINARY_BYTES + b"\x01")
        assert comparison_mode(old, new) is ComparisonMode.BINARY_BINARY


class TestFilepathsContent:
    """Test the content produced for each mode."""

    def test_both_text(self, write_file):
        old = write_file("a.txt", b"old\n")
        new = write_file("b.txt", "新しい\n".encode("utf-8"))

        assert filepaths_content(old, new) == [
            ReadContent(charset="UTF-8", content="old\n"),
            ReadContent(charset="UTF-8", content="新しい\n"),
        ]

    def test_text_against_nothing_and_mirror(self, write_file):
        """Comparing against "" yields a default ReadContent on that side."""
        path = write_file("a.txt", b"only side\n")
        decoded = ReadContent(charset="UTF-8", content="only side\n")

        assert filepaths_content(path, "") == [decoded, ReadContent()]
        assert filepaths_content("", path) == [ReadContent(), decoded]

    def test_text_with_nul_is_bytes_array(self, write_file):
        """Files that pass the first-line check but contain NUL are hex dumps."""
        old = write_file("a.dat", b"head\n\x00")
        new = write_file("b.txt", b"plain\n")

        old_content, new_content = filepaths_content(old, new)
        assert old_content.charset == "(bytes array)"
        assert old_content.content == "68 65 61 64 0A 00\n"
        assert new_content.charset == "UTF-8"

    def test_spreadsheets_use_differ(self):
        """Both sides are flattened and labeled (Excel)."""
        differ = Mock(
            return_value=SplitUnifiedDiff(
                old=[Segment("[Sheet1]", [SegmentLine("R2", "a\t1")])],
                new=[Segment("[Sheet1]", [SegmentLine("R2", "a\t2")])],
            )
        )

        old_content, new_content = filepaths_content("a.xlsx", "b.xlsx", sheets_differ=differ)

        differ.assert_called_once_with("a.xlsx", "b.xlsx")
        assert old_content == ReadContent(charset="(Excel)", content="[Sheet1]\nR2\na\t1")
        assert new_content == ReadContent(charset="(Excel)", content="[Sheet1]\nR2\na\t2")

    def test_real_workbooks_through_default_differ(self, make_workbook):
        """Only the changed sheet shows up, one row per side."""
        old = make_workbook("old.xlsx", {"Sheet1": [("name", "qty"), ("apple", 1)], "Notes": [("same",)]})
        new = make_workbook("new.xlsx", {"Sheet1": [("name", "qty"), ("apple", 2)], "Notes": [("same",)]})

        old_content, new_content = filepaths_content(old, new)

        assert old_content == ReadContent(charset="(Excel)", content="[Sheet1]\nR2\napple\t1")
        assert new_content == ReadContent(charset="(Excel)", content="[Sheet1]\nR2\napple\t2")

    def test_binary_fallback(self, write_file):
        old = write_file("a.png", BINARY_BYTES)
        new = write_file("b.png", b"\xff")

        old_content, new_content = filepaths_content(old, new)
        assert old_content == ReadContent(charset="(binary)", content=bytes_to_hex_dump(BINARY_BYTES))
        assert new_content == ReadContent(charset="(binary)", content="FF\n")

    def test_binary_fallback_with_missing_side_raises(self, write_file):
        """Unreadable paths surface as a descriptive error, not a crash."""
        old = write_file("a.png", BINARY_BYTES)
        with pytest.raises(FileAccessError, match="Failed to read"):
            filepaths_content(old, "")

    def test_nothing_against_nothing_raises(self):
        with pytest.raises(FileAccessError):
            filepaths_content("", "")


class TestExcelContent:
    """Test flattening of spreadsheet diff segments."""

    def test_optional_pos_and_text(self):
        segments = [
            Segment("[First]", [SegmentLine("R1", "x"), SegmentLine(None, "no pos"), SegmentLine("R9", None)]),
            Segment("[Second]", []),
        ]
        result = excel_content(segments)
        assert result.charset == "(Excel)"
        assert result.content == "[First]\nR1\nx\nno pos\nR9\n[Second]"

    def test_no_segments(self):
        assert excel_content([]) == ReadContent(charset="(Excel)", content="")


class TestBinaryContent:
    def test_empty_file(self, write_file):
        assert binary_content(write_file("empty.bin", b"")) == ReadContent(charset="(binary)", content="")


class TestReadContent:
    def test_default_is_empty_side(self):
        assert ReadContent().to_dict() == {"charset": "", "content": ""}
