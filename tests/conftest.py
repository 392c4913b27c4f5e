import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# Ensure local src path is importable without an install
_here = os.path.dirname(os.path.dirname(__file__))
_src = os.path.join(_here, "src")
if os.path.isdir(_src) and _src not in sys.path:
    sys.path.insert(0, _src)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], str]:
    """Write raw bytes to a file under tmp_path and return its path."""

    def _write(name: str, data: bytes) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return str(path)

    return _write


@pytest.fixture
def make_workbook(tmp_path: Path) -> Callable[[str, dict], str]:
    """Create an .xlsx file from {sheet name: list of rows}."""
    from openpyxl import Workbook

    def _make(name: str, sheets: dict) -> str:
        workbook = Workbook()
        workbook.remove(workbook.active)
        for title, rows in sheets.items():
            worksheet = workbook.create_sheet(title=title)
            for row in rows:
                worksheet.append(list(row))
        path = tmp_path / name
        workbook.save(path)
        return str(path)

    return _make


@pytest.fixture
def sample_directory(tmp_path: Path) -> Path:
    """A directory with two subdirectories and three files of known sizes."""
    (tmp_path / "zeta").mkdir()
    (tmp_path / "Alpha").mkdir()
    (tmp_path / "notes.txt").write_text("hello\n", encoding="utf-8")
    (tmp_path / "Image.png").write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 2040)
    (tmp_path / "data.bin").write_bytes(b"\x01" * 1024)
    return tmp_path
