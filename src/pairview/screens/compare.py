"""Side-by-side view of a resolved comparison.

Shows the old and new ``ReadContent`` next to each other with their charset
labels. Content is shown as plain text (no markup) and cut at the configured
render limit.
"""

from __future__ import annotations

import os

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Static

from pairview.core.resolver import filepaths_content
from pairview.core.types import ReadContent
from pairview.utils.config import config
from pairview.utils.error_handling import PairviewError
from pairview.utils.logger import log
from pairview.widgets.footer import Footer
from pairview.widgets.header import Header


def truncate_lines(content: str, max_lines: int) -> tuple[str, bool]:
    """Keep at most ``max_lines`` lines. Returns (text, truncated)."""
    lines = content.splitlines(keepends=True)
    if len(lines) <= max_lines:
        return content, False
    return "".join(lines[:max_lines]), True


class CompareScreen(Screen):
    """Old and new content of a file pair, side by side."""

    BINDINGS = [
        ("q", "go_back", "Back"),
        ("escape", "go_back", "Back"),
    ]

    DEFAULT_CSS = """
    #compare-panes {
        height: 1fr;
    }
    .pane {
        width: 1fr;
        border: round $primary;
    }
    .pane-label {
        height: 1;
        background: $boost;
        text-style: bold;
    }
    """

    def __init__(self, old_path: str = "", new_path: str = ""):
        super().__init__()
        self.old_path = old_path
        self.new_path = new_path
        self.contents: list[ReadContent] = []
        self.error_message: str | None = None
        self._max_render_lines = config.max_render_lines

    def compose(self) -> ComposeResult:
        yield Header(page_name="Compare")
        with Horizontal(id="compare-panes"):
            for side in ("old", "new"):
                with Vertical(classes="pane"):
                    yield Static("", id=f"{side}-label", classes="pane-label")
                    with VerticalScroll():
                        yield Static("", id=f"{side}-content")
        yield Footer(text=" [orange1]q[/orange1] Back")

    def on_mount(self) -> None:
        try:
            self.contents = filepaths_content(self.old_path, self.new_path)
        except PairviewError as e:
            log.error(f"[RESOLVE] Failed to compare {self.old_path!r} and {self.new_path!r}: {e}")
            self.error_message = str(e)
            self.contents = [ReadContent(), ReadContent()]

        for side, path, read in zip(("old", "new"), (self.old_path, self.new_path), self.contents):
            self.query_one(f"#{side}-label", Static).update(Text(self._label(path, read)))
            self.query_one(f"#{side}-content", Static).update(Text(self._body(read)))

    def _label(self, path: str, read: ReadContent) -> str:
        name = os.path.basename(path) if path else "(none)"
        return f"{name}  [{read.charset}]" if read.charset else name

    def _body(self, read: ReadContent) -> str:
        if self.error_message:
            return f"[Error] {self.error_message}"
        text, truncated = truncate_lines(read.content, self._max_render_lines)
        if truncated:
            text += f"\n... (showing first {self._max_render_lines} lines)"
        return text

    def action_go_back(self) -> None:
        self.app.pop_screen()
