"""File browser pane: pick the old and new side of a comparison.

Key responsibilities:
- Render ``list_dir`` output (directories first, then files) in a table.
- Descend into directories on Enter; pick files as old, then new.
- Keep the listing current with a directory watcher.
"""

from __future__ import annotations

import os

from rich.text import Text
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import DataTable, Static

from pairview.core.classifier import validate_filepath
from pairview.core.listing import list_dir
from pairview.core.types import ListDirResponse
from pairview.screens.compare import CompareScreen
from pairview.utils.dir_watcher import DirectoryWatcher
from pairview.utils.error_handling import PairviewError
from pairview.utils.logger import log
from pairview.widgets.footer import Footer
from pairview.widgets.header import Header

PARENT_KEY = "parent:.."


class BrowserScreen(Screen):
    """Directory table plus the current old/new selection."""

    BINDINGS = [
        ("c", "compare", "Compare"),
        ("backspace", "parent_dir", "Parent"),
        ("x", "clear_selection", "Clear"),
        ("q", "quit", "Quit"),
    ]

    DEFAULT_CSS = """
    #current-dir, #selection {
        height: 1;
        padding: 0 1;
    }
    #listing {
        height: 1fr;
    }
    """

    def __init__(self, start_dir: str = "", preload: str | None = None, watch: bool = True):
        super().__init__()
        self.start_dir = start_dir
        self.old_path = preload or ""
        self.new_path = ""
        self.listing: ListDirResponse | None = None
        self._table: DataTable | None = None
        self._watcher = DirectoryWatcher(self._directory_changed) if watch else None

    def compose(self) -> ComposeResult:
        yield Header(page_name="Browse")
        yield Static("", id="current-dir")
        yield Static("", id="selection")
        yield DataTable(id="listing", zebra_stripes=True, cursor_type="row")
        yield Footer(text=self._footer_text())

    def _footer_text(self) -> str:
        return (
            " [orange1]Enter[/orange1] Open/Pick    "
            "[orange1]c[/orange1] Compare    "
            "[orange1]x[/orange1] Clear    "
            "[orange1]Backspace[/orange1] Parent    "
            "[orange1]q[/orange1] Quit"
        )

    def on_mount(self) -> None:
        self._table = self.query_one("#listing", DataTable)
        self._table.add_columns("Name", "Size", "Modified", "Binary only")
        self.load_dir(self.start_dir)
        self._update_selection()

    def on_unmount(self) -> None:
        if self._watcher:
            self._watcher.stop()

    def load_dir(self, path: str) -> bool:
        """List ``path`` into the table. Returns False and keeps the old view on error."""
        try:
            listing = list_dir(path)
        except PairviewError as e:
            log.warning(f"[LIST] {e}")
            self.notify(str(e), severity="error")
            return False

        self.listing = listing
        self._render_listing()
        if self._watcher:
            self._watcher.watch(listing.current_dir)
        return True

    def refresh_listing(self) -> None:
        if self.listing is not None:
            self.load_dir(self.listing.current_dir)

    def _directory_changed(self) -> None:
        # Called from the watcher thread
        self.app.call_from_thread(self.refresh_listing)

    def _render_listing(self) -> None:
        table = self._table
        listing = self.listing
        if table is None or listing is None:
            return

        table.clear()
        self.query_one("#current-dir", Static).update(Text(listing.current_dir))

        if os.path.dirname(listing.current_dir) != listing.current_dir:
            table.add_row(Text("..", style="bold"), "", "", "", key=PARENT_KEY)
        for name in listing.dirs:
            table.add_row(Text(f"{name}/", style="bold"), "<dir>", "", "", key=f"dir:{name}")
        for attr in listing.files:
            table.add_row(
                attr.name,
                Text(attr.human_readable_size, justify="right"),
                attr.last_modified,
                "yes" if attr.binary_comparison_only else "",
                key=f"file:{attr.name}",
            )

    def _update_selection(self) -> None:
        old = self.old_path or "-"
        new = self.new_path or "-"
        self.query_one("#selection", Static).update(Text(f"old: {old}    new: {new}"))

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        key = event.row_key.value or ""
        kind, _, name = key.partition(":")
        if self.listing is None:
            return
        if kind == "parent":
            self.action_parent_dir()
        elif kind == "dir":
            self.load_dir(os.path.join(self.listing.current_dir, name))
        elif kind == "file":
            self.pick_file(os.path.join(self.listing.current_dir, name))

    def pick_file(self, path: str) -> None:
        """Fill the old side first, then the new side; a third pick starts over."""
        if validate_filepath(path) is None:
            self.notify(f"No such file: {path}", severity="warning")
            return
        if not self.old_path or self.new_path:
            self.old_path, self.new_path = path, ""
        else:
            self.new_path = path
        self._update_selection()

    def action_clear_selection(self) -> None:
        self.old_path = ""
        self.new_path = ""
        self._update_selection()

    def action_parent_dir(self) -> None:
        if self.listing is None:
            return
        parent = os.path.dirname(self.listing.current_dir)
        if parent and parent != self.listing.current_dir:
            self.load_dir(parent)

    def action_compare(self) -> None:
        if not self.old_path and not self.new_path:
            self.notify("Pick at least one file to compare", severity="warning")
            return
        self.app.push_screen(CompareScreen(self.old_path, self.new_path))

    def action_quit(self) -> None:
        self.app.exit()
