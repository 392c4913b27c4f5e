from __future__ import annotations

import os
import threading
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .logger import log

# Events that change what a directory listing shows
LISTING_EVENTS = frozenset({"created", "deleted", "moved", "modified"})


class _DebouncedHandler(FileSystemEventHandler):
    """Collapse bursts of filesystem events into one callback."""

    def __init__(self, callback: Callable[[], None], debounce_ms: int = 250) -> None:
        self._callback = callback
        self._debounce = max(0, int(debounce_ms)) / 1000.0
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()

    def _fire(self) -> None:
        try:
            self._callback()
        except (RuntimeError, OSError) as e:
            log.warning(f"[WATCH] Refresh callback failed: {e}")

    def schedule_refresh(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._debounce, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def on_any_event(self, event: FileSystemEvent):  # type: ignore[override]
        if getattr(event, "event_type", "") not in LISTING_EVENTS:
            return
        log.debug(f"[WATCH] {event.event_type} on {getattr(event, 'src_path', '')}")
        self.schedule_refresh()


class DirectoryWatcher:
    """Watch one directory (non-recursively) and call back when it changes.

    ``watch`` replaces the watched directory; ``stop`` is idempotent.
    """

    def __init__(self, on_change: Callable[[], None], debounce_ms: int = 250) -> None:
        self._handler = _DebouncedHandler(on_change, debounce_ms=debounce_ms)
        self._observer: Observer | None = None
        self._path: str | None = None

    @property
    def path(self) -> str | None:
        return self._path

    def watch(self, path: str) -> bool:
        """Start watching ``path``. Returns False if the observer could not start."""
        abs_path = os.path.abspath(path)
        if abs_path == self._path and self._observer is not None:
            return True
        self.stop()

        observer = Observer()
        try:
            observer.schedule(self._handler, abs_path, recursive=False)
            observer.start()
        except (OSError, RuntimeError) as e:
            log.warning(f"[WATCH] Failed to watch {abs_path}: {e}")
            return False

        self._observer = observer
        self._path = abs_path
        log.debug(f"[WATCH] Watching {abs_path}")
        return True

    def stop(self) -> None:
        self._handler.cancel()
        observer, self._observer, self._path = self._observer, None, None
        if observer is None:
            return
        try:
            observer.stop()
            observer.join(timeout=0.5)
        except (RuntimeError, OSError) as e:
            log.warning(f"[WATCH] Failed to stop observer: {e}")
