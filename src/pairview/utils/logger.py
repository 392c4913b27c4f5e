from __future__ import annotations

import os
import sys
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Any, TextIO

# Leveled logger shared by the whole package; terminal output can be switched
# off while the Textual app runs, file output (DEBUG=1) keeps going
# Use: from pairview.utils.logger import log
# log.warning(f"[LIST] skipped {name}")
# log("plain call, INFO level")

DEBUG_LOG_PATH = Path("/tmp/pairview_debug.log")
LEVEL_ENV_VAR = "PAIRVIEW_LOG_LEVEL"

RESET = "\033[0m"


class LogLevel(IntEnum):
    """Log severity levels."""
    DEBUG = 10
    INFO = 20
    WARN = 30
    WARNING = 30  # Alias for WARN
    ERROR = 40


LEVEL_COLORS = {
    LogLevel.DEBUG: "\033[90m",  # Gray
    LogLevel.INFO: RESET,
    LogLevel.WARN: "\033[93m",   # Yellow
    LogLevel.ERROR: "\033[91m",  # Red
}


class Logger:
    """Leveled logger writing to the terminal and, optionally, a file."""

    def __init__(self):
        self._level = LogLevel.INFO
        self._file_handle: TextIO | None = None
        self._console_enabled = True

        self._configure_from_env()

    def _configure_from_env(self) -> None:
        if os.environ.get("DEBUG") == "1":
            self._level = LogLevel.DEBUG
            self.set_file_output(DEBUG_LOG_PATH)

        level_name = os.environ.get(LEVEL_ENV_VAR, "").upper()
        if level_name in LogLevel.__members__:
            self._level = LogLevel[level_name]

    @property
    def level(self) -> LogLevel:
        return self._level

    def set_level(self, level: LogLevel) -> None:
        self._level = level

    def set_file_output(self, path: Path, append: bool = True) -> None:
        """Mirror every record to ``path``; silently stays off if it cannot be opened."""
        if self._file_handle:
            self._file_handle.close()
        try:
            self._file_handle = open(path, "a" if append else "w", encoding="utf-8")
        except OSError:
            self._file_handle = None

    def set_console_output(self, enabled: bool) -> None:
        """Turn terminal output on or off (off while a full-screen app owns the terminal)."""
        self._console_enabled = enabled

    def _write(self, level: LogLevel, *args: Any, sep: str = " ") -> None:
        if level < self._level:
            return

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        line = f"{timestamp} [{level.name:8}] {sep.join(str(a) for a in args)}"

        if self._file_handle:
            try:
                self._file_handle.write(line + "\n")
                self._file_handle.flush()
            except OSError:
                pass

        if not self._console_enabled:
            return
        stream = sys.stderr if level >= LogLevel.WARN else sys.stdout
        try:
            if stream.isatty():
                line = f"{LEVEL_COLORS[level]}{line}{RESET}"
            stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError):
            # Never raise from logging
            pass

    def debug(self, *args: Any, sep: str = " ") -> None:
        self._write(LogLevel.DEBUG, *args, sep=sep)

    def info(self, *args: Any, sep: str = " ") -> None:
        self._write(LogLevel.INFO, *args, sep=sep)

    def warn(self, *args: Any, sep: str = " ") -> None:
        self._write(LogLevel.WARN, *args, sep=sep)

    def warning(self, *args: Any, sep: str = " ") -> None:
        """Alias for warn()."""
        self.warn(*args, sep=sep)

    def error(self, *args: Any, sep: str = " ") -> None:
        self._write(LogLevel.ERROR, *args, sep=sep)

    def __call__(self, *args: Any, sep: str = " ") -> None:
        """Log at INFO level."""
        self.info(*args, sep=sep)


# Singleton logger instance
log = Logger()
