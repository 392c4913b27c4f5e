"""Per-OS behavior, chosen once at startup.

Callers take a ``Platform`` argument (defaulting to ``current_platform()``)
instead of branching on ``sys.platform`` themselves.
"""

from __future__ import annotations

import shutil
import sys
from dataclasses import dataclass
from functools import lru_cache

from pairview.utils.logger import log

WINDOWS_EXTENDED_LENGTH_PATH_PREFIX = "\\\\?\\"

LINUX_FILE_MANAGERS: tuple[str, ...] = ("nautilus", "dolphin", "nemo", "thunar")
LINUX_FILE_MANAGER_FALLBACK = "xdg-open"


@dataclass(frozen=True)
class Platform:
    """Base capability set: paths are displayed as resolved."""

    name: str = "posix"

    def normalize_path(self, path: str) -> str:
        return path

    def file_manager_command(self) -> str:
        return LINUX_FILE_MANAGER_FALLBACK


@dataclass(frozen=True)
class WindowsPlatform(Platform):
    name: str = "windows"

    def normalize_path(self, path: str) -> str:
        """Strip the extended-length prefix that resolving can introduce."""
        if path.startswith(WINDOWS_EXTENDED_LENGTH_PATH_PREFIX):
            return path[len(WINDOWS_EXTENDED_LENGTH_PATH_PREFIX):]
        return path

    def file_manager_command(self) -> str:
        return "explorer"


@dataclass(frozen=True)
class MacPlatform(Platform):
    name: str = "macos"

    def file_manager_command(self) -> str:
        return "open"


@dataclass(frozen=True)
class LinuxPlatform(Platform):
    name: str = "linux"

    def file_manager_command(self) -> str:
        """Return the first installed desktop file manager."""
        for candidate in LINUX_FILE_MANAGERS:
            if shutil.which(candidate):
                return candidate
        return LINUX_FILE_MANAGER_FALLBACK


def detect_platform(platform_name: str | None = None) -> Platform:
    """Build the capability object for ``platform_name`` (default: this host)."""
    platform_name = platform_name or sys.platform
    if platform_name.startswith("win"):
        return WindowsPlatform()
    if platform_name == "darwin":
        return MacPlatform()
    if platform_name.startswith("linux"):
        return LinuxPlatform()
    log.debug(f"[PLATFORM] No dedicated support for {platform_name!r}, using generic POSIX behavior")
    return Platform()


@lru_cache(maxsize=1)
def current_platform() -> Platform:
    """Platform of the running process, detected on first use."""
    return detect_platform()
