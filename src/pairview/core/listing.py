"""Directory listing for the file browser pane.

Policy: a single unreadable entry (dangling symlink, permission problem on
stat) is logged and skipped; only failing to open the directory itself is an
error for the caller.
"""

from __future__ import annotations

import os

from pairview.core.classifier import binary_comparison_only
from pairview.core.formatting import comma_separated_number, format_timestamp, human_readable_size
from pairview.core.platform import Platform, current_platform
from pairview.core.types import FileAttr, ListDirResponse
from pairview.utils.error_handling import FileAccessError, describe_os_error, log_file_error
from pairview.utils.logger import log


def target_dir(current_dir: str, platform: Platform | None = None) -> str:
    """Resolve the directory to list.

    An empty string means the working directory. Anything else must exist and
    is canonicalized, then normalized for display by the platform.
    """
    platform = platform or current_platform()
    if not current_dir:
        # Only a broken host environment makes this raise
        resolved = os.getcwd()
    else:
        try:
            resolved = os.path.realpath(current_dir, strict=True)
        except OSError as e:
            raise FileAccessError(f"Invalid path: {current_dir} ({describe_os_error(e)})", current_dir) from e
    return platform.normalize_path(resolved)


def file_attr(entry: os.DirEntry, stat_result: os.stat_result) -> FileAttr:
    """Build the listing row for a non-directory entry."""
    size = stat_result.st_size
    return FileAttr(
        name=entry.name,
        bytes_size=f"{comma_separated_number(size)} bytes",
        human_readable_size=human_readable_size(size),
        last_modified=format_timestamp(stat_result.st_mtime),
        binary_comparison_only=binary_comparison_only(entry.path),
    )


def list_dir(current_dir: str, platform: Platform | None = None) -> ListDirResponse:
    """List the directories and files in ``current_dir``.

    Raises:
        FileAccessError: If the directory cannot be resolved or opened
    """
    resolved = target_dir(current_dir, platform)

    dirs: list[str] = []
    files: list[FileAttr] = []

    try:
        with os.scandir(resolved) as entries:
            for entry in entries:
                try:
                    if entry.is_dir():
                        dirs.append(entry.name)
                        continue
                    files.append(file_attr(entry, entry.stat()))
                except (OSError, ValueError, OverflowError) as e:
                    log_file_error(entry.path, "reading metadata of", e)
    except OSError as e:
        raise FileAccessError(f"Invalid path: {current_dir} ({describe_os_error(e)})", current_dir) from e

    dirs.sort()
    files.sort()
    log.debug(f"[LIST] {resolved}: {len(dirs)} dirs, {len(files)} files")

    return ListDirResponse(current_dir=resolved, dirs=dirs, files=files)
