"""Error types and standardized error logging for pairview.

Every failure that reaches a caller is a ``PairviewError`` carrying a plain
descriptive message. The log helpers keep the wording of recoverable
failures consistent across modules.
"""

from .logger import log


class PairviewError(Exception):
    """Base class for errors reported to pairview callers."""

    pass


class FileAccessError(PairviewError):
    """A file or directory could not be opened, read, or written."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


def log_file_error(file_path: str, operation: str, exception: Exception) -> None:
    """Log a skipped file operation with consistent formatting.

    Args:
        file_path: Path to the file that caused the error
        operation: Description of the operation (e.g., "reading", "listing")
        exception: The exception that was raised
    """
    error_type = type(exception).__name__
    log.warning(f"[IO] Failed {operation} {file_path}: {error_type}: {exception}")


def log_decode_warning(file_path: str, encoding: str) -> None:
    """Log content that decoded only with replacement characters.

    Args:
        file_path: Path to the decoded file
        encoding: Encoding guessed for the content
    """
    log.warning(
        f"[CHARSET] {file_path}: not binary, not UTF-8 and not cleanly decodable as {encoding}; "
        "undecodable sequences were replaced"
    )


def describe_os_error(exception: OSError) -> str:
    """Return the OS error text without the repeated filename."""
    return exception.strerror or str(exception)
