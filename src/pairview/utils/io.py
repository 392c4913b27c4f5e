from __future__ import annotations

import codecs
import os

from .error_handling import FileAccessError, describe_os_error
from .logger import log

DEFAULT_ENCODING = "utf-8"


def read_bytes(path: str) -> bytes:
    """Read a whole file as bytes.

    Raises:
        FileAccessError: If the file cannot be opened or read
    """
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(f"Failed to read {path!r}: {describe_os_error(e)}", path) from e


def read_first_line(path: str) -> bytes:
    """Read bytes up to and including the first newline (or EOF)."""
    try:
        with open(path, "rb") as f:
            return f.readline()
    except OSError as e:
        raise FileAccessError(f"Failed to read {path!r}: {describe_os_error(e)}", path) from e


def resolve_encoding(label: str) -> str:
    """Map a charset label to a Python text codec name, defaulting to UTF-8.

    Sentinel labels such as "(binary)" are not codec names and fall back too,
    as do bytes-to-bytes codecs like "hex" or "zlib".
    """
    try:
        codec = codecs.lookup(label)
    except (LookupError, TypeError, ValueError):
        log.debug(f"[IO] Unknown charset label {label!r}, saving as {DEFAULT_ENCODING}")
        return DEFAULT_ENCODING
    if not getattr(codec, "_is_text_encoding", True):
        log.debug(f"[IO] {label!r} is not a text encoding, saving as {DEFAULT_ENCODING}")
        return DEFAULT_ENCODING
    return codec.name


def encode_content(content: str, encoding: str) -> tuple[bytes, str]:
    """Encode with replacement; returns the bytes and the codec actually used."""
    try:
        return content.encode(encoding, errors="replace"), encoding
    except (LookupError, UnicodeError) as e:
        log.warning(f"[IO] Encoding with {encoding} failed ({e}), saving as {DEFAULT_ENCODING}")
        return content.encode(DEFAULT_ENCODING, errors="replace"), DEFAULT_ENCODING


def save(path: str, content: str, charset: str) -> None:
    """Encode ``content`` with ``charset`` and overwrite the file at ``path``.

    Characters the target encoding cannot represent are replaced.

    Raises:
        FileAccessError: If the file cannot be written
    """
    encoded, encoding = encode_content(content, resolve_encoding(charset))
    try:
        with open(path, "wb") as f:
            f.write(encoded)
    except OSError as e:
        raise FileAccessError(f"Failed to save {path!r}: {describe_os_error(e)}", path) from e
    log.debug(f"[IO] Saved {len(encoded)} bytes to {path} ({encoding})")


def arg_to_filepath(arg: str | None) -> str | None:
    """Return the command line argument when it names an existing regular file."""
    if arg and os.path.isfile(arg):
        return arg
    return None
