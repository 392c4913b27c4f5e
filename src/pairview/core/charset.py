"""Turn file bytes into display text with a known encoding label.

Pipeline, first match wins:

1. Any NUL byte: the content is binary after all; render it as a hex dump
   labeled "(bytes array)".
2. Valid UTF-8: return the text verbatim labeled "UTF-8".
3. Otherwise guess the encoding statistically with chardet and decode with
   replacement characters, labeled with the guessed encoding name.

Every readable byte sequence produces some text and some label.
"""

from __future__ import annotations

import codecs

import chardet

from pairview.core.hexdump import bytes_to_hex_dump
from pairview.core.types import NOT_TEXTFILE_CHARSET, UTF8_CHARSET, ReadContent
from pairview.utils.error_handling import log_decode_warning
from pairview.utils.io import read_bytes
from pairview.utils.logger import log

# Used when the detector has no answer or names a codec Python lacks
FALLBACK_ENCODING = "windows-1252"


def guess_encoding(data: bytes) -> str:
    """Return the detector's best-guess encoding name for the whole buffer."""
    detected = chardet.detect(data)
    encoding = detected.get("encoding")
    if not encoding:
        return FALLBACK_ENCODING
    try:
        codecs.lookup(encoding)
    except LookupError:
        log.debug(f"[CHARSET] Detector guessed unsupported encoding {encoding!r}")
        return FALLBACK_ENCODING
    return encoding


def decode_with_replacement(data: bytes, encoding: str) -> tuple[str, bool]:
    """Decode ``data``, replacing undecodable sequences.

    Returns (text, had_errors).
    """
    try:
        return data.decode(encoding), False
    except UnicodeDecodeError:
        return data.decode(encoding, errors="replace"), True


def decode_content(data: bytes, source: str = "<bytes>") -> ReadContent:
    """Decode an in-memory buffer through the text pipeline."""
    if b"\x00" in data:
        return ReadContent(charset=NOT_TEXTFILE_CHARSET, content=bytes_to_hex_dump(data))

    try:
        return ReadContent(charset=UTF8_CHARSET, content=data.decode("utf-8"))
    except UnicodeDecodeError:
        pass

    encoding = guess_encoding(data)
    text, had_errors = decode_with_replacement(data, encoding)
    if had_errors:
        log_decode_warning(source, encoding)
    else:
        log.debug(f"[CHARSET] {source} decoded as {encoding}")
    return ReadContent(charset=encoding, content=text)


def textfile_content(filepath: str) -> ReadContent:
    """Read and decode a text-like file.

    Raises:
        FileAccessError: If the file cannot be read
    """
    return decode_content(read_bytes(filepath), source=filepath)
