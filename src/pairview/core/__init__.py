from pairview.core.charset import guess_encoding, textfile_content
from pairview.core.classifier import binary_comparison_only, is_textfile, validate_filepath
from pairview.core.formatting import comma_separated_number, human_readable_size
from pairview.core.hexdump import bytes_to_hex_dump
from pairview.core.listing import list_dir
from pairview.core.platform import Platform, current_platform, detect_platform
from pairview.core.resolver import ComparisonMode, comparison_mode, filepaths_content
from pairview.core.types import FileAttr, ListDirResponse, ReadContent

__all__ = [
    "ComparisonMode",
    "FileAttr",
    "ListDirResponse",
    "Platform",
    "ReadContent",
    "binary_comparison_only",
    "bytes_to_hex_dump",
    "comma_separated_number",
    "comparison_mode",
    "current_platform",
    "detect_platform",
    "filepaths_content",
    "guess_encoding",
    "human_readable_size",
    "is_textfile",
    "list_dir",
    "textfile_content",
    "validate_filepath",
]
