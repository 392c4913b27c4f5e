"""pairview: prepare pairs of files for side-by-side comparison.

The comparison core lives in ``pairview.core``; ``pairview.entry_points``
holds the command line and the Textual front end.
"""

from pairview.core import (
    ComparisonMode,
    FileAttr,
    ListDirResponse,
    ReadContent,
    filepaths_content,
    list_dir,
    validate_filepath,
)
from pairview.utils.io import save

__version__ = "0.1.0"

__all__ = [
    "ComparisonMode",
    "FileAttr",
    "ListDirResponse",
    "ReadContent",
    "filepaths_content",
    "list_dir",
    "save",
    "validate_filepath",
]
