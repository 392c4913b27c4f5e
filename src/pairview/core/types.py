"""Value types exchanged between the comparison core and its front ends."""

from __future__ import annotations

from dataclasses import dataclass, field

UTF8_CHARSET = "UTF-8"
NOT_TEXTFILE_CHARSET = "(bytes array)"
EXCEL_CHARSET = "(Excel)"
BINARY_CHARSET = "(binary)"


@dataclass(frozen=True)
class ReadContent:
    """One side of a comparison after decoding.

    ``charset`` is either a real encoding name or one of the sentinel labels
    above. The default instance stands for "nothing to compare against".
    """

    charset: str = ""
    content: str = ""

    def to_dict(self) -> dict:
        return {"charset": self.charset, "content": self.content}


@dataclass(frozen=True, order=True)
class FileAttr:
    """A file entry in a directory listing. Instances order by name."""

    name: str
    bytes_size: str
    human_readable_size: str
    last_modified: str
    binary_comparison_only: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "bytesSize": self.bytes_size,
            "humanReadableSize": self.human_readable_size,
            "lastModified": self.last_modified,
            "binaryComparisonOnly": self.binary_comparison_only,
        }


@dataclass(frozen=True)
class ListDirResponse:
    """Directory listing for the browser pane."""

    current_dir: str
    dirs: list[str] = field(default_factory=list)
    files: list[FileAttr] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "currentDir": self.current_dir,
            "dirs": list(self.dirs),
            "files": [f.to_dict() for f in self.files],
        }
