"""
Extension model.

An Extension is the ordered chain of compression formats encoded in the
trailing suffixes of a filename, innermost first:

    archive.tar.gz  ->  (TAR, GZIP)

The chain is read from the right and stops at the first suffix that is not
a known format, so `notes.v2.tar.gz` yields (TAR, GZIP) and `notes.txt`
yields nothing at all (UnrecognizedExtension).
"""

import os
from enum import Enum
from pathlib import PurePath
from typing import Dict, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from packrat.core.errors import UnrecognizedExtension


class CompressionFormat(str, Enum):
    """Closed set of supported formats. The value is the canonical suffix."""
    TAR = "tar"
    GZIP = "gz"
    BZIP = "bz2"
    ZIP = "zip"

    @property
    def is_archive(self) -> bool:
        """Archive formats hold many members; the others wrap a single stream."""
        return self in (CompressionFormat.TAR, CompressionFormat.ZIP)

    def __str__(self) -> str:
        return self.value


# Suffix (lower-cased) -> formats it stands for
_SUFFIXES: Dict[str, Tuple[CompressionFormat, ...]] = {
    "tar": (CompressionFormat.TAR,),
    "gz": (CompressionFormat.GZIP,),
    "bz2": (CompressionFormat.BZIP,),
    "zip": (CompressionFormat.ZIP,),
    "tgz": (CompressionFormat.TAR, CompressionFormat.GZIP),
    "tbz": (CompressionFormat.TAR, CompressionFormat.BZIP),
    "tbz2": (CompressionFormat.TAR, CompressionFormat.BZIP),
}

_SEPARATORS = tuple({"/", os.sep, os.altsep or "/"})


def _split(filename: str) -> Tuple[str, List[CompressionFormat]]:
    """Split a file name into what remains and the formats matched."""
    segments = filename.split(".")
    # segments[0] is the stem and is never a format; dotfiles have no stem
    if not segments[0]:
        return filename, []
    consumed = 0
    formats: List[CompressionFormat] = []
    for segment in reversed(segments[1:]):
        matched = _SUFFIXES.get(segment.lower())
        if matched is None:
            break
        formats[:0] = matched
        consumed += 1
    remaining = ".".join(segments[:len(segments) - consumed])
    return remaining, formats


class Extension(BaseModel):
    """Ordered, non-empty, immutable chain of compression formats."""
    model_config = ConfigDict(frozen=True)

    formats: Tuple[CompressionFormat, ...]

    @field_validator("formats")
    @classmethod
    def _not_empty(cls, value):
        if not value:
            raise ValueError("an extension holds at least one format")
        return value

    @classmethod
    def from_filename(cls, filename: Union[str, PurePath]) -> "Extension":
        """
        Parse the extension chain of a path.

        Only the last path component is inspected. A raw string ending in a
        path separator names a directory and never has an extension.

        Raises:
            UnrecognizedExtension: if no trailing suffix is a known format
        """
        raw = str(filename)
        if isinstance(filename, str) and raw.endswith(_SEPARATORS):
            raise UnrecognizedExtension(raw)

        _, formats = _split(PurePath(raw).name)
        if not formats:
            raise UnrecognizedExtension(raw)
        return cls(formats=tuple(formats))

    @property
    def first(self) -> CompressionFormat:
        """Innermost format, the one applied first when compressing."""
        return self.formats[0]

    @property
    def last(self) -> CompressionFormat:
        """Outermost format, the one undone first when decompressing."""
        return self.formats[-1]

    def strip(self, filename: Union[str, PurePath]) -> str:
        """Return the file name of `filename` without its extension chain."""
        remaining, _ = _split(PurePath(str(filename)).name)
        return remaining

    def __str__(self) -> str:
        return "".join(f".{fmt.value}" for fmt in self.formats)


def parse(filename: Union[str, PurePath]) -> Extension:
    """Shorthand for Extension.from_filename."""
    return Extension.from_filename(filename)
