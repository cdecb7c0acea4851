# src/packrat/compression/base.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence

from packrat.core.config import Settings, settings as default_settings
from packrat.schemas.extension import CompressionFormat
from packrat.schemas.file import File


class Entry:
    """
    What a codec compresses: either paths on disk or a single file whose
    contents are already in memory (the output of a previous layer).
    """

    def __init__(self, paths: Optional[Sequence[Path]] = None, file: Optional[File] = None):
        if (paths is None) == (file is None):
            raise ValueError("an Entry holds either paths or an in-memory file")
        self.paths = list(paths) if paths is not None else None
        self.file = file

    @classmethod
    def files(cls, paths: Sequence[Path]) -> "Entry":
        return cls(paths=[Path(p) for p in paths])

    @classmethod
    def in_memory(cls, file: File) -> "Entry":
        return cls(file=file)

    @property
    def is_in_memory(self) -> bool:
        return self.file is not None


class DecompressionResult:
    """Base for what a codec hands back after decompressing."""


class FilesUnpacked(DecompressionResult):
    """An archive was extracted to disk."""

    def __init__(self, paths: List[Path]):
        self.paths = paths


class FileInMemory(DecompressionResult):
    """A single stream was decoded; its bytes feed the next layer or the writer."""

    def __init__(self, contents: bytes, name: Optional[str] = None):
        self.contents = contents
        self.name = name


class Codec(ABC):
    """
    Adapter for one compression format.
    """
    format: CompressionFormat

    def __init__(self, settings: Settings = None):
        self.settings = settings or default_settings

    @abstractmethod
    def compress(self, entry: Entry) -> bytes:
        """
        Compress the entry and return the compressed bytes.
        """
        pass

    @abstractmethod
    def decompress(self, file: File, into: Path, innermost: bool = True) -> DecompressionResult:
        """
        Decompress an in-memory file.

        `innermost` is False when more layers remain to be undone after this
        one; archive codecs then return their single member in memory
        instead of extracting to `into`.
        """
        pass
