"""
Codec adapters, one per CompressionFormat, behind a uniform
compress / decompress interface.
"""

from packrat.compression.base import Codec, DecompressionResult, Entry, FileInMemory, FilesUnpacked
from packrat.compression.registry import get_codec

__all__ = [
    "Codec",
    "DecompressionResult",
    "Entry",
    "FileInMemory",
    "FilesUnpacked",
    "get_codec",
]
