"""
Pydantic schemas shared by inference, codecs and the evaluator.
"""

from packrat.schemas.extension import CompressionFormat, Extension, parse
from packrat.schemas.file import File
from packrat.schemas.command import Command, Compression, Decompression, CommandKind

__all__ = [
    "CompressionFormat",
    "Extension",
    "parse",
    "File",
    "Command",
    "Compression",
    "Decompression",
    "CommandKind",
]
