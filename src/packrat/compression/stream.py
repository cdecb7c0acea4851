"""
Shared behaviour of single-stream codecs (gzip, bzip2).

A stream codec wraps exactly one file. Handing it several paths is an
error: an intermediate archive format such as tar is needed first.
"""

import logging
from abc import abstractmethod
from pathlib import Path

from packrat.compression.base import Codec, Entry, FileInMemory
from packrat.core.errors import InvalidArchive, InvalidInput
from packrat.schemas.file import File
from packrat.utils.fs import check_for_multiple_files, ensure_exists, read_file

logger = logging.getLogger(__name__)


class StreamCodec(Codec):
    decode_errors = (OSError,)

    @abstractmethod
    def compress_bytes(self, data: bytes) -> bytes:
        pass

    @abstractmethod
    def decompress_bytes(self, data: bytes) -> bytes:
        pass

    def compress(self, entry: Entry) -> bytes:
        if entry.is_in_memory:
            return self.compress_bytes(entry.file.take_contents())

        check_for_multiple_files(entry.paths, self.format)
        path = entry.paths[0]
        ensure_exists(path)
        if path.is_dir():
            raise InvalidInput(
                f"cannot compress directory '{path}' directly to {self.format.value}; "
                f"try an intermediate archive, e.g. {path.name}.tar.{self.format.value}"
            )
        contents = self.compress_bytes(read_file(path))
        logger.info(f"Compressed '{path}' into memory ({len(contents)} bytes)")
        return contents

    def decompress(self, file: File, into: Path, innermost: bool = True) -> FileInMemory:
        try:
            contents = self.decompress_bytes(file.take_contents())
        except self.decode_errors as e:
            raise InvalidArchive(file.path, str(e)) from e
        logger.info(f"Decompressed '{file.path}' into memory ({len(contents)} bytes)")
        return FileInMemory(contents)
