"""
Tar adapter.

Archives any number of files and directories (directories recursively).
Extraction rejects members that would land outside the target directory.
"""

import io
import logging
import tarfile
from pathlib import Path
from typing import List

from packrat.compression.base import Codec, DecompressionResult, Entry, FileInMemory, FilesUnpacked
from packrat.core.errors import InvalidArchive, IoError
from packrat.schemas.extension import CompressionFormat
from packrat.schemas.file import File
from packrat.utils.fs import archive_name, ensure_exists, is_within

logger = logging.getLogger(__name__)


class TarCodec(Codec):
    format = CompressionFormat.TAR

    def compress(self, entry: Entry) -> bytes:
        buffer = io.BytesIO()
        with tarfile.open(fileobj=buffer, mode="w") as tar:
            if entry.is_in_memory:
                contents = entry.file.take_contents()
                info = tarfile.TarInfo(name=entry.file.path.name)
                info.size = len(contents)
                tar.addfile(info, io.BytesIO(contents))
            else:
                for path in entry.paths:
                    ensure_exists(path)
                    try:
                        tar.add(str(path), arcname=archive_name(path), recursive=True)
                    except OSError as e:
                        raise IoError(path, e) from e
                    logger.info(f"Added '{path}' to tar archive")
        return buffer.getvalue()

    def decompress(self, file: File, into: Path, innermost: bool = True) -> DecompressionResult:
        data = file.take_contents()
        try:
            with tarfile.open(fileobj=io.BytesIO(data), mode="r:") as tar:
                members = tar.getmembers()
                if not innermost:
                    return self._single_member(tar, members, file.path)
                return FilesUnpacked(self._extract(tar, members, into, file.path))
        except tarfile.TarError as e:
            raise InvalidArchive(file.path, str(e)) from e

    def _extract(self, tar: tarfile.TarFile, members: List[tarfile.TarInfo], into: Path, source: Path) -> List[Path]:
        for member in members:
            if not is_within(into, into / member.name):
                raise InvalidArchive(source, f"member '{member.name}' escapes the target directory")
            if member.issym():
                link_target = (into / member.name).parent / member.linkname
            elif member.islnk():
                link_target = into / member.linkname
            else:
                continue
            if not is_within(into, link_target):
                raise InvalidArchive(source, f"link '{member.name}' points outside the target directory")

        try:
            if hasattr(tarfile, "data_filter"):
                tar.extractall(path=into, members=members, filter="data")
            else:
                tar.extractall(path=into, members=members)
        except OSError as e:
            raise IoError(into, e) from e

        unpacked = []
        for member in members:
            target = into / member.name
            logger.info(f"'{target}' extracted")
            unpacked.append(target)
        return unpacked

    def _single_member(self, tar: tarfile.TarFile, members: List[tarfile.TarInfo], source: Path) -> FileInMemory:
        regular = [m for m in members if m.isfile()]
        if len(regular) != 1:
            raise InvalidArchive(
                source, f"expected exactly one file inside an inner tar layer, found {len(regular)}"
            )
        extracted = tar.extractfile(regular[0])
        return FileInMemory(extracted.read(), name=regular[0].name)
