"""
Zip adapter.
"""

import io
import logging
import zipfile
from pathlib import Path

from packrat.compression.base import Codec, DecompressionResult, Entry, FileInMemory, FilesUnpacked
from packrat.core.errors import InvalidArchive, IoError
from packrat.schemas.extension import CompressionFormat
from packrat.schemas.file import File
from packrat.utils.fs import archive_name, ensure_exists

logger = logging.getLogger(__name__)

_METHODS = {
    "deflated": zipfile.ZIP_DEFLATED,
    "stored": zipfile.ZIP_STORED,
}


class ZipCodec(Codec):
    format = CompressionFormat.ZIP

    def compress(self, entry: Entry) -> bytes:
        buffer = io.BytesIO()
        method = _METHODS[self.settings.zip_compression]
        with zipfile.ZipFile(buffer, mode="w", compression=method) as zf:
            if entry.is_in_memory:
                zf.writestr(entry.file.path.name, entry.file.take_contents())
            else:
                for path in entry.paths:
                    ensure_exists(path)
                    try:
                        self._add_path(zf, path)
                    except OSError as e:
                        raise IoError(path, e) from e
        return buffer.getvalue()

    def _add_path(self, zf: zipfile.ZipFile, path: Path) -> None:
        top = archive_name(path)
        zf.write(path, top)
        if path.is_dir():
            for child in sorted(path.rglob("*")):
                arcname = Path(top, child.relative_to(path)).as_posix()
                zf.write(child, arcname)
        logger.info(f"Added '{path}' to zip archive")

    def decompress(self, file: File, into: Path, innermost: bool = True) -> DecompressionResult:
        data = file.take_contents()
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as zf:
                if not innermost:
                    regular = [info for info in zf.infolist() if not info.is_dir()]
                    if len(regular) != 1:
                        raise InvalidArchive(
                            file.path, f"expected exactly one file inside an inner zip layer, found {len(regular)}"
                        )
                    return FileInMemory(zf.read(regular[0]), name=regular[0].filename)

                unpacked = []
                for info in zf.infolist():
                    # extract() sanitizes absolute paths and '..' components
                    try:
                        target = Path(zf.extract(info, path=into))
                    except OSError as e:
                        raise IoError(into, e) from e
                    logger.info(f"'{target}' extracted")
                    unpacked.append(target)
                return FilesUnpacked(unpacked)
        except zipfile.BadZipFile as e:
            raise InvalidArchive(file.path, str(e)) from e
