import gzip
import zlib

from packrat.compression.stream import StreamCodec
from packrat.schemas.extension import CompressionFormat


class GzipCodec(StreamCodec):
    format = CompressionFormat.GZIP
    decode_errors = (OSError, EOFError, zlib.error)

    def compress_bytes(self, data: bytes) -> bytes:
        # mtime=0 keeps output reproducible for identical input
        return gzip.compress(data, compresslevel=self.settings.gzip_level, mtime=0)

    def decompress_bytes(self, data: bytes) -> bytes:
        return gzip.decompress(data)
