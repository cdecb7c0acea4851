import bz2

from packrat.compression.stream import StreamCodec
from packrat.schemas.extension import CompressionFormat


class BzipCodec(StreamCodec):
    format = CompressionFormat.BZIP
    decode_errors = (OSError, ValueError, EOFError)

    def compress_bytes(self, data: bytes) -> bytes:
        return bz2.compress(data, compresslevel=self.settings.bzip_level)

    def decompress_bytes(self, data: bytes) -> bytes:
        return bz2.decompress(data)
