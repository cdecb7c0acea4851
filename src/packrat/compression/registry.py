"""
Maps each CompressionFormat to the codec adapter that handles it.
"""

from typing import Dict, Type

from packrat.compression.base import Codec
from packrat.compression.bzip_codec import BzipCodec
from packrat.compression.gzip_codec import GzipCodec
from packrat.compression.tar_codec import TarCodec
from packrat.compression.zip_codec import ZipCodec
from packrat.core.config import Settings
from packrat.schemas.extension import CompressionFormat

CODECS: Dict[CompressionFormat, Type[Codec]] = {
    CompressionFormat.TAR: TarCodec,
    CompressionFormat.GZIP: GzipCodec,
    CompressionFormat.BZIP: BzipCodec,
    CompressionFormat.ZIP: ZipCodec,
}

# Adding a format to the enum without an adapter is a programming error
if set(CODECS) != set(CompressionFormat):
    raise RuntimeError(f"no codec for {sorted(f.value for f in set(CompressionFormat) - set(CODECS))}")


def get_codec(fmt: CompressionFormat, settings: Settings = None) -> Codec:
    """Instantiate the codec for `fmt`."""
    return CODECS[fmt](settings)
