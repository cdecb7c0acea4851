"""
Project-wide constants or "settings" that are unlikely to change at runtime.
"""

DEFAULT_COMPRESSION_LEVEL = 6  # Shared by gzip and bzip2
LOG_FORMAT = "%(levelname)s %(name)s - %(message)s"
ENV_PREFIX = "PACKRAT_"
