# packrat/src/packrat/core/config.py

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from packrat.core.settings import DEFAULT_COMPRESSION_LEVEL, ENV_PREFIX


class Settings(BaseSettings):
    # Codec tuning
    gzip_level: int = Field(default=DEFAULT_COMPRESSION_LEVEL, ge=0, le=9)
    bzip_level: int = Field(default=DEFAULT_COMPRESSION_LEVEL, ge=1, le=9)
    zip_compression: Literal["deflated", "stored"] = Field(default="deflated")

    # Execution behaviour
    overwrite: bool = Field(default=False)
    default_output_dir: str = Field(default=".")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )


# Instantiate settings
settings = Settings()
