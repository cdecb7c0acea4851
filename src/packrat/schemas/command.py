"""
Command descriptors produced by the inference engine.

A Command is decided once per invocation and consumed once by the
evaluator. Its kind is either Compression (raw input paths, compressed into
the output's Extension) or Decompression (inputs already carrying their
Extensions).
"""

from pathlib import Path
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator

from packrat.schemas.file import File


class Compression(BaseModel):
    """Files to be compressed. Their own extensions are irrelevant."""
    model_config = ConfigDict(frozen=True)

    files: Tuple[Path, ...]


class Decompression(BaseModel):
    """Files to be decompressed, each with its resolved Extension."""
    model_config = ConfigDict(frozen=True)

    files: Tuple[File, ...]

    @model_validator(mode="after")
    def _every_input_has_extension(self):
        for file in self.files:
            if file.extension is None:
                raise ValueError(f"'{file.path}' has no extension to decompress")
        return self


CommandKind = Union[Compression, Decompression]


class Command(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: CommandKind
    output: Optional[File] = None

    @model_validator(mode="after")
    def _check_consistency(self):
        if not self.kind.files:
            raise ValueError("a command needs at least one input")
        if isinstance(self.kind, Compression) and (self.output is None or self.output.extension is None):
            raise ValueError("compression needs an output with an extension")
        # A decompression destination is a directory, not a compressed artifact
        if isinstance(self.kind, Decompression) and self.output is not None and self.output.extension is not None:
            raise ValueError("decompression output must not carry an extension")
        return self

    @property
    def is_compression(self) -> bool:
        return isinstance(self.kind, Compression)
