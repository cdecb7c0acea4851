"""
Command inference.

Decides from path strings alone whether an invocation compresses or
decompresses:

1. The output parses as an Extension: compress the inputs into it.
2. The output does not parse: decompress every input into it.
3. No output: decompress every input into the default destination.

In cases 2 and 3 every input must parse as an Extension; the first input
(in the order given) that does not aborts the whole command.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from packrat.core.errors import (
    InputsMustHaveBeenDecompressible,
    InvalidInput,
    UnrecognizedExtension,
)
from packrat.schemas.command import Command, Compression, Decompression
from packrat.schemas.extension import Extension
from packrat.schemas.file import File

logger = logging.getLogger(__name__)


def _decompressible_inputs(input_paths: Sequence[str]) -> List[File]:
    files = []
    for raw in input_paths:
        try:
            extension = Extension.from_filename(raw)
        except UnrecognizedExtension:
            raise InputsMustHaveBeenDecompressible(raw) from None
        files.append(File.from_path(raw, extension))
    return files


def infer(input_paths: Sequence[str], output_path: Optional[str] = None) -> Command:
    """
    Build the Command described by the input paths and optional output path.

    Args:
        input_paths: Input files or directories, at least one
        output_path: Output directory or compressed file, if supplied

    Returns:
        A validated Command

    Raises:
        InvalidInput: if no input path was given
        InputsMustHaveBeenDecompressible: if decompression was inferred and
            an input has no recognized extension
    """
    if not input_paths:
        raise InvalidInput("at least one input file is required")

    if output_path is not None:
        try:
            output_extension = Extension.from_filename(output_path)
        except UnrecognizedExtension:
            output_extension = None

        if output_extension is not None:
            logger.debug(f"Output '{output_path}' is {output_extension}: compressing {len(input_paths)} input(s)")
            return Command(
                kind=Compression(files=tuple(Path(p) for p in input_paths)),
                output=File.from_path(output_path, output_extension),
            )

        if "." in Path(output_path).name:
            logger.warning(
                f"Output '{output_path}' has no recognized compression extension; "
                "treating it as a directory to decompress into"
            )
        files = _decompressible_inputs(input_paths)
        logger.debug(f"Decompressing {len(files)} input(s) into '{output_path}'")
        return Command(
            kind=Decompression(files=tuple(files)),
            output=File.from_path(output_path),
        )

    files = _decompressible_inputs(input_paths)
    logger.debug(f"No output supplied: decompressing {len(files)} input(s)")
    return Command(kind=Decompression(files=tuple(files)), output=None)
