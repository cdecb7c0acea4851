"""
Execution stage: carries out a Command produced by inference.

Compression applies the output's formats innermost first; the first codec
reads the inputs from disk and every later codec wraps the previous
layer's bytes. Decompression undoes an input's formats outermost first,
holding intermediate layers in memory, until an archive is unpacked into
the destination directory or the last stream is written there.
"""

import logging
from pathlib import Path
from typing import List, Sequence

from rich.console import Console

from packrat.compression import Entry, FilesUnpacked, get_codec
from packrat.core.config import Settings, settings as default_settings
from packrat.core.errors import AlreadyExists
from packrat.schemas.command import Command, Compression
from packrat.schemas.extension import Extension
from packrat.schemas.file import File
from packrat.utils.fs import (
    check_for_multiple_files,
    create_path_if_non_existent,
    ensure_exists,
    get_destination_path,
    read_file,
    write_file,
)

logger = logging.getLogger(__name__)
console = Console()


def _layer_name(stem: str, extension: Extension, depth: int) -> str:
    """Name of the intermediate file holding the first `depth` layers."""
    if depth == 0:
        return stem
    return stem + str(Extension(formats=extension.formats[:depth]))


class Evaluator:
    """Runs a Command against the filesystem."""

    def __init__(self, settings: Settings = None, overwrite: bool = None):
        self.settings = settings or default_settings
        self.overwrite = self.settings.overwrite if overwrite is None else overwrite

    def evaluate(self, command: Command) -> List[Path]:
        """
        Execute the command.

        Returns:
            Paths that were written (the compressed file, or every file
            produced by decompression)
        """
        if isinstance(command.kind, Compression):
            return [self.compress_files(command.kind.files, command.output)]

        destination = get_destination_path(command.output, self.settings.default_output_dir)
        produced = []
        for file in command.kind.files:
            produced.extend(self.decompress_file(file, destination))
        return produced

    def _check_writable(self, path: Path) -> None:
        if path.exists() and not self.overwrite:
            raise AlreadyExists(path)

    def compress_files(self, files: Sequence[Path], output: File) -> Path:
        for path in files:
            ensure_exists(path)
        self._check_writable(output.path)

        extension = output.extension
        formats = extension.formats
        if not formats[0].is_archive:
            check_for_multiple_files(files, formats[0])
        logger.debug(f"Compressing {len(files)} input(s) as {extension}")

        contents = get_codec(formats[0], self.settings).compress(Entry.files(files))
        stem = extension.strip(output.path)
        for depth in range(1, len(formats)):
            layer = File(
                path=output.path.with_name(_layer_name(stem, extension, depth)),
                contents_in_memory=contents,
            )
            contents = get_codec(formats[depth], self.settings).compress(Entry.in_memory(layer))

        if output.path.parent != Path("."):
            create_path_if_non_existent(output.path.parent)
        write_file(output.path, contents)
        console.print(f"[yellow]info[/yellow]: compressed files into '{output.path}' ({len(contents)} bytes)")
        return output.path

    def decompress_file(self, file: File, destination: Path) -> List[Path]:
        ensure_exists(file.path)
        create_path_if_non_existent(destination)

        extension = file.extension
        formats = extension.formats
        stem = extension.strip(file.path)
        logger.debug(f"Decompressing '{file.path}' ({extension}) into '{destination}'")

        file.contents_in_memory = read_file(file.path)
        current = file
        for depth in reversed(range(len(formats))):
            codec = get_codec(formats[depth], self.settings)
            result = codec.decompress(current, destination, innermost=depth == 0)
            if isinstance(result, FilesUnpacked):
                console.print(f"[yellow]info[/yellow]: unpacked '{file.path}' into '{destination}'")
                return result.paths
            current = File(
                path=file.path.with_name(Path(result.name).name if result.name else _layer_name(stem, extension, depth)),
                contents_in_memory=result.contents,
            )

        target = destination / stem
        self._check_writable(target)
        write_file(target, current.take_contents())
        console.print(f"[yellow]info[/yellow]: '{file.path}' decompressed into '{target}'")
        return [target]
