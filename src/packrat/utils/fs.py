"""
Filesystem helpers used by the codecs and the evaluator.

Inference never touches the filesystem; everything here runs during
execution.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from rich.console import Console

from packrat.core.errors import FileNotFound, InvalidInput, IoError
from packrat.schemas.extension import CompressionFormat
from packrat.schemas.file import File

logger = logging.getLogger(__name__)
console = Console()


def ensure_exists(path: Union[str, Path]) -> None:
    """Raise FileNotFound unless `path` exists."""
    if not Path(path).exists():
        raise FileNotFound(path)


def check_for_multiple_files(files: Sequence[Path], fmt: CompressionFormat) -> None:
    """Single-stream formats compress exactly one file."""
    if len(files) != 1:
        raise InvalidInput(
            f"cannot compress multiple files directly to {fmt.value}. "
            f"Try using an intermediate archival method such as tar, "
            f"e.g. filename.tar.{fmt.value}"
        )


def create_path_if_non_existent(path: Union[str, Path]) -> None:
    path = Path(path)
    if path.exists():
        return
    console.print(f"[yellow]info[/yellow]: attempting to create folder '{path}'.")
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoError(path, e) from e
    logger.debug(f"Created directory {path.resolve()}")
    console.print(f"[yellow]info[/yellow]: directory '{path.resolve()}' created.")


def get_destination_path(dest: Optional[File], default: Union[str, Path] = ".") -> Path:
    """
    Directory that decompressed files go into.

    A decompression output never carries an extension; inference guarantees it.
    """
    if dest is None:
        return Path(default)
    if dest.extension is not None:
        raise InvalidInput(f"decompression output '{dest.path}' must not carry an extension")
    return dest.path


def is_within(base: Path, target: Path) -> bool:
    """True if `target` resolves to `base` or somewhere below it."""
    base = base.resolve()
    target = target.resolve()
    return target == base or base in target.parents


def archive_name(path: Path) -> str:
    """Member name for a top-level input; `.` and `..` use the real directory name."""
    return path.name or path.resolve().name


def read_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise IoError(path, e) from e


def write_file(path: Path, contents: bytes) -> None:
    try:
        path.write_bytes(contents)
    except OSError as e:
        raise IoError(path, e) from e
