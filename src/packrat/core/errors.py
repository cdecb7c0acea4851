"""
Exception hierarchy for packrat.

Library code raises these; only the CLI turns them into exit codes.
"""

from pathlib import Path
from typing import Union


class PackratError(Exception):
    """Base class for every error packrat reports to the user."""


class ExtensionError(PackratError):
    """A filename could not be turned into an Extension."""


class UnrecognizedExtension(ExtensionError):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"'{filename}' has no recognized compression extension")


class InferenceError(PackratError):
    """The invocation does not describe a valid command."""


class InputsMustHaveBeenDecompressible(InferenceError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(
            f"file '{path}' is not decompressible; "
            "supply a compressed output path to compress it instead"
        )


class InvalidInput(InferenceError):
    """Generic fallback for malformed invocations and codec inputs."""

    def __init__(self, message: str = "invalid input"):
        super().__init__(message)


class FileNotFound(PackratError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"could not find file '{path}'")


class AlreadyExists(PackratError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"'{path}' already exists (use --overwrite to replace it)")


class InvalidArchive(PackratError):
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        super().__init__(f"'{path}' is not a valid archive: {reason}")


class IoError(PackratError):
    """Reading, writing or creating something on disk failed."""

    def __init__(self, path: Union[str, Path], error: OSError):
        self.path = Path(path)
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(f"could not access '{path}': {reason}")
