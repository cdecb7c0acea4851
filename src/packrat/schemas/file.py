"""
File descriptor: a path, its parsed Extension (if any) and, once read,
its contents held in memory.
"""

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel

from packrat.core.errors import InvalidInput
from packrat.schemas.extension import Extension


class File(BaseModel):
    """Unit passed from inference to the codecs and on to the writer."""
    path: Path
    extension: Optional[Extension] = None
    contents_in_memory: Optional[bytes] = None

    @classmethod
    def from_path(cls, path: Union[str, Path], extension: Optional[Extension] = None) -> "File":
        """Build a descriptor whose contents have not been read yet."""
        return cls(path=Path(path), extension=extension)

    def take_contents(self) -> bytes:
        """
        Move the in-memory contents out of this descriptor.

        The buffer has a single owner at a time: after this call the
        descriptor is back to "not yet read".
        """
        if self.contents_in_memory is None:
            raise InvalidInput(f"'{self.path}' has no contents in memory")
        contents, self.contents_in_memory = self.contents_in_memory, None
        return contents
