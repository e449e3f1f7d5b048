"""
Base contract shared by every compilable datapack file.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Optional, TypeVar

from ..naming import validate_resource_path
from ..output import FileWriter

E = TypeVar("E", bound="Entity")


class Entity(ABC):
    """A single datapack file: function, tag, recipe, loot table or predicate.

    The path is fixed at construction. A namespace stores entities keyed by
    their path, so it is exposed read-only.

    Subclasses set `category` (directory below the namespace folder) and
    `extension`, and implement `render` and `copy`.
    """

    category: ClassVar[str] = ""
    extension: ClassVar[str] = "json"

    def __init__(self, path: str):
        self._path = validate_resource_path(path)

    @property
    def path(self) -> str:
        """Path of the file relative to its category folder, without extension."""
        return self._path

    @property
    def filename(self) -> str:
        return f"{self._path}.{self.extension}"

    @abstractmethod
    def render(self, writer: FileWriter) -> str | bytes:
        """Return the file body."""

    @abstractmethod
    def copy(self: E) -> E:
        """Return an independent deep copy.

        Also usable as `Cls.copy(entity)`.
        """

    def compile(self, category_root: str | Path, writer: Optional[FileWriter] = None) -> Path:
        """Write this entity below category_root and return the file path.

        Nested paths ('a/b/c') create the intermediate directories.
        """
        writer = writer or FileWriter()
        file_path = Path(category_root) / self.filename
        writer.ensure_directory(file_path.parent)
        return writer.write_file(file_path, self.render(writer))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self._path!r})"
