"""
Tag files: named lists of block, item or function references.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from ..errors import InvalidNameError
from ..output import FileWriter
from .base import Entity


class TagType(Enum):
    """The three tag kinds a namespace can hold."""
    BLOCK = "block"
    ITEM = "item"
    FUNCTION = "function"

    @property
    def directory(self) -> str:
        """Folder below the namespace 'tags' folder ('blocks', 'items', 'functions')."""
        return f"{self.value}s"

    @classmethod
    def parse(cls, value: "TagType | str") -> "TagType":
        """Accept a TagType or its string value."""
        if isinstance(value, TagType):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidNameError(
                f"Unknown tag type {value!r}, expected one of: block, item, function"
            ) from None


class Tag(Entity):
    """A tag file.

    Renders as {"values": [...]}; "replace" is only written when it is set.
    """

    extension = "json"

    def __init__(
        self,
        path: str,
        tag_type: TagType | str,
        values: Optional[Iterable[str]] = None,
        replace: bool = False,
    ):
        super().__init__(path)
        self._tag_type = TagType.parse(tag_type)
        self.values: List[str] = list(values or [])
        self.replace = replace

    @property
    def tag_type(self) -> TagType:
        """Kind of tag; part of the key the tag is stored under, so read-only."""
        return self._tag_type

    @property
    def category(self) -> str:  # type: ignore[override]
        return f"tags/{self.tag_type.directory}"

    def add_value(self, value: str) -> "Tag":
        self.values.append(value)
        return self

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.replace:
            data["replace"] = True
        data["values"] = list(self.values)
        return data

    def render(self, writer: FileWriter) -> bytes:
        return writer.dump_json(self.to_json())

    def copy(self) -> "Tag":
        return Tag(self.path, self.tag_type, list(self.values), self.replace)

    def __repr__(self) -> str:
        return f"Tag(path={self.path!r}, type={self.tag_type.value!r}, values={self.values!r})"
