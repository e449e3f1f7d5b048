"""
Function files (.mcfunction) and the command/value helpers used to build them.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional, Union

import orjson

from ..errors import ValueTypeMismatchError
from ..output import FileWriter
from .base import Entity

# SNBT suffix per numeric type; int has none
NUMERIC_SUFFIXES = {
    "byte": "b",
    "short": "s",
    "int": "",
    "long": "L",
    "float": "f",
    "double": "d",
}
STRING = "string"


@dataclass(frozen=True)
class Value:
    """A typed SNBT value used as a command parameter.

    Numeric types render as the number plus its SNBT suffix ('3b', '2.5f').
    Any other type is treated as a string and rendered quoted and escaped.
    """
    type: str
    value: Any

    def __post_init__(self) -> None:
        if self.type not in NUMERIC_SUFFIXES:
            object.__setattr__(self, "type", STRING)

    @property
    def is_numeric(self) -> bool:
        return self.type in NUMERIC_SUFFIXES

    def compile(self) -> str:
        if self.is_numeric:
            return f"{self.value}{NUMERIC_SUFFIXES[self.type]}"
        return orjson.dumps(str(self.value)).decode("utf-8")


class ValueArray:
    """A homogeneous list of values, rendered as '[a, b, c]'."""

    def __init__(self, type: str, values: Optional[Iterable[Value]] = None):
        self.type = type if type in NUMERIC_SUFFIXES else STRING
        self.values: List[Value] = []
        for value in values or []:
            self.append(value)

    def append(self, value: Value) -> "ValueArray":
        """Add a value, rejecting values of another type."""
        if value.type != self.type:
            raise ValueTypeMismatchError(
                f"Can't add value of type {value.type} to value array of type {self.type}"
            )
        self.values.append(value)
        return self

    def compile(self) -> str:
        return "[" + ", ".join(v.compile() for v in self.values) + "]"

    def copy(self) -> "ValueArray":
        # Value is frozen, the list is all that needs copying
        return ValueArray(self.type, list(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.values)


Param = Union[Value, ValueArray, str, int, float]


@dataclass
class Command:
    """A single command line: the method followed by its parameters."""
    method: str
    params: List[Param] = field(default_factory=list)

    def compile(self) -> str:
        parts = [self.method]
        for param in self.params:
            if isinstance(param, (Value, ValueArray)):
                parts.append(param.compile())
            else:
                parts.append(str(param))
        return " ".join(parts)

    def copy(self) -> "Command":
        return Command(
            self.method,
            [p.copy() if isinstance(p, ValueArray) else p for p in self.params],
        )


class Function(Entity):
    """An .mcfunction file: an ordered list of commands, one per line."""

    category = "functions"
    extension = "mcfunction"

    def __init__(self, path: str, commands: Optional[Iterable[Union[Command, str]]] = None):
        super().__init__(path)
        self.commands: List[Union[Command, str]] = list(commands or [])

    def add_command(self, command: Union[Command, str]) -> "Function":
        """Append a command; returns self so calls can be chained."""
        self.commands.append(command)
        return self

    def render(self, writer: FileWriter) -> str:
        return "\n".join(
            c.compile() if isinstance(c, Command) else str(c) for c in self.commands
        )

    def copy(self) -> "Function":
        return Function(
            self.path,
            [c.copy() if isinstance(c, Command) else c for c in self.commands],
        )
