"""
Predicate files: one or more conditions stored under 'predicates/'.
"""

from typing import Any, Iterable, List, Optional

from ..output import FileWriter
from .base import Entity
from .conditions import Condition


class Predicate(Entity):
    """A predicate file.

    A single condition is written as an object, several as an array
    (the game treats an array as all-of).
    """

    category = "predicates"
    extension = "json"

    def __init__(self, path: str, conditions: Optional[Iterable[Condition]] = None):
        super().__init__(path)
        self.conditions: List[Condition] = list(conditions or [])

    def add_condition(self, condition: Condition) -> "Predicate":
        self.conditions.append(condition)
        return self

    def to_json(self) -> Any:
        if len(self.conditions) == 1:
            return self.conditions[0].to_json()
        return [c.to_json() for c in self.conditions]

    def render(self, writer: FileWriter) -> bytes:
        return writer.dump_json(self.to_json())

    def copy(self) -> "Predicate":
        return Predicate(self.path, [c.copy() for c in self.conditions])
