"""
Loot conditions and loot functions.

Both are thin wrappers around an id plus free-form parameters, mirroring
the game's JSON schema. Nested conditions (for 'inverted' or
'alternative') can be passed as parameters and are rendered recursively.
"""

import copy
from typing import Any, Dict, Iterable, List, Optional

from ..naming import resource_id


def to_json_value(value: Any) -> Any:
    """Render parameter values, expanding nested conditions/functions."""
    if hasattr(value, "to_json"):
        return value.to_json()
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    if isinstance(value, dict):
        return {k: to_json_value(v) for k, v in value.items()}
    return value


class Condition:
    """A predicate condition, e.g. Condition("random_chance", chance=0.5)."""

    def __init__(self, condition: str, **params: Any):
        self.condition = resource_id(condition)
        self.params: Dict[str, Any] = params

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"condition": self.condition}
        data.update(to_json_value(self.params))
        return data

    def copy(self) -> "Condition":
        return Condition(self.condition, **copy.deepcopy(self.params))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Condition):
            return NotImplemented
        return self.to_json() == other.to_json()

    def __repr__(self) -> str:
        return f"Condition({self.condition!r}, {self.params!r})"


class LootFunction:
    """A loot function applied to an entry, pool or table, e.g. set_count."""

    def __init__(
        self,
        function: str,
        conditions: Optional[Iterable[Condition]] = None,
        **params: Any,
    ):
        self.function = resource_id(function)
        self.conditions: List[Condition] = list(conditions or [])
        self.params: Dict[str, Any] = params

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"function": self.function}
        data.update(to_json_value(self.params))
        if self.conditions:
            data["conditions"] = [c.to_json() for c in self.conditions]
        return data

    def copy(self) -> "LootFunction":
        return LootFunction(
            self.function,
            [c.copy() for c in self.conditions],
            **copy.deepcopy(self.params),
        )

    def __repr__(self) -> str:
        return f"LootFunction({self.function!r}, {self.params!r})"
