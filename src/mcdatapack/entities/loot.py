"""
Loot table files: pools of weighted entries with optional conditions
and functions at every level.
"""

import copy
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..naming import resource_id
from ..output import FileWriter
from .base import Entity
from .conditions import Condition, LootFunction

Rolls = Union[int, float, Tuple[float, float], Dict[str, Any]]

# Entry types that reference something by name
NAMED_ENTRY_TYPES = {"item", "tag", "loot_table", "dynamic"}
COMPOSITE_ENTRY_TYPES = {"alternatives", "group", "sequence"}
ENTRY_TYPES = NAMED_ENTRY_TYPES | COMPOSITE_ENTRY_TYPES | {"empty"}


def _rolls_to_json(rolls: Rolls) -> Any:
    if isinstance(rolls, tuple):
        low, high = rolls
        return {"min": low, "max": high}
    return copy.deepcopy(rolls)


class Entry:
    """A single loot entry.

    Args:
        type: item, tag, loot_table, dynamic, empty, alternatives, group or sequence
        name: Referenced id for named types
        weight: Relative chance within the pool
        quality: Weight modifier based on luck
        children: Child entries for composite types
        expand: For tag entries, pick one item of the tag instead of all
    """

    def __init__(
        self,
        type: str = "item",
        name: Optional[str] = None,
        weight: Optional[int] = None,
        quality: Optional[int] = None,
        children: Optional[Iterable["Entry"]] = None,
        conditions: Optional[Iterable[Condition]] = None,
        functions: Optional[Iterable[LootFunction]] = None,
        expand: Optional[bool] = None,
    ):
        bare_type = type.split(":", 1)[-1]
        if bare_type not in ENTRY_TYPES:
            raise ValueError(f"Unknown loot entry type: {type}")
        if bare_type in NAMED_ENTRY_TYPES and not name:
            raise ValueError(f"Loot entry of type {bare_type} needs a name")
        self.type = bare_type
        self.name = name
        self.weight = weight
        self.quality = quality
        self.children: List[Entry] = list(children or [])
        self.conditions: List[Condition] = list(conditions or [])
        self.functions: List[LootFunction] = list(functions or [])
        self.expand = expand

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": resource_id(self.type)}
        if self.name:
            data["name"] = resource_id(self.name)
        if self.type in COMPOSITE_ENTRY_TYPES:
            data["children"] = [child.to_json() for child in self.children]
        if self.expand is not None and self.type == "tag":
            data["expand"] = self.expand
        if self.weight is not None:
            data["weight"] = self.weight
        if self.quality is not None:
            data["quality"] = self.quality
        if self.functions:
            data["functions"] = [f.to_json() for f in self.functions]
        if self.conditions:
            data["conditions"] = [c.to_json() for c in self.conditions]
        return data

    def copy(self) -> "Entry":
        return Entry(
            self.type,
            self.name,
            self.weight,
            self.quality,
            [child.copy() for child in self.children],
            [c.copy() for c in self.conditions],
            [f.copy() for f in self.functions],
            self.expand,
        )


class Pool:
    """A loot pool: rolls a number of times over its entries."""

    def __init__(
        self,
        rolls: Rolls = 1,
        entries: Optional[Iterable[Entry]] = None,
        bonus_rolls: Optional[Rolls] = None,
        conditions: Optional[Iterable[Condition]] = None,
        functions: Optional[Iterable[LootFunction]] = None,
    ):
        self.rolls = rolls
        self.entries: List[Entry] = list(entries or [])
        self.bonus_rolls = bonus_rolls
        self.conditions: List[Condition] = list(conditions or [])
        self.functions: List[LootFunction] = list(functions or [])

    def add_entry(self, entry: Entry) -> "Pool":
        self.entries.append(entry)
        return self

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"rolls": _rolls_to_json(self.rolls)}
        if self.bonus_rolls is not None:
            data["bonus_rolls"] = _rolls_to_json(self.bonus_rolls)
        data["entries"] = [e.to_json() for e in self.entries]
        if self.functions:
            data["functions"] = [f.to_json() for f in self.functions]
        if self.conditions:
            data["conditions"] = [c.to_json() for c in self.conditions]
        return data

    def copy(self) -> "Pool":
        return Pool(
            copy.deepcopy(self.rolls),
            [e.copy() for e in self.entries],
            copy.deepcopy(self.bonus_rolls),
            [c.copy() for c in self.conditions],
            [f.copy() for f in self.functions],
        )


class LootTable(Entity):
    """A loot table file.

    `type` is optional (e.g. 'chest', 'block', 'entity') and omitted from
    the output when unset.
    """

    category = "loot_tables"
    extension = "json"

    def __init__(
        self,
        path: str,
        pools: Optional[Iterable[Pool]] = None,
        type: Optional[str] = None,
        functions: Optional[Iterable[LootFunction]] = None,
    ):
        super().__init__(path)
        self.pools: List[Pool] = list(pools or [])
        self.type = type
        self.functions: List[LootFunction] = list(functions or [])

    def add_pool(self, pool: Pool) -> "LootTable":
        """Append a pool; returns self so calls can be chained."""
        self.pools.append(pool)
        return self

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.type:
            data["type"] = resource_id(self.type)
        data["pools"] = [p.to_json() for p in self.pools]
        if self.functions:
            data["functions"] = [f.to_json() for f in self.functions]
        return data

    def render(self, writer: FileWriter) -> bytes:
        return writer.dump_json(self.to_json())

    def copy(self) -> "LootTable":
        return LootTable(
            self.path,
            [p.copy() for p in self.pools],
            self.type,
            [f.copy() for f in self.functions],
        )
