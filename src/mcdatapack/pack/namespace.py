"""
Namespace: a named group of datapack files.

A namespace keeps one index per file category, keyed by the entity path.
Paths are unique inside a category; the same path may be used in several
categories (a recipe and a loot table can both be called 'diamond').
Entities are copied on insert, so callers keep no reference into the
stored state.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, TypeVar, Union

from ..entities import (
    Command,
    Condition,
    Entity,
    Function,
    LootTable,
    Predicate,
    Recipe,
    Tag,
    TagType,
)
from ..errors import DuplicateEntityError
from ..naming import MINECRAFT, validate_namespace_name
from ..output import FileWriter

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)

# Folders created for every namespace, populated or not
DATA_CATEGORIES = (
    "functions",
    "tags/blocks",
    "tags/items",
    "tags/functions",
    "recipes",
    "loot_tables",
    "predicates",
)


class Namespace:
    """A datapack namespace such as 'mymod'.

    Names may only use 0-9, a-z, _, - and '.'. The 'minecraft' namespace
    belongs to every Datapack and is only built through `Namespace.builtin()`.
    """

    def __init__(self, name: str):
        self._setup(validate_namespace_name(name))

    @classmethod
    def builtin(cls) -> "Namespace":
        """Build the reserved 'minecraft' namespace owned by a Datapack."""
        namespace = cls.__new__(cls)
        namespace._setup(validate_namespace_name(MINECRAFT, allow_reserved=True))
        return namespace

    def _setup(self, name: str) -> None:
        self._name = name
        self.tags: Dict[TagType, Dict[str, Tag]] = {tag_type: {} for tag_type in TagType}
        self.functions: Dict[str, Function] = {}
        self.recipes: Dict[str, Recipe] = {}
        self.loot_tables: Dict[str, LootTable] = {}
        self.predicates: Dict[str, Predicate] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_builtin(self) -> bool:
        return self._name == MINECRAFT

    @property
    def block_tags(self) -> Dict[str, Tag]:
        return self.tags[TagType.BLOCK]

    @property
    def item_tags(self) -> Dict[str, Tag]:
        return self.tags[TagType.ITEM]

    @property
    def function_tags(self) -> Dict[str, Tag]:
        return self.tags[TagType.FUNCTION]

    # === INSERTION HELPERS ===

    def _insert(self, collection: Dict[str, E], entity: E, label: str) -> E:
        """Store a copy of entity under its path and return the copy."""
        if entity.path in collection:
            raise DuplicateEntityError(
                f"The {label} {entity.path} has already been added to namespace {self._name}"
            )
        stored = entity.copy()
        collection[stored.path] = stored
        logger.debug(f"Added {label} {self._name}:{stored.path}")
        return stored

    # === TAGS ===

    def add_tag(self, tag: Tag) -> Tag:
        """Add a copy of tag and return the stored copy."""
        return self._insert(self.tags[tag.tag_type], tag, f"{tag.tag_type.value} tag")

    def create_tag(
        self,
        path: str,
        tag_type: Union[TagType, str],
        values: Optional[Iterable[str]] = None,
    ) -> Tag:
        """Create a tag and add a copy of it to the namespace.

        Returns the created tag. Later changes to it do not reach the
        namespace; use get_tag for the stored one.
        """
        tag = Tag(path, tag_type, values)
        self.add_tag(tag)
        return tag

    def get_tag(self, path: str, tag_type: Union[TagType, str]) -> Optional[Tag]:
        return self.tags[TagType.parse(tag_type)].get(path)

    def delete_tag(self, path: str, tag_type: Union[TagType, str]) -> None:
        """Remove a tag; missing tags are ignored."""
        self.tags[TagType.parse(tag_type)].pop(path, None)

    # === FUNCTIONS ===

    def add_function(self, function: Function) -> Function:
        return self._insert(self.functions, function, "function")

    def create_function(
        self, path: str, commands: Optional[Iterable[Union[Command, str]]] = None
    ) -> Function:
        function = Function(path, commands)
        self.add_function(function)
        return function

    def get_function(self, path: str) -> Optional[Function]:
        return self.functions.get(path)

    def delete_function(self, path: str) -> None:
        self.functions.pop(path, None)

    # === RECIPES ===

    def add_recipe(self, recipe: Recipe) -> Recipe:
        return self._insert(self.recipes, recipe, "recipe")

    def get_recipe(self, path: str) -> Optional[Recipe]:
        return self.recipes.get(path)

    def delete_recipe(self, path: str) -> None:
        self.recipes.pop(path, None)

    # === LOOT TABLES ===

    def add_loot_table(self, loot_table: LootTable) -> LootTable:
        return self._insert(self.loot_tables, loot_table, "loot table")

    def create_loot_table(self, path: str) -> LootTable:
        loot_table = LootTable(path)
        self.add_loot_table(loot_table)
        return loot_table

    def get_loot_table(self, path: str) -> Optional[LootTable]:
        return self.loot_tables.get(path)

    def delete_loot_table(self, path: str) -> None:
        self.loot_tables.pop(path, None)

    # === PREDICATES ===

    def add_predicate(self, predicate: Predicate) -> Predicate:
        return self._insert(self.predicates, predicate, "predicate")

    def create_predicate(
        self, path: str, conditions: Optional[Iterable[Condition]] = None
    ) -> Predicate:
        predicate = Predicate(path, conditions)
        self.add_predicate(predicate)
        return predicate

    def get_predicate(self, path: str) -> Optional[Predicate]:
        return self.predicates.get(path)

    def delete_predicate(self, path: str) -> None:
        self.predicates.pop(path, None)

    # === COPY AND COMPILE ===

    def copy(self) -> "Namespace":
        """Return a namespace with the same name and copies of every entity."""
        clone = self.__class__.__new__(self.__class__)
        clone._setup(self._name)
        for tag_type, tags in self.tags.items():
            clone.tags[tag_type] = {path: tag.copy() for path, tag in tags.items()}
        clone.functions = {path: f.copy() for path, f in self.functions.items()}
        clone.recipes = {path: r.copy() for path, r in self.recipes.items()}
        clone.loot_tables = {path: t.copy() for path, t in self.loot_tables.items()}
        clone.predicates = {path: p.copy() for path, p in self.predicates.items()}
        return clone

    def entities(self) -> Iterator[Entity]:
        """Iterate over every stored entity, tags first."""
        for tag_type in TagType:
            yield from self.tags[tag_type].values()
        yield from self.functions.values()
        yield from self.recipes.values()
        yield from self.loot_tables.values()
        yield from self.predicates.values()

    def __len__(self) -> int:
        return sum(1 for _ in self.entities())

    def compile(self, pack_root: Union[str, Path], writer: Optional[FileWriter] = None) -> List[Path]:
        """Write every file of this namespace below pack_root/data/<name>.

        All category folders are created even when empty.

        Returns:
            Paths of the written files
        """
        writer = writer or FileWriter()
        namespace_root = Path(pack_root) / "data" / self._name
        writer.ensure_directory(namespace_root)
        for category in DATA_CATEGORIES:
            writer.ensure_directory(namespace_root / category)

        written: List[Path] = []
        for tag_type in TagType:
            tags_root = namespace_root / "tags" / tag_type.directory
            for tag in self.tags[tag_type].values():
                written.append(tag.compile(tags_root, writer))

        for collection in (self.functions, self.recipes, self.loot_tables, self.predicates):
            for entity in collection.values():
                written.append(entity.compile(namespace_root / entity.category, writer))

        logger.debug(f"Compiled namespace '{self._name}': {len(written)} files")
        return written

    def __repr__(self) -> str:
        return f"Namespace(name={self._name!r}, entities={len(self)})"
