"""
Compilable datapack files.

Every entity has a fixed path, knows how to render its own body and how
to copy itself. Namespaces store copies of the entities added to them.
"""

from .base import Entity
from .function import Function, Command, Value, ValueArray
from .tag import Tag, TagType
from .recipe import (
    Recipe,
    Ingredient,
    ShapedRecipe,
    ShapelessRecipe,
    CookingRecipe,
    StonecuttingRecipe,
)
from .conditions import Condition, LootFunction
from .loot import LootTable, Pool, Entry
from .predicate import Predicate

__all__ = [
    "Entity",
    # Functions
    "Function",
    "Command",
    "Value",
    "ValueArray",
    # Tags
    "Tag",
    "TagType",
    # Recipes
    "Recipe",
    "Ingredient",
    "ShapedRecipe",
    "ShapelessRecipe",
    "CookingRecipe",
    "StonecuttingRecipe",
    # Loot tables and predicates
    "Condition",
    "LootFunction",
    "LootTable",
    "Pool",
    "Entry",
    "Predicate",
]
