"""
mcdatapack: build Minecraft datapacks in Python.

Model functions, tags, recipes, loot tables and predicates as objects,
group them into namespaces and compile the whole pack to its folder
layout with a pack.mcmeta manifest.
"""

__version__ = "0.1.0"
__author__ = "mcdatapack Contributors"

# Core model
from .pack import Datapack, Namespace
from .errors import (
    DatapackError,
    InvalidNameError,
    ReservedNameError,
    DuplicateNameError,
    DuplicateEntityError,
    ValueTypeMismatchError,
)
from .output import FileWriter

# Entities
from .entities import (
    Entity,
    Function, Command, Value, ValueArray,
    Tag, TagType,
    Recipe, Ingredient, ShapedRecipe, ShapelessRecipe,
    CookingRecipe, StonecuttingRecipe,
    LootTable, Pool, Entry, Condition, LootFunction,
    Predicate,
)

# Configuration and logging
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging

__all__ = [
    # Core
    'Datapack',
    'Namespace',
    'FileWriter',

    # Errors
    'DatapackError',
    'InvalidNameError',
    'ReservedNameError',
    'DuplicateNameError',
    'DuplicateEntityError',
    'ValueTypeMismatchError',
    'ConfigError',

    # Entities
    'Entity',
    'Function',
    'Command',
    'Value',
    'ValueArray',
    'Tag',
    'TagType',
    'Recipe',
    'Ingredient',
    'ShapedRecipe',
    'ShapelessRecipe',
    'CookingRecipe',
    'StonecuttingRecipe',
    'LootTable',
    'Pool',
    'Entry',
    'Condition',
    'LootFunction',
    'Predicate',

    # Configuration and logging
    'AppSettings',
    'setup_logging',
]
