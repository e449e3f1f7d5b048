"""
Recipe files.

Covers shaped and shapeless crafting, the four cooking recipe kinds and
stonecutting. Ingredients are given as Ingredient objects, as item ids
('stick'), as tag ids prefixed with '#' ('#minecraft:planks'), or as a
list of any of these meaning "any one of".
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..naming import resource_id
from ..output import FileWriter
from .base import Entity


@dataclass(frozen=True)
class Ingredient:
    """An item or item tag accepted by a recipe slot."""
    item: Optional[str] = None
    tag: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.item is None) == (self.tag is None):
            raise ValueError("Ingredient needs exactly one of item or tag")

    @classmethod
    def parse(cls, value: "IngredientLike") -> "Ingredient | List[Ingredient]":
        """Convert an ingredient-like value to Ingredient (or a list of them)."""
        if isinstance(value, Ingredient):
            return value
        if isinstance(value, str):
            if value.startswith("#"):
                return cls(tag=value[1:])
            return cls(item=value)
        if isinstance(value, (list, tuple)):
            options: List[Ingredient] = []
            for option in value:
                parsed = cls.parse(option)
                if isinstance(parsed, list):
                    options.extend(parsed)
                else:
                    options.append(parsed)
            return options
        raise TypeError(f"Unsupported ingredient: {value!r}")

    def to_json(self) -> Dict[str, str]:
        if self.item is not None:
            return {"item": resource_id(self.item)}
        return {"tag": resource_id(str(self.tag))}


IngredientLike = Union[Ingredient, str, Sequence[Union[Ingredient, str]]]


def _ingredient_json(ingredient: "Ingredient | List[Ingredient]") -> Any:
    if isinstance(ingredient, list):
        return [i.to_json() for i in ingredient]
    return ingredient.to_json()


class Recipe(Entity):
    """Base class for every recipe kind."""

    category = "recipes"
    extension = "json"
    recipe_type = ""

    def __init__(self, path: str, group: Optional[str] = None):
        super().__init__(path)
        self.group = group

    def _base_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": resource_id(self.recipe_type)}
        if self.group:
            data["group"] = self.group
        return data

    @abstractmethod
    def to_json(self) -> Dict[str, Any]:
        """Recipe body as a JSON-ready dict."""

    def render(self, writer: FileWriter) -> bytes:
        return writer.dump_json(self.to_json())


class ShapedRecipe(Recipe):
    """A crafting table recipe with a fixed pattern.

    Args:
        pattern: Up to three rows of equal width (max 3), one character per slot,
            space for an empty slot
        key: Maps each pattern character to an ingredient
        result: Id of the crafted item
        count: Number of items crafted
    """

    recipe_type = "crafting_shaped"

    def __init__(
        self,
        path: str,
        pattern: Sequence[str],
        key: Mapping[str, IngredientLike],
        result: str,
        count: int = 1,
        group: Optional[str] = None,
    ):
        super().__init__(path, group)
        self.pattern: List[str] = list(pattern)
        self.key: Dict[str, Ingredient | List[Ingredient]] = {
            symbol: Ingredient.parse(value) for symbol, value in key.items()
        }
        self.result = result
        self.count = count
        self._validate()

    def _validate(self) -> None:
        if not 1 <= len(self.pattern) <= 3:
            raise ValueError("Shaped recipe pattern must have 1 to 3 rows")
        widths = {len(row) for row in self.pattern}
        if len(widths) != 1 or not 1 <= widths.pop() <= 3:
            raise ValueError("Shaped recipe rows must all have the same width of 1 to 3")
        symbols = {c for row in self.pattern for c in row if c != " "}
        missing = symbols - self.key.keys()
        if missing:
            raise ValueError(f"Pattern symbols without a key: {sorted(missing)}")
        unused = self.key.keys() - symbols
        if unused:
            raise ValueError(f"Keys not used in the pattern: {sorted(unused)}")

    def to_json(self) -> Dict[str, Any]:
        data = self._base_json()
        data["pattern"] = list(self.pattern)
        data["key"] = {s: _ingredient_json(i) for s, i in self.key.items()}
        data["result"] = {"item": resource_id(self.result), "count": self.count}
        return data

    def copy(self) -> "ShapedRecipe":
        return ShapedRecipe(
            self.path,
            list(self.pattern),
            {s: list(i) if isinstance(i, list) else i for s, i in self.key.items()},
            self.result,
            self.count,
            self.group,
        )


class ShapelessRecipe(Recipe):
    """A crafting recipe where ingredient placement does not matter (1 to 9 ingredients)."""

    recipe_type = "crafting_shapeless"

    def __init__(
        self,
        path: str,
        ingredients: Iterable[IngredientLike],
        result: str,
        count: int = 1,
        group: Optional[str] = None,
    ):
        super().__init__(path, group)
        self.ingredients: List[Ingredient | List[Ingredient]] = [
            Ingredient.parse(i) for i in ingredients
        ]
        if not 1 <= len(self.ingredients) <= 9:
            raise ValueError("Shapeless recipe needs 1 to 9 ingredients")
        self.result = result
        self.count = count

    def to_json(self) -> Dict[str, Any]:
        data = self._base_json()
        data["ingredients"] = [_ingredient_json(i) for i in self.ingredients]
        data["result"] = {"item": resource_id(self.result), "count": self.count}
        return data

    def copy(self) -> "ShapelessRecipe":
        return ShapelessRecipe(
            self.path,
            [list(i) if isinstance(i, list) else i for i in self.ingredients],
            self.result,
            self.count,
            self.group,
        )


# Default cooking time in ticks per cooking recipe kind
COOKING_TIMES = {
    "smelting": 200,
    "blasting": 100,
    "smoking": 100,
    "campfire_cooking": 600,
}


class CookingRecipe(Recipe):
    """A furnace, blast furnace, smoker or campfire recipe."""

    def __init__(
        self,
        path: str,
        ingredient: IngredientLike,
        result: str,
        experience: float = 0.0,
        cooking_time: Optional[int] = None,
        kind: str = "smelting",
        group: Optional[str] = None,
    ):
        super().__init__(path, group)
        if kind not in COOKING_TIMES:
            raise ValueError(
                f"Unknown cooking recipe kind {kind!r}, expected one of {sorted(COOKING_TIMES)}"
            )
        self.kind = kind
        self.ingredient = Ingredient.parse(ingredient)
        self.result = result
        self.experience = experience
        self.cooking_time = COOKING_TIMES[kind] if cooking_time is None else cooking_time

    @property
    def recipe_type(self) -> str:  # type: ignore[override]
        return self.kind

    def to_json(self) -> Dict[str, Any]:
        data = self._base_json()
        data["ingredient"] = _ingredient_json(self.ingredient)
        data["result"] = resource_id(self.result)
        data["experience"] = self.experience
        data["cookingtime"] = self.cooking_time
        return data

    def copy(self) -> "CookingRecipe":
        ingredient = self.ingredient
        return CookingRecipe(
            self.path,
            list(ingredient) if isinstance(ingredient, list) else ingredient,
            self.result,
            self.experience,
            self.cooking_time,
            self.kind,
            self.group,
        )


class StonecuttingRecipe(Recipe):
    recipe_type = "stonecutting"

    def __init__(
        self,
        path: str,
        ingredient: IngredientLike,
        result: str,
        count: int = 1,
        group: Optional[str] = None,
    ):
        super().__init__(path, group)
        self.ingredient = Ingredient.parse(ingredient)
        self.result = result
        self.count = count

    def to_json(self) -> Dict[str, Any]:
        data = self._base_json()
        data["ingredient"] = _ingredient_json(self.ingredient)
        data["result"] = resource_id(self.result)
        data["count"] = self.count
        return data

    def copy(self) -> "StonecuttingRecipe":
        ingredient = self.ingredient
        return StonecuttingRecipe(
            self.path,
            list(ingredient) if isinstance(ingredient, list) else ingredient,
            self.result,
            self.count,
            self.group,
        )
