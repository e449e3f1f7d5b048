"""Tests for entity bodies, copies and per-file compile."""

from pathlib import Path

import orjson
import pytest

from mcdatapack.entities import (
    Command,
    Condition,
    CookingRecipe,
    Entry,
    Function,
    Ingredient,
    LootFunction,
    LootTable,
    Pool,
    Predicate,
    Recipe,
    ShapedRecipe,
    ShapelessRecipe,
    StonecuttingRecipe,
    Tag,
    TagType,
    Value,
    ValueArray,
)
from mcdatapack.errors import InvalidNameError, ValueTypeMismatchError
from mcdatapack.output import FileWriter


class TestValues:
    """Test SNBT value rendering."""

    @pytest.mark.parametrize(
        "type_, value, expected",
        [
            ("int", 5, "5"),
            ("byte", 1, "1b"),
            ("short", 300, "300s"),
            ("long", 3, "3L"),
            ("float", 2.5, "2.5f"),
            ("double", 0.1, "0.1d"),
        ],
    )
    def test_numeric_suffixes(self, type_: str, value: float, expected: str) -> None:
        """Test numeric types get their SNBT suffix."""
        assert Value(type_, value).compile() == expected

    def test_string_is_quoted_and_escaped(self) -> None:
        """Test strings are JSON-quoted."""
        assert Value("string", 'say "hi"').compile() == '"say \\"hi\\""'

    def test_unknown_type_is_string(self) -> None:
        """Test unknown value types fall back to string."""
        value = Value("text", "abc")
        assert value.type == "string"
        assert value.compile() == '"abc"'

    def test_value_array_renders_list(self) -> None:
        """Test arrays render as a bracketed list."""
        array = ValueArray("int", [Value("int", 1), Value("int", 2)])
        assert array.compile() == "[1, 2]"
        assert len(array) == 2

    def test_value_array_rejects_mixed_types(self) -> None:
        """Test arrays refuse elements of another type."""
        with pytest.raises(ValueTypeMismatchError):
            ValueArray("int", [Value("int", 1), Value("float", 1.5)])

    def test_value_array_append_checks_type(self) -> None:
        """Test append refuses elements of another type."""
        array = ValueArray("string", [Value("string", "a")])
        with pytest.raises(TypeError):
            array.append(Value("int", 1))
        assert len(array) == 1


class TestFunction:
    """Test Function bodies, copies and compile."""

    def test_commands_render_one_per_line(self, writer: FileWriter) -> None:
        """Test commands are joined with newlines."""
        function = Function("main")
        function.add_command(Command("say", ["hello"])).add_command("kill @e[type=item]")
        assert function.render(writer) == "say hello\nkill @e[type=item]"

    def test_command_with_values(self) -> None:
        """Test Value parameters render through compile()."""
        command = Command(
            "data",
            ["merge", "storage", "mymod:store", ValueArray("int", [Value("int", 1), Value("int", 2)])],
        )
        assert command.compile() == "data merge storage mymod:store [1, 2]"

    def test_command_with_numbers(self) -> None:
        """Test plain parameters are stringified."""
        assert Command("give", ["@p", "minecraft:diamond", 64]).compile() == "give @p minecraft:diamond 64"

    def test_copy_is_independent(self, writer: FileWriter) -> None:
        """Test the copy does not follow changes to the original."""
        array = ValueArray("int", [Value("int", 1)])
        function = Function("main", [Command("data", ["merge", array])])
        clone = Function.copy(function)

        function.add_command("say later")
        array.append(Value("int", 2))

        assert clone.render(writer) == "data merge [1]"
        assert clone.path == "main"

    def test_compile_nested_path(self, tmp_path: Path, writer: FileWriter) -> None:
        """Test nested paths create parent folders."""
        function = Function("util/math/add", ["scoreboard players add @s x 1"])
        written = function.compile(tmp_path / "functions", writer)

        assert written == tmp_path / "functions" / "util" / "math" / "add.mcfunction"
        assert written.read_text() == "scoreboard players add @s x 1"

    def test_path_is_read_only(self) -> None:
        """Test the path cannot be reassigned."""
        function = Function("main")
        with pytest.raises(AttributeError):
            function.path = "other"  # type: ignore[misc]

    def test_invalid_path(self) -> None:
        """Test a path escaping the category folder is rejected."""
        with pytest.raises(InvalidNameError):
            Function("../outside")


class TestTag:
    """Test Tag bodies, copies and compile."""

    def test_json_shape(self) -> None:
        """Test the default tag body and category folder."""
        tag = Tag("load", "function", ["mymod:main"])
        assert tag.to_json() == {"values": ["mymod:main"]}
        assert tag.category == "tags/functions"

    def test_replace_written_only_when_set(self) -> None:
        """Test replace appears when set."""
        tag = Tag("logs", TagType.BLOCK, ["oak_log"], replace=True)
        assert tag.to_json() == {"replace": True, "values": ["oak_log"]}

    def test_unknown_tag_type(self) -> None:
        """Test an unknown tag type is rejected."""
        with pytest.raises(InvalidNameError):
            Tag("x", "entity")

    def test_values_are_copied_from_argument(self) -> None:
        """Test the values list is copied on construction."""
        values = ["a"]
        tag = Tag("t", "item", values)
        values.append("b")
        assert tag.values == ["a"]

    def test_copy_is_independent(self) -> None:
        """Test the copy does not follow changes to the original."""
        tag = Tag("t", "item", ["a"])
        clone = tag.copy()
        tag.values.append("b")
        assert clone.values == ["a"]
        assert clone.tag_type is TagType.ITEM

    def test_tag_type_is_read_only(self) -> None:
        """Test the tag type cannot be reassigned, it is part of the storage key."""
        tag = Tag("t", "block", ["x"])
        with pytest.raises(AttributeError):
            tag.tag_type = TagType.ITEM  # type: ignore[misc]
        assert tag.tag_type is TagType.BLOCK
        assert tag.category == "tags/blocks"

    def test_compile_writes_json(self, tmp_path: Path, writer: FileWriter) -> None:
        """Test compile writes the JSON body under the path."""
        written = Tag("group/ores", "block", ["#minecraft:gold_ores"]).compile(tmp_path, writer)
        assert written == tmp_path / "group" / "ores.json"
        assert orjson.loads(written.read_bytes()) == {"values": ["#minecraft:gold_ores"]}


class TestRecipes:
    """Test recipe bodies and pattern validation."""

    def test_shaped_recipe(self) -> None:
        """Test a shaped recipe body."""
        recipe = ShapedRecipe("crafting_table", ["##", "##"], {"#": "oak_planks"}, "crafting_table")
        assert recipe.to_json() == {
            "type": "minecraft:crafting_shaped",
            "pattern": ["##", "##"],
            "key": {"#": {"item": "minecraft:oak_planks"}},
            "result": {"item": "minecraft:crafting_table", "count": 1},
        }

    def test_shaped_recipe_alternatives_and_group(self) -> None:
        """Test key alternatives, group and count."""
        recipe = ShapedRecipe(
            "torch", ["c", "s"], {"c": ["coal", "charcoal"], "s": "stick"}, "torch", count=4, group="torches"
        )
        data = recipe.to_json()
        assert data["group"] == "torches"
        assert data["key"]["c"] == [{"item": "minecraft:coal"}, {"item": "minecraft:charcoal"}]
        assert data["result"] == {"item": "minecraft:torch", "count": 4}

    def test_shaped_recipe_missing_key(self) -> None:
        """Test a pattern symbol without a key is rejected."""
        with pytest.raises(ValueError):
            ShapedRecipe("x", ["#X"], {"#": "stick"}, "stone")

    def test_shaped_recipe_unused_key(self) -> None:
        """Test a key not used by the pattern is rejected."""
        with pytest.raises(ValueError):
            ShapedRecipe("x", ["#"], {"#": "stick", "X": "stone"}, "stone")

    def test_shaped_recipe_ragged_pattern(self) -> None:
        """Test rows of different width are rejected."""
        with pytest.raises(ValueError):
            ShapedRecipe("x", ["##", "#"], {"#": "stick"}, "stone")

    def test_shapeless_recipe_with_tag(self) -> None:
        """Test '#' ingredients become tag ingredients."""
        recipe = ShapelessRecipe("buttons", ["#minecraft:planks"], "mymod:button", count=2)
        assert recipe.to_json() == {
            "type": "minecraft:crafting_shapeless",
            "ingredients": [{"tag": "minecraft:planks"}],
            "result": {"item": "mymod:button", "count": 2},
        }

    def test_shapeless_recipe_needs_ingredients(self) -> None:
        """Test an empty ingredient list is rejected."""
        with pytest.raises(ValueError):
            ShapelessRecipe("x", [], "stone")

    def test_cooking_recipe_defaults(self) -> None:
        """Test cooking time defaults per kind."""
        recipe = CookingRecipe("iron", "raw_iron", "iron_ingot", experience=0.7, kind="blasting")
        assert recipe.to_json() == {
            "type": "minecraft:blasting",
            "ingredient": {"item": "minecraft:raw_iron"},
            "result": "minecraft:iron_ingot",
            "experience": 0.7,
            "cookingtime": 100,
        }

    def test_cooking_recipe_unknown_kind(self) -> None:
        """Test an unknown cooking kind is rejected."""
        with pytest.raises(ValueError):
            CookingRecipe("x", "a", "b", kind="microwave")

    def test_stonecutting_recipe(self) -> None:
        """Test a stonecutting recipe body."""
        recipe = StonecuttingRecipe("stairs", "stone", "stone_stairs")
        assert recipe.to_json()["count"] == 1
        assert recipe.to_json()["type"] == "minecraft:stonecutting"

    def test_recipe_base_is_abstract(self) -> None:
        """Test the Recipe base cannot be built without a body."""
        with pytest.raises(TypeError):
            Recipe("x")  # type: ignore[abstract]

    def test_ingredient_needs_one_source(self) -> None:
        """Test an ingredient takes exactly one of item and tag."""
        with pytest.raises(ValueError):
            Ingredient()
        with pytest.raises(ValueError):
            Ingredient(item="a", tag="b")

    def test_copy_is_independent(self) -> None:
        """Test the copy does not follow changes to the original."""
        recipe = ShapelessRecipe("mix", ["dirt", "gravel"], "coarse_dirt")
        clone = recipe.copy()
        recipe.ingredients.append(Ingredient(item="sand"))
        assert len(clone.ingredients) == 2
        assert clone.to_json() == ShapelessRecipe("mix", ["dirt", "gravel"], "coarse_dirt").to_json()


class TestLootTables:
    """Test loot table, pool and entry bodies."""

    def test_full_table(self) -> None:
        """Test a table with pools, entries, functions and conditions."""
        table = LootTable("blocks/ore", type="block").add_pool(
            Pool(
                rolls=(1, 3),
                entries=[
                    Entry(
                        "item",
                        "diamond",
                        weight=2,
                        functions=[LootFunction("set_count", count={"min": 1, "max": 2})],
                    )
                ],
                conditions=[Condition("survives_explosion")],
            )
        )
        assert table.to_json() == {
            "type": "minecraft:block",
            "pools": [
                {
                    "rolls": {"min": 1, "max": 3},
                    "entries": [
                        {
                            "type": "minecraft:item",
                            "name": "minecraft:diamond",
                            "weight": 2,
                            "functions": [
                                {"function": "minecraft:set_count", "count": {"min": 1, "max": 2}}
                            ],
                        }
                    ],
                    "conditions": [{"condition": "minecraft:survives_explosion"}],
                }
            ],
        }

    def test_empty_table(self) -> None:
        """Test a table without pools."""
        assert LootTable("nothing").to_json() == {"pools": []}

    def test_composite_entry(self) -> None:
        """Test composite entries render their children."""
        entry = Entry("alternatives", children=[Entry("item", "apple"), Entry("empty")])
        assert entry.to_json() == {
            "type": "minecraft:alternatives",
            "children": [
                {"type": "minecraft:item", "name": "minecraft:apple"},
                {"type": "minecraft:empty"},
            ],
        }

    def test_tag_entry_expand(self) -> None:
        """Test tag entries carry expand."""
        entry = Entry("tag", "mymod:gems", expand=True)
        assert entry.to_json() == {"type": "minecraft:tag", "name": "mymod:gems", "expand": True}

    def test_named_entry_requires_name(self) -> None:
        """Test named entry types need a name."""
        with pytest.raises(ValueError):
            Entry("loot_table")

    def test_unknown_entry_type(self) -> None:
        """Test an unknown entry type is rejected."""
        with pytest.raises(ValueError):
            Entry("treasure", "x")

    def test_copy_is_deep(self) -> None:
        """Test the copy shares no nested objects with the original."""
        pool = Pool(entries=[Entry("item", "apple", functions=[LootFunction("set_count", count=1)])])
        table = LootTable("chests/cache", [pool])
        clone = table.copy()

        pool.entries.append(Entry("item", "bread"))
        pool.entries[0].functions[0].params["count"] = 5
        table.add_pool(Pool())

        assert len(clone.pools) == 1
        assert len(clone.pools[0].entries) == 1
        assert clone.pools[0].entries[0].functions[0].params["count"] == 1


class TestPredicates:
    """Test predicate and condition bodies."""

    def test_single_condition_is_object(self) -> None:
        """Test one condition renders as an object."""
        predicate = Predicate("chance", [Condition("random_chance", chance=0.5)])
        assert predicate.to_json() == {"condition": "minecraft:random_chance", "chance": 0.5}

    def test_several_conditions_are_array(self) -> None:
        """Test several conditions render as an array."""
        predicate = Predicate("night_rain").add_condition(
            Condition("weather_check", raining=True)
        ).add_condition(Condition("time_check", value={"min": 13000, "max": 23000}))
        data = predicate.to_json()
        assert isinstance(data, list)
        assert data[0] == {"condition": "minecraft:weather_check", "raining": True}

    def test_nested_conditions(self) -> None:
        """Test conditions nest inside condition parameters."""
        condition = Condition("inverted", term=Condition("random_chance", chance=0.25))
        assert condition.to_json() == {
            "condition": "minecraft:inverted",
            "term": {"condition": "minecraft:random_chance", "chance": 0.25},
        }

    def test_copy_is_deep(self) -> None:
        """Test the copy shares no nested objects with the original."""
        condition = Condition("alternative", terms=[Condition("killed_by_player")])
        predicate = Predicate("p", [condition])
        clone = predicate.copy()
        condition.params["terms"].append(Condition("random_chance", chance=0.1))
        assert len(clone.conditions[0].params["terms"]) == 1
