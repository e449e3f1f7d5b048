"""Tests for namespace name, datapack name and resource path rules."""

import pytest

from mcdatapack.errors import DuplicateNameError, InvalidNameError, ReservedNameError
from mcdatapack.naming import (
    resource_id,
    validate_namespace_name,
    validate_pack_name,
    validate_resource_path,
)


class TestNamespaceNames:
    """Test namespace names: 0-9, a-z, _, - and '.' only."""

    @pytest.mark.parametrize("name", ["a", "mymod", "my_mod", "mod-2", "v1.2", "0", "..a"])
    def test_valid_names(self, name: str) -> None:
        """Test names made of allowed characters are returned unchanged."""
        assert validate_namespace_name(name) == name

    @pytest.mark.parametrize("name", ["Bad Name!", "", "MyMod", "a/b", "ns:x", "é"])
    def test_invalid_names(self, name: str) -> None:
        """Test names with other characters are rejected."""
        with pytest.raises(InvalidNameError):
            validate_namespace_name(name)

    @pytest.mark.parametrize("name", [".", ".."])
    def test_relative_folder_names_rejected(self, name: str) -> None:
        """Test '.' and '..' are rejected, they would not get their own data/ folder."""
        with pytest.raises(InvalidNameError):
            validate_namespace_name(name)

    def test_minecraft_is_reserved(self) -> None:
        """Test the built-in namespace name cannot be used."""
        with pytest.raises(ReservedNameError):
            validate_namespace_name("minecraft")

    def test_reserved_counts_as_duplicate(self) -> None:
        """Test the built-in namespace always exists, so its name is taken."""
        assert issubclass(ReservedNameError, DuplicateNameError)

    def test_minecraft_allowed_for_builtin(self) -> None:
        """Test the reserved name passes when explicitly allowed."""
        assert validate_namespace_name("minecraft", allow_reserved=True) == "minecraft"

    def test_invalid_name_is_value_error(self) -> None:
        """Test InvalidNameError can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_namespace_name("NOPE")


class TestPackNames:
    """Test datapack names, which become one folder below the destination."""

    @pytest.mark.parametrize("name", ["demo", "My Pack", "pack-1.2", "..hidden"])
    def test_valid_names(self, name: str) -> None:
        """Test any single folder name is accepted."""
        assert validate_pack_name(name) == name

    @pytest.mark.parametrize("name", ["", "   ", ".", "..", "../x", "a/b", "a\\b"])
    def test_invalid_names(self, name: str) -> None:
        """Test empty, relative and multi-folder names are rejected."""
        with pytest.raises(InvalidNameError):
            validate_pack_name(name)


class TestResourcePaths:
    """Test entity resource paths."""

    @pytest.mark.parametrize("path", ["load", "weapons/sword", "a/b/c.d", "x_y-z"])
    def test_valid_paths(self, path: str) -> None:
        """Test well-formed paths are returned unchanged."""
        assert validate_resource_path(path) == path

    @pytest.mark.parametrize(
        "path", ["", "/abs", "trailing/", "a//b", "../escape", "a/./b", "Upper", "sp ace"]
    )
    def test_invalid_paths(self, path: str) -> None:
        """Test empty segments, relative segments and bad characters are rejected."""
        with pytest.raises(InvalidNameError):
            validate_resource_path(path)


class TestResourceId:
    """Test id qualification."""

    def test_bare_id_gets_minecraft_prefix(self) -> None:
        """Test a bare id is placed in the minecraft namespace."""
        assert resource_id("stone") == "minecraft:stone"

    def test_qualified_id_unchanged(self) -> None:
        """Test an id that already has a namespace is kept."""
        assert resource_id("mymod:gem") == "mymod:gem"
