"""
Name and path rules shared by datapacks, namespaces and entities.
"""

import re

from .errors import InvalidNameError, ReservedNameError

MINECRAFT = "minecraft"
"""Name of the built-in namespace every datapack owns."""

NAMESPACE_RE = re.compile(r"^[0-9a-z_.-]+$")
PATH_SEGMENT_RE = re.compile(r"^[0-9a-z_.-]+$")
RELATIVE_NAMES = (".", "..")


def validate_namespace_name(name: str, allow_reserved: bool = False) -> str:
    """Check a namespace name and return it unchanged.

    Raises:
        InvalidNameError: name is empty, is '.' or '..', or has characters
            outside 0-9, a-z, _, -, .
        ReservedNameError: name is 'minecraft' and allow_reserved is False
    """
    if not isinstance(name, str) or not NAMESPACE_RE.match(name):
        raise InvalidNameError(
            f"Invalid namespace name {name!r}: namespace names can only contain "
            "the characters 0-9, a-z, _, -, ."
        )
    if name in RELATIVE_NAMES:
        raise InvalidNameError(
            f"Invalid namespace name {name!r}: '.' and '..' are not folder names"
        )
    if name == MINECRAFT and not allow_reserved:
        raise ReservedNameError(
            "The 'minecraft' namespace is created by every datapack "
            "(datapack.minecraft) and cannot be created or added again"
        )
    return name


def validate_pack_name(name: str) -> str:
    """Check a datapack name, which becomes a single folder below the destination.

    Any character the filesystem takes is allowed except path separators;
    empty names and '.'/'..' are rejected.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidNameError(f"Invalid datapack name {name!r}: name is empty")
    if "/" in name or "\\" in name or name in RELATIVE_NAMES:
        raise InvalidNameError(
            f"Invalid datapack name {name!r}: must be a single folder name"
        )
    return name


def validate_resource_path(path: str) -> str:
    """Check an entity path such as 'weapons/sword' and return it unchanged.

    Each '/'-separated segment may only use 0-9, a-z, _, -, . and the
    relative segments '.' and '..' are rejected.
    """
    if not isinstance(path, str) or not path:
        raise InvalidNameError(f"Invalid resource path {path!r}: path is empty")
    for segment in path.split("/"):
        if not PATH_SEGMENT_RE.match(segment) or segment in RELATIVE_NAMES:
            raise InvalidNameError(
                f"Invalid resource path {path!r}: bad segment {segment!r}"
            )
    return path


def resource_id(value: str) -> str:
    """Qualify a bare id with the minecraft namespace ('stone' -> 'minecraft:stone')."""
    if ":" in value:
        return value
    return f"{MINECRAFT}:{value}"
