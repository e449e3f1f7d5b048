"""
Datapack: the top-level compiled unit.

Owns the built-in 'minecraft' namespace and any number of user
namespaces, and writes them together with the pack.mcmeta manifest.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from ..errors import DuplicateNameError, ReservedNameError
from ..naming import MINECRAFT, validate_pack_name
from ..output import FileWriter
from ..settings.output import DEFAULT_COMPILE_WORKERS, DEFAULT_PACK_FORMAT
from ..settings.types import ConfigError
from .namespace import Namespace

if TYPE_CHECKING:
    from ..settings import AppSettings

MANIFEST_NAME = "pack.mcmeta"


class Datapack:
    """A datapack made of namespaces.

    Mutation (add/create/delete) is meant for a single owner and is not
    locked. Compilation runs the manifest write and each namespace on a
    thread pool; they write to separate folders.
    """

    def __init__(
        self,
        name: str,
        format: Optional[int] = None,
        description: Optional[str] = None,
        settings: Optional["AppSettings"] = None,
    ):
        """Create a datapack.

        Args:
            name: Datapack name, also the folder it compiles to
            format: pack_format written to pack.mcmeta (settings value, or 5)
            description: Manifest description (defaults to name)
            settings: Optional app settings for output path, format and workers

        Raises:
            InvalidNameError: name is empty, contains a path separator, or is . or ..
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._name = validate_pack_name(name)
        self.settings = settings

        if format is None:
            format = settings.pack_format if settings else DEFAULT_PACK_FORMAT
        self.format = format
        self.description = description if description is not None else name

        self.minecraft = Namespace.builtin()
        self.namespaces: Dict[str, Namespace] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def meta(self) -> Dict[str, Any]:
        """Contents of pack.mcmeta."""
        return {
            "pack": {
                "pack_format": self.format,
                "description": self.description,
            }
        }

    # === NAMESPACES ===

    def add_namespace(self, namespace: Namespace) -> Namespace:
        """Add a copy of namespace and return the stored copy.

        Raises:
            ReservedNameError: namespace is named 'minecraft' (use datapack.minecraft)
            DuplicateNameError: a namespace with that name was already added
        """
        if namespace.name == MINECRAFT:
            raise ReservedNameError(
                "The minecraft namespace is built into every datapack, use datapack.minecraft"
            )
        if namespace.name in self.namespaces:
            raise DuplicateNameError(
                f"The namespace {namespace.name} has already been added to this datapack"
            )
        stored = namespace.copy()
        self.namespaces[stored.name] = stored
        self.logger.debug(f"Added namespace '{stored.name}' to datapack '{self._name}'")
        return stored

    def create_namespace(self, name: str) -> Namespace:
        """Create a namespace, add it, and return the stored namespace."""
        return self.add_namespace(Namespace(name))

    def get_namespace(self, name: str) -> Optional[Namespace]:
        if name == MINECRAFT:
            return self.minecraft
        return self.namespaces.get(name)

    def delete_namespace(self, name: str) -> None:
        """Remove a namespace; unknown names are ignored."""
        self.namespaces.pop(name, None)

    def all_namespaces(self) -> List[Namespace]:
        """The 'minecraft' namespace followed by user namespaces in insertion order."""
        return [self.minecraft, *self.namespaces.values()]

    # === COMPILE ===

    def _resolve_destination(self, destination: Optional[Union[str, Path]]) -> Path:
        if destination is not None:
            return Path(destination)
        if self.settings and self.settings.output_path:
            return self.settings.output_path
        raise ConfigError(
            "No destination given and no output path configured in settings"
        )

    def write_manifest(self, pack_root: Path, writer: FileWriter) -> Path:
        return writer.write_json(pack_root / MANIFEST_NAME, self.meta)

    def compile(
        self,
        destination: Optional[Union[str, Path]] = None,
        writer: Optional[FileWriter] = None,
    ) -> Path:
        """Write the datapack to destination/<name> and return that folder.

        The manifest and every namespace are written concurrently. If any
        of them fails, the remaining ones still finish, nothing is rolled
        back, and the first error is raised.
        """
        pack_root = self._resolve_destination(destination) / self._name
        if writer is None:
            if self.settings:
                writer = FileWriter(
                    pretty=self.settings.pretty_json,
                    log_files=self.settings.log_compiled_files,
                )
            else:
                writer = FileWriter()
        max_workers = (
            self.settings.compile_workers if self.settings else DEFAULT_COMPILE_WORKERS
        )

        namespaces = self.all_namespaces()
        self.logger.info(
            f"Compiling datapack '{self._name}' ({len(namespaces)} namespaces) to {pack_root}"
        )
        writer.ensure_directory(pack_root / "data")

        errors: List[BaseException] = []
        file_count = 0
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures: Dict[Future[Any], str] = {
                executor.submit(self.write_manifest, pack_root, writer): MANIFEST_NAME
            }
            for namespace in namespaces:
                futures[executor.submit(namespace.compile, pack_root, writer)] = namespace.name

            for future in as_completed(futures):
                label = futures[future]
                try:
                    result = future.result()
                except Exception as e:
                    self.logger.error(f"Failed to compile {label}: {e}")
                    errors.append(e)
                    continue
                file_count += len(result) if isinstance(result, list) else 1
                self.logger.debug(f"Finished {label}")

        if errors:
            raise errors[0]

        self.logger.info(f"Datapack '{self._name}' compiled: {file_count} files written")
        return pack_root

    def __repr__(self) -> str:
        return f"Datapack(name={self._name!r}, format={self.format}, namespaces={list(self.namespaces)})"
