"""
File writer used by every compile step.

Wraps directory creation and file writes so that entities, namespaces and
the datapack itself never touch the filesystem directly. JSON bodies are
encoded with orjson.
"""

import logging
from pathlib import Path
from typing import Any

import orjson


class FileWriter:
    """Writes compiled files below an output root.

    Safe to share between threads: directory creation tolerates directories
    that already exist, and every file is written by exactly one caller.
    """

    def __init__(self, pretty: bool = True, log_files: bool = True):
        """
        Args:
            pretty: Indent JSON output with two spaces (compact when False)
            log_files: Log a debug line for every file written
        """
        self.pretty = pretty
        self.log_files = log_files
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def ensure_directory(self, path: str | Path) -> Path:
        """Create a directory and its parents if they do not exist yet."""
        directory = Path(path)
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def write_file(self, path: str | Path, contents: str | bytes) -> Path:
        """Write a file, overwriting any previous content."""
        file_path = Path(path)
        if isinstance(contents, str):
            contents = contents.encode("utf-8")
        file_path.write_bytes(contents)
        if self.log_files:
            self.logger.debug(f"Wrote {file_path} ({len(contents)} bytes)")
        return file_path

    def dump_json(self, data: Any) -> bytes:
        """Encode data the same way write_json does."""
        option = orjson.OPT_INDENT_2 if self.pretty else 0
        return orjson.dumps(data, option=option)

    def write_json(self, path: str | Path, data: Any) -> Path:
        """Encode data as JSON and write it to path."""
        return self.write_file(path, self.dump_json(data))
