"""Shared fixtures for mcdatapack tests."""

import logging
from pathlib import Path
from typing import Iterator

import pytest

from mcdatapack.output import FileWriter
from mcdatapack.settings import AppSettings


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    """Settings stored in a throwaway INI file."""
    return AppSettings(profile="test", settings_file=tmp_path / "settings.ini")


@pytest.fixture
def writer() -> FileWriter:
    """Pretty-printing writer, as used by default compiles."""
    return FileWriter()


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Compile destination that does not exist yet."""
    return tmp_path / "out"


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Close and drop the handlers setup_logging installed on the root logger."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
