"""
Shared pytest fixtures and utilities for the nugetconf test suite.
"""

from pathlib import Path
from typing import Dict, Any, Callable

import pytest
import yaml


class MemoryFileStore:
    """In-memory stand-in for FileStore keyed by path string."""

    def __init__(self, files: Dict[str, str] | None = None):
        self.files = dict(files or {})
        self.writes = []

    def read_text(self, path) -> str:
        try:
            return self.files[str(path)]
        except KeyError:
            raise FileNotFoundError(str(path))

    def write_text(self, path, text: str) -> None:
        self.files[str(path)] = text
        self.writes.append((str(path), text))


@pytest.fixture
def project_root() -> Path:
    """
    Repository root path for locating fixtures and sample data.
    """
    return Path(__file__).resolve().parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """
    Path to shared static test fixtures.
    """
    return project_root / "tests" / "data"


@pytest.fixture
def memory_store() -> MemoryFileStore:
    """Empty in-memory file store."""
    return MemoryFileStore()


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    """
    Create a nugetconf.yaml in a temp directory.

    Usage:
        path = make_config({"proxy": {"url": "http://proxy/"}})
    """

    def _builder(overrides: Dict[str, Any] | None = None) -> Path:
        base = {
            "nuget": {"config_path": str(tmp_path / "nuget.config")},
            "logging": {"level": "INFO", "console": False, "file": None},
        }
        for section, values in (overrides or {}).items():
            if isinstance(values, dict):
                base.setdefault(section, {}).update(values)
            else:
                base[section] = values

        path = tmp_path / "nugetconf.yaml"
        path.write_text(yaml.safe_dump(base))
        return path

    return _builder
