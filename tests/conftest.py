"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable, Iterable

import pytest
from pathkit.core.components import combine_components, normalize_path, split_components
from pathkit.filesystem.models import DirectoryEntry, EntryType
from pathkit.filesystem.provider import FileSystemProvider


class MemoryFileSystem(FileSystemProvider):
    """In-memory filesystem provider for tests.

    Files are given as absolute paths; their parent directories are
    created implicitly. Lookups are case-insensitive when ``ignore_case``
    is set, while listings keep the casing the entries were created with.
    """

    def __init__(
        self,
        files: Iterable[str] = (),
        *,
        directories: Iterable[str] = (),
        ignore_case: bool = False,
        unreadable: Iterable[str] = (),
    ) -> None:
        self.ignore_case = ignore_case
        self.exists_calls: list[str] = []
        self._types: dict[str, EntryType] = {}
        self._real: dict[str, str] = {}
        self._unreadable = {self._key(p) for p in unreadable}
        self._add("/", EntryType.DIRECTORY)
        for directory in directories:
            self._add_with_parents(directory, EntryType.DIRECTORY)
        for file in files:
            self._add_with_parents(file, EntryType.FILE)

    def _key(self, path: str) -> str:
        normalized = normalize_path(path).rstrip("/") or "/"
        return normalized.casefold() if self.ignore_case else normalized

    def _add(self, path: str, entry_type: EntryType) -> None:
        key = self._key(path)
        self._types.setdefault(key, entry_type)
        self._real.setdefault(key, normalize_path(path).rstrip("/") or "/")

    def _add_with_parents(self, path: str, entry_type: EntryType) -> None:
        components = split_components(path)
        for depth in range(1, len(components)):
            if depth > 1 or components[0]:
                self._add(combine_components(components[:depth]), EntryType.DIRECTORY)
        self._add(path, entry_type)

    def read_directory(self, path: str) -> list[DirectoryEntry]:
        key = self._key(path)
        if key not in self._types:
            raise FileNotFoundError(path)
        if self._types[key] != EntryType.DIRECTORY:
            raise NotADirectoryError(path)
        if key in self._unreadable:
            raise PermissionError(path)

        entries: list[DirectoryEntry] = []
        for child_key, entry_type in self._types.items():
            components = split_components(child_key)
            if len(components) < 2 or self._key(combine_components(components[:-1])) != key:
                continue
            name = split_components(self._real[child_key])[-1]
            entries.append(DirectoryEntry(name=name, entry_type=entry_type))
        return sorted(entries, key=lambda e: e.name)

    def exists(self, path: str) -> bool:
        self.exists_calls.append(path)
        return self._key(path) in self._types

    def real_case_path(self, path: str) -> str:
        key = self._key(path)
        if key not in self._real:
            raise FileNotFoundError(path)
        return self._real[key]


@pytest.fixture
def make_memory_fs() -> Callable[..., MemoryFileSystem]:
    """Factory for in-memory filesystem providers."""
    return MemoryFileSystem


@pytest.fixture
def project_fs() -> MemoryFileSystem:
    """Case-sensitive in-memory tree resembling a small Python project."""
    return MemoryFileSystem(
        [
            "/proj/setup.py",
            "/proj/README.md",
            "/proj/src/pkg/__init__.py",
            "/proj/src/pkg/core.py",
            "/proj/src/pkg/core.pyi",
            "/proj/src/pkg/sub/deep.py",
            "/proj/src/pkg/__pycache__/core.cpython-311.pyc",
            "/proj/tests/test_core.py",
            "/proj/.venv/lib/site.py",
            "/proj/node_modules/lib/index.js",
        ]
    )
