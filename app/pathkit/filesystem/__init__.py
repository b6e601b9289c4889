"""Filesystem access through injected providers.

This module provides the provider interface, a local disk provider,
the case-sensitivity probe and pattern-driven file discovery.
"""

from pathkit.filesystem.discovery import FileDiscovery, discover_files
from pathkit.filesystem.local import LocalFileSystem
from pathkit.filesystem.models import DirectoryEntry, EntryType
from pathkit.filesystem.probe import is_case_sensitive
from pathkit.filesystem.provider import FileSystemProvider

__all__ = [
    "DirectoryEntry",
    "EntryType",
    "FileDiscovery",
    "FileSystemProvider",
    "LocalFileSystem",
    "discover_files",
    "is_case_sensitive",
]
