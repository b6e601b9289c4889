"""Filesystem entry models reported by filesystem providers.

This module defines the data structures a provider returns when listing
a directory.
"""

from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    """Type of a directory entry.

    Attributes:
        DIRECTORY: Regular directory.
        FILE: Regular file (or anything that is neither directory nor link).
        SYMLINK: Symbolic link. Providers do not say what it points to.
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A single entry of a directory listing.

    Attributes:
        name: Entry name within its directory (no separators).
        entry_type: Type of the entry.
    """

    name: str
    entry_type: EntryType

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)
        if "/" in self.name or "\\" in self.name:
            msg = f"Entry name cannot contain a separator, got {self.name!r}"
            raise ValueError(msg)

    @property
    def is_directory(self) -> bool:
        """Check if the entry is a directory."""
        return self.entry_type == EntryType.DIRECTORY
