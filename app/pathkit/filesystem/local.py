"""Local disk filesystem provider.

Thin adapter that exposes the machine's own filesystem through the
FileSystemProvider interface. Paths come back with the neutral ``/``
separator on every platform.
"""

import logging
from pathlib import Path

from pathkit.core.components import normalize_slashes
from pathkit.filesystem.models import DirectoryEntry, EntryType
from pathkit.filesystem.provider import FileSystemProvider

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystemProvider):
    """Filesystem provider backed by the local disk."""

    def read_directory(self, path: str) -> list[DirectoryEntry]:
        """List a directory, sorted by name.

        Entries whose type cannot be determined are skipped with a warning.
        """
        entries: list[DirectoryEntry] = []
        for child in sorted(Path(path).iterdir()):
            try:
                entry_type = self._get_entry_type(child)
            except OSError:
                logger.warning("Cannot determine type of: %s", child)
                continue
            entries.append(DirectoryEntry(name=child.name, entry_type=entry_type))
        return entries

    def exists(self, path: str) -> bool:
        """Check if a path exists (dead symlinks count as missing)."""
        return Path(path).exists()

    def real_case_path(self, path: str) -> str:
        """Get the on-disk casing of a path.

        Symlinks are resolved first; each component is then replaced by
        the directory entry it matches, so a case-insensitive filesystem
        reports the stored spelling rather than the requested one.

        Raises:
            FileNotFoundError: If the path does not exist.
        """
        resolved = Path(path).resolve(strict=True)

        real = Path(resolved.anchor)
        for part in resolved.parts[1:]:
            names = {child.name for child in real.iterdir()}
            if part not in names:
                folded = part.casefold()
                part = next((name for name in sorted(names) if name.casefold() == folded), part)
            real = real / part

        return normalize_slashes(str(real))

    @staticmethod
    def _get_entry_type(path: Path) -> EntryType:
        """Classify a directory entry.

        Checks for symlinks first, before is_dir() which follows them.
        """
        if path.is_symlink():
            return EntryType.SYMLINK
        if path.is_dir():
            return EntryType.DIRECTORY
        return EntryType.FILE
