"""Source file discovery driven by include and exclude patterns.

Walks a filesystem provider starting from each include spec's wildcard
root, so only directories that can hold matches are ever listed.
"""

import logging
from collections.abc import Iterator, Sequence

from pathkit.core.components import combine_paths, ensure_trailing_separator
from pathkit.core.wildcard import FileSpec, matches_any
from pathkit.filesystem.models import DirectoryEntry
from pathkit.filesystem.provider import FileSystemProvider

logger = logging.getLogger(__name__)


class FileDiscovery:
    """Enumerates files matching include specs and no exclude spec.

    Directories matched by an exclude spec are pruned without being
    listed. Symlinks are reported like files when they match but are
    never descended into.

    Args:
        fs: Filesystem provider to walk.
        excludes: Specs for paths to leave out.
        max_depth: Maximum number of directory levels to list below a
            wildcard root (1 = only the root itself). None for no limit.
    """

    def __init__(
        self,
        fs: FileSystemProvider,
        *,
        excludes: Sequence[FileSpec] = (),
        max_depth: int | None = None,
    ) -> None:
        if max_depth is not None and max_depth < 1:
            msg = f"max_depth must be at least 1, got {max_depth}"
            raise ValueError(msg)
        self._fs = fs
        self._excludes = tuple(excludes)
        self._max_depth = max_depth

    def discover(self, includes: Sequence[FileSpec]) -> list[str]:
        """Find all files matched by the include specs.

        Args:
            includes: Specs for paths to report.

        Returns:
            Sorted, de-duplicated list of matching file paths.
        """
        found: set[str] = set()
        for spec in includes:
            found.update(self._discover_spec(spec))
        return sorted(found)

    def _discover_spec(self, spec: FileSpec) -> Iterator[str]:
        root = spec.wildcard_root
        if root.endswith(":"):
            # List a bare drive as its root directory
            root = ensure_trailing_separator(root)
        if not self._fs.exists(root):
            logger.debug("Skipping include %r: %s does not exist", spec.pattern, root)
            return
        if matches_any(self._excludes, root):
            logger.debug("Skipping include %r: %s is excluded", spec.pattern, root)
            return

        try:
            entries = self._fs.read_directory(root)
        except NotADirectoryError:
            # The include names a single file
            if spec.matches(root):
                yield root
            return
        except PermissionError:
            logger.warning("Permission denied reading directory: %s", root)
            return

        yield from self._walk(spec, root, entries, depth=1)

    def _walk(
        self,
        spec: FileSpec,
        directory: str,
        entries: list[DirectoryEntry],
        depth: int,
    ) -> Iterator[str]:
        for entry in sorted(entries, key=lambda e: e.name):
            path = combine_paths(directory, entry.name)

            if matches_any(self._excludes, path):
                logger.debug("Excluded: %s", path)
                continue

            if entry.is_directory:
                if not spec.recursive or not self._can_descend(depth):
                    continue
                try:
                    children = self._fs.read_directory(path)
                except PermissionError:
                    logger.warning("Permission denied reading directory: %s", path)
                    continue
                yield from self._walk(spec, path, children, depth + 1)
            elif spec.matches(path):
                yield path

    def _can_descend(self, depth: int) -> bool:
        return self._max_depth is None or depth < self._max_depth


def discover_files(
    fs: FileSystemProvider,
    includes: Sequence[FileSpec],
    excludes: Sequence[FileSpec] = (),
    *,
    max_depth: int | None = None,
) -> list[str]:
    """Find all files matched by ``includes`` and not by ``excludes``.

    Convenience wrapper around :class:`FileDiscovery`.
    """
    return FileDiscovery(fs, excludes=excludes, max_depth=max_depth).discover(includes)
