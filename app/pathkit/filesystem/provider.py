"""Abstract base class for filesystem providers.

pathkit never touches the disk directly. Anything that needs to look at
a filesystem (case-sensitivity probing, file discovery, real-case
lookups) goes through a provider implementing this interface.
"""

from abc import ABC, abstractmethod

from pathkit.filesystem.models import DirectoryEntry


class FileSystemProvider(ABC):
    """Abstract base class for filesystem providers.

    Providers report errors with the standard exceptions
    (``FileNotFoundError``, ``NotADirectoryError``, ``PermissionError``,
    ``OSError``); pathkit lets them propagate unmodified.

    Example:
        >>> fs = LocalFileSystem()
        >>> if fs.exists("/etc"):
        ...     for entry in fs.read_directory("/etc"):
        ...         print(entry.name, entry.entry_type.value)
    """

    @abstractmethod
    def read_directory(self, path: str) -> list[DirectoryEntry]:
        """List the entries of a directory.

        Args:
            path: Directory to list.

        Returns:
            Entries of the directory, without ``.`` and ``..``.

        Raises:
            FileNotFoundError: If the path does not exist.
            NotADirectoryError: If the path is not a directory.
            PermissionError: If the directory cannot be read.
        """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a path exists.

        Returns:
            True if the path names an existing entry, False otherwise.
        """

    @abstractmethod
    def real_case_path(self, path: str) -> str:
        """Get the on-disk casing of an existing path.

        Args:
            path: Path to look up, in any casing the filesystem accepts.

        Returns:
            The same path spelled with the casing stored on disk.

        Raises:
            FileNotFoundError: If the path does not exist.
        """
