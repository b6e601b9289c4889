"""Filesystem case-sensitivity probe."""

import logging
from pathlib import Path

from pathkit.core.components import normalize_slashes
from pathkit.core.errors import CaseProbeError
from pathkit.filesystem.provider import FileSystemProvider

logger = logging.getLogger(__name__)


def _default_probe_path() -> str:
    """Directory of the installed pathkit package, which always exists."""
    return normalize_slashes(str(Path(__file__).parent))


def is_case_sensitive(fs: FileSystemProvider, probe_path: str | None = None) -> bool:
    """Determine whether a filesystem treats path casing as significant.

    Swaps the case of an existing path and asks the provider, once,
    whether the variant exists. If it does, both spellings name the same
    entry and the filesystem is case-insensitive. The result is not
    cached.

    Args:
        fs: Filesystem provider to query.
        probe_path: Existing path to probe with. Defaults to the
            directory of the installed pathkit package.

    Returns:
        True if the filesystem is case-sensitive, False otherwise.

    Raises:
        CaseProbeError: If the probe path contains no cased characters.
        OSError: Propagated unchanged from the provider.
    """
    path = probe_path if probe_path is not None else _default_probe_path()
    variant = path.swapcase()
    if variant == path:
        msg = f"Probe path has no cased characters: {path}"
        raise CaseProbeError(msg)

    sensitive = not fs.exists(variant)
    logger.debug(
        "Case probe %s via %s: %s",
        path,
        variant,
        "case-sensitive" if sensitive else "case-insensitive",
    )
    return sensitive
