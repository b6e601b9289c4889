"""Folder deduplication by containment."""

import logging
from collections.abc import Iterable

from pathkit.core.relative import contains_path

logger = logging.getLogger(__name__)


def dedupe_folders(lists: Iterable[Iterable[str]], ignore_case: bool = False) -> set[str]:
    """Merge folder lists, keeping only folders not covered by another.

    Folders are considered in input order. A folder already contained by
    a kept folder is dropped; kept folders contained by a new folder are
    replaced by it. Equivalent spellings (``/user`` and ``/user/``) keep
    the first one seen.

    Args:
        lists: Folder lists to merge.
        ignore_case: Compare path segments case-insensitively.

    Returns:
        Set of folders in which no entry contains another.
    """
    kept: list[str] = []

    for folders in lists:
        for folder in folders:
            if folder in kept:
                continue

            covering = next((k for k in kept if contains_path(k, folder, ignore_case)), None)
            if covering is not None:
                logger.debug("Dropping %s: covered by %s", folder, covering)
                continue

            covered = [k for k in kept if contains_path(folder, k, ignore_case)]
            if covered:
                logger.debug("Replacing %s with %s", ", ".join(covered), folder)
                kept = [k for k in kept if k not in covered]

            kept.append(folder)

    return set(kept)
