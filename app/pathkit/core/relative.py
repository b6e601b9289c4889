"""Relative path and containment calculations.

Both operate on reduced component lists, so ``/a/d/../b`` and ``/a/b/``
compare equal. Roots are always compared case-insensitively (drive
letters differ only in case); segments honour ``ignore_case``.
"""

from collections.abc import Callable

from pathkit.core.components import SEPARATOR, combine_components, split_components

_PARENT_DIR = ".."


def _equate_case_insensitive(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def _equate_case_sensitive(a: str, b: str) -> bool:
    return a == b


def _segment_comparer(ignore_case: bool) -> Callable[[str, str], bool]:
    return _equate_case_insensitive if ignore_case else _equate_case_sensitive


def _relative_segments(from_path: str, to_path: str, ignore_case: bool) -> list[str] | None:
    """Segments leading from one path to another, None if roots differ."""
    from_components = split_components(from_path)
    to_components = split_components(to_path)
    if not _equate_case_insensitive(from_components[0], to_components[0]):
        return None

    equal = _segment_comparer(ignore_case)
    common = 1
    limit = min(len(from_components), len(to_components))
    while common < limit and equal(from_components[common], to_components[common]):
        common += 1

    parents = [_PARENT_DIR] * (len(from_components) - common)
    return [*parents, *to_components[common:]]


def relative_path_components(
    from_path: str,
    to_path: str,
    ignore_case: bool = False,
) -> list[str]:
    """Get the component list of the path leading from one path to another.

    Returns:
        ``[""]`` followed by ``..`` segments and the remaining target
        segments, or the target's own components when the two paths do
        not share a root.
    """
    segments = _relative_segments(from_path, to_path, ignore_case)
    if segments is None:
        return split_components(to_path)
    return ["", *segments]


def relative_path(from_path: str, to_path: str, ignore_case: bool = False) -> str:
    """Compute the relative path from one absolute path to another.

    A result that does not climb out of ``from_path`` starts with ``./``;
    identical paths give ``.``. Paths on different roots cannot be related
    and the normalized ``to_path`` is returned.

    Examples:
        >>> relative_path("/a/b/c", "/a/b/c/d/e/f")
        './d/e/f'
        >>> relative_path("/a", "/b/c/d")
        '../b/c/d'
    """
    segments = _relative_segments(from_path, to_path, ignore_case)
    if segments is None:
        return combine_components(split_components(to_path))
    if not segments:
        return "."
    joined = SEPARATOR.join(segments)
    if segments[0] == _PARENT_DIR:
        return joined
    return "." + SEPARATOR + joined


def relative_path_from_directory(
    from_dir: str,
    to_path: str,
    ignore_case: bool = False,
) -> str:
    """Compute a relative path without the leading ``./`` marker.

    Identical paths give an empty string.
    """
    return combine_components(relative_path_components(from_dir, to_path, ignore_case))


def contains_path(parent: str, child: str, ignore_case: bool = False) -> bool:
    """Check whether ``child`` lies within ``parent``.

    The test is on whole components, not string prefixes: ``/user`` does
    not contain ``/username``. A path always contains itself.
    """
    if parent == child:
        return True

    parent_components = split_components(parent)
    child_components = split_components(child)
    if len(child_components) < len(parent_components):
        return False
    if not _equate_case_insensitive(parent_components[0], child_components[0]):
        return False

    equal = _segment_comparer(ignore_case)
    return all(
        equal(parent_segment, child_segment)
        for parent_segment, child_segment in zip(parent_components[1:], child_components[1:])
    )
