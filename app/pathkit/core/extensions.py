"""File name and extension helpers built on the component representation."""

from collections.abc import Sequence

from pathkit.core.components import (
    SEPARATOR,
    get_root_length,
    normalize_slashes,
    strip_trailing_separator,
)

Extensions = str | Sequence[str]


def get_file_name(path: str) -> str:
    """Get the last segment of a path, ignoring a trailing separator."""
    normalized = normalize_slashes(path)
    root_length = get_root_length(normalized)
    if root_length == len(normalized):
        return ""
    normalized = strip_trailing_separator(normalized)
    return normalized[max(root_length, normalized.rfind(SEPARATOR) + 1) :]


def get_file_extension(path: str, multi_dot: bool = False) -> str:
    """Get the extension of a path's file name, including the dot.

    Args:
        path: Path whose file name is inspected.
        multi_dot: If True, return everything from the first dot
            (``.cpython-32m.so``) instead of the last (``.so``).

    Returns:
        The extension, or an empty string when the file name has none.
        A leading dot alone (``.bashrc``) is not an extension.
    """
    name = get_file_name(path)
    index = name.find(".", 1) if multi_dot else name.rfind(".")
    if index <= 0:
        return ""
    return name[index:]


def strip_file_extension(path: str, multi_dot: bool = False) -> str:
    """Remove the file extension from a path."""
    extension = get_file_extension(path, multi_dot)
    if not extension:
        return path
    return path[: -len(extension)]


def _try_get_extension(path: str, extension: str, ignore_case: bool) -> str:
    if not extension.startswith("."):
        extension = "." + extension
    if len(path) < len(extension) or path[-len(extension)] != ".":
        return ""
    candidate = path[-len(extension) :]
    if ignore_case:
        return candidate if candidate.casefold() == extension.casefold() else ""
    return candidate if candidate == extension else ""


def get_any_extension_from_path(
    path: str,
    extensions: Extensions | None = None,
    ignore_case: bool = False,
) -> str:
    """Get the extension of a path, optionally restricted to known ones.

    Args:
        path: Path to inspect.
        extensions: One extension or a list of them. When given, only an
            extension from this list is returned, in the list's order.
        ignore_case: Compare against ``extensions`` case-insensitively.

    Returns:
        The matching extension as spelled in the path, or ``""``.
    """
    if extensions is not None:
        stripped = strip_trailing_separator(normalize_slashes(path))
        candidates = [extensions] if isinstance(extensions, str) else extensions
        for extension in candidates:
            found = _try_get_extension(stripped, extension, ignore_case)
            if found:
                return found
        return ""

    name = get_base_file_name(path)
    index = name.rfind(".")
    if index >= 0:
        return name[index:]
    return ""


def get_base_file_name(
    path: str,
    extensions: Extensions | None = None,
    ignore_case: bool = False,
) -> str:
    """Get a path's file name, optionally without a known extension.

    A path that is only a root (``c:/``, ``/``) has no file name.
    """
    name = get_file_name(path)
    if extensions is None:
        return name
    extension = get_any_extension_from_path(name, extensions, ignore_case)
    return name[: -len(extension)] if extension else name


def change_any_extension(
    path: str,
    extension: str,
    extensions: Extensions | None = None,
    ignore_case: bool = False,
) -> str:
    """Replace a path's extension.

    When ``extensions`` is given, only one of those is replaced; a path
    without a matching extension is returned unchanged.
    """
    current = get_any_extension_from_path(path, extensions, ignore_case)
    if not current:
        return path
    if not extension.startswith("."):
        extension = "." + extension
    return path[: -len(current)] + extension
