"""Path component decomposition, reduction and recombination.

A path is represented as a list of components. Element 0 is the root:

- ``""`` for relative paths,
- ``"/"`` for POSIX absolute paths,
- ``"c:/"`` (or a bare ``"c:"``) for DOS drive paths,
- ``"//server/"`` for UNC paths, keeping the server name in the root.

The remaining elements are segment names. Backslashes are converted to the
neutral ``/`` separator once, when a path string is split, so everything
downstream only ever sees ``/``.
"""

from collections.abc import Sequence

# Platform-neutral separator used for every path this package produces
SEPARATOR = "/"
_ALT_SEPARATOR = "\\"

_CURRENT_DIR = "."
_PARENT_DIR = ".."


def normalize_slashes(path: str) -> str:
    """Convert every backslash in a path to the neutral separator."""
    return path.replace(_ALT_SEPARATOR, SEPARATOR)


def get_root_length(path: str) -> int:
    """Get the length of the root portion of a path.

    Args:
        path: Path string (separators may be mixed).

    Returns:
        Number of leading characters that make up the root, 0 for
        relative paths.
    """
    path = normalize_slashes(path)

    if path.startswith(SEPARATOR):
        if not path.startswith(SEPARATOR, 1):
            return 1  # POSIX: "/"
        server_end = path.find(SEPARATOR, 2)
        if server_end < 0:
            return len(path)  # UNC: "//server"
        return server_end + 1  # UNC: "//server/"

    if len(path) >= 2 and path[1] == ":" and path[0].isascii() and path[0].isalpha():
        if len(path) == 2:
            return 2  # DOS: "c:"
        if path[2] == SEPARATOR:
            return 3  # DOS: "c:/"

    return 0


def has_trailing_separator(path: str) -> bool:
    """Check whether a path ends with either separator."""
    return path.endswith((SEPARATOR, _ALT_SEPARATOR))


def ensure_trailing_separator(path: str) -> str:
    """Append the neutral separator unless the path already ends with one."""
    if has_trailing_separator(path):
        return path
    return path + SEPARATOR


def strip_trailing_separator(path: str) -> str:
    """Remove one trailing separator.

    A path made of a single separator is returned unchanged.
    """
    if has_trailing_separator(path) and len(path) > 1:
        return path[:-1]
    return path


def is_rooted_disk_path(path: str) -> bool:
    """Check whether a path is anchored at a POSIX, drive or UNC root.

    A bare drive such as ``c:`` is drive-relative and does not count.
    """
    root_length = get_root_length(path)
    if root_length == 0:
        return False
    return not path[:root_length].endswith(":")


def reduce_components(components: Sequence[str]) -> list[str]:
    """Collapse ``.`` and ``..`` segments.

    ``..`` removes the preceding segment when there is one. With nothing
    left to remove it is dropped for rooted paths (nothing sits above a
    root) and kept for relative paths, which may legitimately walk above
    their unknown base directory.

    Args:
        components: Root followed by segment names.

    Returns:
        Reduced component list, ``[]`` for empty input.
    """
    if not components:
        return []

    reduced = [components[0]]
    for component in components[1:]:
        if not component or component == _CURRENT_DIR:
            continue
        if component == _PARENT_DIR:
            if len(reduced) > 1:
                if reduced[-1] != _PARENT_DIR:
                    reduced.pop()
                    continue
            elif reduced[0]:
                continue
        reduced.append(component)
    return reduced


def split_components(path: str) -> list[str]:
    """Split a path string into its reduced component list.

    Consecutive and trailing separators never produce empty segments.

    Examples:
        >>> split_components("/users/hello/../")
        ['/', 'users']
        >>> split_components("./hello.py")
        ['', 'hello.py']
        >>> split_components("")
        ['']
    """
    normalized = normalize_slashes(path)
    root_length = get_root_length(normalized)
    root = normalized[:root_length]
    rest = normalized[root_length:].split(SEPARATOR)
    return reduce_components([root, *rest])


def combine_components(components: Sequence[str]) -> str:
    """Serialize a component list back to a path string.

    The root receives a trailing separator when it lacks one, so
    ``["/", "a", "b"]`` becomes ``/a/b`` and ``["a", "b"]`` becomes ``a/b``.
    """
    if not components:
        return ""
    root = components[0] and ensure_trailing_separator(components[0])
    return normalize_slashes(root + SEPARATOR.join(components[1:]))


def combine_paths(path: str, *paths: str) -> str:
    """Join path fragments left to right without reducing them.

    Empty fragments are skipped. A rooted fragment replaces everything
    joined so far.
    """
    combined = normalize_slashes(path)
    for fragment in paths:
        if not fragment:
            continue
        fragment = normalize_slashes(fragment)
        if not combined or get_root_length(fragment) != 0:
            combined = fragment
        else:
            combined = ensure_trailing_separator(combined) + fragment
    return combined


def resolve_paths(base: str, *fragments: str) -> str:
    """Resolve fragments against a base into a normalized path.

    Fragments are joined with :func:`combine_paths`, then reduced. A
    trailing separator on the joined string survives resolution as long
    as the result names something below its root.

    No home-directory or environment-variable substitution happens here:
    a ``~`` anywhere in a fragment is an ordinary character.

    Examples:
        >>> resolve_paths("/path", "to", "..", "from", "file.ext/")
        '/path/from/file.ext/'
    """
    combined = combine_paths(base, *fragments)
    components = split_components(combined)
    resolved = combine_components(components)
    if len(components) > 1 and has_trailing_separator(combined):
        resolved = ensure_trailing_separator(resolved)
    return resolved


def normalize_path(path: str) -> str:
    """Normalize separators and collapse ``.``/``..`` in a single path."""
    return resolve_paths(path)
