"""Wildcard pattern engine.

Translates glob-style include/exclude patterns into anchored regular
expressions. Patterns are always resolved against a base directory first,
so ``./**/*.py`` relative to ``/users/me`` becomes a matcher for absolute
candidate paths.

Supported tokens:

- ``*`` matches one or more characters within a segment,
- ``?`` matches exactly one character within a segment,
- a segment that is exactly ``**`` matches zero or more whole segments.

Every other character is matched literally, so no pattern is ever
rejected as malformed.
"""

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from pathkit.core.components import (
    SEPARATOR,
    combine_paths,
    normalize_slashes,
    split_components,
)

logger = logging.getLogger(__name__)

GLOBSTAR = "**"

_WILDCARD_CHARS = re.compile(r"[*?]")
_WILDCARD_TOKENS = re.compile(r"(\*+|\?)")

_ANY_CHARS = "[^/]+"
_ONE_CHAR = "[^/]"
# Zero or more whole segments, each introduced by a separator
_GLOBSTAR_FRAGMENT = "(?:/[^/]+)*?"
# Same, for a relative pattern that starts with "**"
_LEADING_GLOBSTAR_FRAGMENT = "(?:[^/]+/)*?"


def _has_wildcard(segment: str) -> bool:
    return _WILDCARD_CHARS.search(segment) is not None


def _strip_root(root: str) -> str:
    """Drop the separator that terminates a root ("/" -> "", "c:/" -> "c:")."""
    return root[:-1] if root.endswith(SEPARATOR) else root


def _resolve_pattern(base_dir: str, pattern: str) -> list[str]:
    return split_components(combine_paths(base_dir, pattern))


def _translate_segment(segment: str) -> str:
    parts: list[str] = []
    for token in _WILDCARD_TOKENS.split(segment):
        if not token:
            continue
        if token.startswith("*"):
            parts.append(_ANY_CHARS)
        elif token == "?":
            parts.append(_ONE_CHAR)
        else:
            parts.append(re.escape(token))
    return "".join(parts)


def build_wildcard_pattern(base_dir: str, pattern: str) -> str:
    """Translate a pattern into regular expression source text.

    The returned text is not anchored; :func:`build_wildcard_matcher`
    adds the anchors.

    Args:
        base_dir: Directory relative patterns are resolved against.
        pattern: Glob-style pattern.

    Returns:
        Regular expression source matching the resolved pattern.
    """
    components = _resolve_pattern(base_dir, pattern)
    root = components[0]

    parts: list[str] = []
    if stripped_root := _strip_root(root):
        # Roots compare case-insensitively, as in contains_path
        parts.append(f"(?i:{re.escape(stripped_root)})")
    leading = not root
    for segment in components[1:]:
        if segment == GLOBSTAR:
            parts.append(_LEADING_GLOBSTAR_FRAGMENT if leading else _GLOBSTAR_FRAGMENT)
            continue
        prefix = "" if leading else SEPARATOR
        parts.append(prefix + _translate_segment(segment))
        leading = False

    return "".join(parts)


def _compile(base_dir: str, pattern: str, case_sensitive: bool) -> re.Pattern[str]:
    source = build_wildcard_pattern(base_dir, pattern)
    flags = 0 if case_sensitive else re.IGNORECASE
    # A match may stop at a segment boundary: a directory covers its contents
    compiled = re.compile(f"^(?:{source})(?:$|/)", flags)
    logger.debug("Compiled wildcard %r against %r: %s", pattern, base_dir, compiled.pattern)
    return compiled


def build_wildcard_matcher(
    base_dir: str,
    pattern: str,
    case_sensitive: bool,
) -> Callable[[str], bool]:
    """Build a predicate that tests candidate paths against a pattern.

    Candidates are slash-normalized before matching. The match is anchored
    at the start of the candidate and ends either at the end of the
    candidate or at a separator, so a directory pattern also matches
    every path beneath that directory.

    Args:
        base_dir: Directory relative patterns are resolved against.
        pattern: Glob-style pattern.
        case_sensitive: Whether literal characters must match exactly.

    Returns:
        Callable returning True for matching candidate paths.

    Example:
        >>> matches = build_wildcard_matcher("/users/me", "./**/*.py?", True)
        >>> matches("/users/me/.blah/foo.pyd"), matches("/users/me/.blah/foo.py")
        (True, False)
    """
    compiled = _compile(base_dir, pattern, case_sensitive)

    def matches(candidate: str) -> bool:
        return compiled.match(normalize_slashes(candidate)) is not None

    return matches


def wildcard_root(base_dir: str, pattern: str) -> str:
    """Get the longest wildcard-free directory prefix of a resolved pattern.

    The root's own separator is stripped (``c:/`` becomes ``c:``), except
    for the POSIX root which stays ``/`` when no literal segment follows it.
    """
    components = _resolve_pattern(base_dir, pattern)
    root = components[0]

    segments: list[str] = []
    for segment in components[1:]:
        if _has_wildcard(segment):
            break
        segments.append(segment)

    if root == SEPARATOR and not segments:
        return SEPARATOR
    if not root:
        return SEPARATOR.join(segments)
    return SEPARATOR.join([_strip_root(root), *segments])


def has_directory_wildcard(pattern: str) -> bool:
    """Check whether matching a pattern requires walking subdirectories.

    True when a segment is exactly ``*`` or ``**``, or when any segment
    other than the final (file name) segment contains a wildcard.
    """
    segments = [
        segment
        for segment in normalize_slashes(pattern).split(SEPARATOR)
        if segment and segment != "."
    ]
    for index, segment in enumerate(segments):
        if segment in ("*", GLOBSTAR):
            return True
        if index < len(segments) - 1 and _has_wildcard(segment):
            return True
    return False


@dataclass(frozen=True, slots=True)
class FileSpec:
    """A compiled include or exclude pattern.

    Attributes:
        pattern: The pattern as written by the user.
        wildcard_root: Deepest directory that holds every possible match.
        regex: Compiled, anchored matcher for absolute candidate paths.
        has_directory_wildcard: Whether matches may lie in subdirectories
            below ``wildcard_root`` that the pattern names with wildcards.
    """

    pattern: str
    wildcard_root: str
    regex: re.Pattern[str] = field(repr=False)
    has_directory_wildcard: bool

    @property
    def recursive(self) -> bool:
        """Whether discovery must descend below ``wildcard_root``.

        A pattern without any wildcard names a whole directory tree.
        """
        return self.has_directory_wildcard or not _has_wildcard(self.pattern)

    def matches(self, path: str) -> bool:
        """Check whether a path matches this spec."""
        return self.regex.match(normalize_slashes(path)) is not None


def build_file_spec(base_dir: str, pattern: str, case_sensitive: bool = True) -> FileSpec:
    """Compile a pattern into a :class:`FileSpec`."""
    return FileSpec(
        pattern=pattern,
        wildcard_root=wildcard_root(base_dir, pattern),
        regex=_compile(base_dir, pattern, case_sensitive),
        has_directory_wildcard=has_directory_wildcard(pattern),
    )


def matches_any(specs: Iterable[FileSpec], path: str) -> bool:
    """Check whether a path matches at least one spec."""
    return any(spec.matches(path) for spec in specs)
