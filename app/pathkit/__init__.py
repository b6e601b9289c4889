"""pathkit - Cross-platform path resolution and wildcard matching.

Normalizes, combines, resolves and compares paths across POSIX, Windows
and UNC conventions, and compiles include/exclude glob patterns into
matchers for source file discovery.
"""

from pathkit.core.components import (
    combine_components,
    combine_paths,
    reduce_components,
    resolve_paths,
    split_components,
)
from pathkit.core.dedupe import dedupe_folders
from pathkit.core.relative import contains_path, relative_path
from pathkit.core.wildcard import (
    build_wildcard_matcher,
    build_wildcard_pattern,
    has_directory_wildcard,
    wildcard_root,
)
from pathkit.filesystem.probe import is_case_sensitive

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "build_wildcard_matcher",
    "build_wildcard_pattern",
    "combine_components",
    "combine_paths",
    "contains_path",
    "dedupe_folders",
    "has_directory_wildcard",
    "is_case_sensitive",
    "reduce_components",
    "relative_path",
    "resolve_paths",
    "split_components",
    "wildcard_root",
]
