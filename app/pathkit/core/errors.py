"""Exception hierarchy for pathkit.

Pure path functions never raise on malformed input; these exceptions
cover the parts that touch the outside world (filesystem probing and
configuration files).
"""


class PathkitError(Exception):
    """Base exception for all pathkit errors."""


class CaseProbeError(PathkitError):
    """Raised when a case-sensitivity probe cannot be performed."""


class ConfigError(PathkitError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""
