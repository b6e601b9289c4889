"""Discovery configuration and settings.

This module provides the configuration model and I/O functions for file
discovery: which patterns to include and exclude, and how to treat
path casing.

Configuration is stored in ~/.config/pathkit/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pathkit.core.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from pathkit.core.paths import get_config_path
from pathkit.filesystem.probe import is_case_sensitive
from pathkit.filesystem.provider import FileSystemProvider

logger = logging.getLogger(__name__)

DEFAULT_INCLUDE: list[str] = ["**"]
DEFAULT_EXCLUDE: list[str] = [
    "**/node_modules",
    "**/__pycache__",
    "**/.*",
]


class PathkitConfig(BaseModel):
    """Configuration for file discovery.

    Attributes:
        include: Patterns of files to discover, relative to the base directory.
        exclude: Patterns of files and directories to leave out.
        case_sensitive: Whether pattern matching honours case. None probes
            the filesystem each time it is needed.
        max_depth: Maximum directory depth to walk below a pattern's root.
    """

    model_config = ConfigDict(extra="forbid")

    include: Annotated[
        list[str],
        Field(default_factory=lambda: list(DEFAULT_INCLUDE), description="Include patterns"),
    ]
    exclude: Annotated[
        list[str],
        Field(default_factory=lambda: list(DEFAULT_EXCLUDE), description="Exclude patterns"),
    ]
    case_sensitive: Annotated[
        bool | None,
        Field(description="Case-sensitive matching (None = probe the filesystem)"),
    ] = None
    max_depth: Annotated[
        int | None,
        Field(ge=1, description="Maximum walk depth (None = unlimited)"),
    ] = None

    @field_validator("include", "exclude")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Reject blank patterns."""
        for pattern in v:
            if not pattern.strip():
                msg = "patterns cannot be blank"
                raise ValueError(msg)
        return v

    def resolve_case_sensitive(
        self,
        fs: FileSystemProvider,
        probe_path: str | None = None,
    ) -> bool:
        """Get the effective case sensitivity.

        Returns the configured value if set, otherwise probes ``fs``.

        Raises:
            CaseProbeError: If probing is needed and cannot be performed.
            OSError: Propagated from the provider while probing.
        """
        if self.case_sensitive is not None:
            return self.case_sensitive
        return is_case_sensitive(fs, probe_path)


def load_config(path: Path | None = None) -> PathkitConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses default config path.

    Returns:
        Validated PathkitConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        config = PathkitConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config


def load_config_or_default(path: Path | None = None) -> PathkitConfig:
    """Load configuration, falling back to defaults when no file exists.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return get_default_config()


def save_config(config: PathkitConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The PathkitConfig object to save.
        path: Path to save the config. If None, uses default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(_config_to_dict(config), f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: PathkitConfig) -> dict[str, object]:
    """Convert PathkitConfig to a dictionary for TOML serialization.

    TOML has no null, so unset optional values are left out.
    """
    result: dict[str, object] = {
        "include": list(config.include),
        "exclude": list(config.exclude),
    }

    if config.case_sensitive is not None:
        result["case_sensitive"] = config.case_sensitive

    if config.max_depth is not None:
        result["max_depth"] = config.max_depth

    return result


def get_default_config() -> PathkitConfig:
    """Create a default PathkitConfig.

    Returns:
        PathkitConfig with default settings.
    """
    return PathkitConfig()
