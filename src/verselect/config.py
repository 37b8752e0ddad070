"""Configuration loading for the verselect CLI."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError

CONFIG_FILENAME = "verselect.toml"
PYPROJECT_FILENAME = "pyproject.toml"
DEFAULT_MAX_SELECTION_LENGTH = 256


class VerselectConfig(BaseModel):
    """Settings read from the ``[verselect]`` table.

    Attributes:
        max_selection_length: Longest selection string the CLI accepts.
        descending: Default sort order of ``verselect sort``.
    """

    model_config = ConfigDict(extra="forbid")

    max_selection_length: int = Field(default=DEFAULT_MAX_SELECTION_LENGTH, gt=0)
    descending: bool = False


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _extract_table(path: Path, data: dict[str, Any]) -> dict[str, Any]:
    if path.name == PYPROJECT_FILENAME:
        table = data.get("tool", {}).get("verselect", {})
    else:
        table = data.get("verselect", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[verselect] in {path} must be a table")
    return table


def find_config_file(start: Path | None = None) -> Path | None:
    """Find the config file in a directory.

    ``verselect.toml`` takes precedence over ``pyproject.toml``.

    Args:
        start: Directory to look in. Defaults to the current directory.

    Returns:
        The path of the config file, or None if neither file exists.
    """
    directory = start or Path.cwd()
    for name in (CONFIG_FILENAME, PYPROJECT_FILENAME):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_config(config_path: Path | None = None) -> VerselectConfig:
    """Load the CLI configuration.

    Args:
        config_path: Explicit config file. If None, the current directory is
            searched and defaults are used if nothing is found.

    Returns:
        The loaded configuration.

    Raises:
        ConfigError: If an explicit file does not exist, the file is not valid
            TOML, or its settings are invalid.
    """
    if config_path is not None and not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    path = config_path or find_config_file()
    if path is None:
        return VerselectConfig()

    table = _extract_table(path, _read_toml(path))
    try:
        return VerselectConfig.model_validate(table)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(f"Invalid configuration in {path}: {problems}") from e
