"""Tests for configuration loading."""

from collections.abc import Callable
from pathlib import Path

import pytest

from verselect.config import (
    DEFAULT_MAX_SELECTION_LENGTH,
    VerselectConfig,
    find_config_file,
    load_config,
)
from verselect.exceptions import ConfigError


def test_defaults_without_config_file(project_dir: Path) -> None:
    """Test that defaults are used when no config file exists."""
    config = load_config()

    assert config == VerselectConfig()
    assert config.max_selection_length == DEFAULT_MAX_SELECTION_LENGTH
    assert config.descending is False


def test_load_verselect_toml(write_config: Callable[..., Path]) -> None:
    """Test loading the [verselect] table."""
    write_config("""
[verselect]
max_selection_length = 64
descending = true
""")

    config = load_config()

    assert config.max_selection_length == 64
    assert config.descending is True


def test_load_pyproject_toml(write_config: Callable[..., Path]) -> None:
    """Test loading the [tool.verselect] table."""
    write_config(
        """
[project]
name = "example"

[tool.verselect]
max_selection_length = 32
""",
        "pyproject.toml",
    )

    assert load_config().max_selection_length == 32


def test_pyproject_without_table(write_config: Callable[..., Path]) -> None:
    """Test that a pyproject.toml without settings gives defaults."""
    write_config('[project]\nname = "example"\n', "pyproject.toml")

    assert load_config() == VerselectConfig()


def test_verselect_toml_takes_precedence(
    project_dir: Path, write_config: Callable[..., Path]
) -> None:
    """Test that verselect.toml is preferred over pyproject.toml."""
    write_config("[tool.verselect]\ndescending = false\n", "pyproject.toml")
    write_config("[verselect]\ndescending = true\n")

    assert find_config_file() == project_dir / "verselect.toml"
    assert load_config().descending is True


def test_explicit_config_path(tmp_path: Path, project_dir: Path) -> None:
    """Test loading an explicit config file."""
    custom = tmp_path / "custom.toml"
    custom.write_text("[verselect]\nmax_selection_length = 10\n")

    assert load_config(custom).max_selection_length == 10


def test_explicit_config_missing(project_dir: Path) -> None:
    """Test that a missing explicit config file is an error."""
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(project_dir / "missing.toml")


def test_invalid_toml(write_config: Callable[..., Path]) -> None:
    """Test that TOML syntax errors are reported."""
    write_config("[verselect\n")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config()


def test_invalid_setting(write_config: Callable[..., Path]) -> None:
    """Test that invalid settings are reported."""
    write_config("[verselect]\nmax_selection_length = 0\n")

    with pytest.raises(ConfigError, match="max_selection_length"):
        load_config()


def test_unknown_setting(write_config: Callable[..., Path]) -> None:
    """Test that unknown settings are rejected."""
    write_config("[verselect]\ncolour = 'red'\n")

    with pytest.raises(ConfigError, match="colour"):
        load_config()


def test_table_must_be_table(write_config: Callable[..., Path]) -> None:
    """Test that the verselect key must hold a table."""
    write_config("verselect = 3\n")

    with pytest.raises(ConfigError, match="must be a table"):
        load_config()
