"""Shared fixtures for verselect tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from pytest import MonkeyPatch


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Run the test from an empty project directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_config(project_dir: Path) -> Callable[..., Path]:
    """Write a config file into the project directory."""

    def _write(content: str, filename: str = "verselect.toml") -> Path:
        path = project_dir / filename
        path.write_text(content)
        return path

    return _write
