"""Tests for the validation entry points."""

import pytest

from verselect import (
    InvalidSelectionError,
    InvalidVersionError,
    selection_contains,
    validate_selection,
    validate_version,
)


def test_validate_version() -> None:
    """Test validating version strings."""
    assert validate_version("4.18.39")
    assert validate_version("1b1")
    assert not validate_version("1..2")
    assert not validate_version("1000.2.3")
    assert not validate_version("v1.2.3")


def test_validate_selection() -> None:
    """Test validating selection strings."""
    assert validate_selection("1.2.0-2.0.0, 3")
    assert validate_selection("*")
    assert validate_selection("2.0.0-")
    assert not validate_selection("-")
    assert not validate_selection("1, x")


def test_selection_contains() -> None:
    """Test matching a version string against a selection string."""
    assert selection_contains("1.2.0-2.0.0", "1.5.0")
    assert not selection_contains("1.2.0-2.0.0", "2.0.1")


def test_selection_contains_invalid_selection() -> None:
    """Test that an invalid selection raises."""
    with pytest.raises(InvalidSelectionError, match="Invalid version selection: '-'"):
        selection_contains("-", "1.0.0")


def test_selection_contains_invalid_version() -> None:
    """Test that an invalid version raises."""
    with pytest.raises(InvalidVersionError, match="Invalid version string: 'x'"):
        selection_contains("1", "x")


def test_selection_contains_errors_are_value_errors() -> None:
    """Test that both errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        selection_contains("1, 2-1", "1.0.0")
    with pytest.raises(ValueError):
        selection_contains("1", "1.0.0 ")
