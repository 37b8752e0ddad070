"""Validation entry points for forms and other callers."""

from .exceptions import InvalidSelectionError
from .selection import SelectionChecker
from .version import Version


def validate_version(raw: str) -> bool:
    """Check if a string is a valid version.

    Args:
        raw: The version string to check.

    Returns:
        True if the string parses as a Version.
    """
    return Version.from_string(raw) is not None


def validate_selection(raw: str) -> bool:
    """Check if a string is a valid version selection.

    Args:
        raw: The selection string to check.

    Returns:
        True if every segment of the selection is valid.
    """
    return SelectionChecker(raw).is_valid


def selection_contains(selection_raw: str, version_raw: str) -> bool:
    """Check if a version matches a selection.

    Args:
        selection_raw: The selection string.
        version_raw: The version string.

    Returns:
        True if the version falls within the selection.

    Raises:
        InvalidSelectionError: If the selection string is invalid.
        InvalidVersionError: If the version string is invalid.
    """
    checker = SelectionChecker(selection_raw)
    if not checker.is_valid:
        raise InvalidSelectionError(selection_raw)
    return checker.contains(Version.parse(version_raw))
