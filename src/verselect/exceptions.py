"""Exceptions raised by verselect."""


class VerselectError(Exception):
    """Base exception for all verselect errors."""


class InvalidVersionError(VerselectError, ValueError):
    """Raised when a version string or version fields are invalid.

    Attributes:
        version: The offending version string, if one was given.
    """

    def __init__(self, version: str | None = None, reason: str | None = None) -> None:
        """Initialize the error.

        Args:
            version: The version string that failed to parse.
            reason: Explanation used when there is no source string, e.g. when
                a Version is constructed from out-of-range fields.
        """
        self.version = version
        if reason is None:
            message = f"Invalid version string: '{version}'"
        elif version is None:
            message = f"Invalid version: {reason}"
        else:
            message = f"Invalid version string: '{version}' ({reason})"
        super().__init__(message)


class InvalidSelectionError(VerselectError, ValueError):
    """Raised when a version selection string is invalid.

    Attributes:
        selection: The offending selection string.
    """

    def __init__(self, selection: str) -> None:
        """Initialize the error.

        Args:
            selection: The selection string that failed to parse.
        """
        self.selection = selection
        super().__init__(f"Invalid version selection: '{selection}'")


class ConfigError(VerselectError):
    """Raised when the configuration file cannot be loaded."""
