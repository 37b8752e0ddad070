"""verselect - package versions and version selections.

Parses versions such as ``1.2.3b4`` into exactly ordered values and checks
them against comma-separated version selections such as ``1.2-2.0, 3``.
"""

from .exceptions import (
    ConfigError,
    InvalidSelectionError,
    InvalidVersionError,
    VerselectError,
)
from .selection import (
    RangeSet,
    SelectionChecker,
    lower_to_first_prerelease,
    widen_upper,
)
from .validators import selection_contains, validate_selection, validate_version
from .version import (
    MAX_VERSION,
    MIN_VERSION,
    PreReleaseKind,
    Version,
    sort_versions,
    to_ordering_key,
)

__version__ = "0.1.0"

__all__ = [
    "MAX_VERSION",
    "MIN_VERSION",
    "ConfigError",
    "InvalidSelectionError",
    "InvalidVersionError",
    "PreReleaseKind",
    "RangeSet",
    "SelectionChecker",
    "VerselectError",
    "Version",
    "__version__",
    "lower_to_first_prerelease",
    "selection_contains",
    "sort_versions",
    "to_ordering_key",
    "validate_selection",
    "validate_version",
    "widen_upper",
]
