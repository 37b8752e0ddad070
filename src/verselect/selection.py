"""Version selection parsing and matching."""

import logging
from dataclasses import dataclass, replace
from typing import Self

from .types import ComponentCount, OrderingKey, VersionLike
from .version import MAX_COMPONENT, MAX_VERSION, MIN_VERSION, PreReleaseKind, Version

logger = logging.getLogger(__name__)

WILDCARD = "*"


@dataclass(frozen=True)
class RangeSet:
    """An inclusive interval of ordering keys.

    Attributes:
        min_key: Ordering key of the lowest version in the range.
        max_key: Ordering key of the highest version in the range.
        min_version: The version min_key was computed from.
        max_version: The version max_key was computed from.
    """

    min_key: OrderingKey
    max_key: OrderingKey
    min_version: Version
    max_version: Version

    @classmethod
    def between(cls, min_version: Version, max_version: Version) -> Self:
        """Create a range from its lowest and highest versions."""
        return cls(
            min_version.ordering_key,
            max_version.ordering_key,
            min_version,
            max_version,
        )

    @property
    def is_inverted(self: Self) -> bool:
        """Whether the lower bound is above the upper bound."""
        return self.min_key > self.max_key

    def contains_key(self: Self, key: OrderingKey) -> bool:
        """Check if an ordering key falls inside this range, bounds included."""
        return self.min_key <= key <= self.max_key

    def __str__(self: Self) -> str:
        """Return the range as a selection segment."""
        if self.min_key == self.max_key:
            return str(self.min_version)
        return f"{self.min_version}-{self.max_version}"


FULL_RANGE = RangeSet.between(MIN_VERSION, MAX_VERSION)


def widen_upper(version: Version, component_count: ComponentCount) -> Version:
    """Extend an upper bound to cover the components that were left out.

    A bound written as "2" covers up to 2.999.999 and a bound written as
    "2.1" covers up to 2.1.999. Pre-releases and fully written versions are
    returned unchanged.

    Args:
        version: The parsed upper bound.
        component_count: How many dot-separated numbers the bound was
            written with.

    Returns:
        The widened upper bound.
    """
    if version.is_pre_release:
        return version
    if component_count == 1:
        return replace(version, minor=MAX_COMPONENT, patch=MAX_COMPONENT)
    if component_count == 2:  # noqa: PLR2004
        return replace(version, patch=MAX_COMPONENT)
    return version


def lower_to_first_prerelease(version: Version) -> Version:
    """Lower a release bound to its first alpha so its pre-releases match.

    Args:
        version: The parsed lower bound.

    Returns:
        The alpha 1 of a release version, or the version itself if it is
        already a pre-release.
    """
    if version.is_pre_release:
        return version
    return version.with_pre_release(PreReleaseKind.ALPHA, 1)


def _component_count(version_str: str) -> ComponentCount:
    return version_str.count(".") + 1


def _parse_single(segment: str) -> RangeSet | None:
    version = Version.from_string(segment)
    if version is None:
        logger.debug("Invalid version %r in selection", segment)
        return None
    if version.is_pre_release:
        return RangeSet.between(version, version)
    return RangeSet.between(
        lower_to_first_prerelease(version),
        widen_upper(version, _component_count(segment)),
    )


def _parse_bounded(segment: str) -> RangeSet | None:
    lower_str, upper_str = (part.strip() for part in segment.split("-"))
    if not lower_str and not upper_str:
        logger.debug("Range %r has neither a lower nor an upper bound", segment)
        return None

    min_version = FULL_RANGE.min_version
    max_version = FULL_RANGE.max_version

    if lower_str:
        lower = Version.from_string(lower_str)
        if lower is None:
            logger.debug("Invalid lower bound %r in range %r", lower_str, segment)
            return None
        min_version = lower_to_first_prerelease(lower)

    if upper_str:
        upper = Version.from_string(upper_str)
        if upper is None:
            logger.debug("Invalid upper bound %r in range %r", upper_str, segment)
            return None
        max_version = widen_upper(upper, _component_count(upper_str))

    return RangeSet.between(min_version, max_version)


def parse_segment(segment: str) -> RangeSet | None:
    """Parse one comma-separated piece of a selection.

    The ``*`` wildcard is not a segment; SelectionChecker handles it before
    segments are parsed.

    Args:
        segment: The segment, with or without surrounding whitespace.

    Returns:
        The range the segment covers, or None if the segment is invalid.
    """
    segment = segment.strip()
    hyphens = segment.count("-")
    if hyphens == 0:
        return _parse_single(segment)
    if hyphens == 1:
        return _parse_bounded(segment)

    logger.debug("Range %r has more than one '-'", segment)
    return None


class SelectionChecker:
    """Checks whether versions match a version selection.

    A selection is a comma-separated list of segments. Each segment is one
    of:

    - ``*``: every version.
    - A single version. ``1`` matches every 1.x.x version, ``1.2`` every
      1.2.x version and ``1.2.3`` only 1.2.3, each including their
      pre-releases. A pre-release such as ``1.2.3b1`` matches only itself.
    - A range ``lower-upper`` with either side optional. Bounds are widened
      the same way single versions are.

    A version matches the selection if it falls in any segment. If any
    segment is invalid the whole selection is invalid and matches nothing.

    Attributes:
        selection: The selection string the checker was built from.
    """

    def __init__(self: Self, selection: str) -> None:
        """Parse a selection string.

        Args:
            selection: The comma-separated selection string.
        """
        self.selection = selection
        self._is_valid = True
        self._ranges: tuple[RangeSet, ...] = ()

        ranges: list[RangeSet] = []
        for segment in selection.split(","):
            # A wildcard replaces every other segment.
            if segment.strip() == WILDCARD:
                ranges = [FULL_RANGE]
                break

            range_set = parse_segment(segment)
            if range_set is None:
                self._is_valid = False
                return
            if range_set.is_inverted:
                logger.debug("Range %r has its lower bound above its upper", segment)
                self._is_valid = False
                return
            ranges.append(range_set)

        self._ranges = tuple(ranges)

    @property
    def is_valid(self: Self) -> bool:
        """Whether the selection string was valid."""
        return self._is_valid

    @property
    def ranges(self: Self) -> tuple[RangeSet, ...]:
        """The ranges of the selection, in order. Empty if invalid."""
        return self._ranges

    def contains(self: Self, version: VersionLike) -> bool:
        """Check if a version matches this selection.

        Args:
            version: A Version or version string.

        Returns:
            True if the version falls in any range of a valid selection.
            Always False for an invalid selection, whatever the version.

        Raises:
            InvalidVersionError: If a version string is invalid and the
                selection is valid.
        """
        if not self._is_valid:
            return False
        if isinstance(version, str):
            version = Version.parse(version)
        key = version.ordering_key
        return any(range_set.contains_key(key) for range_set in self._ranges)

    def describe(self: Self) -> str:
        """Describe which versions the selection covers.

        Returns:
            The ranges joined by commas with "and" before the last one, for
            example "1.0.0a1-1.999.999 and 3.0.0". Empty if invalid.
        """
        parts = [str(range_set) for range_set in self._ranges]
        if len(parts) <= 1:
            return "".join(parts)
        return f"{', '.join(parts[:-1])} and {parts[-1]}"

    def __contains__(self: Self, version: object) -> bool:
        """Support ``version in checker``."""
        if not isinstance(version, str | Version):
            return False
        return self.contains(version)

    def __len__(self: Self) -> int:
        """Return the number of ranges."""
        return len(self._ranges)

    def __str__(self: Self) -> str:
        """Return the selection string."""
        return self.selection

    def __repr__(self: Self) -> str:
        """Return detailed string representation."""
        return f"SelectionChecker({self.selection!r}, is_valid={self._is_valid})"
