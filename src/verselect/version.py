"""Models a single package version and its ordering key."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from functools import total_ordering
from typing import Self

from .exceptions import InvalidVersionError

MAX_VERSION_LENGTH = 15
MAX_COMPONENT = 999

_COMPONENT_PATTERN = re.compile(r"[0-9]{1,3}")
_PRE_RELEASE_PATTERN = re.compile(r"[ab]")


class PreReleaseKind(str, Enum):
    """The pre-release stage of a version."""

    NONE = ""
    ALPHA = "a"
    BETA = "b"


def _is_component(value: str) -> bool:
    return _COMPONENT_PATTERN.fullmatch(value) is not None


@total_ordering
@dataclass(frozen=True)
class Version:
    """A version made of major, minor and patch numbers.

    A version may also be an alpha or beta pre-release of its
    ``major.minor.patch`` release, written as ``1.2.3a4`` or ``1.2.3b4``.
    Versions are ordered by their ordering key, so every pre-release sorts
    below its release and every alpha sorts below every beta.

    Attributes:
        major: Major version number, 0 to 999.
        minor: Minor version number, 0 to 999.
        patch: Patch version number, 0 to 999.
        pre_release_kind: Whether this is an alpha, beta or full release.
        pre_release_num: Pre-release number, 1 to 999. Only set for
            pre-releases.
    """

    major: int
    minor: int = 0
    patch: int = 0
    pre_release_kind: PreReleaseKind = PreReleaseKind.NONE
    pre_release_num: int | None = None

    def __post_init__(self: Self) -> None:
        """Validate the version fields.

        Raises:
            InvalidVersionError: If any field is out of range, if all of
                major, minor and patch are zero, or if the pre-release number
                does not agree with the pre-release kind.
        """
        try:
            kind = PreReleaseKind(self.pre_release_kind)
        except ValueError as e:
            raise InvalidVersionError(
                reason=f"unknown pre-release kind {self.pre_release_kind!r}"
            ) from e
        object.__setattr__(self, "pre_release_kind", kind)

        for name in ("major", "minor", "patch", "pre_release_num"):
            value = getattr(self, name)
            if name == "pre_release_num" and value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidVersionError(
                    reason=f"{name} must be an integer, got {value!r}"
                )

        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not 0 <= value <= MAX_COMPONENT:
                raise InvalidVersionError(
                    reason=f"{name} must be between 0 and {MAX_COMPONENT}, got {value}"
                )
        if self.major == self.minor == self.patch == 0:
            raise InvalidVersionError(reason="major, minor, and patch are all zero")

        if kind is PreReleaseKind.NONE:
            if self.pre_release_num is not None:
                raise InvalidVersionError(
                    reason="pre-release number given without alpha or beta"
                )
        elif self.pre_release_num is None:
            raise InvalidVersionError(
                reason=f"pre-release number missing for {kind.name.lower()}"
            )
        elif not 1 <= self.pre_release_num <= MAX_COMPONENT:
            raise InvalidVersionError(
                reason=(
                    f"pre-release number must be between 1 and {MAX_COMPONENT}, "
                    f"got {self.pre_release_num}"
                )
            )

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse a version string.

        Args:
            version_str: Version string such as "1", "1.2", "1.2.3" or
                "1.2.3b4". It must already be trimmed and lowercase.

        Returns:
            Parsed Version instance.

        Raises:
            InvalidVersionError: If the version string format is invalid.
        """
        if (
            version_str != version_str.strip().lower()
            or not 1 <= len(version_str) <= MAX_VERSION_LENGTH
            or version_str.endswith(".")
        ):
            raise InvalidVersionError(version_str)

        semantic_part = version_str
        kind = PreReleaseKind.NONE
        pre_release_num = None

        match = _PRE_RELEASE_PATTERN.search(version_str)
        if match:
            kind = PreReleaseKind(match.group())
            semantic_part = version_str[: match.start()]
            pre_release_part = version_str[match.end() :]
            if not _is_component(pre_release_part):
                raise InvalidVersionError(version_str)
            pre_release_num = int(pre_release_part)
            if pre_release_num < 1:
                raise InvalidVersionError(version_str)

        if semantic_part.endswith("."):
            raise InvalidVersionError(version_str)

        parts = semantic_part.split(".")
        if len(parts) > 3 or not all(_is_component(part) for part in parts):  # noqa: PLR2004
            raise InvalidVersionError(version_str)

        numbers = [int(part) for part in parts] + [0] * (3 - len(parts))
        major, minor, patch = numbers
        if major == minor == patch == 0:
            raise InvalidVersionError(version_str)

        return cls(major, minor, patch, kind, pre_release_num)

    @classmethod
    def from_string(cls, version_str: str) -> Self | None:
        """Parse a version string without raising.

        Args:
            version_str: Version string to parse.

        Returns:
            The parsed Version, or None if the string is not a valid version.
        """
        try:
            return cls.parse(version_str)
        except InvalidVersionError:
            return None

    @property
    def is_pre_release(self: Self) -> bool:
        """Whether this version is an alpha or beta pre-release."""
        return self.pre_release_kind is not PreReleaseKind.NONE

    @property
    def ordering_key(self: Self) -> Decimal:
        """The exact decimal key used to order versions.

        The integer part is the major number followed by the minor and patch
        numbers, each padded to three digits. Pre-releases subtract a
        fraction in (0, 1) from it so they fall between the previous patch and
        this one: ``.999RRR`` for alphas and ``.RRR999`` for betas, where RRR
        is ``999 - pre_release_num``.

        Returns:
            The ordering key of this version.
        """
        base = Decimal(f"{self.major}{self.minor:03d}{self.patch:03d}")
        if not self.is_pre_release:
            return base

        remaining = MAX_COMPONENT - (self.pre_release_num or 0)
        if self.pre_release_kind is PreReleaseKind.ALPHA:
            adjustment = Decimal(f"0.999{remaining:03d}")
        else:
            adjustment = Decimal(f"0.{remaining:03d}999")
        return base - adjustment

    def with_pre_release(
        self: Self, kind: PreReleaseKind | str, num: int | None = None
    ) -> Self:
        """Return a copy of this version with a different pre-release.

        Args:
            kind: The new pre-release kind.
            num: The new pre-release number. Defaults to 1 when kind is alpha
                or beta, and is ignored when kind is NONE.

        Returns:
            A new, validated Version.

        Raises:
            InvalidVersionError: If the resulting version is invalid.
        """
        try:
            kind = PreReleaseKind(kind)
        except ValueError as e:
            raise InvalidVersionError(
                reason=f"unknown pre-release kind {kind!r}"
            ) from e
        if kind is PreReleaseKind.NONE:
            num = None
        elif num is None:
            num = 1
        return replace(self, pre_release_kind=kind, pre_release_num=num)

    def __lt__(self: Self, other: object) -> bool:
        """Compare versions by ordering key."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.ordering_key < other.ordering_key

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "major.minor.patch", followed by the
            pre-release letter and number for pre-releases.
        """
        version_str = f"{self.major}.{self.minor}.{self.patch}"
        if self.is_pre_release:
            version_str += f"{self.pre_release_kind.value}{self.pre_release_num}"
        return version_str

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        if self.is_pre_release:
            return (
                f"Version({self.major}, {self.minor}, {self.patch}, "
                f"'{self.pre_release_kind.value}', {self.pre_release_num})"
            )
        return f"Version({self.major}, {self.minor}, {self.patch})"


MIN_VERSION = Version(0, 0, 1, PreReleaseKind.ALPHA, 1)
MAX_VERSION = Version(MAX_COMPONENT, MAX_COMPONENT, MAX_COMPONENT)


def to_ordering_key(version: Version) -> Decimal:
    """Return the ordering key of a version."""
    return version.ordering_key


def sort_versions(
    versions: Iterable[str | Version], descending: bool = False
) -> list[Version]:
    """Sort versions by their ordering key.

    Args:
        versions: Versions or version strings to sort.
        descending: If True, the newest version comes first.

    Returns:
        The parsed versions in order.

    Raises:
        InvalidVersionError: If any version string is invalid.
    """
    parsed = [Version.parse(v) if isinstance(v, str) else v for v in versions]
    return sorted(parsed, key=to_ordering_key, reverse=descending)
