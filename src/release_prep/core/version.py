"""Semantic version numbers and bumping.

Only the ``major.minor.patch`` core of a version is tracked. Anything
after it (pre-release or build metadata) is ignored on parse and dropped
on output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from release_prep.exceptions import FormatError, InputError

VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)")


class BumpType(StrEnum):
    """Which version component to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @classmethod
    def from_string(cls, value: str) -> BumpType:
        """Convert a user supplied string to a BumpType.

        Raises:
            InputError: If the value is not major, minor or patch
        """
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise InputError(
                f"Invalid bump type {value!r}. Must be 'major', 'minor', or 'patch'"
            ) from e


@dataclass(eq=True)
class Version:
    """A mutable ``major.minor.patch`` version."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise FormatError(f"Version components must be non-negative: {self}")

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse the leading ``X.Y.Z`` of a version string.

        Args:
            text: Version string, e.g. "1.2.3" or "1.2.3-rc.1"

        Returns:
            Parsed Version

        Raises:
            FormatError: If the string does not start with X.Y.Z
        """
        match = VERSION_PATTERN.match(text.strip())
        if not match:
            raise FormatError(f"Invalid semver: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    def bump(self, kind: BumpType | str) -> Version:
        """Increment this version in place.

        Args:
            kind: major, minor or patch

        Returns:
            This same instance, for chaining

        Raises:
            InputError: If kind is not a known bump type
        """
        bump_type = kind if isinstance(kind, BumpType) else BumpType.from_string(kind)

        if bump_type is BumpType.MAJOR:
            self.major += 1
            self.minor = 0
            self.patch = 0
        elif bump_type is BumpType.MINOR:
            self.minor += 1
            self.patch = 0
        else:
            self.patch += 1
        return self

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str) -> Version:
    """Shorthand for :meth:`Version.parse`."""
    return Version.parse(text)
