"""Semantic version parsing, bumping and validation."""

from __future__ import annotations

import dataclasses
import enum
import re

__all__ = [
    "VersionError",
    "BumpType",
    "Version",
    "parse",
    "parse_bump_type",
    "bump",
    "bump_version",
    "validate",
    "is_valid_bump_type",
    "normalize_version",
]

_VERSION_RE = re.compile(r"(v)?(\d+)\.(\d+)\.(\d+)", re.ASCII)


class VersionError(ValueError):
    """Raised for malformed versions or unknown bump types."""


class BumpType(str, enum.Enum):
    """Which component of a version to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass
class Version:
    """A MAJOR.MINOR.PATCH version with an optional ``v`` prefix."""

    prefix: str = ""
    major: int = 0
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.prefix}{self.major}.{self.minor}.{self.patch}"

    def bump_major(self) -> None:
        """Increment the major component and reset the others."""
        self.major += 1
        self.minor = 0
        self.patch = 0

    def bump_minor(self) -> None:
        """Increment the minor component and reset the patch."""
        self.minor += 1
        self.patch = 0

    def bump_patch(self) -> None:
        """Increment the patch component."""
        self.patch += 1

    def compare(self, other: Version) -> int:
        """Return a negative, zero or positive number as self is below, equal to or above other."""
        if self.major != other.major:
            return self.major - other.major
        if self.minor != other.minor:
            return self.minor - other.minor
        return self.patch - other.patch

    def is_prerelease(self) -> bool:
        """Pre-release versions are not supported, so this is always False."""
        return False

    def without_prefix(self) -> str:
        """Return the version string without its prefix."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def _apply(self, bump_type: BumpType) -> None:
        {
            BumpType.MAJOR: self.bump_major,
            BumpType.MINOR: self.bump_minor,
            BumpType.PATCH: self.bump_patch,
        }[bump_type]()


def parse(version_str: str) -> Version:
    """Parse a string such as ``1.2.3`` or ``v1.2.3``."""
    match = _VERSION_RE.fullmatch(version_str)
    if match is None:
        raise VersionError(f"invalid version format: {version_str}")
    prefix, major, minor, patch = match.groups()
    return Version(prefix or "", int(major), int(minor), int(patch))


def parse_bump_type(text: str) -> BumpType:
    """Parse a bump type name, ignoring case."""
    try:
        return BumpType(text.lower())
    except ValueError:
        raise VersionError(f"invalid bump type: {text}") from None


def _coerce_bump_type(bump_type: BumpType | str) -> BumpType:
    try:
        return BumpType(bump_type)
    except ValueError:
        raise VersionError(f"invalid bump type: {bump_type}") from None


def bump(current_version: str, bump_type: BumpType | str) -> str:
    """Return the version string with the given component incremented."""
    version = parse(current_version)
    version._apply(_coerce_bump_type(bump_type))
    return str(version)


def bump_version(version: Version, bump_type: BumpType | str) -> Version:
    """Return a bumped copy of version; an unknown bump type yields an unchanged copy."""
    result = dataclasses.replace(version)
    try:
        kind = BumpType(bump_type)
    except ValueError:
        return result
    result._apply(kind)
    return result


def validate(version_str: str) -> None:
    """Raise VersionError unless version_str is a valid version."""
    if not version_str:
        raise VersionError("version cannot be empty")
    parse(version_str)


def is_valid_bump_type(bump_type: str) -> bool:
    """Tell whether bump_type names a known bump type, ignoring case."""
    return bump_type.lower() in {kind.value for kind in BumpType}


def normalize_version(version_str: str) -> str:
    """Parse and re-render a version string."""
    return str(parse(version_str))