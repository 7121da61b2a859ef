# core/version.py - SINGLE SOURCE OF TRUTH for version strings and semver ordering
"""
This is the ONLY place where VERSION is defined.
All other modules MUST import VERSION from here.

Also provides the SemanticVersion type used by the Node.js version gate:
- parse_version(): strict SemVer 2.0 parsing
- compare_versions(): -1 / 0 / 1 comparison of two version strings
- is_version_compatible(): True if a version meets a minimum
"""

import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Tuple, Union

VERSION = "0.1.0"

# Oldest Node.js release the incremental engine supports
MIN_NODE_VERSION = "14.0.0"

_SEMVER_RE = re.compile(
    r"(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
    re.ASCII,
)


def _prerelease_key(identifiers: Tuple[str, ...]) -> tuple:
    # Numeric identifiers sort below alphanumeric ones
    return tuple((0, int(i), "") if i.isdigit() else (1, 0, i) for i in identifiers)


@total_ordering
@dataclass(frozen=True)
class SemanticVersion:
    """A parsed semantic version. Build metadata does not affect ordering."""

    major: int
    minor: int
    patch: int
    prerelease: Tuple[str, ...] = field(default=())
    build: Tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """
        Parse a SemVer 2.0 string such as "14.0.0" or "14.0.0-rc.1+build.5".

        Raises:
            ValueError: If text is not a valid semantic version
        """
        if not isinstance(text, str):
            raise ValueError(f"Invalid version string: {text!r}")
        match = _SEMVER_RE.fullmatch(text)
        if not match:
            raise ValueError(f"Invalid version string: {text!r}")

        prerelease = match.group("prerelease")
        build = match.group("build")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(prerelease.split(".")) if prerelease else (),
            build=tuple(build.split(".")) if build else (),
        )

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def _precedence(self) -> tuple:
        # A release sorts after every pre-release of the same version
        if self.prerelease:
            return (self.major, self.minor, self.patch, 0, _prerelease_key(self.prerelease))
        return (self.major, self.minor, self.patch, 1, ())

    def __eq__(self, other):
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._precedence() == other._precedence()

    def __lt__(self, other):
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __hash__(self):
        return hash(self._precedence())

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


VersionLike = Union[str, SemanticVersion]


def parse_version(version: VersionLike) -> SemanticVersion:
    """Parse a version string; SemanticVersion instances pass through."""
    if isinstance(version, SemanticVersion):
        return version
    return SemanticVersion.parse(version)


def compare_versions(a: VersionLike, b: VersionLike) -> int:
    """
    Compare two versions.

    Returns:
        -1 if a < b, 0 if equal in precedence, 1 if a > b
    """
    va, vb = parse_version(a), parse_version(b)
    if va < vb:
        return -1
    if va > vb:
        return 1
    return 0


def is_version_compatible(found: VersionLike, required: VersionLike = MIN_NODE_VERSION) -> bool:
    """Return True if found is equal to or newer than required."""
    return compare_versions(found, required) >= 0
