"""Typed failures raised by the version-to-tag translation.

Both subclass :class:`ValueError` so callers that only care about "bad
input" can catch the base class.
"""

from __future__ import annotations


class InvalidVersionError(ValueError):
    """The input does not parse as a semantic version."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"not a valid semantic version: {version!r}")


class UnsupportedPrereleaseError(ValueError):
    """The version parses but its pre-release suffix has no tag spelling."""

    def __init__(self, version: str, prerelease: str) -> None:
        self.version = version
        self.prerelease = prerelease
        super().__init__(
            f"unsupported pre-release {prerelease!r} in {version!r}: "
            "expected a single alphabetic identifier or LABEL.NUMBER"
        )
