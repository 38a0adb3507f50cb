"""Semantic version grammar: parsing, validation, canonical form, precedence.

Versions carry a mandatory ``v`` prefix.  Shorthand forms ``v1`` and
``v1.13`` are valid and canonicalize by filling the missing components
with zero; shorthand forms never carry a pre-release or build suffix.

INVARIANT: An invalid version compares below every valid version, and all
invalid versions compare equal to each other.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_NUM = r"0|[1-9][0-9]*"
_IDENTS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

SEMVER_RE = re.compile(
    rf"v(?P<major>{_NUM})"
    rf"(?:\.(?P<minor>{_NUM})"
    rf"(?:\.(?P<patch>{_NUM})"
    rf"(?:-(?P<prerelease>{_IDENTS}))?"
    rf"(?:\+(?P<build>{_IDENTS}))?"
    r")?)?"
)


@dataclass(frozen=True)
class SemVer:
    """A parsed semantic version.

    Attributes:
        major: Major component.
        minor: Minor component (0 for ``vMAJOR`` shorthand).
        patch: Patch component (0 for shorthand forms).
        prerelease: Pre-release suffix without the leading ``-``, or ``""``.
        build: Build metadata without the leading ``+``, or ``""``.
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    @property
    def prerelease_identifiers(self) -> list[str]:
        return self.prerelease.split(".") if self.prerelease else []

    def canonical(self) -> str:
        """``vMAJOR.MINOR.PATCH[-PRERELEASE]``; build metadata is dropped."""
        base = f"v{self.major}.{self.minor}.{self.patch}"
        return f"{base}-{self.prerelease}" if self.prerelease else base


def parse(version: str) -> SemVer | None:
    """Parse *version*, returning None when it is not a valid semantic version."""
    match = SEMVER_RE.fullmatch(version)
    if match is None:
        return None
    prerelease = match.group("prerelease") or ""
    for ident in prerelease.split(".") if prerelease else []:
        # Numeric identifiers must not carry leading zeros.
        if ident.isdigit() and len(ident) > 1 and ident.startswith("0"):
            return None
    return SemVer(
        major=int(match.group("major")),
        minor=int(match.group("minor") or "0"),
        patch=int(match.group("patch") or "0"),
        prerelease=prerelease,
        build=match.group("build") or "",
    )


def is_valid(version: str) -> bool:
    return parse(version) is not None


def canonical(version: str) -> str:
    """Return the canonical form of *version*, or ``""`` if it is invalid.

    Examples:
        >>> canonical("v1.13")
        'v1.13.0'
        >>> canonical("v1.13.0-beta.1+build.5")
        'v1.13.0-beta.1'
    """
    parsed = parse(version)
    return parsed.canonical() if parsed else ""


def major_minor(version: str) -> str:
    """Return ``vMAJOR.MINOR`` for *version*, or ``""`` if it is invalid."""
    parsed = parse(version)
    return f"v{parsed.major}.{parsed.minor}" if parsed else ""


def _compare_identifier(a: str, b: str) -> int:
    a_num, b_num = a.isdigit(), b.isdigit()
    if a_num and b_num:
        return (int(a) > int(b)) - (int(a) < int(b))
    if a_num != b_num:
        # Numeric identifiers have lower precedence than alphanumeric ones.
        return -1 if a_num else 1
    return (a > b) - (a < b)


def _compare_prerelease(a: str, b: str) -> int:
    if a == b:
        return 0
    if not a:
        return 1
    if not b:
        return -1
    a_ids, b_ids = a.split("."), b.split(".")
    for x, y in zip(a_ids, b_ids):
        cmp = _compare_identifier(x, y)
        if cmp:
            return cmp
    return (len(a_ids) > len(b_ids)) - (len(a_ids) < len(b_ids))


def compare(v: str, w: str) -> int:
    """Compare two versions by semantic-version precedence.

    Returns -1, 0, or 1.  Build metadata is ignored.
    """
    pv, pw = parse(v), parse(w)
    if pv is None or pw is None:
        if pv is None and pw is None:
            return 0
        return -1 if pv is None else 1
    core_v = (pv.major, pv.minor, pv.patch)
    core_w = (pw.major, pw.minor, pw.patch)
    if core_v != core_w:
        return -1 if core_v < core_w else 1
    return _compare_prerelease(pv.prerelease, pw.prerelease)


def sort_key(version: str) -> tuple[object, ...]:
    """Key function ordering valid versions by precedence, invalid ones first."""
    parsed = parse(version)
    if parsed is None:
        return (0,)
    pre: tuple[tuple[int, object], ...] = tuple(
        (0, int(ident)) if ident.isdigit() else (1, ident)
        for ident in parsed.prerelease_identifiers
    )
    # Releases sort after every pre-release sharing the same numeric core.
    return (1, parsed.major, parsed.minor, parsed.patch, 0 if pre else 1, pre)
