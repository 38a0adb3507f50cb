"""Translation between semantic versions and Go release tags.

Go tags the standard distribution as ``go1.13``, ``go1.12.5``,
``go1.13beta1``.  The standard library is exposed as a single module
named ``std`` whose versions are the semantic-version spelling of those
tags (``v1.13.0``, ``v1.12.5``, ``v1.13.0-beta.1``).

Forward translation is strict and raises.  The inverse recovers released
versions only and returns ``""`` for anything else, so callers can probe
arbitrary tag names without handling errors.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from gostd.domain import semver
from gostd.domain.errors import InvalidVersionError, UnsupportedPrereleaseError

MODULE_PATH = "std"

DEFAULT_PRERELEASE_LABELS: tuple[str, ...] = ("alpha", "beta", "rc")

RELEASE_TAG_RE = re.compile(r"go(?P<major>[0-9]+)\.(?P<minor>[0-9]+)(?:\.(?P<patch>[0-9]+))?")

# A lone pre-release identifier without digits is kept verbatim.
_WORD_PRERELEASE_RE = re.compile(r"[A-Za-z-]+")

# First version laid out as src/<pkg> rather than src/pkg/<pkg>.
_SRC_LAYOUT_SINCE = "v1.4.0-beta.1"


def _prerelease_suffix(version: str, prerelease: str, labels: Iterable[str]) -> str:
    idents = prerelease.split(".")
    if len(idents) == 1 and _WORD_PRERELEASE_RE.fullmatch(idents[0]):
        return idents[0]
    if len(idents) == 2:
        label, number = idents
        if label in set(labels) and number.isdigit():
            return f"{label}{number}"
    # Fused LABELNUMBER identifiers ("beta1") land here too.
    raise UnsupportedPrereleaseError(version, prerelease)


def tag_for_version(
    version: str,
    *,
    labels: Iterable[str] = DEFAULT_PRERELEASE_LABELS,
) -> str:
    """Return the Go release tag for a semantic *version*.

    Examples:
        >>> tag_for_version("v1.12.5")
        'go1.12.5'
        >>> tag_for_version("v1.13")
        'go1.13'
        >>> tag_for_version("v1.13.0-beta.1")
        'go1.13beta1'

    Args:
        version: Semantic version, possibly in shorthand form.
        labels: Pre-release labels accepted in ``LABEL.NUMBER`` suffixes.

    Raises:
        InvalidVersionError: *version* is not a semantic version.
        UnsupportedPrereleaseError: the pre-release suffix has no tag spelling.
    """
    parsed = semver.parse(version)
    if parsed is None:
        raise InvalidVersionError(version)

    tag = f"go{parsed.major}.{parsed.minor}"
    if parsed.patch:
        tag += f".{parsed.patch}"
    if parsed.prerelease:
        tag += _prerelease_suffix(version, parsed.prerelease, labels)
    return tag


def release_version_for_tag(tag: str) -> str:
    """Return the semantic version for a released Go *tag*, or ``""``.

    Pre-release tags (``go1.9beta2``) and anything that is not a Go tag
    yield ``""``.
    """
    if not tag:
        return ""
    match = RELEASE_TAG_RE.fullmatch(tag)
    if match is None:
        return ""
    version = f"v{match['major']}.{match['minor']}.{match['patch'] or '0'}"
    return version if semver.is_valid(version) else ""


def contains(path: str) -> bool:
    """Report whether the import *path* belongs to the standard library.

    Standard-library paths have no dot in their first element.
    """
    if not path:
        return False
    first = path.split("/", 1)[0]
    return "." not in first


def directory(version: str) -> str:
    """Directory of the Go repository holding the standard library at *version*."""
    if semver.compare(version, _SRC_LAYOUT_SINCE) >= 0:
        return "src"
    return "src/pkg"
