"""Tests for the semantic version grammar."""

from __future__ import annotations

import pytest

from gostd.domain import semver


class TestParse:
    def test_full_version(self) -> None:
        parsed = semver.parse("v1.13.0-beta.1+meta")
        assert parsed == semver.SemVer(1, 13, 0, "beta.1", "meta")
        assert parsed.prerelease_identifiers == ["beta", "1"]

    def test_shorthand_fills_zeros(self) -> None:
        assert semver.parse("v1.13") == semver.SemVer(1, 13, 0)
        assert semver.parse("v2") == semver.SemVer(2, 0, 0)

    @pytest.mark.parametrize(
        "version",
        [
            "",
            "1.2.3",
            "v1.x",
            "v1.0-",
            "v1.2-pre",  # shorthand cannot carry a pre-release
            "v1.2.3-",
            "v1.2.3-beta..1",
            "v1.2.3-01",
            "v01.2.3",
            "v1.02.3",
            "v1.2.3+",
            "v1.2.3\n",
            "v1.2.\u0663",  # non-ASCII digit
        ],
    )
    def test_rejects(self, version: str) -> None:
        assert semver.parse(version) is None
        assert not semver.is_valid(version)


class TestCanonical:
    @pytest.mark.parametrize(
        "version,want",
        [
            ("v1.13", "v1.13.0"),
            ("v1", "v1.0.0"),
            ("v1.13.0-beta.1+build", "v1.13.0-beta.1"),
            ("v1.12.5", "v1.12.5"),
            ("bad", ""),
        ],
    )
    def test_canonical(self, version: str, want: str) -> None:
        assert semver.canonical(version) == want

    def test_major_minor(self) -> None:
        assert semver.major_minor("v1.13.2-rc.1") == "v1.13"
        assert semver.major_minor("nope") == ""


class TestCompare:
    @pytest.mark.parametrize(
        "lower,higher",
        [
            ("v1.3.2", "v1.4.0"),
            ("v1.4.0-beta.1", "v1.4.0"),
            ("v1.4.0-alpha.1", "v1.4.0-beta.1"),
            ("v1.4.0-beta.2", "v1.4.0-beta.10"),
            ("v1.4.0-beta", "v1.4.0-beta.1"),
            ("v1.4.0-1", "v1.4.0-alpha"),
            ("v1.9.7", "v1.12.0"),
            ("bad", "v0.0.0"),
        ],
    )
    def test_ordering(self, lower: str, higher: str) -> None:
        assert semver.compare(lower, higher) == -1
        assert semver.compare(higher, lower) == 1

    def test_equal(self) -> None:
        assert semver.compare("v1.13", "v1.13.0") == 0
        assert semver.compare("v1.2.3+a", "v1.2.3+b") == 0
        assert semver.compare("bad", "worse") == 0

    def test_sort_key_matches_compare(self) -> None:
        versions = ["v1.12.0", "v1.4.0", "v1.4.0-beta.1", "v1.10.0", "v1.4.0-rc.1", "v1.3.2"]
        assert sorted(versions, key=semver.sort_key) == [
            "v1.3.2",
            "v1.4.0-beta.1",
            "v1.4.0-rc.1",
            "v1.4.0",
            "v1.10.0",
            "v1.12.0",
        ]
