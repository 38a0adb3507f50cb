"""Tests for GostdSettings: unified settings with TOML source."""

from __future__ import annotations

import os
from pathlib import Path

import click
import pytest

from gostd.config.settings import GostdSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("GOSTD_"):
            monkeypatch.delenv(name)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = GostdSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.source.repo_url == "https://go.googlesource.com/go"
        assert settings.source.fixture_dir is None
        assert settings.tags.prerelease_labels == ("alpha", "beta", "rc")

    def test_frozen(self, tmp_path: Path) -> None:
        settings = GostdSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "gostd.toml").write_text(
            '[source]\nrepo_url = "https://mirror.example/go"\n'
            '[tags]\nprerelease_labels = ["beta"]\n'
        )
        settings = GostdSettings.from_cli(start=tmp_path)
        assert settings.config_path == (tmp_path / "gostd.toml").resolve()
        assert settings.source.repo_url == "https://mirror.example/go"
        assert settings.source.git_binary == "git"  # default preserved
        assert settings.tags.prerelease_labels == ("beta",)

    def test_relative_fixture_dir_resolved_against_toml(self, tmp_path: Path) -> None:
        (tmp_path / "gostd.toml").write_text('[source]\nfixture_dir = "fixtures"\n')
        settings = GostdSettings.from_cli(start=tmp_path)
        assert settings.source.fixture_dir == tmp_path.resolve() / "fixtures"

    def test_absolute_fixture_dir_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "abs"
        (tmp_path / "gostd.toml").write_text(f'[source]\nfixture_dir = "{target.as_posix()}"\n')
        settings = GostdSettings.from_cli(start=tmp_path)
        assert settings.source.fixture_dir == target

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[source]\ngit_binary = "/opt/git"\n')
        settings = GostdSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.config_path == custom
        assert settings.source.git_binary == "/opt/git"

    def test_missing_explicit_config_uses_defaults(self, tmp_path: Path) -> None:
        settings = GostdSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.source.git_binary == "git"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "gostd.toml").write_text("[source\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            GostdSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "gostd.toml").write_text('[source]\ngit_binary = "/toml/git"\n')
        monkeypatch.setenv("GOSTD_SOURCE__GIT_BINARY", "/env/git")
        settings = GostdSettings.from_cli(start=tmp_path)
        assert settings.source.git_binary == "/env/git"

    def test_cli_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOSTD_QUIET", "false")
        settings = GostdSettings.from_cli(start=tmp_path, quiet=True)
        assert settings.quiet is True

    def test_env_fixture_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOSTD_SOURCE__FIXTURE_DIR", str(tmp_path))
        settings = GostdSettings.from_cli(start=tmp_path)
        assert settings.source.fixture_dir == tmp_path
