"""Shared pytest fixtures and test helpers for gostd tests."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from gostd.infrastructure.sources import FixtureArchiveSource
from gostd.services.stdlib import StdlibService
from gostd.services.telemetry import disable_telemetry

TESTDATA = Path(__file__).parent / "testdata"

GIT_COMMIT_DATE = "2019-09-04T01:02:03+00:00"

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git binary not available")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixture_root() -> Path:
    """Directory holding one fixture tree per Go tag (go1.12.5, go1.3.2)."""
    return TESTDATA


@pytest.fixture
def fixture_source(fixture_root: Path) -> FixtureArchiveSource:
    return FixtureArchiveSource(fixture_root)


@pytest.fixture
def service(fixture_source: FixtureArchiveSource) -> StdlibService:
    """StdlibService reading from the fixture trees."""
    return StdlibService(fixture_source)


@pytest.fixture(autouse=True)
def _no_telemetry() -> Generator[None]:
    """Keep telemetry off between tests (the CLI enables it with -v)."""
    yield
    disable_telemetry()


@pytest.fixture
def _isolated_cli(
    tmp_path: Path, fixture_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Run the CLI from an empty temp dir against the fixture trees.

    Use via ``@pytest.mark.usefixtures("_isolated_cli")`` on command test
    classes.  No gostd.toml is discoverable and no network is touched.
    """
    for name in list(os.environ):
        if name.startswith("GOSTD_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("GOSTD_SOURCE__FIXTURE_DIR", str(fixture_root))
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Local git repository helpers
# ---------------------------------------------------------------------------


def run_git(repo: Path, *args: str) -> subprocess.CompletedProcess[str]:
    """Run git in *repo* with a fixed identity and commit date."""
    env = {
        **os.environ,
        "GIT_AUTHOR_NAME": "Gopher",
        "GIT_AUTHOR_EMAIL": "gopher@example.com",
        "GIT_AUTHOR_DATE": GIT_COMMIT_DATE,
        "GIT_COMMITTER_NAME": "Gopher",
        "GIT_COMMITTER_EMAIL": "gopher@example.com",
        "GIT_COMMITTER_DATE": GIT_COMMIT_DATE,
    }
    return subprocess.run(
        ["git", "-c", "commit.gpgsign=false", "-c", "tag.gpgsign=false", *args],
        cwd=repo,
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )


@pytest.fixture
def go_repo(tmp_path: Path, fixture_root: Path) -> Path:
    """A local git repository with the fixture trees committed and tagged.

    ``go1.3.2`` is committed first, then the tree is replaced with
    ``go1.12.5``; a ``go1.13beta1`` tag and a non-Go tag point at the
    second commit.
    """
    repo = tmp_path / "go"
    repo.mkdir()
    run_git(repo, "init", "--quiet")

    for tag in ("go1.3.2", "go1.12.5"):
        for child in repo.iterdir():
            if child.name == ".git":
                continue
            if child.is_dir():
                shutil.rmtree(child)
            else:
                child.unlink()
        shutil.copytree(fixture_root / tag, repo, dirs_exist_ok=True)
        run_git(repo, "add", "--all")
        run_git(repo, "commit", "--quiet", "-m", f"release {tag}")
        run_git(repo, "tag", tag)

    run_git(repo, "tag", "go1.13beta1")
    run_git(repo, "tag", "weekly.2011-01-20")
    return repo
