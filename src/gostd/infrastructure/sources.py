"""Archive sources: where a Go source tree for a release tag comes from.

Two implementations of the :class:`ArchiveSource` protocol:

- :class:`GitArchiveSource` shallow-clones the Go repository at a tag into
  a temporary directory.
- :class:`FixtureArchiveSource` serves fixed trees from a local directory,
  one subdirectory per tag, with a fixed commit time.

The source is passed explicitly to whatever needs it; there is no global
switch between the two.
"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gostd.config.models import SourceConfig

logger = logging.getLogger(__name__)

GO_REPO_URL = "https://go.googlesource.com/go"

FIXTURE_COMMIT_TIME = datetime(2019, 9, 4, 1, 2, 3, tzinfo=UTC)


class ArchiveNotFoundError(LookupError):
    """The source has no tree for the requested tag."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"no source tree for tag {tag!r}")


class ArchiveSourceError(RuntimeError):
    """The source failed for a reason other than a missing tag."""


@dataclass(frozen=True)
class Checkout:
    """A materialized source tree and the time of its commit."""

    root: Path
    commit_time: datetime


class ArchiveSource(Protocol):
    """Capability resolving a Go release tag to a source tree."""

    def checkout(self, tag: str) -> AbstractContextManager[Checkout]:
        """Materialize the tree for *tag*; raises :class:`ArchiveNotFoundError`."""
        ...

    def list_tags(self) -> list[str]:
        """Return every tag the source knows about."""
        ...


class FixtureArchiveSource:
    """Serve trees from ``root/<tag>/`` with a fixed commit time."""

    def __init__(self, root: Path, *, commit_time: datetime = FIXTURE_COMMIT_TIME) -> None:
        self._root = Path(root)
        self._commit_time = commit_time

    @contextmanager
    def checkout(self, tag: str) -> Iterator[Checkout]:
        tree = self._root / tag
        if not tag or tag.startswith(".") or not tree.is_dir():
            raise ArchiveNotFoundError(tag)
        logger.debug("Using fixture tree %s", tree)
        yield Checkout(root=tree, commit_time=self._commit_time)

    def list_tags(self) -> list[str]:
        if not self._root.is_dir():
            return []
        return sorted(p.name for p in self._root.iterdir() if p.is_dir())


class GitArchiveSource:
    """Shallow-clone a remote Go repository with the git binary.

    Each :meth:`checkout` is a single best-effort clone; there are no
    retries.  The clone directory is removed when the context exits.
    """

    def __init__(
        self,
        repo_url: str = GO_REPO_URL,
        *,
        git_binary: str = "git",
        timeout: float | None = 600,
    ) -> None:
        self._repo_url = repo_url
        self._git = git_binary
        self._timeout = timeout

    def _run_git(self, *args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
        """Run a git command. Raises on failure."""
        return subprocess.run(
            [self._git, *args],
            cwd=cwd,
            env={**os.environ, "LC_ALL": "C"},
            capture_output=True,
            text=True,
            check=True,
            timeout=self._timeout,
        )

    @contextmanager
    def checkout(self, tag: str) -> Iterator[Checkout]:
        with tempfile.TemporaryDirectory(prefix="gostd-") as tmp:
            dest = Path(tmp) / "go"
            logger.debug("Cloning %s at %s", self._repo_url, tag)
            try:
                self._run_git(
                    "clone",
                    "--quiet",
                    "--depth",
                    "1",
                    "--single-branch",
                    "--no-tags",
                    "--branch",
                    tag,
                    self._repo_url,
                    str(dest),
                )
            except subprocess.CalledProcessError as exc:
                stderr = (exc.stderr or "").strip()
                lowered = stderr.lower()
                if "remote branch" in lowered:
                    raise ArchiveNotFoundError(tag) from exc
                msg = f"git clone of {self._repo_url} at {tag} failed: {stderr}"
                raise ArchiveSourceError(msg) from exc
            except (OSError, subprocess.TimeoutExpired) as exc:
                msg = f"git clone of {self._repo_url} at {tag} failed: {exc}"
                raise ArchiveSourceError(msg) from exc

            yield Checkout(root=dest, commit_time=self._commit_time(dest))

    def _commit_time(self, repo: Path) -> datetime:
        try:
            result = self._run_git("log", "-1", "--format=%ct", cwd=repo)
        except (OSError, subprocess.SubprocessError) as exc:
            msg = f"could not read commit time in {repo}: {exc}"
            raise ArchiveSourceError(msg) from exc
        try:
            timestamp = int(result.stdout.strip())
        except ValueError as exc:
            msg = f"no commit time in {repo}: {result.stdout.strip()!r}"
            raise ArchiveSourceError(msg) from exc
        return datetime.fromtimestamp(timestamp, tz=UTC)

    def list_tags(self) -> list[str]:
        try:
            result = self._run_git("ls-remote", "--tags", "--refs", self._repo_url)
        except (OSError, subprocess.SubprocessError) as exc:
            msg = f"git ls-remote {self._repo_url} failed: {exc}"
            raise ArchiveSourceError(msg) from exc

        tags: list[str] = []
        for line in result.stdout.splitlines():
            _, _, ref = line.partition("\t")
            if ref.startswith("refs/tags/"):
                tags.append(ref.removeprefix("refs/tags/"))
        return tags


def source_from_config(config: SourceConfig) -> ArchiveSource:
    """Build the archive source described by a ``[source]`` config section."""
    if config.fixture_dir is not None:
        return FixtureArchiveSource(config.fixture_dir)
    return GitArchiveSource(
        config.repo_url,
        git_binary=config.git_binary,
        timeout=config.timeout_seconds,
    )
