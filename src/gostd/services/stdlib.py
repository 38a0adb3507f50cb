"""Standard-library operations: tag translation, module zips, version listing.

The module-level functions are the library API and raise typed errors.
:class:`StdlibService` wraps them into ServiceResult for the CLI.

Pipeline for a zip: VERSION → TAG → CHECKOUT → PACK.
"""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from gostd.domain import semver
from gostd.domain.errors import InvalidVersionError, UnsupportedPrereleaseError
from gostd.domain.tags import (
    DEFAULT_PRERELEASE_LABELS,
    MODULE_PATH,
    directory,
    release_version_for_tag,
    tag_for_version,
)
from gostd.infrastructure.archive import open_zip, write_module_zip
from gostd.infrastructure.sources import (
    ArchiveNotFoundError,
    ArchiveSource,
    ArchiveSourceError,
)
from gostd.services.result import (
    ARCHIVE_NOT_FOUND,
    INVALID_VERSION,
    SOURCE_FAILED,
    UNSUPPORTED_PRERELEASE,
    WRITE_FAILED,
    ServiceResult,
    failure,
)
from gostd.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def pack_std(
    version: str,
    source: ArchiveSource,
    *,
    labels: Iterable[str] = DEFAULT_PRERELEASE_LABELS,
) -> tuple[bytes, datetime]:
    """Pack the standard library at *version*; return zip bytes and commit time.

    Raises:
        InvalidVersionError: *version* is not a semantic version.
        UnsupportedPrereleaseError: *version* has no Go tag spelling.
        ArchiveNotFoundError: *source* has no tree for the tag.
        ArchiveSourceError: *source* failed, or its tree lacks the library.
    """
    tag = tag_for_version(version, labels=labels)
    libdir = directory(version)
    prefix = f"{MODULE_PATH}@{version}"

    with trace_span("checkout") as span:
        if span:
            span.annotate("tag", tag)
        with source.checkout(tag) as checkout:
            with trace_span("pack") as pack_span:
                if pack_span:
                    pack_span.annotate("libdir", libdir)
                try:
                    data = write_module_zip(checkout.root, prefix, libdir)
                except FileNotFoundError as exc:
                    msg = f"tree for {tag} has no {libdir} directory"
                    raise ArchiveSourceError(msg) from exc
    return data, checkout.commit_time


def zip_std(
    version: str,
    source: ArchiveSource,
    *,
    labels: Iterable[str] = DEFAULT_PRERELEASE_LABELS,
) -> tuple[zipfile.ZipFile, datetime]:
    """Return the standard library at *version* as an in-memory module zip.

    Every entry name starts with ``std@{version}/``.  The commit time is the
    one the source reports for the version's tag.  Raises as :func:`pack_std`.
    """
    data, commit_time = pack_std(version, source, labels=labels)
    return open_zip(data), commit_time


def list_versions(source: ArchiveSource) -> list[str]:
    """Semantic versions of every released tag in *source*, in precedence order."""
    versions = {release_version_for_tag(tag) for tag in source.list_tags()}
    versions.discard("")
    return sorted(versions, key=semver.sort_key)


class StdlibService:
    """ServiceResult facade over the standard-library operations.

    Usage::

        svc = StdlibService(FixtureArchiveSource(root))
        result = svc.zip("v1.12.5", output=Path("std.zip"))
    """

    def __init__(
        self,
        source: ArchiveSource,
        *,
        labels: Iterable[str] = DEFAULT_PRERELEASE_LABELS,
    ) -> None:
        self._source = source
        self._labels = tuple(labels)

    @traced
    def tag_for_version(self, version: str) -> ServiceResult:
        op = "tag_for_version"
        try:
            tag = tag_for_version(version, labels=self._labels)
        except InvalidVersionError as exc:
            return failure(op, INVALID_VERSION, exc, version=version)
        except UnsupportedPrereleaseError as exc:
            return failure(op, UNSUPPORTED_PRERELEASE, exc, version=version)
        return ServiceResult(ok=True, op=op, data={"version": version, "tag": tag})

    @traced
    def release_version_for_tag(self, tag: str) -> ServiceResult:
        """Invert a release tag. Always ``ok``; a miss yields ``version=None``."""
        version = release_version_for_tag(tag)
        warnings: list[str] = []
        if not version:
            warnings.append(f"{tag!r} is not a Go release tag")
        return ServiceResult(
            ok=True,
            op="release_version_for_tag",
            data={"tag": tag, "version": version or None},
            warnings=warnings,
        )

    @traced
    def zip(self, version: str, output: Path | None = None) -> ServiceResult:
        op = "zip"
        try:
            tag = tag_for_version(version, labels=self._labels)
            data, commit_time = pack_std(version, self._source, labels=self._labels)
        except InvalidVersionError as exc:
            return failure(op, INVALID_VERSION, exc, version=version)
        except UnsupportedPrereleaseError as exc:
            return failure(op, UNSUPPORTED_PRERELEASE, exc, version=version)
        except ArchiveNotFoundError as exc:
            return failure(op, ARCHIVE_NOT_FOUND, exc, version=version, tag=exc.tag)
        except ArchiveSourceError as exc:
            return failure(op, SOURCE_FAILED, exc, version=version)

        if output is not None:
            try:
                output.parent.mkdir(parents=True, exist_ok=True)
                output.write_bytes(data)
            except OSError as exc:
                return failure(op, WRITE_FAILED, exc, output=str(output))
            logger.debug("Wrote %d bytes to %s", len(data), output)

        with open_zip(data) as zf:
            file_count = len(zf.namelist())
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "version": version,
                "tag": tag,
                "commit_time": commit_time.isoformat(),
                "file_count": file_count,
                "output": str(output) if output is not None else None,
            },
        )

    @traced
    def versions(self) -> ServiceResult:
        op = "versions"
        try:
            versions = list_versions(self._source)
        except ArchiveSourceError as exc:
            return failure(op, SOURCE_FAILED, exc)
        items = [
            {"version": v, "tag": tag_for_version(v, labels=self._labels)} for v in versions
        ]
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})
