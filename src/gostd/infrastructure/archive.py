"""Module-zip packing for a checked-out Go source tree.

The archive holds the repository's top-level files plus the whole
standard-library directory, every entry prefixed with
``{module}@{version}/``.  Skipped while walking:

- names starting with ``.`` or ``_``
- ``go.mod`` files (the library is packed as one module)
- ``testdata`` directories
- symbolic links
"""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path

logger = logging.getLogger(__name__)

_SKIPPED_FILES = frozenset({"go.mod"})
_SKIPPED_DIRS = frozenset({"testdata"})


def _skip(entry: Path) -> bool:
    return entry.name.startswith((".", "_")) or entry.is_symlink()


def _add_files(
    zf: zipfile.ZipFile,
    directory: Path,
    prefix: str,
    *,
    recursive: bool,
) -> int:
    """Write the files of *directory* under *prefix*. Returns the entry count."""
    count = 0
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if _skip(entry):
            continue
        if entry.is_file():
            if entry.name in _SKIPPED_FILES:
                continue
            zf.writestr(f"{prefix}/{entry.name}", entry.read_bytes())
            count += 1
        elif entry.is_dir() and recursive and entry.name not in _SKIPPED_DIRS:
            count += _add_files(zf, entry, f"{prefix}/{entry.name}", recursive=True)
    return count


def write_module_zip(root: Path, prefix: str, libdir: str) -> bytes:
    """Pack *root* into a module zip and return its bytes.

    Args:
        root: Checked-out repository root.
        prefix: Path prefix for every entry, e.g. ``std@v1.12.5``.
        libdir: Directory under *root* holding the library, e.g. ``src``.

    Raises:
        FileNotFoundError: *libdir* does not exist under *root*.
    """
    lib = root / libdir
    if not lib.is_dir():
        msg = f"library directory {libdir!r} not found under {root}"
        raise FileNotFoundError(msg)

    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        count = _add_files(zf, root, prefix, recursive=False)
        count += _add_files(zf, lib, prefix, recursive=True)
    logger.debug("Packed %d files under %s", count, prefix)
    return buf.getvalue()


def open_zip(data: bytes) -> zipfile.ZipFile:
    """Open zip *data* for reading, fully in memory."""
    return zipfile.ZipFile(io.BytesIO(data))
