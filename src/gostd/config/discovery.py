"""Config file discovery and loading.

Walk-up finder locates gostd.toml, similar to how git finds .git/.
Supports the GOSTD_CONFIG env var and the --config CLI flag as overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from gostd.config.models import GostdConfig

CONFIG_FILENAME = "gostd.toml"
CONFIG_ENV_VAR = "GOSTD_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for gostd.toml.

    Returns the path to the config file, or None if not found.
    Checks GOSTD_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def load_config(path: Path | None = None, cwd: Path | None = None) -> GostdConfig:
    """Load and validate a gostd.toml.

    If *path* is None, discovers one from *cwd*.  Returns defaults when no
    file exists.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return GostdConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return GostdConfig.model_validate(data)
