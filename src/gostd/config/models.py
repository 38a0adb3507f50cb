"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, gostd.toml only holds overrides.
An empty or missing gostd.toml clones from the public Go repository.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from gostd.infrastructure.sources import GO_REPO_URL


class SourceConfig(BaseModel):
    """[source] section.

    Setting ``fixture_dir`` switches every archive lookup to the local
    fixture trees under that directory.
    """

    model_config = {"frozen": True}

    repo_url: str = GO_REPO_URL
    git_binary: str = "git"
    timeout_seconds: float = Field(default=600, gt=0)
    fixture_dir: Path | None = None


class TagsConfig(BaseModel):
    """[tags] section."""

    model_config = {"frozen": True}

    prerelease_labels: tuple[str, ...] = ("alpha", "beta", "rc")

    @field_validator("prerelease_labels")
    @classmethod
    def _labels_are_alphabetic(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for label in value:
            if not label.isalpha():
                msg = f"pre-release label must be alphabetic: {label!r}"
                raise ValueError(msg)
        return value


class GostdConfig(BaseModel):
    """Root model for a whole gostd.toml file."""

    model_config = {"frozen": True}

    source: SourceConfig = Field(default_factory=SourceConfig)
    tags: TagsConfig = Field(default_factory=TagsConfig)
