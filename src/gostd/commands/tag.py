"""Command: translate a semantic version to a Go release tag."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gostd.commands._base import GostdCommand

if TYPE_CHECKING:
    from gostd.commands._context import AppContext


@click.command(
    cls=GostdCommand,
    examples="""\
  gostd tag v1.12.5
  gostd tag v1.13.0-beta.1
  gostd --quiet tag v1.13""",
)
@click.argument("version")
@click.pass_obj
def tag(app: AppContext, version: str) -> None:
    """Print the Go release tag for VERSION (e.g. v1.13.0-beta.1 -> go1.13beta1)."""
    app.emit(app.service.tag_for_version(version))
