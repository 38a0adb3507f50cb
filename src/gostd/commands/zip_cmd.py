"""Command: package the standard library at a version as a module zip."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from gostd.commands._base import GostdCommand

if TYPE_CHECKING:
    from gostd.commands._context import AppContext


@click.command(
    "zip",
    cls=GostdCommand,
    examples="""\
  gostd zip v1.12.5 -o std.zip
  gostd zip v1.13.0-beta.1 --output out/std@v1.13.0-beta.1.zip
  gostd --json zip v1.3.2""",
)
@click.argument("version")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the zip to this file (otherwise only report it).",
)
@click.pass_obj
def zip_cmd(app: AppContext, version: str, output: Path | None) -> None:
    """Build the std@VERSION module zip and report its commit time."""
    app.emit(app.service.zip(version, output=output))
