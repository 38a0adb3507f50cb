"""Command: list released standard-library versions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gostd.commands._base import GostdCommand

if TYPE_CHECKING:
    from gostd.commands._context import AppContext


@click.command(
    cls=GostdCommand,
    examples="""\
  gostd versions
  gostd --quiet versions | tail -n 5""",
)
@click.pass_obj
def versions(app: AppContext) -> None:
    """List every released version of the standard library, oldest first."""
    app.emit(app.service.versions())
