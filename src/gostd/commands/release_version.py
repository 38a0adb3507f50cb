"""Command: translate a Go release tag back to a semantic version."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gostd.commands._base import GostdCommand

if TYPE_CHECKING:
    from gostd.commands._context import AppContext


@click.command(
    "release-version",
    cls=GostdCommand,
    examples="""\
  gostd release-version go1.12
  gostd --json release-version go1.9.7""",
)
@click.argument("tag_name", metavar="TAG")
@click.pass_obj
def release_version(app: AppContext, tag_name: str) -> None:
    """Print the semantic version of a released Go TAG.

    Pre-release and non-Go tags have no release version; the command still
    succeeds and prints a warning.
    """
    app.emit(app.service.release_version_for_tag(tag_name))
