"""Subcommand modules for gostd.

register_commands() imports each command module on registration so the
root group stays a thin shell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from gostd.commands.release_version import release_version
    from gostd.commands.tag import tag
    from gostd.commands.versions import versions
    from gostd.commands.zip_cmd import zip_cmd

    cli.add_command(tag)
    cli.add_command(release_version)
    cli.add_command(zip_cmd)
    cli.add_command(versions)
