"""Subcommand modules for commdomain.

Provides register_commands() which uses deferred imports to keep
``commdomain --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from commdomain.commands.list_cmd import list_cmd
    from commdomain.commands.show import show
    from commdomain.commands.verify import verify

    cli.add_command(verify)
    cli.add_command(list_cmd)
    cli.add_command(show)
