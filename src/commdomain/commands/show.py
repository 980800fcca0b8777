"""Command: describe a single domain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commdomain.commands._base import DomainCommand

if TYPE_CHECKING:
    from commdomain.commands._context import AppContext


@click.command(
    cls=DomainCommand,
    examples="""\
  commdomain show chat
  commdomain show 0xfa
  commdomain --json show 3""",
)
@click.argument("ref")
@click.pass_obj
def show(app: AppContext, ref: str) -> None:
    """Show the domain named or numbered by REF."""
    app.emit(app.registry.show(ref))
