"""Command: list all registered domains."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commdomain.commands._base import DomainCommand

if TYPE_CHECKING:
    from commdomain.commands._context import AppContext


@click.command(
    "list",
    cls=DomainCommand,
    examples="""\
  commdomain list
  commdomain -q list
  commdomain --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every registered domain in code order."""
    app.emit(app.registry.list_domains())
