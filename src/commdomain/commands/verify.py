"""Command: check domain codes against the registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commdomain.commands._base import DomainCommand

if TYPE_CHECKING:
    from commdomain.commands._context import AppContext


@click.command(
    cls=DomainCommand,
    examples="""\
  commdomain verify 1
  commdomain verify -- 0xfa 0x05 -1
  commdomain verify chat info
  commdomain verify --strict 0x04 0x99
  commdomain --json verify 250""",
)
@click.argument("refs", nargs=-1)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail (exit 1) if any reference is not a registered domain.",
)
@click.pass_obj
def verify(app: AppContext, refs: tuple[str, ...], strict: bool) -> None:
    """Check whether each REF is a registered domain code.

    REF may be decimal, hex (0x..), or a domain name. Put negative
    numbers after ``--``.
    """
    strict = strict or app.settings.verify.strict
    app.emit(app.registry.verify(refs, strict=strict))
