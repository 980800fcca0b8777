"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from commdomain.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from commdomain.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    List-style results print one name (or input) per line; anything else
    collapses to the status line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "verify":
        return "\n".join(
            f"{item['input']}\t{'valid' if item['valid'] else 'invalid'}"
            for item in result.data.get("items", [])
        )
    if result.op == "list_domains":
        return "\n".join(item["name"] for item in result.data.get("items", []))
    if result.op == "show":
        return str(result.data.get("name", ""))

    return f"OK: {result.op}"


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="cd.error")
    op = Text(f"  {result.op}", style="cd.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Registry renderers ────────────────────────────────────────────────


def _render_verify(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render verify results as an input/code/verdict table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Input")
    table.add_column("Code", style="cd.code", justify="right")
    table.add_column("Domain", style="cd.name")
    table.add_column("Valid")

    for item in items:
        code = item.get("code")
        verdict = (
            Text("yes", style="cd.valid") if item.get("valid") else Text("no", style="cd.invalid")
        )
        table.add_row(
            Text(str(item.get("input", ""))),
            "" if code is None else str(code),
            item.get("name") or "",
            verdict,
        )
    console.print(table)
    console.print(
        f"\n{result.data.get('valid_count', 0)} valid, "
        f"{result.data.get('invalid_count', 0)} invalid"
    )


def _render_domain_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_domains results as a table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="cd.name", no_wrap=True)
    table.add_column("Code", style="cd.code", justify="right")
    table.add_column("Hex", style="cd.code")
    for item in items:
        table.add_row(str(item["name"]), str(item["code"]), str(item["hex"]))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} domains")


def _render_domain(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single domain as a panel."""
    d = result.data
    content = f"code: {d.get('code')}\nhex: {d.get('hex')}"
    console.print(Panel(content, title=str(d.get("name", "?")), border_style="dim", expand=False))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line only."""
    console.print(Text("OK", style="cd.ok"), Text(f"  {result.op}", style="cd.op"))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "verify": _render_verify,
    "list_domains": _render_domain_table,
    "show": _render_domain,
}
