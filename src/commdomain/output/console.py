"""Rich Console factory and theme for commdomain output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

COMMDOMAIN_THEME = Theme(
    {
        "cd.ok": "bold green",
        "cd.error": "bold red",
        "cd.op": "bold cyan",
        "cd.name": "bold",
        "cd.code": "bold blue",
        "cd.valid": "green",
        "cd.invalid": "red",
    }
)


def create_console(*, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=COMMDOMAIN_THEME,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
