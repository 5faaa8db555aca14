"""Rich Console factory and theme for graphreach output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GRAPHREACH_THEME = Theme(
    {
        "gr.ok": "bold green",
        "gr.error": "bold red",
        "gr.warning": "bold yellow",
        "gr.op": "bold cyan",
        "gr.key": "dim",
        "gr.id": "bold blue",
        "gr.yes": "bold green",
        "gr.no": "bold red",
        "gr.value": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Terminal width (``[output] width`` from settings).
    """
    return Console(
        file=StringIO(),
        theme=GRAPHREACH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
