"""Rich Console factory and theme for patternctl output.

Consoles render into a StringIO buffer so renderers keep the
``format_result() -> str`` contract. Rich drops color codes on its own
when the output is not a terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PATTERN_THEME = Theme(
    {
        "pc.ok": "bold green",
        "pc.error": "bold red",
        "pc.warning": "bold yellow",
        "pc.op": "bold cyan",
        "pc.key": "dim",
        "pc.accepted": "green",
        "pc.rejected": "red",
        "pc.category.creational": "green",
        "pc.category.structural": "blue",
        "pc.category.behavioral": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=PATTERN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_category(category: str) -> str:
    return f"pc.category.{category}" if category else ""
