"""Rich Console factory and theme for isoperiod output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PERIOD_THEME = Theme(
    {
        "period.ok": "bold green",
        "period.error": "bold red",
        "period.warning": "bold yellow",
        "period.op": "bold cyan",
        "period.key": "dim",
        "period.text": "bold blue",
        "period.input": "dim",
        "period.negative": "magenta",
        "period.zero": "dim",
    }
)

DEFAULT_WIDTH = 100


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PERIOD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_value(value: int | str) -> str:
    """Return the Rich style for a component value cell."""
    text = str(value)
    if text.startswith("-"):
        return "period.negative"
    if text.strip("0.") == "":
        return "period.zero"
    return ""
