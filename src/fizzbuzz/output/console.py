"""Rich Console factory and theme for diagnostics on stderr.

Creates Console instances that render to a StringIO buffer so callers get
a plain ``str`` back. In non-TTY environments (tests, pipes) Rich
automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

FIZZBUZZ_THEME = Theme(
    {
        "fb.error": "bold red",
        "fb.hint": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=FIZZBUZZ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def render_error(message: str, *, hint: str | None = None, no_color: bool = False) -> str:
    """Render ``Error: <message>`` plus an optional hint paragraph.

    The message is printed as literal text, so brackets in user input are
    never interpreted as Rich markup.
    """
    console = create_console(no_color=no_color)
    line = Text("Error:", style="fb.error")
    line.append(f" {message}")
    console.print(line, soft_wrap=True)
    if hint:
        console.print()
        console.print(Text(hint, style="fb.hint"), soft_wrap=True)
    return get_output(console).rstrip("\n")
