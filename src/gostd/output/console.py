"""Rich Console factory and theme for gostd output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract.  In non-TTY environments (tests, pipes) Rich drops
color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GOSTD_THEME = Theme(
    {
        "gostd.ok": "bold green",
        "gostd.error": "bold red",
        "gostd.warning": "bold yellow",
        "gostd.op": "bold cyan",
        "gostd.key": "dim",
        "gostd.version": "bold blue",
        "gostd.tag": "bold magenta",
        "gostd.path": "dim",
    }
)

_KEY_STYLES: dict[str, str] = {
    "version": "gostd.version",
    "tag": "gostd.tag",
    "output": "gostd.path",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=GOSTD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_key(key: str) -> str:
    """Return the Rich style for a result data key."""
    return _KEY_STYLES.get(key, "")
