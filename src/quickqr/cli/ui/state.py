#!/usr/bin/env python3
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

THEME = Theme(
    {
        "title": "bold cyan",
        "accent": "cyan",
        "muted": "dim",
        "hint": "dim italic",
        "rule": "blue",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "field": "bold",
    }
)


def is_terminal(stream: TextIO | None) -> bool:
    """Whether ``stream`` is attached to a terminal; closed or fake streams are not."""
    probe = getattr(stream, "isatty", None)
    if probe is None:
        return False
    try:
        return bool(probe())
    except (OSError, ValueError):
        return False


@dataclass
class UIContext:
    console: Console
    console_err: Console
    theme: Theme = field(default=THEME)

    def set_color(self, enabled: bool) -> None:
        self.console.no_color = not enabled
        self.console_err.no_color = not enabled


def _default_context() -> UIContext:
    # Consoles resolve sys.stdout / sys.stderr on every write, so redirected
    # streams (tests, pipes) are honored without rebuilding the context.
    return UIContext(
        console=Console(theme=THEME),
        console_err=Console(theme=THEME, stderr=True),
    )


DEFAULT_CONTEXT = _default_context()


def get_context() -> UIContext:
    return DEFAULT_CONTEXT


def stdin_is_terminal() -> bool:
    return is_terminal(sys.stdin)


def format_hint(help_text: str) -> Text:
    return Text.assemble(("Hint: ", "muted"), (help_text, "hint"))
