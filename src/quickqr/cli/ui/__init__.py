#!/usr/bin/env python3
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from rich import box
from rich.panel import Panel
from rich.table import Table

from ...core.errors import FieldError
from .prompts import (
    CheckValidator,
    TextCheck,
    print_prompt_header,
    prompt_choice_list,
    prompt_text,
    prompt_yes_no,
)
from .state import UIContext, format_hint, get_context, is_terminal, stdin_is_terminal

DEFAULT_CONTEXT = get_context()
THEME = DEFAULT_CONTEXT.theme
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    _resolve_context(context).set_color(not no_color)


def print_payload(payload: str, *, context: UIContext | None = None) -> None:
    """Write a payload byte-for-byte to the console's stream.

    Rich strips carriage returns from renderables, which would break iCal line
    folds, so the text bypasses rendering entirely.
    """
    context = _resolve_context(context)
    stream = context.console.file
    stream.write(payload + "\n")
    stream.flush()


def print_json(data: object, *, context: UIContext | None = None) -> None:
    context = _resolve_context(context)
    context.console.print(
        json.dumps(data, indent=2, ensure_ascii=False),
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE, show_lines=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    return table


def build_field_error_table(errors: Sequence[FieldError], *, title: str | None = None) -> Table:
    table = Table(title=title, box=box.SIMPLE, show_lines=False, title_justify="left")
    table.add_column("Field", style="field", no_wrap=True)
    table.add_column("Problem", style="error")
    for error in errors:
        table.add_row(error.field, error.message)
    return table


def build_types_table(types: Mapping[str, Mapping[str, Any]]) -> Table:
    table = Table(box=box.SIMPLE, show_lines=False)
    table.add_column("Type", style="accent", no_wrap=True)
    table.add_column("Category", style="muted", no_wrap=True)
    table.add_column("Label")
    table.add_column("Required fields")
    for type_id, info in types.items():
        required = info.get("required") or ()
        table.add_row(
            type_id,
            str(info.get("category", "")),
            str(info.get("label", "")),
            ", ".join(str(name) for name in required),
        )
    return table


def panel(title: str, renderable, *, style: str = "accent") -> Panel:
    return Panel(
        renderable,
        title=title,
        title_align="left",
        border_style=style,
        box=box.ROUNDED,
        padding=(1, 2),
    )


def print_warning(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[warning]Warning:[/warning] {message}")


def print_completion_panel(title: str, renderable, *, quiet: bool, use_err: bool = False) -> None:
    if quiet:
        return
    output = console_err if use_err else console
    output.print(panel(title, renderable, style="success"))


__all__ = [
    "CheckValidator",
    "THEME",
    "TextCheck",
    "UIContext",
    "build_field_error_table",
    "build_kv_table",
    "build_types_table",
    "configure_ui",
    "console",
    "console_err",
    "format_hint",
    "is_terminal",
    "panel",
    "print_completion_panel",
    "print_json",
    "print_payload",
    "print_prompt_header",
    "print_warning",
    "prompt_choice_list",
    "prompt_text",
    "prompt_yes_no",
    "stdin_is_terminal",
]
