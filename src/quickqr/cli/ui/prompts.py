#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from collections.abc import Callable, Sequence

import questionary
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError as PromptValidationError, Validator
from rich.padding import Padding
from rich.rule import Rule

from .state import UIContext, format_hint, get_context

QUESTIONARY_STYLE = questionary.Style(
    [
        ("question", "bold"),
        ("answer", "bold"),
        ("pointer", "bold"),
        ("highlighted", "reverse"),
        ("selected", "fg:ansibrightblack"),
        ("text", "fg:default bg:default noreverse"),
        ("instruction", "fg:ansibrightblack"),
        ("separator", "fg:ansibrightblack"),
        ("validation-toolbar", "fg:ansired bold"),
    ]
)

DEFAULT_CONTEXT = get_context()

# Returns an error message for bad input, or None when the text is acceptable.
TextCheck = Callable[[str], str | None]


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


class CheckValidator(Validator):
    """Adapts a ``TextCheck`` so questionary shows its message under the input."""

    def __init__(self, check: TextCheck) -> None:
        self._check = check

    def validate(self, document: Document) -> None:
        message = self._check(document.text)
        if message:
            raise PromptValidationError(message=message, cursor_position=len(document.text))


def print_prompt_header(
    prompt: str,
    help_text: str | None,
    *,
    context: UIContext | None = None,
) -> None:
    context = _resolve_context(context)
    context.console.print(Rule(style="rule"))
    if help_text:
        context.console.print(Padding(format_hint(help_text), (0, 0, 0, 1)))


def prompt_text(
    prompt: str,
    *,
    default: str = "",
    check: TextCheck | None = None,
    help_text: str | None = None,
    context: UIContext | None = None,
) -> str:
    """Ask for one line of text; ``check`` runs on every submit until it passes."""
    print_prompt_header(prompt, help_text, context=context)
    value = questionary.text(
        prompt,
        default=default,
        qmark="",
        style=QUESTIONARY_STYLE,
        validate=CheckValidator(check) if check is not None else None,
    ).ask()
    if value is None:
        raise KeyboardInterrupt
    return value


def prompt_yes_no(
    prompt: str,
    *,
    default: bool,
    help_text: str | None = None,
    context: UIContext | None = None,
) -> bool:
    print_prompt_header(prompt, help_text, context=context)
    value = questionary.confirm(
        prompt,
        default=default,
        qmark="",
        style=QUESTIONARY_STYLE,
    ).ask()
    if value is None:
        raise KeyboardInterrupt
    return value


def prompt_choice_list(
    items: Sequence[tuple[str, str]],
    *,
    default: str | None,
    title: str | None = None,
    help_text: str | None = None,
    context: UIContext | None = None,
) -> str:
    print_prompt_header(title or "Select an option", help_text, context=context)
    choices = [questionary.Choice(title=label, value=key) for key, label in items]
    value = questionary.select(
        title or "Select an option",
        choices=choices,
        default=default,
        qmark="",
        pointer=">",
        style=QUESTIONARY_STYLE,
    ).ask()
    if value is None:
        raise KeyboardInterrupt
    return value
