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

import typer

from ..core.common import _ctx_value, _resolve_output_format, _run_cli
from ..flows.wizard import run_wizard

_WIZARD_HELP = (
    "Build a payload interactively.\n\n"
    "Prompts for a QR type (unless given) and then for each field, checking values\n"
    "as they are typed. This is also what `quickqr` runs with no subcommand.\n\n"
    "Examples:\n"
    "  quickqr wizard\n"
    "  quickqr wizard vcard"
)


def register(app: typer.Typer) -> None:
    app.command(help=_WIZARD_HELP)(wizard)


def wizard(
    ctx: typer.Context,
    type_id: str | None = typer.Argument(
        None,
        metavar="[TYPE]",
        help="Skip the type prompt and build this type.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help='Print {"type": ..., "encoded": ...} instead of the raw payload.',
        rich_help_panel="Output",
    ),
) -> None:
    quiet = bool(_ctx_value(ctx, "quiet"))

    def _run() -> None:
        run_wizard(
            type_id=type_id,
            quiet=quiet,
            output_format=_resolve_output_format(ctx, json_output),
        )

    _run_cli(_run, debug=bool(_ctx_value(ctx, "debug")))
