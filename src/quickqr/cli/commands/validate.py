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

import functools
from pathlib import Path

import typer

from ...formats import get_format
from ...service import validate_payload
from ..api import build_field_error_table, console, console_err, print_json
from ..core.common import _ctx_value, _resolve_output_format, _run_cli
from ..core.fields import collect_fields

_VALIDATE_HELP = (
    "Check field values without encoding them.\n\n"
    "Every failing field is reported, not just the first. Exits with 1 when any\n"
    "field is invalid.\n\n"
    "Examples:\n"
    "  quickqr validate upi -f vpa=user@bank -f name=Shop -f amount=10.5\n"
    "  quickqr validate epc --data-file transfer.json --json"
)

EXIT_INVALID = 1


def register(app: typer.Typer) -> None:
    app.command(help=_VALIDATE_HELP)(validate)


def _run_validate(
    *,
    ctx: typer.Context,
    type_id: str,
    field_args: list[str],
    data_file: Path | None,
    json_output: bool,
    quiet: bool,
) -> int:
    payload_format = get_format(type_id)
    output_format = _resolve_output_format(ctx, json_output)
    data = collect_fields(payload_format.schema, field_args, data_file)
    result = validate_payload(payload_format.type_id, data)
    if output_format == "json":
        print_json(
            {
                "type": payload_format.type_id.value,
                "valid": result.ok,
                "fields": [error.to_dict() for error in result.errors],
            }
        )
    elif result.ok:
        if not quiet:
            console.print(f"[success]valid[/success] {payload_format.type_id.value} data")
    else:
        console_err.print(f"[red]invalid[/red] {payload_format.type_id.value} data")
        console_err.print(build_field_error_table(result.errors))
    return 0 if result.ok else EXIT_INVALID


def validate(
    ctx: typer.Context,
    type_id: str = typer.Argument(..., metavar="TYPE", help="QR type, e.g. url, wifi, pix."),
    field_args: list[str] = typer.Option(
        [],
        "--field",
        "-f",
        metavar="KEY=VALUE",
        help="Field value (repeatable).",
        rich_help_panel="Input",
    ),
    data_file: Path | None = typer.Option(
        None,
        "--data-file",
        "-d",
        help="JSON object with field values; --field options override it.",
        rich_help_panel="Input",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON.",
        rich_help_panel="Output",
    ),
) -> None:
    _run_cli(
        functools.partial(
            _run_validate,
            ctx=ctx,
            type_id=type_id,
            field_args=field_args,
            data_file=data_file,
            json_output=json_output,
            quiet=bool(_ctx_value(ctx, "quiet")),
        ),
        debug=bool(_ctx_value(ctx, "debug")),
    )
