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

import typer
from rich.console import Group

from ...api import handle_list_types
from ...formats import get_format
from ...service import describe_type, describe_types
from ..api import build_kv_table, build_types_table, console, print_json
from ..core.common import _ctx_value, _resolve_output_format, _run_cli

_TYPES_HELP = (
    "List supported QR types, or show the fields one type accepts.\n\n"
    "Examples:\n"
    "  quickqr types\n"
    "  quickqr types epc\n"
    "  quickqr types --json"
)


def register(app: typer.Typer) -> None:
    app.command(help=_TYPES_HELP)(types)


def _run_types(*, ctx: typer.Context, type_id: str | None, json_output: bool) -> None:
    output_format = _resolve_output_format(ctx, json_output)
    if type_id is None:
        if output_format == "json":
            print_json(handle_list_types().payload)
            return
        console.print(build_types_table(describe_types()))
        return

    if output_format == "json":
        print_json(describe_type(type_id))
        return
    schema = get_format(type_id).schema
    field_rows = []
    for spec in schema.fields:
        detail = spec.describe()
        if spec.default not in (None, "", False):
            detail = f"{detail} [default {spec.default}]"
        field_rows.append((spec.name, detail))
    example_rows = [(key, str(value)) for key, value in schema.example.items()]
    console.print(f"[title]{schema.label}[/title] [muted]({schema.type_id.value})[/muted]")
    console.print(schema.description, markup=False)
    console.print(
        Group(
            build_kv_table(field_rows, title="Fields"),
            build_kv_table(example_rows, title="Example"),
        )
    )


def types(
    ctx: typer.Context,
    type_id: str | None = typer.Argument(
        None,
        metavar="[TYPE]",
        help="Show the fields of this type only.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the type contract as JSON.",
        rich_help_panel="Output",
    ),
) -> None:
    _run_cli(
        functools.partial(_run_types, ctx=ctx, type_id=type_id, json_output=json_output),
        debug=bool(_ctx_value(ctx, "debug")),
    )
