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
from ...service import encode_payload, encode_validated
from ..api import print_json, print_payload, print_warning
from ..core.common import _ctx_config, _ctx_value, _resolve_output_format, _run_cli
from ..core.fields import collect_fields

_ENCODE_HELP = (
    "Encode field values into the exact text a QR code must carry.\n\n"
    "Fields are given as repeated -f key=value options and/or a JSON object file.\n"
    "Boolean fields accept true/false, yes/no or 1/0.\n\n"
    "Examples:\n"
    "  quickqr encode url -f url=https://example.com\n"
    '  quickqr encode wifi -f ssid="My Net" -f password=secret -f hidden=yes\n'
    "  quickqr encode pix --data-file pix.json --json\n"
    "  quickqr types wifi      # list the fields a type accepts"
)


def register(app: typer.Typer) -> None:
    app.command(help=_ENCODE_HELP)(encode)


def _run_encode(
    *,
    ctx: typer.Context,
    type_id: str,
    field_args: list[str],
    data_file: Path | None,
    json_output: bool,
    no_validate: bool,
    quiet: bool,
) -> None:
    payload_format = get_format(type_id)
    output_format = _resolve_output_format(ctx, json_output)
    data = collect_fields(payload_format.schema, field_args, data_file)
    validate = _ctx_config(ctx).encode.validate and not no_validate
    if validate:
        encoded = encode_payload(payload_format.type_id, data)
    else:
        print_warning(
            "field validation skipped; the payload may be rejected by scanners",
            quiet=quiet,
        )
        encoded = encode_validated(payload_format.type_id, data)
    if output_format == "json":
        print_json({"type": payload_format.type_id.value, "encoded": encoded})
    else:
        print_payload(encoded)


def encode(
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
        help='Print {"type": ..., "encoded": ...} instead of the raw payload.',
        rich_help_panel="Output",
    ),
    no_validate: bool = typer.Option(
        False,
        "--no-validate",
        help="Skip field validation (required keys are still checked).",
        rich_help_panel="Behavior",
    ),
) -> None:
    _run_cli(
        functools.partial(
            _run_encode,
            ctx=ctx,
            type_id=type_id,
            field_args=field_args,
            data_file=data_file,
            json_output=json_output,
            no_validate=no_validate,
            quiet=bool(_ctx_value(ctx, "quiet")),
        ),
        debug=bool(_ctx_value(ctx, "debug")),
    )
