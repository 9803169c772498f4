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
from dataclasses import dataclass

import typer
from rich.markup import escape
from rich.tree import Tree

from ...encoding.crc import CRC_FIELD_ID, verify_emv_crc
from ...encoding.tlv import TlvField, parse_tlv
from ...formats import pix
from ..api import console, console_err, print_json
from ..core.common import _ctx_value, _resolve_output_format, _run_cli

_INSPECT_HELP = (
    "Decode an EMV merchant-presented payload (such as a Pix BR Code) into its\n"
    "TLV fields and check its trailing CRC.\n\n"
    "Exits with 1 when the CRC does not match.\n\n"
    "Examples:\n"
    '  quickqr inspect "00020101021226340014br.gov.bcb.pix...6304ABCD"\n'
    '  quickqr inspect --json "$(quickqr encode pix --data-file pix.json)"'
)

EXIT_BAD_CRC = 1

# Merchant account templates (26-51), additional data (62) and unreserved
# templates (80-99) nest further TLV fields.
_TEMPLATE_IDS = frozenset(
    [f"{tag:02d}" for tag in range(26, 52)] + ["62"] + [f"{tag:02d}" for tag in range(80, 100)]
)

_TOP_LEVEL_NAMES = {
    pix.ID_PAYLOAD_FORMAT: "Payload format indicator",
    pix.ID_INITIATION: "Point of initiation method",
    pix.ID_MERCHANT_ACCOUNT: "Merchant account information",
    pix.ID_CATEGORY: "Merchant category code",
    pix.ID_CURRENCY: "Transaction currency",
    pix.ID_AMOUNT: "Transaction amount",
    pix.ID_COUNTRY: "Country code",
    pix.ID_NAME: "Merchant name",
    pix.ID_CITY: "Merchant city",
    pix.ID_ADDITIONAL_DATA: "Additional data field",
    CRC_FIELD_ID: "CRC",
}

_NESTED_NAMES = {
    pix.ID_MERCHANT_ACCOUNT: {
        pix.SUB_GUI: "GUI",
        pix.SUB_KEY: "Pix key",
        pix.SUB_DESCRIPTION: "Description",
    },
    pix.ID_ADDITIONAL_DATA: {pix.SUB_REFERENCE_LABEL: "Reference label"},
}


@dataclass(frozen=True)
class InspectedField:
    tag: str
    name: str
    value: str
    children: tuple[InspectedField, ...] = ()

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "id": self.tag,
            "name": self.name,
            "length": len(self.value),
            "value": self.value,
        }
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def _nested(field: TlvField) -> tuple[InspectedField, ...]:
    if field.tag not in _TEMPLATE_IDS:
        return ()
    try:
        children = list(parse_tlv(field.value))
    except ValueError:
        # Not every template value is itself TLV; show it as a leaf.
        return ()
    names = _NESTED_NAMES.get(field.tag, {})
    return tuple(
        InspectedField(tag=child.tag, name=names.get(child.tag, ""), value=child.value)
        for child in children
    )


def inspect_payload(payload: str) -> tuple[tuple[InspectedField, ...], bool]:
    """Decode ``payload`` into fields and report whether its CRC matches."""
    fields = tuple(
        InspectedField(
            tag=field.tag,
            name=_TOP_LEVEL_NAMES.get(field.tag, ""),
            value=field.value,
            children=_nested(field),
        )
        for field in parse_tlv(payload)
    )
    return fields, verify_emv_crc(payload)


def _label(field: InspectedField) -> str:
    name = f" [muted]{field.name}[/muted]" if field.name else ""
    value = "" if field.children else f" = {escape(repr(field.value))}"
    return f"[accent]{field.tag}[/accent] ({len(field.value):02d}){name}{value}"


def build_tlv_tree(fields: tuple[InspectedField, ...]) -> Tree:
    tree = Tree("[title]EMV payload[/title]", guide_style="muted")
    for field in fields:
        branch = tree.add(_label(field))
        for child in field.children:
            branch.add(_label(child))
    return tree


def register(app: typer.Typer) -> None:
    app.command(help=_INSPECT_HELP)(inspect)


def _run_inspect(*, ctx: typer.Context, payload: str, json_output: bool) -> int:
    output_format = _resolve_output_format(ctx, json_output)
    payload = payload.strip()
    fields, crc_ok = inspect_payload(payload)
    if output_format == "json":
        print_json({"fields": [field.to_dict() for field in fields], "crcValid": crc_ok})
    else:
        console.print(build_tlv_tree(fields))
        if crc_ok:
            console.print("[success]CRC OK[/success]")
    if not crc_ok:
        console_err.print("[red]Error:[/red] CRC mismatch or missing CRC field")
        return EXIT_BAD_CRC
    return 0


def inspect(
    ctx: typer.Context,
    payload: str = typer.Argument(..., help="Payload text to decode."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the decoded fields as JSON.",
        rich_help_panel="Output",
    ),
) -> None:
    _run_cli(
        functools.partial(_run_inspect, ctx=ctx, payload=payload, json_output=json_output),
        debug=bool(_ctx_value(ctx, "debug")),
    )
