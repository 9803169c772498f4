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

"""Interactive field entry.

Each field is checked as it is typed; cross-field rules run once everything is
entered, after which only the fields they flag are asked for again.
"""

from __future__ import annotations

from collections.abc import Mapping

from ...core.types import FieldKind, FieldSpec, FieldValue, TypeSchema
from ...core.validation import validate_field
from ...formats import PayloadFormat, get_format, iter_formats
from ...service import encode_validated, validate_payload
from ..api import (
    build_field_error_table,
    console_err,
    print_completion_panel,
    print_json,
    print_payload,
    prompt_choice_list,
    prompt_text,
    prompt_yes_no,
)

_NO_CHOICE = ""


def _prompt_type() -> PayloadFormat:
    items = [
        (fmt.type_id.value, f"{fmt.schema.label} ({fmt.type_id.value})")
        for fmt in iter_formats()
    ]
    choice = prompt_choice_list(
        items,
        default=items[0][0],
        title="QR type",
        help_text="Pick the kind of payload to build.",
    )
    return get_format(choice)


def _field_hint(schema: TypeSchema, spec: FieldSpec, errors: tuple[str, ...]) -> str:
    if errors:
        return "; ".join(errors)
    example = schema.example.get(spec.name)
    if example in (None, ""):
        return spec.describe()
    return f"{spec.describe()}, e.g. {example}"


def prompt_field(
    schema: TypeSchema,
    spec: FieldSpec,
    *,
    current: FieldValue = None,
    errors: tuple[str, ...] = (),
) -> FieldValue:
    hint = _field_hint(schema, spec, errors)
    if spec.kind is FieldKind.BOOLEAN:
        default = current if isinstance(current, bool) else bool(spec.default)
        return prompt_yes_no(spec.label, default=default, help_text=hint)
    if spec.kind is FieldKind.ENUM:
        items = [(choice, choice) for choice in spec.choices]
        if not spec.required and spec.default is None:
            items.insert(0, (_NO_CHOICE, "(none)"))
        default = current if current in spec.choices else spec.default
        return prompt_choice_list(
            items,
            default=default if isinstance(default, str) else None,
            title=spec.label,
            help_text=hint,
        )

    label = spec.label if spec.required else f"{spec.label} (optional)"
    return prompt_text(
        label,
        default=current if isinstance(current, str) else "",
        check=lambda text: validate_field(spec, text or None)[1],
        help_text=hint,
    )


def collect_wizard_fields(schema: TypeSchema) -> Mapping[str, FieldValue]:
    """Prompt for every field until the whole set validates; return it normalized."""
    values: dict[str, FieldValue] = {
        spec.name: prompt_field(schema, spec) for spec in schema.fields
    }
    result = validate_payload(schema.type_id, values)
    while not result.ok:
        console_err.print(build_field_error_table(result.errors, title="Please fix"))
        for name in dict.fromkeys(error.field for error in result.errors):
            spec = schema.get_field(name)
            values[name] = prompt_field(
                schema,
                spec,
                current=values.get(name),
                errors=result.errors_for(name),
            )
        result = validate_payload(schema.type_id, values)
    return result.fields


def run_wizard(
    *,
    type_id: str | None = None,
    quiet: bool = False,
    output_format: str = "text",
) -> str:
    payload_format = get_format(type_id) if type_id else _prompt_type()
    schema = payload_format.schema
    fields = collect_wizard_fields(schema)
    encoded = encode_validated(schema.type_id, fields)
    print_completion_panel("Encoded", f"{schema.label} payload ready", quiet=quiet, use_err=True)
    if output_format == "json":
        print_json({"type": schema.type_id.value, "encoded": encoded})
    else:
        print_payload(encoded)
    return encoded
