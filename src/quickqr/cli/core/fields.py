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

"""Turn command-line field input into the raw mapping the validators expect.

Values arrive as strings. Only fields the schema declares as booleans are
converted; everything else is passed through untouched so validation sees
exactly what the user typed.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from ...core.types import FieldKind, FieldValue, TypeSchema
from ...core.validation import require_dict

TRUE_WORDS = frozenset({"1", "true", "yes", "on", "y"})
FALSE_WORDS = frozenset({"0", "false", "no", "off", "n"})


def parse_bool_word(value: str, *, field: str) -> bool:
    normalized = value.strip().lower()
    if normalized in TRUE_WORDS:
        return True
    if normalized in FALSE_WORDS:
        return False
    raise ValueError(f"{field} must be true or false, got {value!r}")


def parse_field_args(schema: TypeSchema, pairs: Sequence[str]) -> dict[str, FieldValue]:
    """Parse repeated ``key=value`` options.

    Unknown keys are rejected here rather than silently dropped, since on the
    command line they are almost always typos.
    """
    known = set(schema.field_names)
    data: dict[str, FieldValue] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"field must be given as key=value: {pair!r}")
        if key not in known:
            raise ValueError(
                f"unknown field {key!r} for {schema.type_id.value} "
                f"(fields: {', '.join(schema.field_names)})"
            )
        if schema.get_field(key).kind is FieldKind.BOOLEAN:
            data[key] = parse_bool_word(value, field=key)
        else:
            data[key] = value
    return data


def load_data_file(path: Path) -> dict[str, object]:
    """Read a JSON object of field values."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"data file not found: {path}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"data file {path} is not valid JSON: {exc.msg}") from exc
    return dict(require_dict(data, label=f"data file {path}"))


def collect_fields(
    schema: TypeSchema,
    pairs: Sequence[str],
    data_file: Path | None,
) -> dict[str, object]:
    """Merge a data file with ``key=value`` options; options win."""
    data: dict[str, object] = {}
    if data_file is not None:
        data.update(load_data_file(data_file))
    data.update(parse_field_args(schema, pairs))
    return data
