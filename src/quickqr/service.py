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

"""Validate-then-encode entry points shared by the CLI, API and MCP server."""

from __future__ import annotations

from collections.abc import Mapping

from .core.types import Fields, QrType
from .core.validation import ValidationResult, validate_fields
from .formats import get_format, iter_formats


def validate_payload(type_id: QrType | str, data: object) -> ValidationResult:
    """Check ``data`` against the schema for ``type_id`` without encoding.

    Raises ``UnsupportedTypeError`` for unknown tags and ``InputShapeError``
    when ``data`` is not a mapping. Field problems are reported on the result.
    """
    return validate_fields(get_format(type_id).schema, data)


def encode_payload(type_id: QrType | str, data: object) -> str:
    """Validate ``data`` and return the payload string for ``type_id``."""
    payload_format = get_format(type_id)
    fields = validate_fields(payload_format.schema, data).raise_for_errors()
    return payload_format.encode(fields)


def encode_validated(type_id: QrType | str, fields: Fields) -> str:
    """Encode fields that were validated elsewhere.

    Only required keys are checked; a missing one raises ``InputShapeError``.
    """
    return get_format(type_id).encode(fields)


def describe_type(type_id: QrType | str) -> dict[str, object]:
    schema = get_format(type_id).schema
    return {"id": schema.type_id.value, **schema.to_dict()}


def describe_types() -> dict[str, Mapping[str, object]]:
    """Contract of every supported type, keyed by identifier."""
    return {
        payload_format.type_id.value: payload_format.schema.to_dict()
        for payload_format in iter_formats()
    }
