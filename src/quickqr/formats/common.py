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

"""Field spec builders shared by the format modules."""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal

from ..core.types import FieldKind, FieldSpec, FieldValue
from ..core.validation import is_absolute_url, is_email

_SIGNED_DECIMAL_RE = re.compile(r"-?\d+(\.\d+)?")


def text_field(
    name: str,
    label: str,
    *,
    required: bool = False,
    max_length: int | None = None,
    pattern: str | None = None,
    message: str | None = None,
    default: str | None = None,
) -> FieldSpec:
    shape = "string" if max_length is None else f"string (max {max_length})"
    return FieldSpec(
        name=name,
        label=label,
        required=required,
        max_length=max_length,
        pattern=re.compile(pattern) if pattern is not None else None,
        message=message,
        shape=shape,
        default=default,
    )


def url_field(name: str, label: str, *, required: bool = True) -> FieldSpec:
    return FieldSpec(
        name=name,
        label=label,
        required=required,
        check=is_absolute_url,
        message=f"{label} must be an absolute URL (scheme and host)",
        shape="url",
    )


def email_field(name: str, label: str, *, required: bool = False) -> FieldSpec:
    return FieldSpec(
        name=name,
        label=label,
        required=required,
        check=is_email,
        message=f"{label} must be a valid email address",
        shape="email",
    )


def amount_field(
    name: str,
    label: str,
    *,
    decimals: int,
    required: bool = False,
    min_value: Decimal | None = None,
    max_value: Decimal | None = None,
    max_length: int | None = None,
) -> FieldSpec:
    """Non-negative decimal string with at most ``decimals`` fraction digits."""
    shape = f"decimal string (max {decimals} decimals)"
    if max_length is not None:
        shape = f"decimal string (max {decimals} decimals, {max_length} characters)"
    return FieldSpec(
        name=name,
        label=label,
        kind=FieldKind.DECIMAL,
        required=required,
        max_length=max_length,
        pattern=re.compile(rf"\d+(\.\d{{1,{decimals}}})?"),
        min_value=min_value,
        max_value=max_value,
        message=f"{label} must be a non-negative number with at most {decimals} decimals",
        shape=shape,
    )


def coordinate_field(name: str, label: str, *, low: Decimal, high: Decimal) -> FieldSpec:
    return FieldSpec(
        name=name,
        label=label,
        kind=FieldKind.DECIMAL,
        required=True,
        pattern=_SIGNED_DECIMAL_RE,
        min_value=low,
        max_value=high,
        message=f"{label} must be a decimal number",
        shape=f"decimal string ({low} to {high})",
    )


def flag_field(name: str, label: str) -> FieldSpec:
    return FieldSpec(
        name=name,
        label=label,
        kind=FieldKind.BOOLEAN,
        default=False,
        shape="boolean",
    )


def choice_field(
    name: str,
    label: str,
    choices: tuple[str, ...],
    *,
    default: str | None = None,
) -> FieldSpec:
    return FieldSpec(
        name=name,
        label=label,
        kind=FieldKind.ENUM,
        required=default is None,
        choices=choices,
        default=default,
        shape=" | ".join(choices),
    )


def optional(fields: Mapping[str, FieldValue], name: str) -> str:
    """Return an optional string field, or ``""`` when absent."""
    value = fields.get(name)
    if value is None or isinstance(value, bool):
        return ""
    return value
