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

import datetime
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit

from .errors import FieldError, InputShapeError, ValidationError
from .types import FieldKind, FieldSpec, FieldValue, Fields, QrType, TypeSchema

_EMAIL_RE = re.compile(
    r"^(?!\.)(?!.*\.\.)[A-Z0-9_'+\-.]*[A-Z0-9_+\-]@(?:[A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE,
)
_URL_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^(\d{2}):(\d{2})$")


@dataclass(frozen=True)
class ValidationResult:
    type_id: QrType
    fields: Mapping[str, FieldValue]
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def errors_for(self, name: str) -> tuple[str, ...]:
        return tuple(error.message for error in self.errors if error.field == name)

    def raise_for_errors(self) -> Mapping[str, FieldValue]:
        """Return the normalized fields or raise ``ValidationError``."""
        if self.errors:
            raise ValidationError(self.type_id.value, self.errors)
        return self.fields


def require_dict(value: object, *, label: str) -> Mapping[str, Any]:
    """Validate that value is a mapping."""
    if not isinstance(value, Mapping):
        raise InputShapeError(label, detail="must be an object")
    return value


def require_keys(mapping: Mapping[str, Any], keys: Iterable[str], *, label: str) -> None:
    """Validate that all keys are present in mapping with a usable value."""
    missing = [key for key in keys if mapping.get(key) in (None, "")]
    if missing:
        raise InputShapeError(label, missing)


def require_field_types(
    mapping: Mapping[str, Any], specs: Iterable[FieldSpec], *, label: str
) -> None:
    """Validate that present values have the Python type their field holds."""
    wrong = []
    for spec in specs:
        value = mapping.get(spec.name)
        if value is None:
            continue
        expected = bool if spec.kind is FieldKind.BOOLEAN else str
        if not isinstance(value, expected):
            wrong.append(spec.name)
    if wrong:
        detail = f"has values of the wrong type: {', '.join(wrong)}"
        raise InputShapeError(label, wrong, detail=detail)


def validate_fields(schema: TypeSchema, raw: object) -> ValidationResult:
    """Check ``raw`` against ``schema`` and normalize it.

    Field problems are collected rather than raised so interactive callers can
    show them next to the offending input. A non-mapping ``raw`` is a shape
    problem and raises ``InputShapeError``.
    """
    data = require_dict(raw, label=f"{schema.type_id.value} data")
    normalized: dict[str, FieldValue] = {}
    errors: list[FieldError] = []
    for spec in schema.fields:
        value, message = validate_field(spec, data.get(spec.name))
        if message is not None:
            errors.append(FieldError(spec.name, message))
            continue
        normalized[spec.name] = value
    if not errors and schema.check is not None:
        errors.extend(schema.check(normalized))
    if errors:
        return ValidationResult(
            type_id=schema.type_id,
            fields=MappingProxyType({}),
            errors=tuple(errors),
        )
    return ValidationResult(type_id=schema.type_id, fields=MappingProxyType(normalized))


def validate_field(spec: FieldSpec, value: object) -> tuple[FieldValue, str | None]:
    """Return ``(normalized, None)`` or ``(None, message)`` for one field."""
    if spec.kind is FieldKind.BOOLEAN:
        if value is None:
            return bool(spec.default), None
        if not isinstance(value, bool):
            return None, f"{spec.label} must be true or false"
        return value, None

    if value is None or value == "":
        if spec.required:
            return None, f"{spec.label} is required"
        return spec.default, None
    if not isinstance(value, str):
        return None, f"{spec.label} must be a string"

    if spec.max_length is not None and len(value) > spec.max_length:
        return None, f"{spec.label} must be {spec.max_length} characters or fewer"
    if spec.kind is FieldKind.ENUM and value not in spec.choices:
        return None, f"{spec.label} must be one of: {', '.join(spec.choices)}"
    if spec.pattern is not None and not spec.pattern.fullmatch(value):
        return None, spec.message or f"{spec.label} has an invalid format"
    if spec.check is not None and not spec.check(value):
        return None, spec.message or f"{spec.label} has an invalid format"
    if spec.kind is FieldKind.DECIMAL:
        message = _check_decimal_bounds(spec, value)
        if message is not None:
            return None, message
    return value, None


def _check_decimal_bounds(spec: FieldSpec, value: str) -> str | None:
    try:
        number = Decimal(value)
    except InvalidOperation:
        return spec.message or f"{spec.label} must be a number"
    if not number.is_finite():
        return spec.message or f"{spec.label} must be a number"
    too_low = spec.min_value is not None and number < spec.min_value
    too_high = spec.max_value is not None and number > spec.max_value
    if not (too_low or too_high):
        return None
    if spec.min_value is not None and spec.max_value is not None:
        return f"{spec.label} must be between {spec.min_value} and {spec.max_value}"
    if too_low:
        return f"{spec.label} must be at least {spec.min_value}"
    return f"{spec.label} must be at most {spec.max_value}"


def is_absolute_url(value: str) -> bool:
    """Return True for URLs that carry both a scheme and a host."""
    if any(char.isspace() for char in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    if not parts.scheme or not _URL_SCHEME_RE.match(parts.scheme):
        return False
    return bool(parts.hostname)


def is_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value))


def is_calendar_date(value: str) -> bool:
    if not _DATE_RE.fullmatch(value):
        return False
    try:
        datetime.date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_clock_time(value: str) -> bool:
    match = _TIME_RE.fullmatch(value)
    if match is None:
        return False
    return int(match.group(1)) < 24 and int(match.group(2)) < 60


__all__ = [
    "Fields",
    "ValidationResult",
    "is_absolute_url",
    "is_calendar_date",
    "is_clock_time",
    "is_email",
    "require_dict",
    "require_field_types",
    "require_keys",
    "validate_field",
    "validate_fields",
]
