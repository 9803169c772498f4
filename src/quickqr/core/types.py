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

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType

from .errors import FieldError

FieldValue = str | bool | None
Fields = Mapping[str, FieldValue]


class QrType(str, Enum):
    URL = "url"
    TEXT = "text"
    WIFI = "wifi"
    EMAIL = "email"
    PHONE = "phone"
    SMS = "sms"
    VCARD = "vcard"
    MECARD = "mecard"
    SOCIAL = "social"
    UPI = "upi"
    EPC = "epc"
    PIX = "pix"
    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
    PAYPAL = "paypal"
    EVENT = "event"
    GEO = "geo"
    GOOGLE_MAPS = "google-maps"
    APP_STORE = "app-store"


class QrCategory(str, Enum):
    BASIC = "basic"
    CONTACT = "contact"
    SOCIAL = "social"
    PAYMENT = "payment"
    EVENT = "event"
    LOCATION = "location"
    APP = "app"


class FieldKind(str, Enum):
    STRING = "string"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    ENUM = "enum"


@dataclass(frozen=True)
class FieldSpec:
    """Declarative constraints for a single input field.

    ``message`` is reported when ``pattern`` or ``check`` rejects a value; the
    remaining constraints produce their own messages.
    """

    name: str
    label: str
    kind: FieldKind = FieldKind.STRING
    required: bool = False
    pattern: re.Pattern[str] | None = None
    max_length: int | None = None
    min_value: Decimal | None = None
    max_value: Decimal | None = None
    choices: tuple[str, ...] = ()
    check: Callable[[str], bool] | None = None
    message: str | None = None
    shape: str = "string"
    default: FieldValue = None

    def describe(self) -> str:
        suffix = " (required)" if self.required else ""
        return f"{self.shape}{suffix}"


SchemaCheck = Callable[[Fields], list[FieldError]]


@dataclass(frozen=True)
class TypeSchema:
    type_id: QrType
    label: str
    category: QrCategory
    description: str
    fields: tuple[FieldSpec, ...]
    example: Mapping[str, FieldValue] = field(default_factory=dict)
    check: SchemaCheck | None = None

    def __post_init__(self) -> None:
        names = [spec.name for spec in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"{self.type_id.value} schema has duplicate field names")
        object.__setattr__(self, "example", MappingProxyType(dict(self.example)))

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    @property
    def required_fields(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields if spec.required)

    @property
    def optional_fields(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields if not spec.required)

    def get_field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.type_id.value} has no field {name!r}")

    def to_dict(self) -> dict[str, object]:
        return {
            "label": self.label,
            "category": self.category.value,
            "description": self.description,
            "required": list(self.required_fields),
            "optional": list(self.optional_fields),
            "fields": {spec.name: spec.describe() for spec in self.fields},
            "example": dict(self.example),
        }


__all__ = [
    "FieldKind",
    "FieldSpec",
    "FieldValue",
    "Fields",
    "QrCategory",
    "QrType",
    "SchemaCheck",
    "TypeSchema",
]
