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

from ..core.types import Fields, QrCategory, QrType, TypeSchema
from ..encoding.escaping import escape_mecard
from .common import email_field, optional, text_field, url_field

VCARD_ADDRESS_FIELDS = ("street", "city", "state", "zip", "country")

# vCard property name for each optional single-value field, in output order.
_VCARD_PROPERTIES = (
    ("phone", "TEL"),
    ("email", "EMAIL"),
    ("company", "ORG"),
    ("title", "TITLE"),
    ("website", "URL"),
)

_MECARD_PROPERTIES = (
    ("phone", "TEL"),
    ("email", "EMAIL"),
    ("url", "URL"),
    ("address", "ADR"),
    ("note", "NOTE"),
)

VCARD_SCHEMA = TypeSchema(
    type_id=QrType.VCARD,
    label="vCard",
    category=QrCategory.CONTACT,
    description="Share a full contact card (vCard 3.0 format)",
    fields=(
        text_field("firstName", "First name", required=True),
        text_field("lastName", "Last name", required=True),
        text_field("phone", "Phone"),
        email_field("email", "Email"),
        text_field("company", "Company"),
        text_field("title", "Job title"),
        url_field("website", "Website", required=False),
        text_field("street", "Street"),
        text_field("city", "City"),
        text_field("state", "State"),
        text_field("zip", "ZIP code"),
        text_field("country", "Country"),
    ),
    example={"firstName": "John", "lastName": "Doe", "email": "john@example.com"},
)

MECARD_SCHEMA = TypeSchema(
    type_id=QrType.MECARD,
    label="MeCard",
    category=QrCategory.CONTACT,
    description="Share a contact using the compact MeCard format",
    fields=(
        text_field("name", "Name", required=True),
        text_field("phone", "Phone"),
        email_field("email", "Email"),
        url_field("url", "URL", required=False),
        text_field("address", "Address"),
        text_field("note", "Note"),
    ),
    example={"name": "John Doe", "email": "john@example.com"},
)


def encode_vcard(fields: Fields) -> str:
    first = fields["firstName"]
    last = fields["lastName"]
    lines = [
        "BEGIN:VCARD",
        "VERSION:3.0",
        f"N:{last};{first};;;",
        f"FN:{first} {last}",
    ]
    for key, prop in _VCARD_PROPERTIES:
        value = optional(fields, key)
        if value:
            lines.append(f"{prop}:{value}")
    address = [optional(fields, key) for key in VCARD_ADDRESS_FIELDS]
    if any(address):
        lines.append("ADR:;;" + ";".join(address))
    lines.append("END:VCARD")
    return "\n".join(lines)


def encode_mecard(fields: Fields) -> str:
    parts = [f"N:{escape_mecard(fields['name'])}"]
    for key, prop in _MECARD_PROPERTIES:
        value = optional(fields, key)
        if value:
            parts.append(f"{prop}:{escape_mecard(value)}")
    return f"MECARD:{';'.join(parts)};;"
