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

"""Single-line payloads: links, text, WiFi, mailto, tel and SMS."""

from __future__ import annotations

from ..core.types import FieldSpec, Fields, QrCategory, QrType, TypeSchema
from ..encoding.escaping import build_query, encode_uri_component, escape_wifi
from .common import choice_field, email_field, flag_field, optional, text_field, url_field

PHONE_PATTERN = r"\+?[\d\s\-().]+"
WIFI_ENCRYPTIONS = ("WPA", "WEP", "nopass")


def _phone_field() -> FieldSpec:
    return text_field(
        "phone",
        "Phone number",
        required=True,
        pattern=PHONE_PATTERN,
        message="Phone number may only contain +, digits, spaces, hyphens, dots and parentheses",
    )


URL_SCHEMA = TypeSchema(
    type_id=QrType.URL,
    label="URL",
    category=QrCategory.BASIC,
    description="Encode a website link into a QR code",
    fields=(url_field("url", "URL"),),
    example={"url": "https://example.com"},
)

TEXT_SCHEMA = TypeSchema(
    type_id=QrType.TEXT,
    label="Text",
    category=QrCategory.BASIC,
    description="Encode plain text into a QR code",
    fields=(text_field("text", "Text", required=True),),
    example={"text": "Hello World"},
)

WIFI_SCHEMA = TypeSchema(
    type_id=QrType.WIFI,
    label="WiFi",
    category=QrCategory.BASIC,
    description="Share WiFi credentials via QR code",
    fields=(
        text_field("ssid", "SSID", required=True),
        text_field("password", "Password", default=""),
        choice_field("encryption", "Encryption", WIFI_ENCRYPTIONS, default="WPA"),
        flag_field("hidden", "Hidden network"),
    ),
    example={"ssid": "MyNetwork", "password": "secret123", "encryption": "WPA", "hidden": False},
)

EMAIL_SCHEMA = TypeSchema(
    type_id=QrType.EMAIL,
    label="Email",
    category=QrCategory.BASIC,
    description="Pre-compose an email with recipient, subject, and body",
    fields=(
        email_field("to", "Recipient", required=True),
        text_field("subject", "Subject"),
        text_field("body", "Body"),
    ),
    example={"to": "hello@example.com", "subject": "Hi", "body": "Hello there"},
)

PHONE_SCHEMA = TypeSchema(
    type_id=QrType.PHONE,
    label="Phone",
    category=QrCategory.BASIC,
    description="Dial a phone number when scanned",
    fields=(_phone_field(),),
    example={"phone": "+1234567890"},
)

SMS_SCHEMA = TypeSchema(
    type_id=QrType.SMS,
    label="SMS",
    category=QrCategory.BASIC,
    description="Pre-compose an SMS message to a phone number",
    fields=(_phone_field(), text_field("message", "Message")),
    example={"phone": "+1234567890", "message": "Hello"},
)

SOCIAL_SCHEMA = TypeSchema(
    type_id=QrType.SOCIAL,
    label="Social Link",
    category=QrCategory.SOCIAL,
    description="Share a social media profile link",
    fields=(url_field("url", "Profile URL"),),
    example={"url": "https://twitter.com/example"},
)

APP_STORE_SCHEMA = TypeSchema(
    type_id=QrType.APP_STORE,
    label="App Store",
    category=QrCategory.APP,
    description="Link to an app on any app store",
    fields=(url_field("url", "App URL"),),
    example={"url": "https://apps.apple.com/app/example/id123456789"},
)


def encode_url(fields: Fields) -> str:
    return fields["url"]


def encode_text(fields: Fields) -> str:
    return fields["text"]


def encode_wifi(fields: Fields) -> str:
    """Build ``WIFI:T:<enc>;S:<ssid>;P:<password>;[H:true;];``."""
    parts = [
        f"T:{fields.get('encryption') or 'WPA'}",
        f"S:{escape_wifi(fields['ssid'])}",
        f"P:{escape_wifi(optional(fields, 'password'))}",
    ]
    if fields.get("hidden") is True:
        parts.append("H:true")
    return f"WIFI:{';'.join(parts)};;"


def encode_email(fields: Fields) -> str:
    params = []
    for key in ("subject", "body"):
        value = optional(fields, key)
        if value:
            params.append((key, encode_uri_component(value)))
    return f"mailto:{fields['to']}{build_query(params)}"


def encode_phone(fields: Fields) -> str:
    return f"tel:{fields['phone']}"


def encode_sms(fields: Fields) -> str:
    return f"smsto:{fields['phone']}:{optional(fields, 'message')}"
