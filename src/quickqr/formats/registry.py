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

from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import UnsupportedTypeError
from ..core.types import Fields, QrType, TypeSchema
from ..core.validation import require_dict, require_field_types, require_keys
from . import basic, contact, epc, event, location, payment, pix

Encoder = Callable[[Fields], str]


@dataclass(frozen=True)
class PayloadFormat:
    """A type's schema paired with the function that renders its payload."""

    schema: TypeSchema
    encoder: Encoder

    @property
    def type_id(self) -> QrType:
        return self.schema.type_id

    def encode(self, fields: Fields) -> str:
        """Render already-validated ``fields``.

        Only the presence of required keys and the Python type of each value
        are checked here; formats are the validator's concern.
        """
        label = f"{self.type_id.value} fields"
        data = require_dict(fields, label=label)
        require_keys(data, self.schema.required_fields, label=label)
        require_field_types(data, self.schema.fields, label=label)
        return self.encoder(data)


# Registry of available payload formats, in declaration order of QrType.
_FORMATS: dict[QrType, PayloadFormat] = {}


def _register_format(schema: TypeSchema, encoder: Encoder) -> None:
    if schema.type_id in _FORMATS:
        raise ValueError(f"duplicate payload format: {schema.type_id.value}")
    _FORMATS[schema.type_id] = PayloadFormat(schema=schema, encoder=encoder)


_register_format(basic.URL_SCHEMA, basic.encode_url)
_register_format(basic.TEXT_SCHEMA, basic.encode_text)
_register_format(basic.WIFI_SCHEMA, basic.encode_wifi)
_register_format(basic.EMAIL_SCHEMA, basic.encode_email)
_register_format(basic.PHONE_SCHEMA, basic.encode_phone)
_register_format(basic.SMS_SCHEMA, basic.encode_sms)
_register_format(contact.VCARD_SCHEMA, contact.encode_vcard)
_register_format(contact.MECARD_SCHEMA, contact.encode_mecard)
_register_format(basic.SOCIAL_SCHEMA, basic.encode_url)
_register_format(payment.UPI_SCHEMA, payment.encode_upi)
_register_format(epc.EPC_SCHEMA, epc.encode_epc)
_register_format(pix.PIX_SCHEMA, pix.encode_pix)
_register_format(payment.BITCOIN_SCHEMA, payment.encode_bitcoin)
_register_format(payment.ETHEREUM_SCHEMA, payment.encode_ethereum)
_register_format(payment.PAYPAL_SCHEMA, payment.encode_paypal)
_register_format(event.EVENT_SCHEMA, event.encode_event)
_register_format(location.GEO_SCHEMA, location.encode_geo)
_register_format(location.GOOGLE_MAPS_SCHEMA, location.encode_google_maps)
_register_format(basic.APP_STORE_SCHEMA, basic.encode_url)


def supported_types() -> tuple[str, ...]:
    """Type identifiers in declaration order."""
    return tuple(qr_type.value for qr_type in QrType if qr_type in _FORMATS)


def resolve_type(type_id: QrType | str) -> QrType:
    """Normalize a tag (case and surrounding whitespace) to its ``QrType``."""
    if isinstance(type_id, QrType):
        return type_id
    if not isinstance(type_id, str):
        raise UnsupportedTypeError(type_id, supported_types())
    try:
        return QrType(type_id.strip().lower())
    except ValueError as exc:
        raise UnsupportedTypeError(type_id, supported_types()) from exc


def get_format(type_id: QrType | str) -> PayloadFormat:
    qr_type = resolve_type(type_id)
    payload_format = _FORMATS.get(qr_type)
    if payload_format is None:
        raise UnsupportedTypeError(type_id, supported_types())
    return payload_format


def iter_formats() -> tuple[PayloadFormat, ...]:
    return tuple(_FORMATS[qr_type] for qr_type in QrType if qr_type in _FORMATS)
