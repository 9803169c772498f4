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

"""Pix static BR Code (EMV merchant-presented QR).

Layout::

    00 payload format indicator "01"
    01 point of initiation "12" (static)
    26 merchant account information
       00 GUI "br.gov.bcb.pix"
       01 Pix key
       02 description (optional)
    52 merchant category code "0000"
    53 currency "986" (BRL)
    54 amount (optional)
    58 country "BR"
    59 merchant name
    60 merchant city
    62 additional data
       05 reference label "***"
    63 CRC-16/CCITT-FALSE over everything before it, including "6304"
"""

from __future__ import annotations

from ..core.bounds import (
    MAX_PIX_AMOUNT_CHARS,
    MAX_PIX_CITY_CHARS,
    MAX_PIX_DESCRIPTION_CHARS,
    MAX_PIX_KEY_CHARS,
    MAX_PIX_NAME_CHARS,
    MAX_TLV_VALUE_CHARS,
)
from ..core.errors import FieldError
from ..core.types import Fields, QrCategory, QrType, TypeSchema
from ..encoding.crc import append_emv_crc
from ..encoding.tlv import TlvField, build_tlv, tlv
from .common import amount_field, optional, text_field

PAYLOAD_FORMAT_INDICATOR = "01"
STATIC_INITIATION = "12"
PIX_GUI = "br.gov.bcb.pix"
MERCHANT_CATEGORY_CODE = "0000"
CURRENCY_BRL = "986"
COUNTRY_CODE = "BR"
REFERENCE_LABEL = "***"

ID_PAYLOAD_FORMAT = "00"
ID_INITIATION = "01"
ID_MERCHANT_ACCOUNT = "26"
ID_CATEGORY = "52"
ID_CURRENCY = "53"
ID_AMOUNT = "54"
ID_COUNTRY = "58"
ID_NAME = "59"
ID_CITY = "60"
ID_ADDITIONAL_DATA = "62"

SUB_GUI = "00"
SUB_KEY = "01"
SUB_DESCRIPTION = "02"
SUB_REFERENCE_LABEL = "05"


def merchant_account_info(pix_key: str, description: str = "") -> str:
    items = [TlvField(SUB_GUI, PIX_GUI), TlvField(SUB_KEY, pix_key)]
    if description:
        items.append(TlvField(SUB_DESCRIPTION, description))
    return build_tlv(items)


def _check_template_length(fields: Fields) -> list[FieldError]:
    description = optional(fields, "description")
    template = merchant_account_info(optional(fields, "pixKey"), description)
    if len(template) <= MAX_TLV_VALUE_CHARS:
        return []
    culprit = "description" if description else "pixKey"
    return [
        FieldError(
            culprit,
            f"Pix key and description together exceed the {MAX_TLV_VALUE_CHARS} character "
            "merchant account limit",
        )
    ]


PIX_SCHEMA = TypeSchema(
    type_id=QrType.PIX,
    label="Pix",
    category=QrCategory.PAYMENT,
    description="Generate a Pix payment QR code (Brazil)",
    fields=(
        text_field("pixKey", "Pix key", required=True, max_length=MAX_PIX_KEY_CHARS),
        text_field("name", "Merchant name", required=True, max_length=MAX_PIX_NAME_CHARS),
        text_field("city", "City", required=True, max_length=MAX_PIX_CITY_CHARS),
        amount_field("amount", "Amount", decimals=2, max_length=MAX_PIX_AMOUNT_CHARS),
        text_field("description", "Description", max_length=MAX_PIX_DESCRIPTION_CHARS),
    ),
    example={"pixKey": "12345678901", "name": "John", "city": "SAO PAULO"},
    check=_check_template_length,
)


def encode_pix(fields: Fields) -> str:
    amount = optional(fields, "amount")
    payload = [
        tlv(ID_PAYLOAD_FORMAT, PAYLOAD_FORMAT_INDICATOR),
        tlv(ID_INITIATION, STATIC_INITIATION),
        tlv(
            ID_MERCHANT_ACCOUNT,
            merchant_account_info(fields["pixKey"], optional(fields, "description")),
        ),
        tlv(ID_CATEGORY, MERCHANT_CATEGORY_CODE),
        tlv(ID_CURRENCY, CURRENCY_BRL),
    ]
    if amount:
        payload.append(tlv(ID_AMOUNT, amount))
    payload.extend(
        [
            tlv(ID_COUNTRY, COUNTRY_CODE),
            tlv(ID_NAME, fields["name"]),
            tlv(ID_CITY, fields["city"]),
            tlv(ID_ADDITIONAL_DATA, tlv(SUB_REFERENCE_LABEL, REFERENCE_LABEL)),
        ]
    )
    return append_emv_crc("".join(payload))
