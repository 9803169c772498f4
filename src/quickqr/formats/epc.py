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

"""EPC069-12 (GiroCode) SEPA credit transfer payload.

The payload is exactly twelve newline-separated lines and line positions are
significant, so optional values are emitted as empty lines rather than dropped.
"""

from __future__ import annotations

from ..core.bounds import (
    MAX_EPC_AMOUNT,
    MAX_EPC_INFO_CHARS,
    MAX_EPC_NAME_CHARS,
    MAX_EPC_REFERENCE_CHARS,
    MIN_EPC_AMOUNT,
)
from ..core.types import Fields, QrCategory, QrType, TypeSchema
from .common import amount_field, optional, text_field

SERVICE_TAG = "BCD"
VERSION = "002"
CHARACTER_SET_UTF8 = "1"
IDENTIFICATION_SCT = "SCT"
CURRENCY = "EUR"
LINE_COUNT = 12

IBAN_PATTERN = r"[A-Z]{2}\d{2}[A-Za-z0-9]{4,30}"
BIC_PATTERN = r"[A-Z]{4}[A-Z]{2}[A-Z0-9]{2}([A-Z0-9]{3})?"

EPC_SCHEMA = TypeSchema(
    type_id=QrType.EPC,
    label="EPC / SEPA",
    category=QrCategory.PAYMENT,
    description="Generate an EPC QR code for SEPA credit transfers (EU)",
    fields=(
        text_field("name", "Beneficiary name", required=True, max_length=MAX_EPC_NAME_CHARS),
        text_field(
            "iban",
            "IBAN",
            required=True,
            pattern=IBAN_PATTERN,
            message="IBAN must look like DE89370400440532013000",
        ),
        text_field(
            "bic",
            "BIC",
            pattern=BIC_PATTERN,
            message="BIC must be an 8 or 11 character SWIFT code",
        ),
        amount_field(
            "amount",
            "Amount",
            decimals=2,
            min_value=MIN_EPC_AMOUNT,
            max_value=MAX_EPC_AMOUNT,
        ),
        text_field("reference", "Reference", max_length=MAX_EPC_REFERENCE_CHARS),
        text_field("info", "Info", max_length=MAX_EPC_INFO_CHARS),
    ),
    example={"name": "John Doe", "iban": "DE89370400440532013000", "amount": "100"},
)


def encode_epc(fields: Fields) -> str:
    amount = optional(fields, "amount")
    reference = optional(fields, "reference")
    info = optional(fields, "info")
    # Free text goes to line 11 unless a structured reference occupies line 10,
    # in which case it moves to the beneficiary-to-originator line.
    unstructured = "" if reference else info
    beneficiary_info = info if reference else ""
    lines = [
        SERVICE_TAG,
        VERSION,
        CHARACTER_SET_UTF8,
        IDENTIFICATION_SCT,
        optional(fields, "bic"),
        fields["name"],
        fields["iban"],
        f"{CURRENCY}{amount}" if amount else "",
        "",
        reference,
        unstructured,
        beneficiary_info,
    ]
    return "\n".join(lines)
