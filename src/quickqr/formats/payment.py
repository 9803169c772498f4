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

"""Payment links: UPI, BIP21, EIP-681 and PayPal.me.

EPC and Pix carry structured bank payloads and live in their own modules.
"""

from __future__ import annotations

from ..core.bounds import BTC_DECIMALS, WEI_DECIMALS
from ..core.types import Fields, QrCategory, QrType, TypeSchema
from ..encoding.amounts import eth_to_wei
from ..encoding.escaping import build_query, encode_uri_component
from .common import amount_field, optional, text_field

UPI_CURRENCY = "INR"

UPI_VPA_PATTERN = r"[\w.\-]+@\w+"
BITCOIN_ADDRESS_PATTERN = (
    r"(1[a-km-zA-HJ-NP-Z1-9]{25,34}|3[a-km-zA-HJ-NP-Z1-9]{25,34}|bc1[a-z0-9]{14,74})"
)
ETHEREUM_ADDRESS_PATTERN = r"0x[a-fA-F0-9]{40}"
CURRENCY_CODE_PATTERN = r"[A-Z]{3}"

UPI_SCHEMA = TypeSchema(
    type_id=QrType.UPI,
    label="UPI",
    category=QrCategory.PAYMENT,
    description="Generate a UPI payment QR code (India)",
    fields=(
        text_field(
            "vpa",
            "VPA",
            required=True,
            pattern=UPI_VPA_PATTERN,
            message="VPA must look like user@bank",
        ),
        text_field("name", "Payee name", required=True),
        amount_field("amount", "Amount", decimals=2),
        text_field("note", "Note"),
    ),
    example={"vpa": "user@upi", "name": "John Doe", "amount": "100"},
)

BITCOIN_SCHEMA = TypeSchema(
    type_id=QrType.BITCOIN,
    label="Bitcoin",
    category=QrCategory.PAYMENT,
    description="Generate a Bitcoin payment request (BIP21)",
    fields=(
        text_field(
            "address",
            "Bitcoin address",
            required=True,
            pattern=BITCOIN_ADDRESS_PATTERN,
            message="Bitcoin address must start with 1, 3 or bc1",
        ),
        amount_field("amount", "Amount", decimals=BTC_DECIMALS),
        text_field("label", "Label"),
        text_field("message", "Message"),
    ),
    example={"address": "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"},
)

ETHEREUM_SCHEMA = TypeSchema(
    type_id=QrType.ETHEREUM,
    label="Ethereum",
    category=QrCategory.PAYMENT,
    description="Generate an Ethereum payment request",
    fields=(
        text_field(
            "address",
            "Ethereum address",
            required=True,
            pattern=ETHEREUM_ADDRESS_PATTERN,
            message="Ethereum address must be 0x followed by 40 hex characters",
        ),
        amount_field("amount", "Amount (ETH)", decimals=WEI_DECIMALS),
    ),
    example={"address": "0x32Be343B94f860124dC4fEe278FDCBD38C102D88"},
)

PAYPAL_SCHEMA = TypeSchema(
    type_id=QrType.PAYPAL,
    label="PayPal",
    category=QrCategory.PAYMENT,
    description="Generate a PayPal.me payment link",
    fields=(
        text_field("username", "PayPal.me username", required=True),
        amount_field("amount", "Amount", decimals=2),
        text_field(
            "currency",
            "Currency",
            pattern=CURRENCY_CODE_PATTERN,
            message="Currency must be a 3-letter upper-case code such as EUR",
        ),
    ),
    example={"username": "johndoe", "amount": "25"},
)


def encode_upi(fields: Fields) -> str:
    params = [
        ("pa", encode_uri_component(fields["vpa"])),
        ("pn", encode_uri_component(fields["name"])),
    ]
    amount = optional(fields, "amount")
    if amount:
        params.append(("am", encode_uri_component(amount)))
    params.append(("cu", UPI_CURRENCY))
    note = optional(fields, "note")
    if note:
        params.append(("tn", encode_uri_component(note)))
    return f"upi://pay{build_query(params)}"


def encode_bitcoin(fields: Fields) -> str:
    params = []
    for key in ("amount", "label", "message"):
        value = optional(fields, key)
        if value:
            params.append((key, encode_uri_component(value)))
    return f"bitcoin:{fields['address']}{build_query(params)}"


def encode_ethereum(fields: Fields) -> str:
    """EIP-681 transfer request; ``value`` is omitted for an empty or zero amount."""
    amount = optional(fields, "amount")
    wei = eth_to_wei(amount) if amount else "0"
    if wei == "0":
        return f"ethereum:{fields['address']}"
    return f"ethereum:{fields['address']}?value={wei}"


def encode_paypal(fields: Fields) -> str:
    base = f"https://paypal.me/{encode_uri_component(fields['username'])}"
    amount = optional(fields, "amount")
    if not amount:
        return base
    currency = optional(fields, "currency")
    suffix = f"/{currency}" if currency else ""
    return f"{base}/{amount}{suffix}"
