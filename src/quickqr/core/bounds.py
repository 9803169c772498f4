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

from decimal import Decimal

# EPC069-12 beneficiary name (line 6).
MAX_EPC_NAME_CHARS = 70

# EPC069-12 structured creditor reference (line 10).
MAX_EPC_REFERENCE_CHARS = 35

# EPC069-12 unstructured remittance / beneficiary-to-originator info.
MAX_EPC_INFO_CHARS = 70

# EPC069-12 amount range in EUR.
MIN_EPC_AMOUNT = Decimal("0.01")
MAX_EPC_AMOUNT = Decimal("999999999.99")

# BR Code merchant name (ID 59).
MAX_PIX_NAME_CHARS = 25

# BR Code merchant city (ID 60).
MAX_PIX_CITY_CHARS = 15

# BR Code transaction amount (ID 54).
MAX_PIX_AMOUNT_CHARS = 13

# BR Code merchant account description (ID 26/02).
MAX_PIX_DESCRIPTION_CHARS = 25

# Longest Pix key accepted by the DICT directory (EVP keys are 36, emails 77).
MAX_PIX_KEY_CHARS = 77

# EMV TLV length field is two decimal digits.
MAX_TLV_VALUE_CHARS = 99

# Wei per ether, as a count of fraction digits.
WEI_DECIMALS = 18

# Satoshi precision for BIP21 amounts.
BTC_DECIMALS = 8

# RFC 5545 content line limit (octets, excluding the line break).
MAX_ICAL_LINE_OCTETS = 75

MIN_LATITUDE = Decimal("-90")
MAX_LATITUDE = Decimal("90")
MIN_LONGITUDE = Decimal("-180")
MAX_LONGITUDE = Decimal("180")


__all__ = [
    "BTC_DECIMALS",
    "MAX_EPC_AMOUNT",
    "MAX_EPC_INFO_CHARS",
    "MAX_EPC_NAME_CHARS",
    "MAX_EPC_REFERENCE_CHARS",
    "MAX_ICAL_LINE_OCTETS",
    "MAX_LATITUDE",
    "MAX_LONGITUDE",
    "MAX_PIX_AMOUNT_CHARS",
    "MAX_PIX_CITY_CHARS",
    "MAX_PIX_DESCRIPTION_CHARS",
    "MAX_PIX_KEY_CHARS",
    "MAX_PIX_NAME_CHARS",
    "MAX_TLV_VALUE_CHARS",
    "MIN_EPC_AMOUNT",
    "MIN_LATITUDE",
    "MIN_LONGITUDE",
    "WEI_DECIMALS",
]
