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

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF
CRC_FIELD_ID = "63"
CRC_FIELD_PREFIX = CRC_FIELD_ID + "04"
CRC_HEX_LEN = 4


def crc16_ccitt_false(data: bytes, *, initial: int = CRC16_INIT) -> int:
    """CRC-16/CCITT-FALSE: poly 0x1021, MSB first, no reflection or xor-out."""
    crc = initial
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ CRC16_POLY) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc


def emv_crc(payload: str) -> str:
    """Checksum ``payload`` (which must already end in ``6304``) as 4 hex digits."""
    return f"{crc16_ccitt_false(payload.encode('utf-8')):04X}"


def append_emv_crc(payload: str) -> str:
    """Append the CRC field (``6304`` + checksum) to an EMV payload."""
    body = payload + CRC_FIELD_PREFIX
    return body + emv_crc(body)


def verify_emv_crc(payload: str) -> bool:
    """Recompute the trailing CRC of a complete EMV payload."""
    if len(payload) < len(CRC_FIELD_PREFIX) + CRC_HEX_LEN:
        return False
    body = payload[:-CRC_HEX_LEN]
    if not body.endswith(CRC_FIELD_PREFIX):
        return False
    return emv_crc(body) == payload[-CRC_HEX_LEN:].upper()
