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

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..core.bounds import MAX_TLV_VALUE_CHARS

ID_LEN = 2
LENGTH_LEN = 2


@dataclass(frozen=True)
class TlvField:
    tag: str
    value: str

    def serialize(self) -> str:
        return tlv(self.tag, self.value)


def tlv(tag: str, value: str) -> str:
    """Serialize one EMV field: 2-digit id, 2-digit character count, value."""
    if len(tag) != ID_LEN or not tag.isdigit():
        raise ValueError(f"TLV id must be {ID_LEN} digits: {tag!r}")
    if len(value) > MAX_TLV_VALUE_CHARS:
        raise ValueError(
            f"TLV {tag} value exceeds MAX_TLV_VALUE_CHARS ({MAX_TLV_VALUE_CHARS}): "
            f"{len(value)} characters"
        )
    return f"{tag}{len(value):02d}{value}"


def build_tlv(fields: Iterable[TlvField]) -> str:
    return "".join(field.serialize() for field in fields)


def parse_tlv(payload: str) -> Iterator[TlvField]:
    idx = 0
    total = len(payload)
    while idx < total:
        if idx + ID_LEN + LENGTH_LEN > total:
            raise ValueError("truncated TLV header")
        tag = payload[idx : idx + ID_LEN]
        length_text = payload[idx + ID_LEN : idx + ID_LEN + LENGTH_LEN]
        if not tag.isdigit() or not length_text.isdigit():
            raise ValueError(f"invalid TLV header at offset {idx}")
        start = idx + ID_LEN + LENGTH_LEN
        end = start + int(length_text)
        if end > total:
            raise ValueError(f"TLV {tag} length exceeds payload")
        yield TlvField(tag=tag, value=payload[start:end])
        idx = end
