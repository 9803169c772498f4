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

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class QrPayloadError(ValueError):
    """Base class for every error raised by the payload core."""


class ValidationError(QrPayloadError):
    """One or more fields failed their schema constraints."""

    def __init__(self, type_id: str, errors: Iterable[FieldError]) -> None:
        self.type_id = type_id
        self.errors: tuple[FieldError, ...] = tuple(errors)
        if not self.errors:
            raise ValueError("ValidationError requires at least one field error")
        details = "; ".join(f"{error.field}: {error.message}" for error in self.errors)
        super().__init__(f"invalid {type_id} data: {details}")

    @property
    def fields(self) -> tuple[str, ...]:
        seen: list[str] = []
        for error in self.errors:
            if error.field not in seen:
                seen.append(error.field)
        return tuple(seen)


class UnsupportedTypeError(QrPayloadError):
    def __init__(self, type_id: object, supported: Sequence[str]) -> None:
        self.type_id = type_id
        self.supported = tuple(supported)
        super().__init__(
            f"unsupported QR type: {type_id!r} (valid types: {', '.join(self.supported)})"
        )


class InputShapeError(QrPayloadError):
    """Field map handed to an encoder lacks keys it strictly needs."""

    def __init__(self, label: str, missing: Iterable[str] = (), *, detail: str | None = None):
        self.label = label
        self.missing = tuple(missing)
        if detail is None:
            detail = f"missing required keys: {', '.join(self.missing)}"
        super().__init__(f"{label} {detail}")


__all__ = [
    "FieldError",
    "InputShapeError",
    "QrPayloadError",
    "UnsupportedTypeError",
    "ValidationError",
]
