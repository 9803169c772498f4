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

"""Build the exact text payloads that QR codes carry."""

from __future__ import annotations

from .core.errors import (
    InputShapeError as InputShapeError,
    QrPayloadError as QrPayloadError,
    UnsupportedTypeError as UnsupportedTypeError,
    ValidationError as ValidationError,
)
from .core.types import QrType as QrType
from .formats import supported_types as supported_types
from .service import (
    describe_type as describe_type,
    describe_types as describe_types,
    encode_payload as encode_payload,
    encode_validated as encode_validated,
    validate_payload as validate_payload,
)

__all__ = [
    "InputShapeError",
    "QrPayloadError",
    "QrType",
    "UnsupportedTypeError",
    "ValidationError",
    "describe_type",
    "describe_types",
    "encode_payload",
    "encode_validated",
    "supported_types",
    "validate_payload",
]
