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

"""Transport-neutral request handlers.

Bodies follow the ``POST /api/qr`` contract: ``{"type": ..., "data": {...}}``
in, ``{"encoded": ..., "type": ...}`` out. Callers own the transport and only
need to serialize ``ApiResponse.payload`` with the given status.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .core.errors import InputShapeError, UnsupportedTypeError, ValidationError
from .formats import supported_types
from .service import describe_types, encode_payload

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_UNPROCESSABLE = 422


@dataclass(frozen=True)
class ApiResponse:
    status: int
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == HTTP_OK


def _error(status: int, message: str, **extra: Any) -> ApiResponse:
    return ApiResponse(status=status, payload={"error": message, **extra})


def handle_generate(body: object) -> ApiResponse:
    if not isinstance(body, Mapping):
        return _error(HTTP_BAD_REQUEST, "Request body must be a JSON object")
    type_id = body.get("type")
    if not type_id or not isinstance(type_id, str):
        return _error(HTTP_BAD_REQUEST, "Missing or invalid 'type' field")
    data = body.get("data")
    try:
        # The type is resolved before ``data`` is inspected, so an unknown tag
        # is reported even when the body is also malformed.
        encoded = encode_payload(type_id, data)
    except UnsupportedTypeError:
        return _error(
            HTTP_BAD_REQUEST,
            f"Invalid QR type '{type_id}'. Valid types: {', '.join(supported_types())}",
        )
    except InputShapeError:
        return _error(HTTP_BAD_REQUEST, "Missing or invalid 'data' field, must be an object")
    except ValidationError as exc:
        return _error(
            HTTP_UNPROCESSABLE,
            str(exc),
            fields=[error.to_dict() for error in exc.errors],
        )
    return ApiResponse(
        status=HTTP_OK,
        payload={"encoded": encoded, "type": type_id.strip().lower()},
    )


def handle_list_types() -> ApiResponse:
    return ApiResponse(
        status=HTTP_OK,
        payload={"availableTypes": list(supported_types()), "types": describe_types()},
    )
