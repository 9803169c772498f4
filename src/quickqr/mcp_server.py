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

"""MCP stdio server exposing payload generation to agents.

Tools:
    generate_qr    encode structured data for one of the supported types
    list_qr_types  list every type with its fields and an example

stdout carries JSON-RPC framing, so logging goes to stderr only.
"""

from __future__ import annotations

import logging
import sys

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .api import handle_generate, handle_list_types
from .formats import supported_types

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
RAW_PAYLOAD_NOTE = (
    "This is the raw string to encode into a QR code image. "
    "Any QR code library or app can render it."
)

logger = logging.getLogger("quickqr.mcp")

mcp = FastMCP("quickqr")

_READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True)


@mcp.tool(annotations=_READ_ONLY)
def generate_qr(type: str, data: dict) -> dict:
    """
    Generate the raw string a QR code must carry from structured data.

    Supports URL, text, WiFi, email, phone, SMS, vCard, MeCard, social link,
    UPI, SEPA/EPC, Pix, Bitcoin, Ethereum, PayPal, calendar event, geo
    location, Google Maps and app store links. Call list_qr_types first to
    learn the fields each type needs.

    Args:
        type: The QR type identifier, e.g. "wifi" or "pix".
        data: Field values for the type. Text and amounts are strings,
              flags such as "hidden" or "allDay" are booleans.
    """
    logger.info("tool: generate_qr type=%s", type)
    response = handle_generate({"type": type, "data": data})
    if not response.ok:
        logger.warning("generate_qr: %s %s", response.status, response.payload.get("error"))
        return {"success": False, **response.payload}
    return {
        "success": True,
        "qrType": response.payload["type"],
        "encoded": response.payload["encoded"],
        "note": RAW_PAYLOAD_NOTE,
    }


@mcp.tool(annotations=_READ_ONLY)
def list_qr_types() -> dict:
    """
    List all available QR types with their required and optional fields,
    value shapes and one example field set per type.
    """
    logger.info("tool: list_qr_types")
    return handle_list_types().payload


def main() -> None:
    logging.basicConfig(level=logging.INFO, stream=sys.stderr, format=LOG_FORMAT)
    logger.info("startup: serving %d QR types over stdio", len(supported_types()))
    mcp.run()


if __name__ == "__main__":
    main()
