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

from urllib.parse import quote

# Characters left intact by JavaScript's encodeURIComponent besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"

# Backslash must come first so inserted escapes are not escaped again.
_WIFI_SPECIALS = ("\\", ";", ",", ":")
_MECARD_SPECIALS = ("\\", ";", ":", ",")
_ICAL_SPECIALS = ("\\", ";", ",")


def _backslash_escape(value: str, specials: tuple[str, ...]) -> str:
    for char in specials:
        value = value.replace(char, "\\" + char)
    return value


def escape_wifi(value: str) -> str:
    """Escape SSID/password text for the ``WIFI:`` scheme."""
    return _backslash_escape(value, _WIFI_SPECIALS)


def escape_mecard(value: str) -> str:
    return _backslash_escape(value, _MECARD_SPECIALS)


def escape_ical_text(value: str) -> str:
    """Escape a TEXT property value (RFC 5545 section 3.3.11)."""
    escaped = _backslash_escape(value, _ICAL_SPECIALS)
    escaped = escaped.replace("\r\n", "\n").replace("\r", "\n")
    return escaped.replace("\n", "\\n")


def encode_uri_component(value: str) -> str:
    """Percent-encode UTF-8 text the way ``encodeURIComponent`` does."""
    return quote(value, safe=_URI_COMPONENT_SAFE, encoding="utf-8", errors="strict")


def build_query(params: list[tuple[str, str]]) -> str:
    """Join already-encoded ``key=value`` pairs, returning ``""`` when empty."""
    if not params:
        return ""
    return "?" + "&".join(f"{key}={value}" for key, value in params)
