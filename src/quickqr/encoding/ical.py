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

import datetime

from ..core.bounds import MAX_ICAL_LINE_OCTETS

FOLD_SEPARATOR = "\r\n "


def fold_line(line: str, *, limit: int = MAX_ICAL_LINE_OCTETS) -> str:
    """Fold a content line so no physical line exceeds ``limit`` octets.

    Continuation lines start with a single space, which counts towards the
    limit. Multi-byte UTF-8 sequences are never split across lines.
    """
    if len(line.encode("utf-8")) <= limit:
        return line
    segments: list[str] = []
    current: list[str] = []
    used = 0
    budget = limit
    for char in line:
        size = len(char.encode("utf-8"))
        if used + size > budget:
            segments.append("".join(current))
            current = []
            used = 0
            budget = limit - 1
        current.append(char)
        used += size
    segments.append("".join(current))
    return FOLD_SEPARATOR.join(segments)


def _parse_date(value: str) -> datetime.date:
    return datetime.date.fromisoformat(value)


def format_ical_date(value: str) -> str:
    """Render ``YYYY-MM-DD`` as ``yyyyMMdd``."""
    return _parse_date(value).strftime("%Y%m%d")


def format_ical_datetime(date_value: str, time_value: str) -> str:
    """Render a date and ``HH:MM`` as floating local time ``yyyyMMddTHHmm00``."""
    hours, minutes = time_value.split(":")
    return f"{format_ical_date(date_value)}T{int(hours):02d}{int(minutes):02d}00"


def add_one_day(value: str) -> str:
    """Return the ``YYYY-MM-DD`` date that follows ``value``."""
    return (_parse_date(value) + datetime.timedelta(days=1)).isoformat()
