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

"""iCalendar VEVENT wrapped in a VCALENDAR (RFC 5545).

All-day events use ``VALUE=DATE`` with an exclusive DTEND, so the last
inclusive day is shifted forward by one. Timed events are floating local
times with seconds fixed at ``00``.
"""

from __future__ import annotations

from ..core.errors import FieldError
from ..core.types import FieldSpec, Fields, QrCategory, QrType, TypeSchema
from ..core.validation import is_calendar_date, is_clock_time
from ..encoding.escaping import escape_ical_text
from ..encoding.ical import add_one_day, fold_line, format_ical_date, format_ical_datetime
from .common import flag_field, optional, text_field

PRODID = "-//QR Code Generator//EN"
MIDNIGHT = "00:00"


def _date_field(name: str, label: str, *, required: bool = False) -> FieldSpec:
    return FieldSpec(
        name=name,
        label=label,
        required=required,
        check=is_calendar_date,
        message=f"{label} must be a calendar date in YYYY-MM-DD format",
        shape="string YYYY-MM-DD",
    )


def _time_field(name: str, label: str) -> FieldSpec:
    return FieldSpec(
        name=name,
        label=label,
        check=is_clock_time,
        message=f"{label} must be a 24-hour time in HH:MM format",
        shape="string HH:MM",
    )


def _check_end_after_start(fields: Fields) -> list[FieldError]:
    end_date = optional(fields, "endDate")
    # ISO dates order lexically.
    if end_date and end_date < fields["startDate"]:
        return [FieldError("endDate", "End date must not be before the start date")]
    return []


EVENT_SCHEMA = TypeSchema(
    type_id=QrType.EVENT,
    label="Calendar Event",
    category=QrCategory.EVENT,
    description="Create a calendar event (iCal / vEvent format)",
    fields=(
        text_field("title", "Title", required=True),
        _date_field("startDate", "Start date", required=True),
        _time_field("startTime", "Start time"),
        _date_field("endDate", "End date"),
        _time_field("endTime", "End time"),
        text_field("location", "Location"),
        text_field("description", "Description"),
        flag_field("allDay", "All-day event"),
    ),
    example={
        "title": "Meeting",
        "startDate": "2026-03-01",
        "startTime": "10:00",
        "endDate": "2026-03-01",
        "endTime": "11:00",
    },
    check=_check_end_after_start,
)


def _text_property(name: str, value: str) -> str:
    return fold_line(f"{name}:{escape_ical_text(value)}")


def _date_lines(fields: Fields) -> list[str]:
    start_date = fields["startDate"]
    end_date = optional(fields, "endDate")
    if fields.get("allDay") is True:
        exclusive_end = add_one_day(end_date or start_date)
        return [
            f"DTSTART;VALUE=DATE:{format_ical_date(start_date)}",
            f"DTEND;VALUE=DATE:{format_ical_date(exclusive_end)}",
        ]
    start_time = optional(fields, "startTime") or MIDNIGHT
    lines = [f"DTSTART:{format_ical_datetime(start_date, start_time)}"]
    end_time = optional(fields, "endTime")
    if end_date:
        lines.append(f"DTEND:{format_ical_datetime(end_date, end_time or MIDNIGHT)}")
    elif end_time:
        lines.append(f"DTEND:{format_ical_datetime(start_date, end_time)}")
    return lines


def encode_event(fields: Fields) -> str:
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "BEGIN:VEVENT",
        _text_property("SUMMARY", fields["title"]),
    ]
    lines.extend(_date_lines(fields))
    for key, prop in (("location", "LOCATION"), ("description", "DESCRIPTION")):
        value = optional(fields, key)
        if value:
            lines.append(_text_property(prop, value))
    lines.extend(["END:VEVENT", "END:VCALENDAR"])
    return "\n".join(lines)
