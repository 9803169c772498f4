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

from ..core.bounds import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from ..core.types import Fields, QrCategory, QrType, TypeSchema
from .common import coordinate_field

GOOGLE_MAPS_URL = "https://maps.google.com/"

_COORDINATES = (
    coordinate_field("latitude", "Latitude", low=MIN_LATITUDE, high=MAX_LATITUDE),
    coordinate_field("longitude", "Longitude", low=MIN_LONGITUDE, high=MAX_LONGITUDE),
)
_EXAMPLE = {"latitude": "40.7128", "longitude": "-74.0060"}

GEO_SCHEMA = TypeSchema(
    type_id=QrType.GEO,
    label="Geo Location",
    category=QrCategory.LOCATION,
    description="Encode GPS coordinates using the geo: URI scheme",
    fields=_COORDINATES,
    example=_EXAMPLE,
)

GOOGLE_MAPS_SCHEMA = TypeSchema(
    type_id=QrType.GOOGLE_MAPS,
    label="Google Maps",
    category=QrCategory.LOCATION,
    description="Link to a location on Google Maps",
    fields=_COORDINATES,
    example=_EXAMPLE,
)


def encode_geo(fields: Fields) -> str:
    # Coordinates are emitted verbatim so "-74.0060" keeps its trailing zero.
    return f"geo:{fields['latitude']},{fields['longitude']}"


def encode_google_maps(fields: Fields) -> str:
    return f"{GOOGLE_MAPS_URL}?q={fields['latitude']},{fields['longitude']}"
