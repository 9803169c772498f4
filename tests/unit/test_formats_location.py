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

import unittest

from quickqr.service import encode_payload, validate_payload

NYC = {"latitude": "40.7128", "longitude": "-74.0060"}


class TestLocation(unittest.TestCase):
    def test_geo_keeps_coordinates_verbatim(self) -> None:
        self.assertEqual(encode_payload("geo", NYC), "geo:40.7128,-74.0060")

    def test_google_maps(self) -> None:
        self.assertEqual(
            encode_payload("google-maps", NYC),
            "https://maps.google.com/?q=40.7128,-74.0060",
        )

    def test_coordinate_ranges(self) -> None:
        for type_id in ("geo", "google-maps"):
            for latitude, longitude in (("90", "180"), ("-90", "-180"), ("0", "0")):
                with self.subTest(type_id=type_id, latitude=latitude, longitude=longitude):
                    data = {"latitude": latitude, "longitude": longitude}
                    self.assertTrue(validate_payload(type_id, data).ok)

        cases = (
            ({"latitude": "90.0001", "longitude": "0"}, "latitude"),
            ({"latitude": "0", "longitude": "-180.5"}, "longitude"),
            ({"latitude": "north", "longitude": "0"}, "latitude"),
            ({"latitude": "1e1", "longitude": "0"}, "latitude"),
            ({"latitude": "0"}, "longitude"),
        )
        for data, field in cases:
            with self.subTest(data=data):
                result = validate_payload("geo", data)
                self.assertTrue(result.errors_for(field))


if __name__ == "__main__":
    unittest.main()
