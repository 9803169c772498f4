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

from quickqr.core.errors import InputShapeError, UnsupportedTypeError
from quickqr.core.types import QrType
from quickqr.formats import get_format, iter_formats, resolve_type, supported_types

EXPECTED_TYPES = (
    "url",
    "text",
    "wifi",
    "email",
    "phone",
    "sms",
    "vcard",
    "mecard",
    "social",
    "upi",
    "epc",
    "pix",
    "bitcoin",
    "ethereum",
    "paypal",
    "event",
    "geo",
    "google-maps",
    "app-store",
)


class TestRegistry(unittest.TestCase):
    def test_every_type_has_a_format(self) -> None:
        self.assertEqual(supported_types(), EXPECTED_TYPES)
        self.assertEqual(len(iter_formats()), len(QrType))
        for payload_format in iter_formats():
            with self.subTest(type_id=payload_format.type_id):
                self.assertIs(payload_format.schema.type_id, payload_format.type_id)

    def test_resolve_type_normalizes_case_and_whitespace(self) -> None:
        self.assertIs(resolve_type(" WiFi "), QrType.WIFI)
        self.assertIs(resolve_type("Google-Maps"), QrType.GOOGLE_MAPS)
        self.assertIs(resolve_type(QrType.PIX), QrType.PIX)

    def test_unknown_types_are_rejected(self) -> None:
        for value in ("barcode", "", "google_maps", None, 7):
            with self.subTest(value=value):
                with self.assertRaises(UnsupportedTypeError) as ctx:
                    get_format(value)
                self.assertEqual(ctx.exception.supported, EXPECTED_TYPES)
                self.assertIn("valid types: url, text", str(ctx.exception))

    def test_examples_encode_without_errors(self) -> None:
        for payload_format in iter_formats():
            with self.subTest(type_id=payload_format.type_id):
                encoded = payload_format.encode(payload_format.schema.example)
                self.assertIsInstance(encoded, str)
                self.assertTrue(encoded)

    def test_examples_cover_required_fields(self) -> None:
        for payload_format in iter_formats():
            schema = payload_format.schema
            with self.subTest(type_id=schema.type_id):
                self.assertTrue(set(schema.required_fields) <= set(schema.example))

    def test_encode_checks_required_keys(self) -> None:
        with self.assertRaisesRegex(InputShapeError, "missing required keys: ssid"):
            get_format("wifi").encode({"password": "x"})
        with self.assertRaisesRegex(InputShapeError, "must be an object"):
            get_format("url").encode(["https://example.com"])

    def test_social_and_app_store_pass_urls_through(self) -> None:
        for type_id in ("social", "app-store"):
            with self.subTest(type_id=type_id):
                url = "https://example.com/profile?id=1"
                self.assertEqual(get_format(type_id).encode({"url": url}), url)


if __name__ == "__main__":
    unittest.main()
