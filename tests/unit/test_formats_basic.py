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

import re
import unittest

from quickqr.core.errors import ValidationError
from quickqr.service import encode_payload


class TestBasicFormats(unittest.TestCase):
    def test_url_and_text_pass_through(self) -> None:
        self.assertEqual(
            encode_payload("url", {"url": "https://example.com"}),
            "https://example.com",
        )
        self.assertEqual(encode_payload("text", {"text": "Hello\nWorld"}), "Hello\nWorld")

    def test_url_must_be_absolute(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            encode_payload("url", {"url": "example.com"})
        self.assertEqual(ctx.exception.fields, ("url",))

    def test_wifi_escapes_ssid_and_password(self) -> None:
        encoded = encode_payload(
            "wifi",
            {"ssid": "My;Net,work:2", "password": r"p\a;ss", "encryption": "WPA"},
        )
        self.assertEqual(encoded, r"WIFI:T:WPA;S:My\;Net\,work\:2;P:p\\a\;ss;;")
        # Strip escaped pairs; only the structural delimiters remain.
        bare = re.sub(r"\\.", "", encoded)
        self.assertEqual(bare.count(";"), 4)
        self.assertTrue(bare.endswith(";;"))

    def test_wifi_defaults_and_hidden_flag(self) -> None:
        cases = (
            ({"ssid": "Home"}, "WIFI:T:WPA;S:Home;P:;;"),
            (
                {"ssid": "Home", "password": "pw", "encryption": "WEP", "hidden": True},
                "WIFI:T:WEP;S:Home;P:pw;H:true;;",
            ),
            (
                {"ssid": "Cafe", "encryption": "nopass", "hidden": False},
                "WIFI:T:nopass;S:Cafe;P:;;",
            ),
        )
        for data, expected in cases:
            with self.subTest(data=data):
                self.assertEqual(encode_payload("wifi", data), expected)

    def test_wifi_rejects_unknown_encryption_and_string_flag(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            encode_payload("wifi", {"ssid": "x", "encryption": "WPA3", "hidden": "true"})
        self.assertEqual(ctx.exception.fields, ("encryption", "hidden"))

    def test_email(self) -> None:
        cases = (
            ({"to": "hello@example.com"}, "mailto:hello@example.com"),
            (
                {"to": "hello@example.com", "subject": "Hi there", "body": "a&b"},
                "mailto:hello@example.com?subject=Hi%20there&body=a%26b",
            ),
            (
                {"to": "hello@example.com", "body": "Only body"},
                "mailto:hello@example.com?body=Only%20body",
            ),
        )
        for data, expected in cases:
            with self.subTest(data=data):
                self.assertEqual(encode_payload("email", data), expected)

    def test_email_requires_valid_address(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            encode_payload("email", {"to": "not-an-email"})
        self.assertEqual(ctx.exception.errors[0].message, "Recipient must be a valid email address")

    def test_phone_and_sms(self) -> None:
        self.assertEqual(
            encode_payload("phone", {"phone": "+1 (555) 123-4567"}),
            "tel:+1 (555) 123-4567",
        )
        self.assertEqual(
            encode_payload("sms", {"phone": "+1234567890", "message": "Hello"}),
            "smsto:+1234567890:Hello",
        )
        self.assertEqual(encode_payload("sms", {"phone": "+1234567890"}), "smsto:+1234567890:")

    def test_phone_rejects_letters(self) -> None:
        for type_id in ("phone", "sms"):
            with self.subTest(type_id=type_id):
                with self.assertRaises(ValidationError):
                    encode_payload(type_id, {"phone": "call-me"})


if __name__ == "__main__":
    unittest.main()
