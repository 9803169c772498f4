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

from quickqr.encoding.crc import verify_emv_crc
from quickqr.encoding.tlv import parse_tlv
from quickqr.formats.pix import merchant_account_info
from quickqr.service import encode_payload, validate_payload

BASE = {"pixKey": "test@pix.com", "name": "John", "city": "SAO PAULO"}


class TestPix(unittest.TestCase):
    def test_minimal_payload(self) -> None:
        self.assertEqual(
            encode_payload("pix", BASE),
            "00020101021226340014br.gov.bcb.pix0112test@pix.com"
            "5204000053039865802BR5904John6009SAO PAULO62070503***63046727",
        )

    def test_amount_and_description(self) -> None:
        encoded = encode_payload("pix", {**BASE, "description": "Pedido 1", "amount": "123.45"})
        self.assertEqual(
            encoded,
            "00020101021226460014br.gov.bcb.pix0112test@pix.com0208Pedido 1"
            "5204000053039865406123.455802BR5904John6009SAO PAULO62070503***6304853C",
        )

    def test_non_ascii_name_counts_characters_and_hashes_utf8(self) -> None:
        encoded = encode_payload("pix", {**BASE, "name": "JOSÉ"})
        self.assertTrue(encoded.endswith("5904JOSÉ6009SAO PAULO62070503***6304F65D"))
        self.assertTrue(verify_emv_crc(encoded))

    def test_crc_recomputes(self) -> None:
        encoded = encode_payload("pix", {**BASE, "amount": "10"})
        self.assertTrue(verify_emv_crc(encoded))
        self.assertEqual(encode_payload("pix", {**BASE, "amount": "10"}), encoded)

    def test_field_order(self) -> None:
        encoded = encode_payload("pix", {**BASE, "amount": "1.50"})
        tags = [field.tag for field in parse_tlv(encoded)]
        self.assertEqual(tags, ["00", "01", "26", "52", "53", "54", "58", "59", "60", "62", "63"])

    def test_merchant_account_info(self) -> None:
        self.assertEqual(
            merchant_account_info("key", "desc"),
            "0014br.gov.bcb.pix0103key0204desc",
        )

    def test_length_limits(self) -> None:
        cases = (
            ("name", "N" * 26),
            ("city", "C" * 16),
            ("description", "D" * 26),
            ("pixKey", "k" * 78),
        )
        for field, value in cases:
            with self.subTest(field=field):
                result = validate_payload("pix", {**BASE, field: value})
                self.assertTrue(result.errors_for(field))

    def test_amount_fits_its_tlv_field(self) -> None:
        self.assertTrue(validate_payload("pix", {**BASE, "amount": "1234567890.12"}).ok)
        encoded = encode_payload("pix", {**BASE, "amount": "1234567890.12"})
        self.assertIn("54131234567890.12", encoded)

        for amount in ("12345678901.12", "1" * 100):
            with self.subTest(length=len(amount)):
                result = validate_payload("pix", {**BASE, "amount": amount})
                self.assertEqual(
                    result.errors_for("amount"),
                    ("Amount must be 13 characters or fewer",),
                )

    def test_merchant_template_limit(self) -> None:
        longest_key = {**BASE, "pixKey": "k" * 77}
        self.assertTrue(validate_payload("pix", longest_key).ok)
        result = validate_payload("pix", {**longest_key, "description": "hi"})
        self.assertEqual(len(result.errors), 1)
        self.assertIn("merchant account limit", result.errors_for("description")[0])


if __name__ == "__main__":
    unittest.main()
