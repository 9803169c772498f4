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

from quickqr.encoding.tlv import TlvField, build_tlv, parse_tlv, tlv


class TestTlv(unittest.TestCase):
    def test_tlv_pads_length_to_two_digits(self) -> None:
        self.assertEqual(tlv("00", "01"), "000201")
        self.assertEqual(tlv("59", "John"), "5904John")
        self.assertEqual(tlv("62", ""), "6200")

    def test_tlv_length_counts_characters(self) -> None:
        self.assertEqual(tlv("59", "JOSÉ"), "5904JOSÉ")

    def test_tlv_accepts_ninety_nine_characters(self) -> None:
        value = "x" * 99
        self.assertEqual(tlv("26", value), "2699" + value)

    def test_tlv_rejects_overlong_value(self) -> None:
        with self.assertRaisesRegex(ValueError, "exceeds"):
            tlv("26", "x" * 100)

    def test_tlv_rejects_bad_id(self) -> None:
        for tag in ("1", "123", "ab", ""):
            with self.subTest(tag=tag):
                with self.assertRaisesRegex(ValueError, "TLV id"):
                    tlv(tag, "value")

    def test_build_tlv_concatenates(self) -> None:
        fields = [TlvField("00", "br.gov.bcb.pix"), TlvField("01", "test@pix.com")]
        self.assertEqual(build_tlv(fields), "0014br.gov.bcb.pix0112test@pix.com")

    def test_parse_tlv_reads_fields_in_order(self) -> None:
        fields = list(parse_tlv("000201010212" "6304ABCD"))
        self.assertEqual(
            fields,
            [TlvField("00", "01"), TlvField("01", "12"), TlvField("63", "ABCD")],
        )

    def test_parse_tlv_errors(self) -> None:
        cases = (
            ("0002016", "truncated TLV header"),
            ("0x0201", "invalid TLV header at offset 0"),
            ("000201" "5910short", "TLV 59 length exceeds payload"),
        )
        for payload, message in cases:
            with self.subTest(payload=payload):
                with self.assertRaisesRegex(ValueError, message):
                    list(parse_tlv(payload))

    def test_parse_tlv_empty_payload(self) -> None:
        self.assertEqual(list(parse_tlv("")), [])


if __name__ == "__main__":
    unittest.main()
