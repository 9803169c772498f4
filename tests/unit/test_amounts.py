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

from quickqr.encoding.amounts import eth_to_wei, scale_decimal


class TestAmounts(unittest.TestCase):
    def test_eth_to_wei(self) -> None:
        cases = (
            ("1.5", "1500000000000000000"),
            ("0.000000000000000001", "1"),
            ("0", "0"),
            ("0.0", "0"),
            ("1", "1000000000000000000"),
            ("123456789.123456789123456789", "123456789123456789123456789"),
            ("007", "7000000000000000000"),
        )
        for amount, expected in cases:
            with self.subTest(amount=amount):
                self.assertEqual(eth_to_wei(amount), expected)

    def test_extra_fraction_digits_are_truncated(self) -> None:
        self.assertEqual(eth_to_wei("0.0000000000000000019"), "1")
        self.assertEqual(scale_decimal("1.239", 2), "123")

    def test_large_values_keep_every_digit(self) -> None:
        amount = "99999999999999999999.999999999999999999"
        self.assertEqual(eth_to_wei(amount), "9" * 38)

    def test_invalid_amounts(self) -> None:
        for amount in ("", ".", "1e5", "-1", "1.2.3", "١٢"):
            with self.subTest(amount=amount):
                with self.assertRaises(ValueError):
                    scale_decimal(amount, 18)


if __name__ == "__main__":
    unittest.main()
