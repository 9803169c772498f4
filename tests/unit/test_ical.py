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

from quickqr.encoding.ical import (
    FOLD_SEPARATOR,
    add_one_day,
    fold_line,
    format_ical_date,
    format_ical_datetime,
)


class TestFoldLine(unittest.TestCase):
    def test_short_line_unchanged(self) -> None:
        line = "SUMMARY:" + "x" * 67
        self.assertEqual(len(line), 75)
        self.assertEqual(fold_line(line), line)

    def test_long_ascii_line_folds_at_limits(self) -> None:
        line = "SUMMARY:" + "x" * 200
        physical = fold_line(line).split("\r\n")
        self.assertEqual(len(physical[0]), 75)
        for continuation in physical[1:]:
            self.assertTrue(continuation.startswith(" "))
            self.assertLessEqual(len(continuation.encode("utf-8")), 75)
        unfolded = physical[0] + "".join(part[1:] for part in physical[1:])
        self.assertEqual(unfolded, line)

    def test_continuations_are_full(self) -> None:
        line = "x" * (75 + 74 + 10)
        physical = fold_line(line).split(FOLD_SEPARATOR)
        self.assertEqual([len(part) for part in physical], [75, 74, 10])

    def test_multibyte_characters_are_not_split(self) -> None:
        line = "DESCRIPTION:" + "é" * 80
        folded = fold_line(line)
        for physical in folded.split("\r\n"):
            encoded = physical.encode("utf-8")
            self.assertLessEqual(len(encoded), 75)
            encoded.decode("utf-8")
        self.assertEqual(folded.replace(FOLD_SEPARATOR, ""), line)

    def test_custom_limit(self) -> None:
        self.assertEqual(fold_line("abcdef", limit=3), "abc\r\n de\r\n f")


class TestIcalDates(unittest.TestCase):
    def test_format_ical_date(self) -> None:
        self.assertEqual(format_ical_date("2026-03-01"), "20260301")

    def test_format_ical_datetime(self) -> None:
        self.assertEqual(format_ical_datetime("2026-03-01", "09:05"), "20260301T090500")
        self.assertEqual(format_ical_datetime("2026-12-31", "23:59"), "20261231T235900")

    def test_add_one_day(self) -> None:
        cases = (
            ("2026-03-01", "2026-03-02"),
            ("2026-01-31", "2026-02-01"),
            ("2026-12-31", "2027-01-01"),
            ("2028-02-28", "2028-02-29"),
            ("2026-02-28", "2026-03-01"),
        )
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertEqual(add_one_day(value), expected)


if __name__ == "__main__":
    unittest.main()
