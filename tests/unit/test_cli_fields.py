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

import json
import tempfile
import unittest
from pathlib import Path

from quickqr.cli.core.fields import (
    collect_fields,
    load_data_file,
    parse_bool_word,
    parse_field_args,
)
from quickqr.core.errors import InputShapeError
from quickqr.formats import get_format

WIFI = get_format("wifi").schema


class TestParseFieldArgs(unittest.TestCase):
    def test_values_stay_strings_except_booleans(self) -> None:
        data = parse_field_args(
            WIFI,
            ["ssid=My=Net", "password= spaced ", "hidden=Yes", "encryption=WEP"],
        )
        self.assertEqual(
            data,
            {"ssid": "My=Net", "password": " spaced ", "hidden": True, "encryption": "WEP"},
        )

    def test_empty_value_is_kept(self) -> None:
        self.assertEqual(parse_field_args(WIFI, ["password="]), {"password": ""})

    def test_rejections(self) -> None:
        cases = (
            (["ssid"], "key=value"),
            (["=x"], "key=value"),
            (["SSID=x"], "unknown field 'SSID' for wifi"),
            (["hidden=maybe"], "hidden must be true or false"),
        )
        for pairs, message in cases:
            with self.subTest(pairs=pairs):
                with self.assertRaisesRegex(ValueError, message):
                    parse_field_args(WIFI, pairs)

    def test_parse_bool_word(self) -> None:
        for word in ("1", "true", "YES", " on ", "y"):
            with self.subTest(word=word):
                self.assertTrue(parse_bool_word(word, field="x"))
        for word in ("0", "False", "no", "off", "N"):
            with self.subTest(word=word):
                self.assertFalse(parse_bool_word(word, field="x"))


class TestDataFile(unittest.TestCase):
    def test_load_and_merge(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "wifi.json"
            path.write_text(
                json.dumps({"ssid": "FromFile", "hidden": True, "extra": 1}),
                encoding="utf-8",
            )
            self.assertEqual(load_data_file(path)["ssid"], "FromFile")
            data = collect_fields(WIFI, ["ssid=FromArgs"], path)
        self.assertEqual(data, {"ssid": "FromArgs", "hidden": True, "extra": 1})

    def test_no_file(self) -> None:
        self.assertEqual(collect_fields(WIFI, [], None), {})

    def test_errors(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "missing.json"
            with self.assertRaisesRegex(FileNotFoundError, "data file not found"):
                load_data_file(missing)

            broken = Path(tmpdir) / "broken.json"
            broken.write_text("{not json", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "is not valid JSON"):
                load_data_file(broken)

            array = Path(tmpdir) / "array.json"
            array.write_text("[1, 2]", encoding="utf-8")
            with self.assertRaisesRegex(InputShapeError, "must be an object"):
                load_data_file(array)


if __name__ == "__main__":
    unittest.main()
