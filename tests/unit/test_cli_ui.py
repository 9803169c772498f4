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

import io
import json
import unittest

from rich.console import Console

from quickqr.cli import ui as ui_module
from quickqr.cli.ui.state import THEME, UIContext
from quickqr.core.errors import FieldError


def _context(*, no_color: bool = False) -> UIContext:
    return UIContext(
        theme=THEME,
        console=Console(file=io.StringIO(), theme=THEME, width=80, no_color=no_color),
        console_err=Console(file=io.StringIO(), theme=THEME, width=80, no_color=no_color),
    )


class TestCliUi(unittest.TestCase):
    def test_print_payload_keeps_carriage_returns(self) -> None:
        context = _context()
        payload = "BEGIN:VCALENDAR\nSUMMARY:" + "x" * 70 + "\r\n y\nEND:VCALENDAR"
        ui_module.print_payload(payload, context=context)
        self.assertEqual(context.console.file.getvalue(), payload + "\n")

    def test_print_json_does_not_escape_unicode(self) -> None:
        context = _context()
        ui_module.print_json({"name": "JOSÉ", "valid": True}, context=context)
        output = context.console.file.getvalue()
        self.assertEqual(json.loads(output), {"name": "JOSÉ", "valid": True})
        self.assertIn("JOSÉ", output)

    def test_configure_ui_toggles_color(self) -> None:
        context = _context()
        ui_module.configure_ui(no_color=True, context=context)
        self.assertTrue(context.console.no_color)
        self.assertTrue(context.console_err.no_color)
        ui_module.configure_ui(no_color=False, context=context)
        self.assertFalse(context.console.no_color)

    def test_tables(self) -> None:
        errors = [
            FieldError("vpa", "VPA must look like user@bank"),
            FieldError("name", "Payee name is required"),
        ]
        self.assertEqual(ui_module.build_field_error_table(errors).row_count, 2)
        self.assertEqual(ui_module.build_kv_table([("a", "1")], title="Example").row_count, 1)

        table = ui_module.build_types_table(
            {"url": {"label": "URL", "category": "basic", "required": ["url"]}}
        )
        self.assertEqual(table.row_count, 1)
        console = Console(file=io.StringIO(), width=100)
        console.print(table)
        rendered = console.file.getvalue()
        for text in ("url", "basic", "URL"):
            with self.subTest(text=text):
                self.assertIn(text, rendered)

    def test_is_terminal_handles_closed_and_missing_streams(self) -> None:
        class _Closed:
            def isatty(self) -> bool:
                raise ValueError("closed")

        class _Tty:
            def isatty(self) -> bool:
                return True

        self.assertFalse(ui_module.is_terminal(_Closed()))
        self.assertFalse(ui_module.is_terminal(None))
        self.assertFalse(ui_module.is_terminal(io.StringIO()))
        self.assertTrue(ui_module.is_terminal(_Tty()))


if __name__ == "__main__":
    unittest.main()
