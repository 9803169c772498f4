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
from unittest import mock

from quickqr.cli.flows import wizard as wizard_module
from quickqr.formats import get_format


class TestWizardFlow(unittest.TestCase):
    def setUp(self) -> None:
        patchers = {
            "text": mock.patch.object(wizard_module, "prompt_text"),
            "yes_no": mock.patch.object(wizard_module, "prompt_yes_no"),
            "choice": mock.patch.object(wizard_module, "prompt_choice_list"),
            "payload": mock.patch.object(wizard_module, "print_payload"),
            "json": mock.patch.object(wizard_module, "print_json"),
            "panel": mock.patch.object(wizard_module, "print_completion_panel"),
            "console_err": mock.patch.object(wizard_module, "console_err"),
        }
        self.mocks = {}
        for name, patcher in patchers.items():
            self.mocks[name] = patcher.start()
            self.addCleanup(patcher.stop)

    def test_wifi_prompts_by_field_kind(self) -> None:
        self.mocks["text"].side_effect = ["Home", "pw"]
        self.mocks["choice"].return_value = "WEP"
        self.mocks["yes_no"].return_value = True

        encoded = wizard_module.run_wizard(type_id="wifi", quiet=True)

        self.assertEqual(encoded, "WIFI:T:WEP;S:Home;P:pw;H:true;;")
        self.mocks["payload"].assert_called_once_with(encoded)
        self.mocks["json"].assert_not_called()
        labels = [call.args[0] for call in self.mocks["text"].call_args_list]
        self.assertEqual(labels, ["SSID", "Password (optional)"])
        choice_kwargs = self.mocks["choice"].call_args.kwargs
        self.assertEqual(choice_kwargs["default"], "WPA")
        self.assertEqual(choice_kwargs["title"], "Encryption")

    def test_text_check_reuses_field_validation(self) -> None:
        self.mocks["text"].return_value = "https://example.com"

        wizard_module.run_wizard(type_id="url")

        check = self.mocks["text"].call_args.kwargs["check"]
        self.assertEqual(check(""), "URL is required")
        self.assertIn("absolute URL", check("example.com"))
        self.assertIsNone(check("https://example.com"))

    def test_type_is_prompted_when_missing(self) -> None:
        self.mocks["choice"].return_value = "geo"
        self.mocks["text"].side_effect = ["40.7128", "-74.0060"]

        encoded = wizard_module.run_wizard(output_format="json")

        self.assertEqual(encoded, "geo:40.7128,-74.0060")
        items = self.mocks["choice"].call_args.args[0]
        self.assertEqual(len(items), 19)
        self.assertEqual(items[0], ("url", "URL (url)"))
        self.mocks["json"].assert_called_once_with({"type": "geo", "encoded": encoded})

    def test_cross_field_errors_reprompt_only_failing_fields(self) -> None:
        # title, startDate, startTime, endDate, endTime, location, description, then endDate again
        self.mocks["text"].side_effect = [
            "Offsite",
            "2026-03-02",
            "",
            "2026-03-01",
            "",
            "",
            "",
            "2026-03-03",
        ]
        self.mocks["yes_no"].return_value = True

        encoded = wizard_module.run_wizard(type_id="event")

        self.assertIn("DTSTART;VALUE=DATE:20260302", encoded)
        self.assertIn("DTEND;VALUE=DATE:20260304", encoded)
        self.assertEqual(self.mocks["text"].call_count, 8)
        self.assertEqual(self.mocks["yes_no"].call_count, 1)
        last_call = self.mocks["text"].call_args
        self.assertEqual(last_call.args[0], "End date (optional)")
        self.assertEqual(last_call.kwargs["default"], "2026-03-01")
        self.assertEqual(
            last_call.kwargs["help_text"],
            "End date must not be before the start date",
        )
        self.mocks["console_err"].print.assert_called_once()

    def test_field_hint_uses_example(self) -> None:
        schema = get_format("upi").schema
        hint = wizard_module._field_hint(schema, schema.get_field("vpa"), ())
        self.assertEqual(hint, "string (required), e.g. user@upi")

    def test_cancel_propagates(self) -> None:
        self.mocks["text"].side_effect = KeyboardInterrupt
        with self.assertRaises(KeyboardInterrupt):
            wizard_module.run_wizard(type_id="text")
        self.mocks["payload"].assert_not_called()


if __name__ == "__main__":
    unittest.main()
