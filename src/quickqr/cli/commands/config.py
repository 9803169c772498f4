#!/usr/bin/env python3
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

from __future__ import annotations

import functools

import typer

from ...config import AppConfig, load_app_config, resolve_config_path
from ..api import build_kv_table, console, print_json
from ..core.common import _ctx_value, _resolve_output_format, _run_cli

_CONFIG_HELP = (
    "Show which config file is active and the defaults it sets.\n\n"
    "Create a user config with `quickqr --init-config` and edit it by hand.\n\n"
    "Examples:\n"
    "  quickqr config\n"
    "  quickqr config --print-path\n"
    "  quickqr config --config ./quickqr.toml --json"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def settings_rows(app_config: AppConfig) -> list[tuple[str, str]]:
    """Effective settings as ``section.key`` / TOML literal pairs."""
    return [
        ("output.format", f'"{app_config.output.format}"'),
        ("ui.quiet", _toml_bool(app_config.ui.quiet)),
        ("ui.no_color", _toml_bool(app_config.ui.no_color)),
        ("encode.validate", _toml_bool(app_config.encode.validate)),
    ]


def _toml_bool(value: bool) -> str:
    return "true" if value else "false"


def _run_config(
    *,
    ctx: typer.Context,
    config_value: str | None,
    print_path: bool,
    json_output: bool,
) -> None:
    path = resolve_config_path(config_value)
    if print_path:
        console.print(str(path), markup=False, highlight=False, soft_wrap=True)
        return
    app_config = load_app_config(path)
    if _resolve_output_format(ctx, json_output) == "json":
        print_json(
            {
                "path": str(path),
                "output": {"format": app_config.output.format},
                "ui": {"quiet": app_config.ui.quiet, "no_color": app_config.ui.no_color},
                "encode": {"validate": app_config.encode.validate},
            }
        )
        return
    console.print(build_kv_table(settings_rows(app_config), title=str(path)))


def config(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Show this config file instead of the active one.",
        rich_help_panel="Config",
    ),
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved config path and exit.",
        rich_help_panel="Output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the path and settings as JSON.",
        rich_help_panel="Output",
    ),
) -> None:
    _run_cli(
        functools.partial(
            _run_config,
            ctx=ctx,
            config_value=config or _ctx_value(ctx, "config"),
            print_path=print_path,
            json_output=json_output,
        ),
        debug=bool(_ctx_value(ctx, "debug")),
    )
