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

import typer

from ..config import load_app_config
from . import command_registry
from .api import configure_ui, console, console_err, stdin_is_terminal
from .core.common import _get_version, _run_cli
from .flows.wizard import run_wizard
from .startup import run_startup

app = typer.Typer(add_completion=False, help="QuickQR payload encoder.")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"quickqr {_get_version()}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        help="Read defaults from this TOML file instead of the user config.",
        rich_help_panel="Config",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Raise errors with a full traceback instead of a one-line message.",
        rich_help_panel="Output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Print only payloads and errors.",
        rich_help_panel="Output",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Render tables and messages without color.",
        rich_help_panel="Output",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Write the default config.toml to the user config directory and exit.",
        is_eager=True,
        rich_help_panel="Config",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Print the installed quickqr version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    _ = version
    try:
        should_exit = run_startup(
            quiet=quiet,
            no_color=no_color,
            debug=debug,
            init_config=init_config,
        )
    except (OSError, RuntimeError, ValueError) as exc:
        console_err.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)
    if should_exit:
        raise typer.Exit()
    try:
        app_config = load_app_config(config)
    except (OSError, ValueError) as exc:
        console_err.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)
    quiet = quiet or app_config.ui.quiet
    if app_config.ui.no_color and not no_color:
        configure_ui(no_color=True)
    ctx.ensure_object(dict)
    ctx.obj.update(
        {
            "config": config,
            "app_config": app_config,
            "debug": debug,
            "quiet": quiet,
        }
    )
    if ctx.invoked_subcommand is None:
        if not stdin_is_terminal():
            console_err.print(
                "[red]Error:[/red] No subcommand provided. "
                "Run `quickqr --help` for available commands."
            )
            raise typer.Exit(code=2)
        _run_cli(
            lambda: run_wizard(quiet=quiet, output_format=app_config.output.format),
            debug=debug,
        )


command_registry.register(app)


def main() -> None:
    app()
