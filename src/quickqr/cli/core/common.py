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

import importlib.metadata
from collections.abc import Callable
from typing import Any

import typer
from rich.traceback import install as install_rich_traceback

from ...config import AppConfig, load_app_config
from ...core.errors import ValidationError
from ..api import build_field_error_table, console_err


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except ValidationError as exc:
        if debug:
            raise
        console_err.print(f"[red]Error:[/red] invalid {exc.type_id} data")
        console_err.print(build_field_error_table(exc.errors))
        raise typer.Exit(code=2)
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    if ctx.obj is None:
        return None
    return ctx.obj.get(key)


def _ctx_config(ctx: typer.Context) -> AppConfig:
    """Config loaded by the root callback, or loaded on demand when absent."""
    app_config = _ctx_value(ctx, "app_config")
    if isinstance(app_config, AppConfig):
        return app_config
    return load_app_config(_ctx_value(ctx, "config"))


def _resolve_output_format(ctx: typer.Context, json_output: bool) -> str:
    if json_output:
        return "json"
    return _ctx_config(ctx).output.format


def _get_version() -> str:
    try:
        return importlib.metadata.version("quickqr")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
