#!/usr/bin/env python3
from __future__ import annotations

import datetime
from pathlib import Path

import click
import typer

from ..api import console


def register(app: typer.Typer) -> None:
    app.command(help="Generate a manpage for the CLI.")(manpage)


def render_manpage(command: click.Command, *, date: datetime.date) -> str:
    ctx = click.Context(command, info_name="quickqr")
    formatter = ctx.make_formatter()
    # Typer's rich help prints to the terminal itself; use click's plain layout.
    click.Command.format_help(command, ctx, formatter)
    help_text = formatter.getvalue().rstrip("\n")
    return "\n".join(
        [
            f'.TH QUICKQR 1 "{date.isoformat()}" "quickqr" "User Commands"',
            ".SH NAME",
            "quickqr \\- build QR code payload strings",
            ".SH SYNOPSIS",
            ".nf",
            help_text,
            ".fi",
            ".SH EXIT STATUS",
            "0 on success, 1 when validate or inspect find a problem, 2 on errors.",
        ]
    )


def manpage(
    ctx: typer.Context,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the manpage to a file (default: stdout).",
    ),
) -> None:
    command = ctx.find_root().command
    man = render_manpage(command, date=datetime.datetime.now(datetime.timezone.utc).date())
    if output:
        output.write_text(man + "\n", encoding="utf-8")
    else:
        console.print(man, markup=False, highlight=False, soft_wrap=True)
