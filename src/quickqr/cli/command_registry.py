#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    config as config_command,
    encode as encode_command,
    inspect as inspect_command,
    manpage as manpage_command,
    types as types_command,
    validate as validate_command,
    wizard as wizard_command,
)


def register(app: typer.Typer) -> None:
    encode_command.register(app)
    validate_command.register(app)
    types_command.register(app)
    inspect_command.register(app)
    wizard_command.register(app)
    config_command.register(app)
    manpage_command.register(app)
