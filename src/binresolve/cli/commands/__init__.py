# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from .catalog import catalog_command
from .install import install_command
from .platform import platform_command
from .resolve import resolve_command

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register the built-in commands on ``app``.

    Args:
        app: Typer application receiving command registrations.
    """

    app.command(name="install")(install_command)
    app.command(name="resolve")(resolve_command)
    app.command(name="platform")(platform_command)
    app.command(name="catalog")(catalog_command)
