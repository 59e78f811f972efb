# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from typing import Annotated

import typer

from ..logging import enable_verbose_logging
from .commands import register_commands

app = typer.Typer(
    help="Resolve, verify and install pre-built binaries for this platform.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log resolution and install steps to stderr."),
    ] = False,
) -> None:
    """Resolve, verify and install pre-built binaries for this platform."""

    if verbose:
        enable_verbose_logging()


register_commands(app)

__all__ = ["app"]
