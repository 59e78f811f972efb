# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``binresolve platform`` command."""

from __future__ import annotations

import typer

from ...errors import BinResolveError
from ..options import ARCH_OPTION, OS_OPTION
from ..shared import build_identifier, exit_with_error


def platform_command(os_name: OS_OPTION = None, arch: ARCH_OPTION = None) -> None:
    """Print the normalised platform key used for catalog lookups."""

    try:
        key = build_identifier(os_name, arch).identify()
    except BinResolveError as exc:
        exit_with_error(exc, use_emoji=False)
    typer.echo(str(key))


__all__ = ["platform_command"]
