# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``binresolve resolve`` command."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from ...errors import BinResolveError
from ...pipeline import resolve_for_host
from ..options import (
    ARCH_OPTION,
    CATALOG_OPTION,
    EMOJI_OPTION,
    JSON_OPTION,
    OS_OPTION,
    ROOT_OPTION,
    TOOL_OPTION,
    VERSION_ARGUMENT,
)
from ..shared import build_identifier, exit_with_error, load_catalog, load_cli_config


def resolve_command(
    version: VERSION_ARGUMENT,
    catalog: CATALOG_OPTION = None,
    tool: TOOL_OPTION = None,
    os_name: OS_OPTION = None,
    arch: ARCH_OPTION = None,
    as_json: JSON_OPTION = False,
    emoji: EMOJI_OPTION = None,
    root: ROOT_OPTION = Path("."),
) -> None:
    """Show the artifact selected for this platform without installing it."""

    config = load_cli_config(root, {"catalog_path": catalog, "tool": tool, "use_emoji": emoji})
    try:
        resolution = resolve_for_host(
            version,
            catalog=load_catalog(config),
            identifier=build_identifier(os_name, arch),
        )
    except BinResolveError as exc:
        exit_with_error(exc, use_emoji=config.use_emoji)

    record = resolution.entry.to_record()
    if as_json:
        typer.echo(json.dumps(record, indent=2))
        return
    for key, value in record.items():
        typer.echo(f"{key:8} {value}")


__all__ = ["resolve_command"]
