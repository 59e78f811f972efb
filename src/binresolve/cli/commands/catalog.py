# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``binresolve catalog`` command."""

from __future__ import annotations

from pathlib import Path

from rich.table import Table

from ...console import detect_tty, get_console_registry
from ...errors import BinResolveError
from ...logging import warn
from ..options import CATALOG_OPTION, EMOJI_OPTION, FILTER_VERSION_OPTION, ROOT_OPTION, TOOL_OPTION
from ..shared import exit_with_error, load_catalog, load_cli_config


def catalog_command(
    catalog: CATALOG_OPTION = None,
    tool: TOOL_OPTION = None,
    version: FILTER_VERSION_OPTION = None,
    emoji: EMOJI_OPTION = None,
    root: ROOT_OPTION = Path("."),
) -> None:
    """List the artifacts published in the catalog."""

    config = load_cli_config(root, {"catalog_path": catalog, "tool": tool, "use_emoji": emoji})
    try:
        active_catalog = load_catalog(config)
    except BinResolveError as exc:
        exit_with_error(exc, use_emoji=config.use_emoji)

    entries = [entry for entry in active_catalog if version is None or entry.version == version]
    if not entries:
        warn(f"No {active_catalog.tool} artifacts for version {version}", use_emoji=config.use_emoji)
        return

    table = Table(title=f"{active_catalog.tool} (installed as {active_catalog.binary_name})")
    table.add_column("Version")
    table.add_column("OS")
    table.add_column("Arch")
    table.add_column("SHA-256")
    table.add_column("URL", overflow="fold")
    for entry in entries:
        table.add_row(
            entry.version,
            str(entry.platform.os),
            str(entry.platform.arch),
            entry.expected_checksum,
            entry.download_url,
        )
    console = get_console_registry().console(color=detect_tty(), emoji=config.use_emoji)
    console.print(table)


__all__ = ["catalog_command"]
