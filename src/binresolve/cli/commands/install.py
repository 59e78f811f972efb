# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``binresolve install`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ... import pipeline
from ...errors import BinResolveError
from ...installer import InstallTarget
from ...logging import info, ok, section, warn
from ...process_utils import run_smoke_test
from ..options import (
    ARCH_OPTION,
    CATALOG_OPTION,
    DEST_OPTION,
    EMOJI_OPTION,
    NAME_OPTION,
    OS_OPTION,
    ROOT_OPTION,
    SMOKE_TEST_OPTION,
    TIMEOUT_OPTION,
    TOOL_OPTION,
    VERSION_ARGUMENT,
)
from ..shared import build_identifier, exit_with_error, load_catalog, load_cli_config


def install_command(
    version: VERSION_ARGUMENT,
    dest: DEST_OPTION = None,
    name: NAME_OPTION = None,
    catalog: CATALOG_OPTION = None,
    tool: TOOL_OPTION = None,
    os_name: OS_OPTION = None,
    arch: ARCH_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    smoke_test: SMOKE_TEST_OPTION = None,
    emoji: EMOJI_OPTION = None,
    root: ROOT_OPTION = Path("."),
) -> None:
    """Download, verify and install the binary published for this platform."""

    config = load_cli_config(
        root,
        {
            "destination_dir": dest,
            "destination_name": name,
            "catalog_path": catalog,
            "tool": tool,
            "timeout": timeout,
            "smoke_test": smoke_test,
            "use_emoji": emoji,
        },
    )
    use_emoji = config.use_emoji

    def _show_notice(text: str) -> None:
        section("Notice", use_color=False)
        typer.echo(text.rstrip("\n"))

    try:
        active_catalog = load_catalog(config)
        info(f"Installing {active_catalog.tool} {version} into {config.destination_dir}", use_emoji=use_emoji)
        target = pipeline.install(
            version,
            config.destination_dir,
            catalog=active_catalog,
            identifier=build_identifier(os_name, arch),
            destination_name=config.destination_name,
            notifier=_show_notice,
            timeout=config.timeout,
        )
    except BinResolveError as exc:
        exit_with_error(exc, use_emoji=use_emoji)

    ok(f"Installed {target.path} (sha256 {target.checksum})", use_emoji=use_emoji)
    if config.smoke_test and active_catalog.smoke_test:
        _report_smoke_test(target, active_catalog.smoke_test, use_emoji=use_emoji)


def _report_smoke_test(target: InstallTarget, args: tuple[str, ...], *, use_emoji: bool) -> None:
    result = run_smoke_test(target.path, args)
    rendered = " ".join((target.destination_name, *args))
    if result.ok:
        ok(f"{rendered}: {result.output or 'ok'}", use_emoji=use_emoji)
    else:
        warn(f"{rendered} exited with status {result.returncode}: {result.output}", use_emoji=use_emoji)


__all__ = ["install_command"]
