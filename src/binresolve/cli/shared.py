# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (configuration, catalogs, errors)."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, NoReturn

import typer

from ..catalog import Catalog, load_builtin_catalog, load_manifest
from ..config import InstallerConfig, load_config
from ..errors import BinResolveError
from ..logging import fail
from ..platform import HostPlatformIdentifier, PlatformIdentifier


def exit_with_error(exc: BinResolveError, *, use_emoji: bool) -> NoReturn:
    """Report ``exc`` with its failure kind and exit with its mapped status.

    Args:
        exc: Failure raised by the library.
        use_emoji: Whether the failure line may include emoji.

    Raises:
        typer.Exit: Always, carrying ``exc.exit_code``.
    """

    fail(f"{type(exc).__name__}: {exc}", use_emoji=use_emoji)
    raise typer.Exit(code=exc.exit_code) from exc


def load_cli_config(root: Path, overrides: Mapping[str, Any]) -> InstallerConfig:
    """Return the merged configuration, exiting on invalid input."""

    try:
        return load_config(root.resolve(), overrides=overrides)
    except BinResolveError as exc:
        exit_with_error(exc, use_emoji=overrides.get("use_emoji") is not False)


def load_catalog(config: InstallerConfig) -> Catalog:
    """Return the manifest named by ``config`` or the bundled catalog."""

    if config.catalog_path is not None:
        return load_manifest(config.catalog_path)
    return load_builtin_catalog(config.tool)


def build_identifier(os_name: str | None, arch: str | None) -> PlatformIdentifier:
    """Return a host identifier with optional per-field overrides.

    Args:
        os_name: Operating system reported instead of the host's.
        arch: Architecture reported instead of the host's.

    Returns:
        PlatformIdentifier: Identifier combining overrides with host probes.
    """

    return HostPlatformIdentifier(
        system=(lambda: os_name) if os_name else None,
        machine=(lambda: arch) if arch else None,
    )


__all__ = ["build_identifier", "exit_with_error", "load_catalog", "load_cli_config"]
