# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer parameter declarations shared by CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

VERSION_ARGUMENT = Annotated[str, typer.Argument(help="Tool version to resolve, for example 0.0.81.")]
ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Directory searched for pyproject.toml and binresolve.toml."),
]
CATALOG_OPTION = Annotated[
    Path | None,
    typer.Option("--catalog", "-c", help="Manifest file used instead of the bundled catalog."),
]
TOOL_OPTION = Annotated[
    str | None,
    typer.Option("--tool", help="Bundled catalog to use when no manifest file is given."),
]
OS_OPTION = Annotated[
    str | None,
    typer.Option("--os", help="Override the detected operating system (e.g. linux, darwin)."),
]
ARCH_OPTION = Annotated[
    str | None,
    typer.Option("--arch", help="Override the detected architecture (e.g. amd64, arm64)."),
]
DEST_OPTION = Annotated[
    Path | None,
    typer.Option("--dest", "-d", help="Directory receiving the installed binary."),
]
NAME_OPTION = Annotated[
    str | None,
    typer.Option("--name", "-n", help="File name for the installed binary."),
]
TIMEOUT_OPTION = Annotated[
    float | None,
    typer.Option("--timeout", help="Network timeout in seconds."),
]
SMOKE_TEST_OPTION = Annotated[
    bool | None,
    typer.Option("--smoke-test/--no-smoke-test", help="Run the installed binary with its smoke-test arguments."),
]
EMOJI_OPTION = Annotated[
    bool | None,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output."),
]
JSON_OPTION = Annotated[
    bool,
    typer.Option("--json", help="Emit the selected manifest record as JSON."),
]
FILTER_VERSION_OPTION = Annotated[
    str | None,
    typer.Option("--version", "-V", help="Only list artifacts for this version."),
]

__all__ = [
    "ARCH_OPTION",
    "CATALOG_OPTION",
    "DEST_OPTION",
    "EMOJI_OPTION",
    "FILTER_VERSION_OPTION",
    "JSON_OPTION",
    "NAME_OPTION",
    "OS_OPTION",
    "ROOT_OPTION",
    "SMOKE_TEST_OPTION",
    "TIMEOUT_OPTION",
    "TOOL_OPTION",
    "VERSION_ARGUMENT",
]
