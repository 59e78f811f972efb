# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console status lines for the CLI and the ``--verbose`` debug stream."""

from __future__ import annotations

import logging
import sys
from enum import StrEnum
from typing import Final

from rich.rule import Rule
from rich.text import Text

from .console import detect_tty, get_console_registry

PACKAGE_LOGGER: Final[str] = "binresolve"
_VERBOSE_HANDLER_FLAG: Final[str] = "_binresolve_verbose_configured"


class Tone(StrEnum):
    """Kinds of status line, each with its own marker and colour."""

    INFO = "info"
    OK = "ok"
    WARN = "warn"
    FAIL = "fail"


_MARKERS: Final[dict[Tone, tuple[str, str]]] = {
    Tone.INFO: ("ℹ️ ", "cyan"),
    Tone.OK: ("✅ ", "green"),
    Tone.WARN: ("⚠️ ", "yellow"),
    Tone.FAIL: ("❌ ", "red"),
}


def report(tone: Tone, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print a single status line.

    Args:
        tone: Kind of status line; selects the emoji marker and colour.
        msg: Text of the line.
        use_emoji: Whether the line starts with the tone's emoji.
        use_color: Colour override; follows TTY detection when ``None``.
    """

    marker, colour = _MARKERS[tone]
    styled = detect_tty() if use_color is None else use_color
    line = Text(f"{marker}{msg}" if use_emoji else msg)
    if styled:
        line.stylize(colour)
    get_console_registry().console(color=styled, emoji=use_emoji).print(line)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    report(Tone.INFO, msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    report(Tone.OK, msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    report(Tone.WARN, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    report(Tone.FAIL, msg, use_emoji=use_emoji, use_color=use_color)


def section(title: str, *, use_color: bool) -> None:
    """Separate a block of output, such as a post-install notice, under ``title``."""

    console = get_console_registry().console(color=use_color, emoji=False)
    if not use_color:
        console.print(Text(f"\n--- {title} ---"))
        return
    console.print()
    console.print(Rule(title, style="dim"))


def enable_verbose_logging() -> None:
    """Stream debug records from the package loggers to stderr."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    if getattr(logger, _VERBOSE_HANDLER_FLAG, False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, _VERBOSE_HANDLER_FLAG, True)


__all__ = ["Tone", "enable_verbose_logging", "fail", "info", "ok", "report", "section", "warn"]
