# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared Rich consoles for CLI output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import TextIO

from rich.console import Console


def detect_tty(stream: TextIO | None = None) -> bool:
    """Return whether ``stream`` (stdout by default) is attached to a terminal."""

    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ConsoleProfile:
    """Rendering options a console is built for.

    Attributes:
        color: Whether ANSI styling was requested.
        emoji: Whether ``:name:`` emoji codes are rendered.
        terminal: Whether stdout is a terminal at lookup time.
    """

    color: bool
    emoji: bool
    terminal: bool

    @classmethod
    def current(cls, *, color: bool, emoji: bool) -> ConsoleProfile:
        return cls(color=color, emoji=emoji, terminal=detect_tty())

    @property
    def styled(self) -> bool:
        """Return whether styling can reach the user; pipes always get plain text."""

        return self.color and self.terminal


class ConsoleRegistry:
    """Hand out one Rich console per :class:`ConsoleProfile`."""

    def __init__(self) -> None:
        self._consoles: dict[ConsoleProfile, Console] = {}

    def console(self, *, color: bool, emoji: bool) -> Console:
        """Return the console matching the requested options and current stdout.

        Args:
            color: Whether coloured output was requested.
            emoji: Whether emoji codes should be rendered.

        Returns:
            Console: Console writing to the current ``sys.stdout``.
        """

        profile = ConsoleProfile.current(color=color, emoji=emoji)
        existing = self._consoles.get(profile)
        if existing is not None:
            return existing
        created = Console(
            color_system="auto" if profile.styled else None,
            force_terminal=profile.terminal,
            no_color=not profile.styled,
            emoji=profile.emoji,
            highlight=False,
            soft_wrap=True,
        )
        self._consoles[profile] = created
        return created


@lru_cache(maxsize=1)
def get_console_registry() -> ConsoleRegistry:
    """Return the process-wide console registry."""

    return ConsoleRegistry()


__all__ = ["ConsoleProfile", "ConsoleRegistry", "detect_tty", "get_console_registry"]
