# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host platform detection normalised to catalog lookup keys."""

from __future__ import annotations

import logging
import platform
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ..errors import UnsupportedPlatform
from .constants import ARCH_ALIASES, OS_ALIASES, Architecture, OperatingSystem

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlatformKey:
    """Normalised ``(os, arch)`` pair used as a catalog lookup key."""

    os: OperatingSystem
    arch: Architecture

    @classmethod
    def parse(cls, os_name: str, arch_name: str) -> PlatformKey:
        """Return a key built from raw host names.

        Args:
            os_name: Operating system name as reported by a host or a user.
            arch_name: Architecture name as reported by a host or a user.

        Returns:
            PlatformKey: Canonicalised platform key.

        Raises:
            UnsupportedPlatform: If either name is absent from the alias tables.
        """

        return cls(os=normalize_os(os_name), arch=normalize_arch(arch_name))

    def __str__(self) -> str:
        return f"{self.os}/{self.arch}"


def normalize_os(name: str) -> OperatingSystem:
    """Return the canonical operating system for ``name``.

    Args:
        name: Raw operating system name.

    Returns:
        OperatingSystem: Catalog vocabulary value.

    Raises:
        UnsupportedPlatform: If ``name`` is not a recognised alias.
    """

    try:
        return OS_ALIASES[name.strip().lower()]
    except KeyError:
        raise UnsupportedPlatform(f"Unsupported operating system: {name or '<unknown>'}") from None


def normalize_arch(name: str) -> Architecture:
    """Return the canonical architecture for ``name``.

    Args:
        name: Raw machine/architecture name.

    Returns:
        Architecture: Catalog vocabulary value.

    Raises:
        UnsupportedPlatform: If ``name`` is not a recognised alias.
    """

    try:
        return ARCH_ALIASES[name.strip().lower()]
    except KeyError:
        raise UnsupportedPlatform(f"Unsupported architecture: {name or '<unknown>'}") from None


@runtime_checkable
class PlatformIdentifier(Protocol):
    """Service returning the platform key for the current run."""

    def identify(self) -> PlatformKey:
        """Return the normalised platform key for the host."""

        raise NotImplementedError


class HostPlatformIdentifier:
    """Identify the running machine via the ``platform`` module."""

    def __init__(
        self,
        *,
        system: Callable[[], str] | None = None,
        machine: Callable[[], str] | None = None,
    ) -> None:
        """Initialise the identifier with injectable host probes.

        Args:
            system: Callable returning the raw operating system name;
                ``platform.system`` when omitted.
            machine: Callable returning the raw machine architecture;
                ``platform.machine`` when omitted.
        """

        self._system = system or platform.system
        self._machine = machine or platform.machine

    def identify(self) -> PlatformKey:
        """Return the platform key for the host.

        Returns:
            PlatformKey: Normalised key for the running machine.

        Raises:
            UnsupportedPlatform: If the host reports an unknown OS or architecture.
        """

        raw_os = self._system()
        raw_arch = self._machine()
        key = PlatformKey.parse(raw_os, raw_arch)
        LOGGER.debug("identified host %s/%s as %s", raw_os, raw_arch, key)
        return key


@dataclass(frozen=True, slots=True)
class StaticPlatformIdentifier:
    """Simulated host returning a fixed platform key."""

    os_name: str
    arch_name: str

    def identify(self) -> PlatformKey:
        return PlatformKey.parse(self.os_name, self.arch_name)


def identify(identifier: PlatformIdentifier | None = None) -> PlatformKey:
    """Return the platform key reported by ``identifier`` or the host.

    Args:
        identifier: Optional identifier override; defaults to the host.

    Returns:
        PlatformKey: Normalised platform key.
    """

    return (identifier or HostPlatformIdentifier()).identify()


__all__ = [
    "HostPlatformIdentifier",
    "PlatformIdentifier",
    "PlatformKey",
    "StaticPlatformIdentifier",
    "identify",
    "normalize_arch",
    "normalize_os",
]
