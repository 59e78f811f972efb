# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Normalisation tables mapping host-reported names onto catalog vocabulary."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class OperatingSystem(StrEnum):
    """Operating systems recognised by the catalog."""

    DARWIN = "darwin"
    LINUX = "linux"
    WINDOWS = "windows"
    FREEBSD = "freebsd"


class Architecture(StrEnum):
    """CPU architectures recognised by the catalog (Go-style naming)."""

    AMD64 = "amd64"
    ARM64 = "arm64"
    I386 = "386"
    ARM = "arm"


OS_ALIASES: Final[dict[str, OperatingSystem]] = {
    "darwin": OperatingSystem.DARWIN,
    "macos": OperatingSystem.DARWIN,
    "mac": OperatingSystem.DARWIN,
    "osx": OperatingSystem.DARWIN,
    "linux": OperatingSystem.LINUX,
    "windows": OperatingSystem.WINDOWS,
    "win32": OperatingSystem.WINDOWS,
    "cygwin": OperatingSystem.WINDOWS,
    "msys": OperatingSystem.WINDOWS,
    "freebsd": OperatingSystem.FREEBSD,
}

# 32-bit ARM stays distinct from arm64 so it can never select a 64-bit build.
ARCH_ALIASES: Final[dict[str, Architecture]] = {
    "x86_64": Architecture.AMD64,
    "amd64": Architecture.AMD64,
    "x64": Architecture.AMD64,
    "x86-64": Architecture.AMD64,
    "aarch64": Architecture.ARM64,
    "arm64": Architecture.ARM64,
    "armv8": Architecture.ARM64,
    "i386": Architecture.I386,
    "i486": Architecture.I386,
    "i586": Architecture.I386,
    "i686": Architecture.I386,
    "x86": Architecture.I386,
    "386": Architecture.I386,
    "armv6l": Architecture.ARM,
    "armv7l": Architecture.ARM,
    "armv8l": Architecture.ARM,
    "armv7": Architecture.ARM,
    "arm": Architecture.ARM,
}

__all__ = ["ARCH_ALIASES", "Architecture", "OS_ALIASES", "OperatingSystem"]
