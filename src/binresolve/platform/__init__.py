# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Platform identification helpers."""

from __future__ import annotations

from .constants import ARCH_ALIASES, OS_ALIASES, Architecture, OperatingSystem
from .identifier import (
    HostPlatformIdentifier,
    PlatformIdentifier,
    PlatformKey,
    StaticPlatformIdentifier,
    identify,
    normalize_arch,
    normalize_os,
)

__all__ = [
    "ARCH_ALIASES",
    "Architecture",
    "HostPlatformIdentifier",
    "OS_ALIASES",
    "OperatingSystem",
    "PlatformIdentifier",
    "PlatformKey",
    "StaticPlatformIdentifier",
    "identify",
    "normalize_arch",
    "normalize_os",
]
