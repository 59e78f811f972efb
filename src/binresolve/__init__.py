# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Platform-aware binary resolver and installer."""

from __future__ import annotations

from importlib import metadata

from .catalog import Catalog, CatalogEntry, load_builtin_catalog, load_manifest
from .errors import (
    AmbiguousArtifact,
    BinResolveError,
    CatalogIntegrityError,
    ChecksumMismatch,
    ConfigError,
    FetchError,
    InstallError,
    NoMatchingArtifact,
    UnsupportedPlatform,
)
from .installer import InstallTarget
from .pipeline import Resolution, install, resolve_for_host
from .platform import PlatformKey, identify
from .resolver import resolve

__all__ = [
    "AmbiguousArtifact",
    "BinResolveError",
    "Catalog",
    "CatalogEntry",
    "CatalogIntegrityError",
    "ChecksumMismatch",
    "ConfigError",
    "FetchError",
    "InstallError",
    "InstallTarget",
    "NoMatchingArtifact",
    "PlatformKey",
    "Resolution",
    "UnsupportedPlatform",
    "__version__",
    "identify",
    "install",
    "load_builtin_catalog",
    "load_manifest",
    "resolve",
    "resolve_for_host",
]

try:
    __version__ = metadata.version("binresolve")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
