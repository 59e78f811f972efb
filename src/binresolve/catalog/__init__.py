# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Artifact catalog models, manifest loading and checksum helpers."""

from __future__ import annotations

from .checksum import checksums_match, digest_file
from .loader import DEFAULT_TOOL, builtin_tools, load_builtin_catalog, load_manifest, parse_manifest
from .models import Catalog, CatalogEntry, CatalogKey

__all__ = [
    "Catalog",
    "CatalogEntry",
    "CatalogKey",
    "DEFAULT_TOOL",
    "builtin_tools",
    "checksums_match",
    "digest_file",
    "load_builtin_catalog",
    "load_manifest",
    "parse_manifest",
]
