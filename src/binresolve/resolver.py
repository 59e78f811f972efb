# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exact-match artifact lookup keyed by platform and version."""

from __future__ import annotations

from .catalog import Catalog, CatalogEntry
from .errors import AmbiguousArtifact, NoMatchingArtifact
from .platform import PlatformKey


def resolve(catalog: Catalog, platform: PlatformKey, version: str) -> CatalogEntry:
    """Return the single catalog entry published for ``platform`` and ``version``.

    Matching is exact on both fields. No nearby version or compatible
    architecture is ever substituted.

    Args:
        catalog: Catalog to search.
        platform: Normalised platform key of the target host.
        version: Tool version requested by the caller.

    Returns:
        CatalogEntry: The unique matching entry.

    Raises:
        NoMatchingArtifact: If no entry matches both platform and version.
        AmbiguousArtifact: If several entries match; the catalog is corrupt
            and no entry is chosen.
    """

    matches = [entry for entry in catalog if entry.platform == platform and entry.version == version]
    if len(matches) == 1:
        return matches[0]
    if matches:
        raise AmbiguousArtifact(
            f"{len(matches)} {catalog.tool} artifacts match the same key; refusing to choose one",
            platform=platform,
            version=version,
        )
    raise NoMatchingArtifact(_describe_miss(catalog, version), platform=platform, version=version)


def _describe_miss(catalog: Catalog, version: str) -> str:
    published = catalog.platforms_for(version)
    if published:
        available = ", ".join(str(key) for key in published)
        return f"No {catalog.tool} artifact for this platform (published for: {available})"
    versions = ", ".join(catalog.versions()) or "<none>"
    return f"No {catalog.tool} artifact for this version (available versions: {versions})"


__all__ = ["resolve"]
