# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable catalog data structures."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field

from ..platform import PlatformKey

CatalogKey = tuple[PlatformKey, str]


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Single downloadable artifact for one platform and version."""

    platform: PlatformKey
    version: str
    download_url: str
    expected_checksum: str

    @property
    def key(self) -> CatalogKey:
        """Return the ``(platform, version)`` uniqueness key."""

        return (self.platform, self.version)

    def to_record(self) -> dict[str, str]:
        """Return the five-field manifest record describing the entry.

        Returns:
            dict[str, str]: Mapping with ``os``, ``arch``, ``version``, ``url``
            and ``sha256`` keys.
        """

        return {
            "os": str(self.platform.os),
            "arch": str(self.platform.arch),
            "version": self.version,
            "url": self.download_url,
            "sha256": self.expected_checksum,
        }


@dataclass(frozen=True, slots=True)
class Catalog:
    """Ordered collection of artifacts published for a single tool.

    Attributes:
        tool: Name of the published tool.
        binary_name: Canonical file name the artifact is installed under.
        entries: Catalog entries in manifest order.
        notice: Optional informational text shown after installing any version.
        version_notices: (version, text) pairs replacing ``notice`` for that version.
        smoke_test: Arguments passed to the installed binary as a smoke test.
    """

    tool: str
    binary_name: str
    entries: tuple[CatalogEntry, ...] = ()
    notice: str | None = None
    smoke_test: tuple[str, ...] = field(default=())
    version_notices: tuple[tuple[str, str], ...] = ()

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def notice_for(self, version: str) -> str | None:
        """Return the post-install notice shown for ``version``, if any."""

        return dict(self.version_notices).get(version, self.notice)

    def duplicate_keys(self) -> tuple[CatalogKey, ...]:
        """Return every ``(platform, version)`` key that occurs more than once."""

        counts = Counter(entry.key for entry in self.entries)
        return tuple(key for key, count in counts.items() if count > 1)

    def versions(self) -> tuple[str, ...]:
        """Return distinct versions in manifest order."""

        return tuple(dict.fromkeys(entry.version for entry in self.entries))

    def platforms_for(self, version: str) -> tuple[PlatformKey, ...]:
        """Return platforms published for ``version`` in manifest order.

        Args:
            version: Version string to filter on.

        Returns:
            tuple[PlatformKey, ...]: Distinct platform keys for the version.
        """

        return tuple(dict.fromkeys(entry.platform for entry in self.entries if entry.version == version))


__all__ = ["Catalog", "CatalogEntry", "CatalogKey"]
