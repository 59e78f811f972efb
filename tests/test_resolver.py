# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for exact-match artifact resolution."""

from __future__ import annotations

import pytest

from binresolve.catalog import Catalog, CatalogEntry, load_builtin_catalog
from binresolve.errors import AmbiguousArtifact, NoMatchingArtifact
from binresolve.platform import PlatformKey, StaticPlatformIdentifier
from binresolve.resolver import resolve


def _entry(os_name: str, arch: str, version: str) -> CatalogEntry:
    return CatalogEntry(
        platform=PlatformKey.parse(os_name, arch),
        version=version,
        download_url=f"https://example/{os_name}-{arch}-{version}",
        expected_checksum="0" * 64,
    )


def test_every_builtin_platform_resolves_to_exactly_one_entry() -> None:
    catalog = load_builtin_catalog()

    for entry in catalog:
        host = StaticPlatformIdentifier(str(entry.platform.os), str(entry.platform.arch))
        resolved = resolve(catalog, host.identify(), entry.version)
        assert resolved is entry


def test_missing_version_never_returns_closest_match(linux_amd64: PlatformKey) -> None:
    catalog = Catalog(tool="t", binary_name="t", entries=(_entry("linux", "amd64", "1.0.0"),))

    with pytest.raises(NoMatchingArtifact, match="available versions: 1.0.0") as excinfo:
        resolve(catalog, linux_amd64, "1.0")

    assert excinfo.value.platform == linux_amd64
    assert excinfo.value.version == "1.0"
    assert "version=1.0" in str(excinfo.value)


def test_32bit_arm_host_does_not_receive_arm64_build() -> None:
    catalog = Catalog(tool="t", binary_name="t", entries=(_entry("linux", "arm64", "1.0.0"),))

    with pytest.raises(NoMatchingArtifact, match="published for: linux/arm64"):
        resolve(catalog, PlatformKey.parse("linux", "armv7l"), "1.0.0")


def test_duplicate_entries_fail_closed(linux_amd64: PlatformKey) -> None:
    first = _entry("linux", "amd64", "1.0.0")
    second = _entry("linux", "x86_64", "1.0.0")
    catalog = Catalog(tool="t", binary_name="t", entries=(first, second))

    with pytest.raises(AmbiguousArtifact):
        resolve(catalog, linux_amd64, "1.0.0")


def test_empty_catalog_reports_no_versions(linux_amd64: PlatformKey) -> None:
    with pytest.raises(NoMatchingArtifact, match="<none>"):
        resolve(Catalog(tool="t", binary_name="t"), linux_amd64, "1.0.0")
