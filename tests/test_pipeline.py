# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for the identify → resolve → install pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest
from support import HELLO, FakeTransport

from binresolve import install, resolve_for_host
from binresolve.catalog import Catalog, load_builtin_catalog
from binresolve.errors import ChecksumMismatch, NoMatchingArtifact, UnsupportedPlatform
from binresolve.platform import PlatformKey, StaticPlatformIdentifier


def test_concrete_hello_scenario(tmp_path: Path, hello_catalog: Catalog, hello_transport: FakeTransport) -> None:
    notices: list[str] = []

    target = install(
        "1.0.0",
        tmp_path,
        catalog=hello_catalog,
        identifier=StaticPlatformIdentifier("linux", "amd64"),
        transport=hello_transport,
        notifier=notices.append,
    )

    assert target.path == tmp_path / "hello"
    assert target.path.read_bytes() == HELLO
    assert notices == ["Set HELLO_HOME."]


def test_destination_name_override(tmp_path: Path, hello_catalog: Catalog, hello_transport: FakeTransport) -> None:
    target = install(
        "1.0.0",
        tmp_path,
        catalog=hello_catalog,
        identifier=StaticPlatformIdentifier("linux", "x86_64"),
        transport=hello_transport,
        destination_name="greeter",
    )

    assert target.path == tmp_path / "greeter"


def test_unsupported_host_halts_before_fetch(
    tmp_path: Path,
    hello_catalog: Catalog,
    hello_transport: FakeTransport,
) -> None:
    with pytest.raises(UnsupportedPlatform) as excinfo:
        install(
            "1.0.0",
            tmp_path,
            catalog=hello_catalog,
            identifier=StaticPlatformIdentifier("linux", "sparc64"),
            transport=hello_transport,
        )

    assert excinfo.value.version == "1.0.0"
    assert hello_transport.requests == []
    assert list(tmp_path.iterdir()) == []


def test_missing_platform_reports_platform_and_version(
    tmp_path: Path,
    hello_catalog: Catalog,
    hello_transport: FakeTransport,
) -> None:
    with pytest.raises(NoMatchingArtifact) as excinfo:
        install(
            "1.0.0",
            tmp_path,
            catalog=hello_catalog,
            identifier=StaticPlatformIdentifier("darwin", "arm64"),
            transport=hello_transport,
        )

    message = str(excinfo.value)
    assert "platform=darwin/arm64" in message
    assert "version=1.0.0" in message
    assert hello_transport.requests == []


def test_resolve_for_host_uses_builtin_catalog_by_default() -> None:
    resolution = resolve_for_host("0.0.81", identifier=StaticPlatformIdentifier("Linux", "aarch64"))

    assert resolution.platform == PlatformKey.parse("linux", "arm64")
    assert resolution.entry.download_url.endswith("/v0.0.81/meta-cli_linux_arm64")
    assert resolution.entry.expected_checksum == "0b9b91951e3b1230b87c4050bf76d4fd7c0d01c6eccd561ee0c5f00b0e4e81c6"


def test_builtin_catalog_rejects_bytes_that_are_not_the_release(tmp_path: Path) -> None:
    host = StaticPlatformIdentifier("darwin", "amd64")
    entry = resolve_for_host("0.0.58", identifier=host).entry
    transport = FakeTransport({entry.download_url: b"not the release"})

    with pytest.raises(ChecksumMismatch) as excinfo:
        install("0.0.58", tmp_path, identifier=host, transport=transport)

    assert excinfo.value.expected == "236609f801a5990eba7b76f01d6cdc71aa6aa35dbe8fcecf79a24879c007bb72"
    assert not (tmp_path / "meta").exists()


def test_notice_follows_the_installed_version(
    tmp_path: Path,
    hello_catalog: Catalog,
    hello_transport: FakeTransport,
) -> None:
    catalog = Catalog(
        tool=hello_catalog.tool,
        binary_name=hello_catalog.binary_name,
        entries=hello_catalog.entries,
        version_notices=(("2.0.0", "Only for 2.0.0."),),
    )
    notices: list[str] = []

    install(
        "1.0.0",
        tmp_path,
        catalog=catalog,
        identifier=StaticPlatformIdentifier("linux", "amd64"),
        transport=hello_transport,
        notifier=notices.append,
    )

    assert notices == []
