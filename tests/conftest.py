# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from support import HELLO, FakeTransport, sha256_hex

from binresolve.catalog import Catalog, CatalogEntry
from binresolve.platform import PlatformKey


@pytest.fixture
def hello_digest() -> str:
    return sha256_hex(HELLO)


@pytest.fixture
def linux_amd64() -> PlatformKey:
    return PlatformKey.parse("linux", "amd64")


@pytest.fixture
def hello_entry(linux_amd64: PlatformKey, hello_digest: str) -> CatalogEntry:
    return CatalogEntry(
        platform=linux_amd64,
        version="1.0.0",
        download_url="https://example/bin",
        expected_checksum=hello_digest,
    )


@pytest.fixture
def hello_catalog(hello_entry: CatalogEntry) -> Catalog:
    return Catalog(tool="hello", binary_name="hello", entries=(hello_entry,), notice="Set HELLO_HOME.")


@pytest.fixture
def hello_transport() -> FakeTransport:
    return FakeTransport({"https://example/bin": HELLO})


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing a manifest document into ``tmp_path``."""

    def _write(payload: Any, name: str = "manifest.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
