# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Test doubles and manifest builders shared across the suite."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

HELLO = b"HELLO"


def sha256_hex(payload: bytes) -> str:
    return hashlib.sha256(payload).hexdigest()


class FakeTransport:
    """Transport serving in-memory payloads and recording requested URLs."""

    def __init__(self, payloads: dict[str, bytes], *, chunk_size: int = 2) -> None:
        self.payloads = payloads
        self.chunk_size = chunk_size
        self.requests: list[str] = []

    def fetch(self, url: str) -> Iterable[bytes]:
        self.requests.append(url)
        payload = self.payloads[url]
        return [payload[i : i + self.chunk_size] for i in range(0, len(payload), self.chunk_size)]


class InterruptedTransport:
    """Transport that yields a prefix of the payload and then aborts."""

    def __init__(self, prefix: bytes, error: Exception) -> None:
        self.prefix = prefix
        self.error = error

    def fetch(self, url: str) -> Iterator[bytes]:
        del url
        yield self.prefix
        raise self.error


def artifact_record(os_name: str, arch: str, version: str, url: str, sha256: str) -> dict[str, str]:
    return {"os": os_name, "arch": arch, "version": version, "url": url, "sha256": sha256}


def manifest_document(artifacts: Sequence[dict[str, str]], **extra: Any) -> dict[str, Any]:
    document: dict[str, Any] = {"tool": "hello", "binaryName": "hello", "artifacts": list(artifacts)}
    document.update(extra)
    return document
