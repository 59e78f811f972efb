# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Checksum utilities for artifact contents."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Final

_READ_CHUNK_SIZE: Final[int] = 1 << 16


def digest_file(path: Path) -> str:
    """Calculate the SHA-256 digest of the file stored at ``path``.

    Args:
        path: File whose contents should be hashed.

    Returns:
        str: Lowercase hex-encoded digest.
    """
    hasher = hashlib.sha256()
    with path.open("rb") as stream:
        for chunk in iter(lambda: stream.read(_READ_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def checksums_match(expected: str, actual: str) -> bool:
    """Return ``True`` when two hex digests are equal, ignoring case."""

    return expected.strip().lower() == actual.strip().lower()


__all__ = ["checksums_match", "digest_file"]
