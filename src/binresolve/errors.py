# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error taxonomy shared by the resolve, verify and install stages."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .platform import PlatformKey


class BinResolveError(RuntimeError):
    """Base class for every failure surfaced by a single install run.

    Each subclass maps to a distinct process exit code so that host tooling
    can tell platform mismatches apart from transport or integrity failures.
    The platform and version that triggered the failure travel with the
    error and are rendered in its string form.
    """

    exit_code: ClassVar[int] = 1

    def __init__(
        self,
        message: str,
        *,
        platform: PlatformKey | None = None,
        version: str | None = None,
    ) -> None:
        """Initialise the error with optional platform/version context.

        Args:
            message: Human-readable description of the failure.
            platform: Platform key identified for the host, when known.
            version: Tool version requested by the caller, when known.
        """

        super().__init__(message)
        self.message = message
        self.platform = platform
        self.version = version

    def with_context(
        self,
        *,
        platform: PlatformKey | None = None,
        version: str | None = None,
    ) -> BinResolveError:
        """Fill in missing platform/version details and return ``self``.

        Args:
            platform: Platform key to attach when none is recorded yet.
            version: Version string to attach when none is recorded yet.

        Returns:
            BinResolveError: The same error instance, enriched in place.
        """

        if self.platform is None:
            self.platform = platform
        if self.version is None:
            self.version = version
        return self

    def __str__(self) -> str:
        details: list[str] = []
        if self.platform is not None:
            details.append(f"platform={self.platform}")
        if self.version is not None:
            details.append(f"version={self.version}")
        if not details:
            return self.message
        return f"{self.message} ({', '.join(details)})"


class UnsupportedPlatform(BinResolveError):
    """Raised when the host OS or architecture has no canonical name."""

    exit_code = 1


class NoMatchingArtifact(BinResolveError):
    """Raised when the catalog holds no entry for the platform and version."""

    exit_code = 2


class AmbiguousArtifact(BinResolveError):
    """Raised when more than one catalog entry matches a lookup key."""

    exit_code = 2


class FetchError(BinResolveError):
    """Raised when the transport fails to deliver the artifact bytes."""

    exit_code = 3


class ChecksumMismatch(BinResolveError):
    """Raised when fetched bytes do not hash to the expected digest."""

    exit_code = 4

    def __init__(
        self,
        message: str,
        *,
        expected: str,
        actual: str,
        platform: PlatformKey | None = None,
        version: str | None = None,
    ) -> None:
        super().__init__(message, platform=platform, version=version)
        self.expected = expected
        self.actual = actual


class InstallError(BinResolveError):
    """Raised when the verified artifact cannot be placed on disk."""

    exit_code = 5


class CatalogIntegrityError(BinResolveError):
    """Raised when a manifest is malformed or violates key uniqueness."""

    exit_code = 6


class ConfigError(BinResolveError):
    """Raised when configuration input is invalid."""

    exit_code = 6


__all__ = [
    "AmbiguousArtifact",
    "BinResolveError",
    "CatalogIntegrityError",
    "ChecksumMismatch",
    "ConfigError",
    "FetchError",
    "InstallError",
    "NoMatchingArtifact",
    "UnsupportedPlatform",
]
