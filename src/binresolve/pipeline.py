# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Identify → resolve → install pipeline exposed to callers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from . import installer
from .catalog import Catalog, CatalogEntry, load_builtin_catalog
from .errors import BinResolveError
from .installer import InstallTarget, Notifier
from .platform import HostPlatformIdentifier, PlatformIdentifier, PlatformKey
from .resolver import resolve
from .transport import DEFAULT_TIMEOUT, Transport, default_transport

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Resolution:
    """Platform identified for the host and the entry selected for it."""

    platform: PlatformKey
    entry: CatalogEntry


def resolve_for_host(
    version: str,
    *,
    catalog: Catalog | None = None,
    identifier: PlatformIdentifier | None = None,
) -> Resolution:
    """Identify the host and select its artifact for ``version``.

    Args:
        version: Tool version to resolve.
        catalog: Catalog to search; the bundled catalog when omitted.
        identifier: Platform identifier; the running host when omitted.

    Returns:
        Resolution: Identified platform and matching catalog entry.

    Raises:
        UnsupportedPlatform: If the host cannot be mapped to a platform key.
        NoMatchingArtifact: If the catalog has no entry for the host.
        AmbiguousArtifact: If the catalog has duplicate entries for the host.
    """

    active_catalog = catalog if catalog is not None else load_builtin_catalog()
    platform: PlatformKey | None = None
    try:
        platform = (identifier or HostPlatformIdentifier()).identify()
        entry = resolve(active_catalog, platform, version)
    except BinResolveError as exc:
        raise exc.with_context(platform=platform, version=version)
    LOGGER.debug("resolved %s %s for %s: %s", active_catalog.tool, version, platform, entry.download_url)
    return Resolution(platform=platform, entry=entry)


def install(
    version: str,
    destination_dir: Path,
    *,
    catalog: Catalog | None = None,
    identifier: PlatformIdentifier | None = None,
    transport: Transport | None = None,
    destination_name: str | None = None,
    notifier: Notifier | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> InstallTarget:
    """Install ``version`` of the catalog's tool for the current host.

    Args:
        version: Tool version to install.
        destination_dir: Existing directory receiving the binary.
        catalog: Catalog to install from; the bundled catalog when omitted.
        identifier: Platform identifier; the running host when omitted.
        transport: Artifact transport; chosen from the URL scheme when omitted.
        destination_name: Installed file name; the catalog's binary name when
            omitted.
        notifier: Callable receiving the catalog's post-install notice.
        timeout: Network timeout for the default transport.

    Returns:
        InstallTarget: Description of the installed binary.

    Raises:
        BinResolveError: The first failure of any stage, annotated with the
            identified platform and the requested version.
    """

    active_catalog = catalog if catalog is not None else load_builtin_catalog()
    resolution = resolve_for_host(version, catalog=active_catalog, identifier=identifier)
    name = destination_name or active_catalog.binary_name
    try:
        active_transport = transport or default_transport(resolution.entry.download_url, timeout=timeout)
        return installer.install(
            resolution.entry,
            destination_dir,
            name,
            transport=active_transport,
            notice=active_catalog.notice_for(version),
            notifier=notifier,
        )
    except BinResolveError as exc:
        raise exc.with_context(platform=resolution.platform, version=version)


__all__ = ["Resolution", "install", "resolve_for_host"]
