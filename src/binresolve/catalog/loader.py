# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load artifact manifests from JSON documents into validated catalogs."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from importlib import resources
from pathlib import Path
from typing import Any, Final

from ..errors import CatalogIntegrityError, UnsupportedPlatform
from ..platform import PlatformKey
from .models import Catalog, CatalogEntry
from .schema import manifest_validator

LOGGER = logging.getLogger(__name__)

DEFAULT_TOOL: Final[str] = "meta-cli"
_MANIFEST_SUFFIX: Final[str] = ".json"


def load_manifest(path: Path) -> Catalog:
    """Load and validate the manifest stored at ``path``.

    Args:
        path: Filesystem path to a JSON manifest.

    Returns:
        Catalog: Validated catalog built from the manifest.

    Raises:
        CatalogIntegrityError: If the document is missing, unreadable or
            unparsable, fails schema validation, or repeats a
            ``(platform, version)`` key.
    """

    try:
        with path.open("r", encoding="utf-8") as stream:
            payload = json.load(stream)
    except FileNotFoundError as exc:
        raise CatalogIntegrityError(f"{path}: manifest not found") from exc
    except OSError as exc:
        raise CatalogIntegrityError(f"{path}: cannot read manifest: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise CatalogIntegrityError(f"{path}: manifest is not valid UTF-8: {exc.reason}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogIntegrityError(f"{path}: failed to parse manifest JSON: {exc.msg}") from exc
    return parse_manifest(payload, context=str(path), default_tool=path.stem)


def load_builtin_catalog(tool: str = DEFAULT_TOOL) -> Catalog:
    """Return the catalog bundled with the package for ``tool``.

    Args:
        tool: Name of the bundled manifest, without extension.

    Returns:
        Catalog: Validated catalog for the bundled tool.

    Raises:
        CatalogIntegrityError: If no bundled manifest exists for ``tool``.
    """

    resource = resources.files(__package__).joinpath("data", f"{tool}{_MANIFEST_SUFFIX}")
    if not resource.is_file():
        known = ", ".join(builtin_tools()) or "<none>"
        raise CatalogIntegrityError(f"No bundled manifest for '{tool}' (available: {known})")
    payload = json.loads(resource.read_text(encoding="utf-8"))
    return parse_manifest(payload, context=f"builtin:{tool}", default_tool=tool)


def builtin_tools() -> tuple[str, ...]:
    """Return names of the manifests bundled with the package."""

    data_dir = resources.files(__package__).joinpath("data")
    names = (
        entry.name.removesuffix(_MANIFEST_SUFFIX)
        for entry in data_dir.iterdir()
        if entry.name.endswith(_MANIFEST_SUFFIX) and not entry.name.endswith(".schema.json")
    )
    return tuple(sorted(names))


def parse_manifest(payload: Any, *, context: str, default_tool: str = DEFAULT_TOOL) -> Catalog:
    """Validate ``payload`` and convert it into a :class:`Catalog`.

    Both the full document form and a bare list of artifact records are
    accepted. Entry order follows the manifest.

    Args:
        payload: Decoded JSON manifest.
        context: Human-readable origin used in error messages.
        default_tool: Tool name used when the manifest does not declare one.

    Returns:
        Catalog: Validated catalog.

    Raises:
        CatalogIntegrityError: If the payload violates the schema, names an
            unknown platform, or repeats a ``(platform, version)`` key.
    """

    _validate(payload, context=context)
    if isinstance(payload, Mapping):
        records: Sequence[Mapping[str, str]] = payload["artifacts"]
        tool = str(payload["tool"])
        binary_name = str(payload.get("binaryName") or tool)
        notice = payload.get("notice")
        smoke_test = tuple(payload.get("smokeTest", ()))
        version_notices = tuple(payload.get("versionNotices", {}).items())
    else:
        records = payload
        tool = default_tool
        binary_name = default_tool
        notice = None
        smoke_test = ()
        version_notices = ()

    entries = tuple(_entry_from_record(record, index=index, context=context) for index, record in enumerate(records))
    catalog = Catalog(
        tool=tool,
        binary_name=binary_name,
        entries=entries,
        notice=notice,
        smoke_test=smoke_test,
        version_notices=version_notices,
    )
    duplicates = catalog.duplicate_keys()
    if duplicates:
        rendered = ", ".join(f"{platform}@{version}" for platform, version in duplicates)
        raise CatalogIntegrityError(f"{context}: duplicate catalog entries for {rendered}")
    LOGGER.debug("loaded %d artifacts for %s from %s", len(catalog), tool, context)
    return catalog


def _validate(payload: Any, *, context: str) -> None:
    """Raise :class:`CatalogIntegrityError` listing every schema violation."""

    errors = sorted(manifest_validator().iter_errors(payload), key=lambda error: list(error.absolute_path))
    if not errors:
        return
    details = "; ".join(_describe_error(error) for error in errors)
    raise CatalogIntegrityError(f"{context}: manifest failed schema validation: {details}")


def _describe_error(error: Any) -> str:
    location = "/".join(str(part) for part in error.absolute_path) or "<root>"
    if error.context:
        # oneOf failures: report the branch that got furthest into the document.
        best = max(error.context, key=lambda sub: len(sub.absolute_path))
        location = "/".join(str(part) for part in best.absolute_path) or location
        return f"{location}: {best.message}"
    return f"{location}: {error.message}"


def _entry_from_record(record: Mapping[str, str], *, index: int, context: str) -> CatalogEntry:
    try:
        platform = PlatformKey.parse(record["os"], record["arch"])
    except UnsupportedPlatform as exc:
        raise CatalogIntegrityError(f"{context}: artifact #{index}: {exc.message}") from exc
    return CatalogEntry(
        platform=platform,
        version=record["version"],
        download_url=record["url"],
        expected_checksum=record["sha256"].lower(),
    )


__all__ = [
    "DEFAULT_TOOL",
    "builtin_tools",
    "load_builtin_catalog",
    "load_manifest",
    "parse_manifest",
]
