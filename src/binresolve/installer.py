# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fetch, verify and atomically place a resolved artifact."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Final

from .catalog import CatalogEntry, checksums_match, digest_file
from .errors import BinResolveError, ChecksumMismatch, FetchError, InstallError
from .transport import Transport, default_transport

LOGGER = logging.getLogger(__name__)

Notifier = Callable[[str], None]

_TEMP_SUFFIX: Final[str] = ".partial"
_INSTALL_MODE: Final[int] = stat.S_IRWXU | stat.S_IRGRP | stat.S_IXGRP | stat.S_IROTH | stat.S_IXOTH


@dataclass(frozen=True, slots=True)
class InstallTarget:
    """Result of a successful installation."""

    source_artifact_path: str
    destination_dir: Path
    destination_name: str
    checksum: str

    @property
    def path(self) -> Path:
        """Return the full path of the installed binary."""

        return self.destination_dir / self.destination_name


def install(
    entry: CatalogEntry,
    destination_dir: Path,
    destination_name: str,
    *,
    transport: Transport | None = None,
    notice: str | None = None,
    notifier: Notifier | None = None,
) -> InstallTarget:
    """Install the artifact described by ``entry`` as ``destination_dir/destination_name``.

    The artifact is streamed into a temporary file inside ``destination_dir``,
    hashed, and only renamed over the destination once the digest matches.
    Any failure removes the temporary file and leaves an existing destination
    file untouched.

    Args:
        entry: Resolved catalog entry to install.
        destination_dir: Existing directory receiving the binary.
        destination_name: File name the binary is installed under.
        transport: Transport used to fetch the artifact; chosen from the URL
            scheme when omitted.
        notice: Optional informational text emitted after installation.
        notifier: Callable receiving ``notice``; its failures are logged only.

    Returns:
        InstallTarget: Description of the installed binary.

    Raises:
        FetchError: If the transport fails to deliver the artifact.
        ChecksumMismatch: If the fetched bytes do not match ``entry``.
        InstallError: If the filesystem rejects the write or rename.
    """

    _validate_destination(destination_dir, destination_name)
    active_transport = transport or default_transport(entry.download_url)
    destination = destination_dir / destination_name
    temp_path = _create_temp_file(destination_dir, destination_name)
    placed = False
    try:
        with temp_path.open("wb") as handle:
            _stream_into(handle, _fetch(active_transport, entry.download_url), temp_path)
        actual = digest_file(temp_path)
        if not checksums_match(entry.expected_checksum, actual):
            raise ChecksumMismatch(
                f"Checksum mismatch for {entry.download_url}: expected {entry.expected_checksum}, got {actual}",
                expected=entry.expected_checksum,
                actual=actual,
                platform=entry.platform,
                version=entry.version,
            )
        LOGGER.debug("verified %s sha256=%s", entry.download_url, actual)
        _place(temp_path, destination)
        placed = True
    except BinResolveError as exc:
        raise exc.with_context(platform=entry.platform, version=entry.version)
    except OSError as exc:
        raise InstallError(
            f"Failed to stage {temp_path}: {exc.strerror or exc}",
            platform=entry.platform,
            version=entry.version,
        ) from exc
    finally:
        # Interrupts and non-bytes chunks also land here.
        if not placed:
            _discard(temp_path)

    LOGGER.info("installed %s -> %s", entry.download_url, destination)
    target = InstallTarget(
        source_artifact_path=entry.download_url,
        destination_dir=destination_dir,
        destination_name=destination_name,
        checksum=actual,
    )
    if notice and notifier is not None:
        _notify(notifier, notice)
    return target


def _validate_destination(destination_dir: Path, destination_name: str) -> None:
    if not destination_name or Path(destination_name).name != destination_name:
        raise InstallError(f"Invalid destination name: {destination_name!r}")
    if not destination_dir.is_dir():
        raise InstallError(f"Destination directory does not exist: {destination_dir}")


def _create_temp_file(destination_dir: Path, destination_name: str) -> Path:
    """Create the temp file next to the destination so the rename stays on one filesystem."""

    try:
        fd, name = tempfile.mkstemp(prefix=f".{destination_name}.", suffix=_TEMP_SUFFIX, dir=destination_dir)
    except OSError as exc:
        raise InstallError(f"Cannot write to {destination_dir}: {exc.strerror or exc}") from exc
    os.close(fd)
    return Path(name)


def _fetch(transport: Transport, url: str) -> Iterator[bytes]:
    """Yield chunks from ``transport``, converting any abort into :class:`FetchError`."""

    try:
        chunks: Iterable[bytes] = transport.fetch(url)
        yield from chunks
    except FetchError:
        raise
    except Exception as exc:
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc


def _stream_into(handle: BinaryIO, chunks: Iterator[bytes], temp_path: Path) -> None:
    for chunk in chunks:
        try:
            handle.write(chunk)
        except OSError as exc:
            raise InstallError(f"Failed to write {temp_path}: {exc.strerror or exc}") from exc
    try:
        handle.flush()
        os.fsync(handle.fileno())
    except OSError as exc:
        raise InstallError(f"Failed to flush {temp_path}: {exc.strerror or exc}") from exc


def _place(temp_path: Path, destination: Path) -> None:
    try:
        temp_path.chmod(_INSTALL_MODE)
        os.replace(temp_path, destination)
    except OSError as exc:
        raise InstallError(f"Failed to install {destination}: {exc.strerror or exc}") from exc


def _discard(temp_path: Path) -> None:
    try:
        temp_path.unlink(missing_ok=True)
    except OSError as exc:
        LOGGER.warning("could not remove temporary file %s: %s", temp_path, exc)


def _notify(notifier: Notifier, notice: str) -> None:
    try:
        notifier(notice)
    except Exception:
        LOGGER.warning("post-install notice could not be emitted", exc_info=True)


__all__ = ["InstallTarget", "Notifier", "install"]
