# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Transports delivering artifact bytes to the installer."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Final, Protocol, runtime_checkable
from urllib.parse import urlparse
from urllib.request import url2pathname

import requests

from .errors import FetchError

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Final[float] = 60.0
DEFAULT_CHUNK_SIZE: Final[int] = 1 << 16
HTTP_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https"})
FILE_SCHEME: Final[str] = "file"


@runtime_checkable
class Transport(Protocol):
    """Fetch artifact bytes from a URL as a stream of chunks.

    Implementations own their retry and timeout policy. Any exception they
    raise, including while the returned iterable is consumed, aborts the
    install as a fetch failure.
    """

    def fetch(self, url: str) -> Iterable[bytes]:
        """Return an iterable yielding the artifact contents in order."""

        raise NotImplementedError


class RequestsTransport:
    """Stream artifacts over HTTP(S) using ``requests``."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Initialise the transport.

        Args:
            timeout: Connect/read timeout in seconds for each request.
            session: Optional session reused across requests.
            chunk_size: Preferred response chunk size in bytes.
        """

        self._timeout = timeout
        self._session = session or requests.Session()
        self._chunk_size = chunk_size

    def fetch(self, url: str) -> Iterator[bytes]:
        """Yield the body of ``url`` chunk by chunk.

        Args:
            url: HTTP(S) URL of the artifact.

        Yields:
            bytes: Successive body chunks.

        Raises:
            FetchError: On connection errors, timeouts or non-2xx responses.
        """

        LOGGER.debug("GET %s (timeout=%ss)", url, self._timeout)
        try:
            with self._session.get(url, stream=True, timeout=self._timeout) as response:
                response.raise_for_status()
                for chunk in response.iter_content(chunk_size=self._chunk_size):
                    if chunk:
                        yield chunk
        except requests.RequestException as exc:
            raise FetchError(f"Failed to download {url}: {exc}") from exc


class FileTransport:
    """Read artifacts from ``file://`` URLs or plain filesystem paths."""

    def __init__(self, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._chunk_size = chunk_size

    def fetch(self, url: str) -> Iterator[bytes]:
        path = path_from_url(url)
        LOGGER.debug("reading %s", path)
        try:
            with path.open("rb") as stream:
                for chunk in iter(lambda: stream.read(self._chunk_size), b""):
                    yield chunk
        except OSError as exc:
            raise FetchError(f"Failed to read {path}: {exc.strerror or exc}") from exc


def path_from_url(url: str) -> Path:
    """Return the local path addressed by a ``file://`` URL or bare path."""

    parsed = urlparse(url)
    if parsed.scheme == FILE_SCHEME:
        return Path(url2pathname(parsed.path))
    return Path(url)


def default_transport(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> Transport:
    """Return a transport able to fetch ``url``.

    Args:
        url: Artifact URL whose scheme selects the transport.
        timeout: Timeout applied by network transports.

    Returns:
        Transport: HTTP transport for ``http``/``https`` URLs, file transport
        for ``file`` URLs and scheme-less paths.

    Raises:
        FetchError: If the URL scheme is not supported.
    """

    scheme = urlparse(url).scheme.lower()
    if scheme in HTTP_SCHEMES:
        return RequestsTransport(timeout=timeout)
    # Single-letter schemes are Windows drive letters.
    if scheme in {"", FILE_SCHEME} or len(scheme) == 1:
        return FileTransport()
    raise FetchError(f"Unsupported URL scheme '{scheme}' for {url}")


__all__ = [
    "DEFAULT_TIMEOUT",
    "FileTransport",
    "RequestsTransport",
    "Transport",
    "default_transport",
    "path_from_url",
]
