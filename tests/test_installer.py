# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for fetch/verify/place installation."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest
from support import HELLO, FakeTransport, InterruptedTransport

from binresolve.catalog import CatalogEntry
from binresolve.errors import ChecksumMismatch, FetchError, InstallError
from binresolve.installer import install


def _leftovers(directory: Path) -> list[str]:
    return sorted(path.name for path in directory.iterdir() if path.name.endswith(".partial"))


def test_round_trip_install_matches_fixture(
    tmp_path: Path,
    hello_entry: CatalogEntry,
    hello_transport: FakeTransport,
    hello_digest: str,
) -> None:
    target = install(hello_entry, tmp_path, "hello", transport=hello_transport)

    assert target.path == tmp_path / "hello"
    assert target.path.read_bytes() == HELLO
    assert target.checksum == hello_digest
    assert target.source_artifact_path == "https://example/bin"
    assert os.access(target.path, os.X_OK)
    assert hello_transport.requests == ["https://example/bin"]
    assert _leftovers(tmp_path) == []


def test_second_install_overwrites_without_error(
    tmp_path: Path,
    hello_entry: CatalogEntry,
    hello_transport: FakeTransport,
) -> None:
    install(hello_entry, tmp_path, "hello", transport=hello_transport)
    install(hello_entry, tmp_path, "hello", transport=hello_transport)

    assert (tmp_path / "hello").read_bytes() == HELLO
    assert sorted(path.name for path in tmp_path.iterdir()) == ["hello"]


def test_tampered_artifact_is_rejected_and_prior_install_kept(
    tmp_path: Path,
    hello_entry: CatalogEntry,
    hello_transport: FakeTransport,
) -> None:
    install(hello_entry, tmp_path, "hello", transport=hello_transport)
    tampered = FakeTransport({"https://example/bin": b"HELLP"})

    with pytest.raises(ChecksumMismatch) as excinfo:
        install(hello_entry, tmp_path, "hello", transport=tampered)

    assert excinfo.value.expected == hello_entry.expected_checksum
    assert excinfo.value.actual != hello_entry.expected_checksum
    assert excinfo.value.platform == hello_entry.platform
    assert excinfo.value.version == "1.0.0"
    assert (tmp_path / "hello").read_bytes() == HELLO
    assert _leftovers(tmp_path) == []


def test_mismatch_without_prior_install_leaves_nothing(tmp_path: Path, hello_entry: CatalogEntry) -> None:
    with pytest.raises(ChecksumMismatch):
        install(hello_entry, tmp_path, "hello", transport=FakeTransport({"https://example/bin": b"nope"}))

    assert list(tmp_path.iterdir()) == []


def test_interrupted_fetch_keeps_previous_binary(
    tmp_path: Path,
    hello_entry: CatalogEntry,
    hello_transport: FakeTransport,
) -> None:
    install(hello_entry, tmp_path, "hello", transport=hello_transport)

    with pytest.raises(FetchError, match="connection reset"):
        install(hello_entry, tmp_path, "hello", transport=InterruptedTransport(b"HE", ConnectionError("connection reset")))

    assert (tmp_path / "hello").read_bytes() == HELLO
    assert _leftovers(tmp_path) == []


def test_interrupted_rename_never_exposes_partial_file(
    tmp_path: Path,
    hello_entry: CatalogEntry,
    hello_transport: FakeTransport,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _failing_replace(src: str, dst: str) -> None:
        raise OSError(28, "No space left on device")

    monkeypatch.setattr("binresolve.installer.os.replace", _failing_replace)

    with pytest.raises(InstallError, match="No space left on device"):
        install(hello_entry, tmp_path, "hello", transport=hello_transport)

    assert not (tmp_path / "hello").exists()
    assert _leftovers(tmp_path) == []


def test_missing_destination_directory_is_install_error(
    tmp_path: Path,
    hello_entry: CatalogEntry,
    hello_transport: FakeTransport,
) -> None:
    with pytest.raises(InstallError, match="does not exist"):
        install(hello_entry, tmp_path / "missing", "hello", transport=hello_transport)

    assert hello_transport.requests == []


@pytest.mark.parametrize("name", ["", "../escape", "sub/hello"])
def test_destination_name_must_be_a_plain_file_name(
    tmp_path: Path,
    hello_entry: CatalogEntry,
    hello_transport: FakeTransport,
    name: str,
) -> None:
    with pytest.raises(InstallError, match="Invalid destination name"):
        install(hello_entry, tmp_path, name, transport=hello_transport)


def test_notifier_failure_does_not_fail_install(
    tmp_path: Path,
    hello_entry: CatalogEntry,
    hello_transport: FakeTransport,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def _broken_notifier(text: str) -> None:
        raise RuntimeError(f"cannot print {text}")

    with caplog.at_level(logging.WARNING, logger="binresolve.installer"):
        target = install(
            hello_entry,
            tmp_path,
            "hello",
            transport=hello_transport,
            notice="Set HELLO_HOME.",
            notifier=_broken_notifier,
        )

    assert target.path.read_bytes() == HELLO
    assert "post-install notice could not be emitted" in caplog.text


def test_notifier_receives_notice(
    tmp_path: Path,
    hello_entry: CatalogEntry,
    hello_transport: FakeTransport,
) -> None:
    received: list[str] = []

    install(hello_entry, tmp_path, "hello", transport=hello_transport, notice="Set HELLO_HOME.", notifier=received.append)

    assert received == ["Set HELLO_HOME."]


def test_transport_abort_of_any_kind_is_fetch_error(tmp_path: Path, hello_entry: CatalogEntry) -> None:
    class _TimeoutTransport:
        def fetch(self, url: str) -> bytes:
            raise TimeoutError(f"timed out fetching {url}")

    with pytest.raises(FetchError, match="timed out") as excinfo:
        install(hello_entry, tmp_path, "hello", transport=_TimeoutTransport())

    assert excinfo.value.platform == hello_entry.platform
    assert list(tmp_path.iterdir()) == []


def test_keyboard_interrupt_mid_fetch_leaves_no_partial_file(
    tmp_path: Path,
    hello_entry: CatalogEntry,
    hello_transport: FakeTransport,
) -> None:
    install(hello_entry, tmp_path, "hello", transport=hello_transport)

    with pytest.raises(KeyboardInterrupt):
        install(hello_entry, tmp_path, "hello", transport=InterruptedTransport(b"HE", KeyboardInterrupt()))

    assert (tmp_path / "hello").read_bytes() == HELLO
    assert _leftovers(tmp_path) == []


def test_non_bytes_chunks_leave_no_partial_file(tmp_path: Path, hello_entry: CatalogEntry) -> None:
    class _TextTransport:
        def fetch(self, url: str) -> list[str]:
            return ["HELLO"]

    with pytest.raises(TypeError):
        install(hello_entry, tmp_path, "hello", transport=_TextTransport())  # type: ignore[arg-type]

    assert list(tmp_path.iterdir()) == []
