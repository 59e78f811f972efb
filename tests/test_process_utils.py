# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for post-install smoke tests."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from binresolve.process_utils import TIMEOUT_RETURNCODE, run_smoke_test


def test_missing_binary_is_reported_not_raised(tmp_path: Path) -> None:
    result = run_smoke_test(tmp_path / "absent", ["--version"])

    assert not result.ok
    assert result.command == (str(tmp_path / "absent"), "--version")


def test_timeout_is_reported_with_conventional_status(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _hang(*args: object, **kwargs: object) -> subprocess.CompletedProcess[str]:
        raise subprocess.TimeoutExpired(cmd="meta", timeout=1.0)

    monkeypatch.setattr("binresolve.process_utils.subprocess.run", _hang)

    result = run_smoke_test(tmp_path / "meta", ["--version"], timeout=1.0)

    assert result.returncode == TIMEOUT_RETURNCODE
    assert "timed out after 1.0s" in result.output
