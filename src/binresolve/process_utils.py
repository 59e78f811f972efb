# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

# Bandit: subprocess usage is intentional; commands are argument lists built
# from the installed binary path and catalog-provided arguments.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

SMOKE_TEST_TIMEOUT: Final[float] = 30.0
TIMEOUT_RETURNCODE: Final[int] = 124


@dataclass(frozen=True, slots=True)
class SmokeTestResult:
    """Outcome of running an installed binary with its smoke-test arguments."""

    command: tuple[str, ...]
    returncode: int
    output: str

    @property
    def ok(self) -> bool:
        """Return ``True`` when the binary exited successfully."""

        return self.returncode == 0


def run_smoke_test(
    binary: Path,
    args: Sequence[str],
    *,
    timeout: float = SMOKE_TEST_TIMEOUT,
) -> SmokeTestResult:
    """Execute ``binary`` with ``args`` and capture its combined output.

    Args:
        binary: Installed executable.
        args: Arguments such as ``("--version",)``.
        timeout: Seconds before the process is abandoned.

    Returns:
        SmokeTestResult: Exit status and output of the run. Launch failures
        and timeouts are reported as non-zero results rather than raised.
    """

    command = (str(binary), *args)
    try:
        completed = subprocess.run(  # nosec B603
            command,
            check=False,
            capture_output=True,
            text=True,
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired:
        return SmokeTestResult(command, TIMEOUT_RETURNCODE, f"Command timed out after {timeout:.1f}s")
    except OSError as exc:
        return SmokeTestResult(command, exc.errno or 1, str(exc))
    output = (completed.stdout or "") + (completed.stderr or "")
    return SmokeTestResult(command, completed.returncode, output.strip())


__all__ = ["SmokeTestResult", "run_smoke_test"]
