# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for installer runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..catalog import DEFAULT_TOOL
from ..transport import DEFAULT_TIMEOUT

DEFAULT_DESTINATION_DIR: Final[Path] = Path("~/.local/bin")


class InstallerConfig(BaseModel):
    """Validated settings controlling where artifacts come from and land.

    Attributes:
        catalog_path: Manifest file overriding the bundled catalog.
        tool: Bundled catalog to use when ``catalog_path`` is unset.
        destination_dir: Directory receiving installed binaries.
        destination_name: Installed file name; the catalog's binary name when unset.
        timeout: Network timeout in seconds handed to the transport.
        smoke_test: Whether to run the catalog's smoke test after installing.
        use_emoji: Whether console output may include emoji.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, validate_default=True)

    catalog_path: Path | None = None
    tool: str = DEFAULT_TOOL
    destination_dir: Path = DEFAULT_DESTINATION_DIR
    destination_name: str | None = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    smoke_test: bool = True
    use_emoji: bool = True

    @field_validator("catalog_path", "destination_dir", mode="after")
    @classmethod
    def _expand_user(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None

    @field_validator("destination_name", mode="after")
    @classmethod
    def _plain_file_name(cls, value: str | None) -> str | None:
        if value is not None and (not value or Path(value).name != value):
            raise ValueError("destination_name must be a bare file name")
        return value

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a plain mapping."""

        return self.model_dump()


__all__ = ["DEFAULT_DESTINATION_DIR", "InstallerConfig"]
