# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (defaults, TOML, pyproject, environment)."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import ValidationError

from ..errors import ConfigError
from .models import InstallerConfig

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
CONFIG_FILENAME: Final[str] = "binresolve.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "binresolve"
ENV_PREFIX: Final[str] = "BINRESOLVE_"

# Environment variable suffix -> configuration field.
ENV_FIELDS: Final[dict[str, str]] = {
    "CATALOG": "catalog_path",
    "TOOL": "tool",
    "DEST": "destination_dir",
    "NAME": "destination_name",
    "TIMEOUT": "timeout",
    "SMOKE_TEST": "smoke_test",
    "EMOJI": "use_emoji",
}


class ConfigSource(Protocol):
    """Source of a configuration fragment."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the fragment contributed by this source."""

        raise NotImplementedError


def _normalise_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in data.items()}


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return InstallerConfig().to_dict()


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self._path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        data = self._read()
        return self._anchor_paths(_normalise_keys(data))

    def _read(self) -> Mapping[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("rb") as handle:
                return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{self._path}: invalid TOML: {exc}") from exc

    def _anchor_paths(self, data: dict[str, Any]) -> dict[str, Any]:
        """Resolve relative path settings against the document's directory."""

        for key in ("catalog_path", "destination_dir"):
            value = data.get(key)
            if isinstance(value, str) and not value.startswith("~") and not Path(value).is_absolute():
                data[key] = str(self._path.parent / value)
        return data


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.binresolve]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = self._read()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return self._anchor_paths(_normalise_keys(section))


class EnvConfigSource:
    """Read ``BINRESOLVE_*`` environment variables."""

    name = "environment"

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = os.environ if env is None else env

    def load(self) -> Mapping[str, Any]:
        fragment: dict[str, Any] = {}
        for suffix, field in ENV_FIELDS.items():
            value = self._env.get(f"{ENV_PREFIX}{suffix}")
            if value is not None and value != "":
                fragment[field] = value
        return fragment


def default_sources(root: Path, env: Mapping[str, str] | None = None) -> list[ConfigSource]:
    """Return configuration sources for ``root`` in increasing precedence."""

    return [
        DefaultConfigSource(),
        PyProjectConfigSource(root / PYPROJECT_FILENAME),
        TomlConfigSource(root / CONFIG_FILENAME),
        EnvConfigSource(env),
    ]


def load_config(
    root: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
    sources: Sequence[ConfigSource] | None = None,
) -> InstallerConfig:
    """Merge every configuration source and validate the result.

    Args:
        root: Directory searched for ``pyproject.toml`` and ``binresolve.toml``.
        env: Environment mapping; ``os.environ`` when omitted.
        overrides: Highest-precedence values, typically CLI options. ``None``
            values are ignored.
        sources: Explicit source list replacing the defaults.

    Returns:
        InstallerConfig: Validated configuration.

    Raises:
        ConfigError: If a source is unreadable or the merged values are invalid.
    """

    active_sources = sources if sources is not None else default_sources(root or Path.cwd(), env)
    merged: dict[str, Any] = {}
    for source in active_sources:
        merged.update(source.load())
    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return InstallerConfig.model_validate(merged)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from exc


__all__ = [
    "CONFIG_FILENAME",
    "ConfigSource",
    "DefaultConfigSource",
    "ENV_PREFIX",
    "EnvConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
    "load_config",
]
