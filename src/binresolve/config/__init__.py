# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration loading for installer runs."""

from __future__ import annotations

from .models import DEFAULT_DESTINATION_DIR, InstallerConfig
from .sources import CONFIG_FILENAME, ENV_PREFIX, load_config

__all__ = ["CONFIG_FILENAME", "DEFAULT_DESTINATION_DIR", "ENV_PREFIX", "InstallerConfig", "load_config"]
