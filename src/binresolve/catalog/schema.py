# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating manifest documents."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Final

from jsonschema import Draft202012Validator

from ..errors import CatalogIntegrityError

MANIFEST_SCHEMA_NAME: Final[str] = "manifest.schema.json"


@lru_cache(maxsize=1)
def manifest_validator() -> Draft202012Validator:
    """Return the cached validator for manifest documents.

    Returns:
        Draft202012Validator: Validator compiled from the packaged schema.

    Raises:
        CatalogIntegrityError: If the packaged schema cannot be parsed.
    """

    schema_file = resources.files(__package__).joinpath("data", MANIFEST_SCHEMA_NAME)
    try:
        schema: dict[str, Any] = json.loads(schema_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:  # pragma: no cover - packaged data is static
        raise CatalogIntegrityError(f"{MANIFEST_SCHEMA_NAME}: failed to parse JSON schema") from exc
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


__all__ = ["MANIFEST_SCHEMA_NAME", "manifest_validator"]
