# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Typed exceptions raised by the valuation engine.

Every exception carries a machine-readable ``code`` so callers (the UI,
an API layer) can branch on type or code instead of parsing messages.

    FleetbookError (base)
    |
    +-- ConfigurationError (also a ValueError)
        +-- UnknownCategoryError
        +-- InvalidUsefulLifeError

Malformed numeric input is not represented here: it is rejected by the
pydantic record models with a ``ValidationError`` before it reaches the
engine.
"""

from __future__ import annotations

from typing import Optional


class FleetbookError(Exception):
    """Base exception for all fleetbook errors."""

    code: str = "FLEETBOOK_ERROR"


class ConfigurationError(FleetbookError, ValueError):
    """
    Category defaults are missing or unusable for a record.

    Unrecoverable for that record: a silent fallback would misstate every
    downstream financial figure, so the caller must surface it (e.g. as a
    "category not configured" message).
    """

    code: str = "CONFIGURATION_ERROR"

    def __init__(self, message: str, category: Optional[str] = None):
        self.category = category
        super().__init__(message)


class UnknownCategoryError(ConfigurationError):
    """The record references a category with no defaults entry."""

    code: str = "UNKNOWN_CATEGORY"

    def __init__(self, category: str):
        super().__init__(f"No category defaults configured for: {category!r}", category)


class InvalidUsefulLifeError(ConfigurationError):
    """The resolved useful life is zero or negative."""

    code: str = "INVALID_USEFUL_LIFE"

    def __init__(self, category: str, useful_life: float):
        self.useful_life = useful_life
        super().__init__(
            f"Useful life for category {category!r} must be positive, got {useful_life}",
            category,
        )
