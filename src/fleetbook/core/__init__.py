# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fleetbook Core Framework

Foundational building blocks shared by every Fleetbook module: primitives
(model base, types, enums, settings, calendar arithmetic) and typed errors.
"""

from . import exceptions, primitives
from .exceptions import (
    ConfigurationError,
    FleetbookError,
    InvalidUsefulLifeError,
    UnknownCategoryError,
)

__all__ = [
    "exceptions",
    "primitives",
    "ConfigurationError",
    "FleetbookError",
    "InvalidUsefulLifeError",
    "UnknownCategoryError",
]
