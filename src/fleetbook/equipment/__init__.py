# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fleetbook Equipment Inputs

The equipment record read from the persistence layer and the category
defaults table supplied by configuration.
"""

from .categories import STANDARD_CATEGORY_DEFAULTS, CategoryDefaults, CategoryDefaultsTable
from .record import EquipmentRecord

__all__ = [
    "EquipmentRecord",
    "CategoryDefaults",
    "CategoryDefaultsTable",
    "STANDARD_CATEGORY_DEFAULTS",
]
