# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fleetbook - Equipment Financial Valuation for Contractor Fleets

Turns raw equipment records into the financial figures a contractor needs
to price jobs and plan replacements: cost basis, COGS/overhead split,
replacement cost, expected resale, remaining life and financing position.

Key Entry Points:
- fleetbook.valuation.compose() - Derived valuation for one record
- fleetbook.financing.* - Amortization state, cashflow and payback
- fleetbook.reporting.* - Fleet dashboard, portfolio cashflow, rollup, exports
- fleetbook.analysis.* - Buy vs rent

Example Usage:
    ```python
    from datetime import date

    from fleetbook.equipment import STANDARD_CATEGORY_DEFAULTS, EquipmentRecord
    from fleetbook.valuation import compose

    record = EquipmentRecord(
        name="CAT 305",
        category="Excavation",
        purchase_date=date(2022, 1, 15),
        purchase_price=100_000.0,
        sales_tax=8_000.0,
        freight_setup=2_000.0,
        cogs_percent=80.0,
    )
    valuation = compose(record, STANDARD_CATEGORY_DEFAULTS, 5_000.0, date(2024, 1, 15))
    print(f"Years left: {valuation.estimated_years_left:.1f}")
    ```
"""

import importlib
import logging

# Library logging: applications configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "core",
    "equipment",
    "financing",
    "reporting",
    "valuation",
]


_LAZY_MODULES = {
    "analysis": "fleetbook.analysis",
    "core": "fleetbook.core",
    "equipment": "fleetbook.equipment",
    "financing": "fleetbook.financing",
    "reporting": "fleetbook.reporting",
    "valuation": "fleetbook.valuation",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'fleetbook' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
