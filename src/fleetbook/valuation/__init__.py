# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fleetbook Valuation Engine

Turns a raw equipment record plus category defaults into the derived
financial figures shown throughout the product:

1. Cost basis (total_cost_basis)
2. COGS / overhead allocation (split_allocation)
3. Age, remaining life, replacement cost and resale (estimate_time_value)
4. Financing state (fleetbook.financing.amortize)

``compose`` runs all of them and is the single public entry point.
"""

from .allocation import AllocationSplit, effective_cogs_percent, split_allocation
from .composer import DerivedValuation, compose, compose_many, roi_percent
from .cost_basis import additional_purchase_fees, total_cost_basis
from .declared_value import suggest_declared_value
from .resale import ResaleCurve
from .time_value import (
    TimeValueEstimate,
    estimate_time_value,
    inflate,
    replacement_cost,
    resolve_useful_life,
)

__all__ = [
    # Entry point
    "compose",
    "compose_many",
    "DerivedValuation",
    # Components
    "total_cost_basis",
    "additional_purchase_fees",
    "AllocationSplit",
    "split_allocation",
    "effective_cogs_percent",
    "TimeValueEstimate",
    "estimate_time_value",
    "resolve_useful_life",
    "replacement_cost",
    "inflate",
    "ResaleCurve",
    "roi_percent",
    # Consumers
    "suggest_declared_value",
]
