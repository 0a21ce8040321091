# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Decision analysis: buy versus rent."""

from .buy_vs_rent import (
    BuyVsRentInput,
    BuyVsRentResult,
    OwnershipBreakdown,
    calculate_buy_vs_rent,
    optimal_rental_cost,
    ownership_breakdown,
    recommend,
    year_by_year_comparison,
)

__all__ = [
    "BuyVsRentInput",
    "BuyVsRentResult",
    "OwnershipBreakdown",
    "calculate_buy_vs_rent",
    "optimal_rental_cost",
    "ownership_breakdown",
    "recommend",
    "year_by_year_comparison",
]
