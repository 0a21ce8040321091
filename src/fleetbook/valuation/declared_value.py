# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Insurance declared-value suggestion seeded from the valuation."""

from __future__ import annotations

from ..core.primitives import DeclaredValueBasisEnum
from ..equipment.record import EquipmentRecord
from .composer import DerivedValuation


def suggest_declared_value(
    record: EquipmentRecord,
    valuation: DerivedValuation,
    basis: DeclaredValueBasisEnum = DeclaredValueBasisEnum.REPLACEMENT_COST,
) -> float:
    """
    Seed value for an insured asset's declared value.

    REPLACEMENT_COST uses the inflation-adjusted replacement cost (what it
    would take to replace the unit today); PURCHASE_PRICE uses the price
    actually paid. Either is only a starting point the user confirms.
    """
    if basis == DeclaredValueBasisEnum.PURCHASE_PRICE:
        return record.purchase_price
    return valuation.replacement_cost_used
