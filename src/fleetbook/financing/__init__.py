# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fleetbook Financing

Loan and lease schedule position (amortize) and the informational
cashflow view built on top of a composed valuation.
"""

from .amortization import FinancingState, amortize, payment_schedule
from .cashflow import (
    EquipmentCashflow,
    annual_economic_recovery,
    calculate_equipment_cashflow,
    calculate_payback_timeline,
    classify_cashflow,
    effective_deposit,
)

__all__ = [
    "FinancingState",
    "amortize",
    "payment_schedule",
    "EquipmentCashflow",
    "calculate_equipment_cashflow",
    "calculate_payback_timeline",
    "classify_cashflow",
    "effective_deposit",
    "annual_economic_recovery",
]
