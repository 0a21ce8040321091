# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class EquipmentStatusEnum(str, Enum):
    """
    Lifecycle status of a piece of equipment.

    Status is a display and filtering concern. The valuation engine computes
    figures for every status; fleet reports only count ACTIVE equipment.
    """

    ACTIVE = "Active"
    SOLD = "Sold"  # sale_date / sale_price populated
    RETIRED = "Retired"
    LOST = "Lost"


class PurchaseConditionEnum(str, Enum):
    """Condition of the equipment when it was acquired."""

    NEW = "new"
    USED = "used"


class AllocationTypeEnum(str, Enum):
    """
    How the cost of a piece of equipment is charged out.

    Attributes:
        OPERATIONAL: Field equipment, split between job cost (COGS) and overhead
        OVERHEAD_ONLY: Shop or office equipment, normally 0% COGS
        OWNER_PERK: Excluded from job costing; COGS is always forced to 0%
    """

    OPERATIONAL = "operational"
    OVERHEAD_ONLY = "overhead_only"
    OWNER_PERK = "owner_perk"


class FinancingTypeEnum(str, Enum):
    """How the equipment was paid for."""

    OWNED = "owned"  # Paid in full, no payment schedule
    FINANCED = "financed"  # Loan; terminal obligation is the payment stream
    LEASED = "leased"  # Lease; terminal obligation includes the buyout


class ReplacementCostSourceEnum(str, Enum):
    """Where the replacement cost figure came from."""

    MANUAL = "manual"  # Explicit replacement_cost_new estimate, inflated forward
    INFLATION_ADJUSTED = "inflation_adjusted"  # Purchase price inflated forward


class ResaleCurveMethodEnum(str, Enum):
    """Shape of the expected-resale depreciation curve."""

    STRAIGHT_LINE = "straight_line"
    DECLINING_BALANCE = "declining_balance"


class CashflowStatusEnum(str, Enum):
    """Whether pricing recovery covers the financing outflow."""

    SURPLUS = "surplus"
    NEUTRAL = "neutral"
    SHORTFALL = "shortfall"


class DeclaredValueBasisEnum(str, Enum):
    """Basis used to seed an insurance declared value."""

    REPLACEMENT_COST = "replacement_cost"
    PURCHASE_PRICE = "purchase_price"


class UsageUnitEnum(str, Enum):
    """Unit equipment usage is budgeted in."""

    HOURS = "Hours"
    DAYS = "Days"


class BuyVsRentRecommendationEnum(str, Enum):
    """Outcome of the buy-vs-rent comparison."""

    BUY = "BUY"
    RENT = "RENT"
    CLOSE_CALL = "CLOSE_CALL"
