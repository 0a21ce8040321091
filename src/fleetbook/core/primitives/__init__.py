# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fleetbook Core Primitives

Essential building blocks for all equipment valuation in Fleetbook.
Handles the immutable model base, constrained types, enums, settings and
calendar arithmetic.
"""

from .dates import (
    add_months,
    add_years_fractional,
    calendar_months_between,
    whole_months_between,
    year_fraction,
)
from .enums import (
    AllocationTypeEnum,
    BuyVsRentRecommendationEnum,
    CashflowStatusEnum,
    DeclaredValueBasisEnum,
    EquipmentStatusEnum,
    FinancingTypeEnum,
    PurchaseConditionEnum,
    ReplacementCostSourceEnum,
    ResaleCurveMethodEnum,
    UsageUnitEnum,
)
from .model import Model
from .settings import (
    DAYS_PER_YEAR,
    BuyVsRentSettings,
    CashflowSettings,
    FleetSettings,
    GlobalSettings,
    InflationSettings,
    ResaleSettings,
)
from .types import (
    FloatBetween0And1,
    Percentage,
    PositiveFloat,
    PositiveInt,
    StrictlyPositiveFloat,
)

__all__ = [
    # Core models
    "Model",
    # Settings
    "GlobalSettings",
    "InflationSettings",
    "ResaleSettings",
    "CashflowSettings",
    "FleetSettings",
    "BuyVsRentSettings",
    "DAYS_PER_YEAR",
    # Enums
    "AllocationTypeEnum",
    "BuyVsRentRecommendationEnum",
    "CashflowStatusEnum",
    "DeclaredValueBasisEnum",
    "EquipmentStatusEnum",
    "FinancingTypeEnum",
    "PurchaseConditionEnum",
    "ReplacementCostSourceEnum",
    "ResaleCurveMethodEnum",
    "UsageUnitEnum",
    # Types
    "PositiveFloat",
    "PositiveInt",
    "FloatBetween0And1",
    "Percentage",
    "StrictlyPositiveFloat",
    # Calendar arithmetic
    "add_months",
    "add_years_fractional",
    "calendar_months_between",
    "whole_months_between",
    "year_fraction",
]
