# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Equipment record - the normalised input to the valuation engine.

The persistence layer owns the record schema; this model is the boundary
where its rows (currency already coerced to numbers, dates already parsed)
are validated before any figure is derived from them.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import Field, model_validator

from ..core.primitives import (
    AllocationTypeEnum,
    EquipmentStatusEnum,
    FinancingTypeEnum,
    Model,
    Percentage,
    PositiveFloat,
    PositiveInt,
    PurchaseConditionEnum,
    StrictlyPositiveFloat,
)


class EquipmentRecord(Model):
    """
    A single piece of fleet equipment as stored by the persistence layer.

    Optional valuation inputs are true ``None`` when unset. A stored ``0`` is
    a real value (e.g. a zero replacement estimate) and is never treated as
    "derive the default".

    Attributes:
        category: Key into the category defaults table
        purchase_price / sales_tax / freight_setup / other_capex: Acquisition charges
        replacement_cost_new: Manual estimate of the cost of a new equivalent
        replacement_cost_as_of_date: Date the manual estimate was valid for
            (defaults to the purchase date when absent)
        useful_life_override: Years; replaces the category default
        expected_resale_override: Currency; used verbatim when present
        cogs_percent: Job-cost share of the cost basis, 0-100
        financing_start_date: Defaults to the purchase date for non-owned equipment

    Examples:
        >>> record = EquipmentRecord(
        ...     name="CTL #3",
        ...     category="Excavation",
        ...     purchase_date=date(2021, 4, 1),
        ...     purchase_price=100_000.0,
        ...     sales_tax=8_000.0,
        ...     cogs_percent=80.0,
        ...     financing_type=FinancingTypeEnum.FINANCED,
        ...     monthly_payment=1_200.0,
        ...     term_months=60,
        ... )
    """

    # Identity / classification
    id: Optional[str] = None
    name: str = ""
    category: str
    purchase_condition: PurchaseConditionEnum = PurchaseConditionEnum.NEW
    allocation_type: AllocationTypeEnum = AllocationTypeEnum.OPERATIONAL
    status: EquipmentStatusEnum = EquipmentStatusEnum.ACTIVE

    # Acquisition cost
    purchase_date: date
    purchase_price: PositiveFloat = 0.0
    sales_tax: PositiveFloat = 0.0
    freight_setup: PositiveFloat = 0.0
    other_capex: PositiveFloat = 0.0

    # Valuation inputs
    replacement_cost_new: Optional[PositiveFloat] = None
    replacement_cost_as_of_date: Optional[date] = None
    useful_life_override: Optional[StrictlyPositiveFloat] = None
    expected_resale_override: Optional[PositiveFloat] = None

    # Allocation
    cogs_percent: Percentage = Field(
        default=100.0, description="Share of the cost basis charged to jobs (0-100)."
    )

    # Financing
    financing_type: FinancingTypeEnum = FinancingTypeEnum.OWNED
    deposit_amount: PositiveFloat = 0.0
    financed_amount: PositiveFloat = 0.0
    monthly_payment: PositiveFloat = 0.0
    term_months: PositiveInt = 0
    buyout_amount: PositiveFloat = 0.0
    financing_start_date: Optional[date] = None

    # Disposal
    sale_date: Optional[date] = None
    sale_price: Optional[PositiveFloat] = None

    @model_validator(mode="before")
    @classmethod
    def force_owner_perk_cogs(cls, data: Any) -> Any:
        """Owner-perk equipment is excluded from job costing: store 0% COGS."""
        if isinstance(data, dict):
            allocation = data.get("allocation_type")
            if allocation in (AllocationTypeEnum.OWNER_PERK, AllocationTypeEnum.OWNER_PERK.value):
                data = {**data, "cogs_percent": 0.0}
        return data

    @property
    def overhead_percent(self) -> float:
        """Stored overhead share, the complement of ``cogs_percent``."""
        return 100.0 - self.cogs_percent

    @property
    def is_financed(self) -> bool:
        """True for financed or leased equipment."""
        return self.financing_type != FinancingTypeEnum.OWNED

    @property
    def effective_financing_start_date(self) -> Optional[date]:
        """Financing start date, falling back to the purchase date when not owned."""
        if not self.is_financed:
            return None
        return self.financing_start_date or self.purchase_date
