# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Valuation Composer - the public entry point of the valuation engine.

``compose`` turns one equipment record into the complete set of derived
financial figures used by every screen: cost basis, COGS/overhead split,
remaining life, replacement cost, expected resale and financing state.

The result is recomputed on every call and never cached; identical inputs
always produce identical output.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Mapping, Optional

from ..core.primitives import (
    AllocationTypeEnum,
    EquipmentStatusEnum,
    FinancingTypeEnum,
    GlobalSettings,
    Model,
    ReplacementCostSourceEnum,
)
from ..equipment.categories import CategoryDefaultsTable
from ..equipment.record import EquipmentRecord
from ..financing.amortization import FinancingState, amortize
from .allocation import split_allocation
from .cost_basis import additional_purchase_fees, total_cost_basis
from .time_value import estimate_time_value

logger = logging.getLogger(__name__)


class DerivedValuation(Model):
    """
    Complete derived view of one piece of equipment as of a date.

    Never persisted. Carries the identifying fields callers group and filter
    on (name, category, status, allocation and financing type) so reports
    can work from valuations alone.
    """

    # Identity
    equipment_id: Optional[str] = None
    name: str = ""
    category: str
    status: EquipmentStatusEnum
    allocation_type: AllocationTypeEnum
    as_of: date

    # Cost basis and allocation
    purchase_price: float
    additional_purchase_fees: float
    attachment_total: float
    total_cost_basis: float
    cogs_allocated_cost: float
    overhead_allocated_cost: float
    cogs_percent: float
    overhead_percent: float

    # Useful life
    useful_life_used: float
    age_years: float
    estimated_years_left: float
    life_consumed_fraction: float
    end_of_life_date: date

    # Replacement and resale
    replacement_cost_used: float
    replacement_cost_source: ReplacementCostSourceEnum
    inflation_years: float
    default_resale_percent: float
    expected_resale_default: float
    expected_resale_used: float

    # Disposal
    roi_percent: Optional[float] = None

    # Financing
    financing_type: FinancingTypeEnum
    monthly_payment: float
    term_months: int
    buyout_amount: float
    deposit_amount: float
    financed_amount: float
    financing: FinancingState

    @property
    def is_active(self) -> bool:
        """True for equipment still in the fleet."""
        return self.status == EquipmentStatusEnum.ACTIVE


def roi_percent(record: EquipmentRecord, cost_basis: float) -> Optional[float]:
    """Return on a sold item as a percentage of its cost basis, else None."""
    if record.status != EquipmentStatusEnum.SOLD or record.sale_price is None:
        return None
    if cost_basis == 0:
        return None
    return (record.sale_price - cost_basis) / cost_basis * 100.0


def compose(
    record: EquipmentRecord,
    category_defaults: CategoryDefaultsTable,
    attachment_total: float,
    as_of: date,
    settings: Optional[GlobalSettings] = None,
) -> DerivedValuation:
    """
    Derive every financial figure for ``record`` as of ``as_of``.

    Args:
        record: Validated equipment record
        category_defaults: Table holding an entry for the record's category
        attachment_total: Declared value of linked attachments, added to the cost basis
        as_of: Date the valuation is computed for; never read from a clock
        settings: Engine settings, defaults to ``GlobalSettings()``

    Returns:
        DerivedValuation with cost, allocation, life, replacement, resale
        and financing figures

    Raises:
        ConfigurationError: If the category has no defaults entry or its
            useful life is not positive. Malformed numbers are never rejected here.

    Example:
        >>> valuation = compose(record, STANDARD_CATEGORY_DEFAULTS, 5_000.0, date(2024, 6, 1))
        >>> valuation.total_cost_basis
        115000.0
    """
    settings = settings or GlobalSettings()
    category_default = category_defaults.lookup(record.category)

    basis = total_cost_basis(record, attachment_total)
    split = split_allocation(basis, record.cogs_percent, record.allocation_type)
    time_value = estimate_time_value(record, category_default, as_of, settings)
    financing = amortize(record, as_of)

    logger.debug(
        f"Composed valuation for {record.name or record.category!r} as of {as_of}: "
        f"basis=${basis:,.0f} cogs=${split.cogs_allocated_cost:,.0f} "
        f"debt=${financing.outstanding_debt:,.0f}"
    )

    return DerivedValuation(
        equipment_id=record.id,
        name=record.name,
        category=record.category,
        status=record.status,
        allocation_type=record.allocation_type,
        as_of=as_of,
        purchase_price=record.purchase_price,
        additional_purchase_fees=additional_purchase_fees(record),
        attachment_total=attachment_total,
        total_cost_basis=basis,
        **split.model_dump(),
        **time_value.model_dump(),
        roi_percent=roi_percent(record, basis),
        financing_type=record.financing_type,
        monthly_payment=record.monthly_payment,
        term_months=record.term_months,
        buyout_amount=record.buyout_amount,
        deposit_amount=record.deposit_amount,
        financed_amount=record.financed_amount,
        financing=financing,
    )


def compose_many(
    records: Iterable[EquipmentRecord],
    category_defaults: CategoryDefaultsTable,
    as_of: date,
    attachment_totals: Optional[Mapping[str, float]] = None,
    settings: Optional[GlobalSettings] = None,
) -> List[DerivedValuation]:
    """
    Compose valuations for many records, preserving input order.

    ``attachment_totals`` maps record ``id`` to its attachment total;
    records without an entry (or without an id) use 0. The first record
    with an unconfigured category raises ConfigurationError.
    """
    attachment_totals = attachment_totals or {}
    return [
        compose(
            record,
            category_defaults,
            attachment_totals.get(record.id, 0.0) if record.id is not None else 0.0,
            as_of,
            settings,
        )
        for record in records
    ]
