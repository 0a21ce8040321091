# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Fleetbook testing.

Factories build valid equipment records with only the fields a test cares
about. Every date-dependent test injects a fixed as-of date; nothing reads
the clock.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from fleetbook.core.primitives import FinancingTypeEnum, GlobalSettings
from fleetbook.equipment import STANDARD_CATEGORY_DEFAULTS, EquipmentRecord
from fleetbook.financing import EquipmentCashflow, calculate_equipment_cashflow
from fleetbook.valuation import DerivedValuation, compose

AS_OF = date(2024, 1, 15)


def make_record(
    category: str = "Excavation",
    purchase_date: date = date(2022, 1, 15),
    purchase_price: float = 100_000.0,
    **overrides,
) -> EquipmentRecord:
    """
    Create an owned, active, operational record for testing.

    Example:
        >>> record = make_record(sales_tax=8_000.0, cogs_percent=80.0)
        >>> record.category
        'Excavation'
    """
    return EquipmentRecord(
        category=category,
        purchase_date=purchase_date,
        purchase_price=purchase_price,
        **overrides,
    )


def make_financed_record(
    monthly_payment: float = 1_200.0,
    term_months: int = 60,
    financing_type: FinancingTypeEnum = FinancingTypeEnum.FINANCED,
    **overrides,
) -> EquipmentRecord:
    """Create a financed (or leased) record starting on its purchase date."""
    return make_record(
        financing_type=financing_type,
        monthly_payment=monthly_payment,
        term_months=term_months,
        **overrides,
    )


def value(
    record: EquipmentRecord,
    as_of: date = AS_OF,
    attachment_total: float = 0.0,
    settings: Optional[GlobalSettings] = None,
) -> DerivedValuation:
    """Compose a record against the standard category table."""
    return compose(record, STANDARD_CATEGORY_DEFAULTS, attachment_total, as_of, settings)


def value_with_cashflow(
    record: EquipmentRecord, as_of: date = AS_OF
) -> tuple[DerivedValuation, EquipmentCashflow]:
    """(valuation, cashflow) pair as consumed by the portfolio reports."""
    valuation = value(record, as_of)
    return valuation, calculate_equipment_cashflow(valuation)


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def worked_example_record() -> EquipmentRecord:
    """
    The reference excavator: $100k + $8k tax + $2k freight, 80% COGS,
    financed at $1,200/month for 60 months, purchased two years before AS_OF.
    """
    return make_financed_record(
        name="CAT 305",
        sales_tax=8_000.0,
        freight_setup=2_000.0,
        cogs_percent=80.0,
    )


@pytest.fixture
def worked_example_valuation(worked_example_record) -> DerivedValuation:
    """Reference excavator valued with $5k of attachments."""
    return value(worked_example_record, attachment_total=5_000.0)
