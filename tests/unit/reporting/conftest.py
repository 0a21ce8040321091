# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Dict, List

import pytest

from fleetbook.core.primitives import AllocationTypeEnum, EquipmentStatusEnum, FinancingTypeEnum
from fleetbook.equipment import EquipmentRecord
from fleetbook.valuation import DerivedValuation
from tests.conftest import make_financed_record, make_record, value, value_with_cashflow


@pytest.fixture
def fleet_records() -> Dict[str, EquipmentRecord]:
    """
    A small contractor fleet valued at AS_OF (2024-01-15).

    - excavator: financed, $1,200/mo, pays off 2027-01-15
    - excavator_2: owned, bought a year ago
    - truck: leased, $800/mo plus $5,000 buyout, pays off 2024-03-01
    - trailer: owned, about 1.4 years left
    - trimmers: owned handheld tools, about 0.4 years left
    - compressor: shop equipment, overhead only
    - owner_truck: owner perk, about 2.4 years left
    - sold_excavator: sold, excluded from every report
    """
    return {
        "excavator": make_financed_record(
            name="CAT 305", sales_tax=8_000.0, freight_setup=2_000.0, cogs_percent=80.0
        ),
        "excavator_2": make_record(
            name="Kubota KX040", purchase_date=date(2023, 1, 15), purchase_price=50_000.0
        ),
        "truck": make_financed_record(
            name="F-350",
            category="Truck / Vehicle",
            purchase_date=date(2023, 3, 1),
            purchase_price=70_000.0,
            financing_type=FinancingTypeEnum.LEASED,
            monthly_payment=800.0,
            term_months=12,
            buyout_amount=5_000.0,
        ),
        "trailer": make_record(
            name="Dump Trailer",
            category="Trailer",
            purchase_date=date(2015, 6, 1),
            purchase_price=12_000.0,
        ),
        "trimmers": make_record(
            name="Trimmer Set",
            category="Handheld Power Tools",
            purchase_date=date(2021, 6, 1),
            purchase_price=2_000.0,
        ),
        "compressor": make_record(
            name="Shop Compressor",
            category="Shop / Other",
            purchase_date=date(2023, 1, 15),
            purchase_price=8_000.0,
            allocation_type=AllocationTypeEnum.OVERHEAD_ONLY,
            cogs_percent=0.0,
        ),
        "owner_truck": make_record(
            name="Owner Pickup",
            category="Truck / Vehicle",
            purchase_date=date(2021, 6, 1),
            purchase_price=60_000.0,
            allocation_type=AllocationTypeEnum.OWNER_PERK,
        ),
        "sold_excavator": make_record(
            name="Old Bobcat",
            purchase_date=date(2016, 1, 15),
            purchase_price=40_000.0,
            status=EquipmentStatusEnum.SOLD,
            sale_price=15_000.0,
        ),
    }


@pytest.fixture
def fleet(fleet_records) -> Dict[str, DerivedValuation]:
    return {key: value(record) for key, record in fleet_records.items()}


@pytest.fixture
def fleet_valuations(fleet) -> List[DerivedValuation]:
    return list(fleet.values())


@pytest.fixture
def fleet_items(fleet_records):
    """(valuation, cashflow) pairs for the portfolio reports."""
    return [value_with_cashflow(record) for record in fleet_records.values()]
