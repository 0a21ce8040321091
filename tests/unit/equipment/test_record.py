# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the equipment record model.

The record is the validation boundary: malformed numbers are rejected here
so the engine never sees them.
"""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from fleetbook.core.primitives import AllocationTypeEnum, FinancingTypeEnum
from fleetbook.equipment import EquipmentRecord
from tests.conftest import make_financed_record, make_record


class TestRecordValidation:
    """Test boundary validation of stored values."""

    def test_minimal_record_defaults(self):
        """Test that only category and purchase date are required."""
        record = EquipmentRecord(category="Trailer", purchase_date=date(2020, 5, 1))
        assert record.purchase_price == 0.0
        assert record.cogs_percent == 100.0
        assert record.financing_type == FinancingTypeEnum.OWNED
        assert record.replacement_cost_new is None
        assert record.useful_life_override is None

    def test_negative_price_rejected(self):
        """Test that negative currency is rejected rather than clamped."""
        with pytest.raises(ValidationError):
            make_record(purchase_price=-1.0)

    def test_cogs_percent_out_of_range_rejected(self):
        """Test that COGS above 100% is rejected."""
        with pytest.raises(ValidationError):
            make_record(cogs_percent=120.0)

    def test_zero_useful_life_override_rejected(self):
        """Test that a non-positive life override is rejected."""
        with pytest.raises(ValidationError):
            make_record(useful_life_override=0.0)

    def test_zero_override_is_a_real_value(self):
        """Test that a stored 0 is kept, not treated as missing."""
        record = make_record(replacement_cost_new=0.0, expected_resale_override=0.0)
        assert record.replacement_cost_new == 0.0
        assert record.expected_resale_override == 0.0


class TestOwnerPerk:
    """Test that owner-perk equipment never carries job cost."""

    def test_owner_perk_forces_zero_cogs(self):
        """Test the stored COGS percent is forced to 0 for owner-perk."""
        record = make_record(allocation_type=AllocationTypeEnum.OWNER_PERK, cogs_percent=75.0)
        assert record.cogs_percent == 0.0
        assert record.overhead_percent == 100.0

    def test_owner_perk_from_stored_string(self):
        """Test the override applies to raw persisted values too."""
        record = EquipmentRecord.model_validate(
            {
                "category": "Truck / Vehicle",
                "purchase_date": date(2023, 3, 1),
                "allocation_type": "owner_perk",
                "cogs_percent": 50.0,
            }
        )
        assert record.cogs_percent == 0.0


class TestFinancingFields:
    """Test financing convenience properties."""

    def test_owned_has_no_financing_start(self):
        """Test owned equipment has no effective financing start."""
        assert make_record().effective_financing_start_date is None
        assert not make_record().is_financed

    def test_financing_start_defaults_to_purchase_date(self):
        """Test non-owned equipment falls back to the purchase date."""
        record = make_financed_record()
        assert record.is_financed
        assert record.effective_financing_start_date == record.purchase_date

    def test_explicit_financing_start(self):
        """Test an explicit financing start wins over the purchase date."""
        record = make_financed_record(financing_start_date=date(2022, 3, 1))
        assert record.effective_financing_start_date == date(2022, 3, 1)
