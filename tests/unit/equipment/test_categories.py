# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the category defaults table."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fleetbook.core import ConfigurationError, UnknownCategoryError
from fleetbook.equipment import (
    STANDARD_CATEGORY_DEFAULTS,
    CategoryDefaults,
    CategoryDefaultsTable,
)


class TestStandardDefaults:
    """Test the shipped category defaults."""

    def test_standard_table_contents(self):
        """Test a few known categories and their assumptions."""
        assert len(STANDARD_CATEGORY_DEFAULTS) == 11
        excavation = STANDARD_CATEGORY_DEFAULTS.lookup("Excavation")
        assert excavation.default_useful_life == 7.0
        assert excavation.default_resale_percent == 25.0
        assert STANDARD_CATEGORY_DEFAULTS.lookup("Trailer").default_useful_life == 10.0

    def test_every_life_positive(self):
        """Test every shipped category has a positive useful life."""
        for category in STANDARD_CATEGORY_DEFAULTS.categories:
            assert STANDARD_CATEGORY_DEFAULTS.lookup(category).default_useful_life > 0


class TestLookup:
    """Test lookup and membership."""

    def test_unknown_category_raises(self):
        """Test an unconfigured category raises instead of defaulting."""
        with pytest.raises(UnknownCategoryError) as exc_info:
            STANDARD_CATEGORY_DEFAULTS.lookup("Hovercraft")
        assert exc_info.value.category == "Hovercraft"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_membership(self):
        """Test the in operator on category keys."""
        assert "Excavation" in STANDARD_CATEGORY_DEFAULTS
        assert "Hovercraft" not in STANDARD_CATEGORY_DEFAULTS

    def test_mismatched_key_rejected(self):
        """Test entries must be stored under their own category."""
        entry = CategoryDefaults(category="Trailer", default_useful_life=10.0)
        with pytest.raises(ValidationError):
            CategoryDefaultsTable(entries={"Boat": entry})


class TestOverrides:
    """Test user-edited defaults."""

    def test_partial_override(self):
        """Test a partial update keeps the other fields."""
        table = STANDARD_CATEGORY_DEFAULTS.with_overrides({"Trailer": {"default_useful_life": 12.0}})
        trailer = table.lookup("Trailer")
        assert trailer.default_useful_life == 12.0
        assert trailer.default_resale_percent == 35.0
        # Original table untouched
        assert STANDARD_CATEGORY_DEFAULTS.lookup("Trailer").default_useful_life == 10.0

    def test_partial_override_unknown_category(self):
        """Test a partial update for a missing category raises."""
        with pytest.raises(UnknownCategoryError):
            STANDARD_CATEGORY_DEFAULTS.with_overrides({"Boat": {"default_useful_life": 12.0}})

    def test_full_entry_adds_category(self):
        """Test complete entries add new categories."""
        table = STANDARD_CATEGORY_DEFAULTS.with_overrides(
            [CategoryDefaults(category="Boat", default_useful_life=15.0, default_resale_percent=40.0)]
        )
        assert len(table) == 12
        assert table.lookup("Boat").default_resale_percent == 40.0

    def test_invalid_override_rejected(self):
        """Test an override cannot set a non-positive life."""
        with pytest.raises(ValidationError):
            STANDARD_CATEGORY_DEFAULTS.with_overrides({"Trailer": {"default_useful_life": 0.0}})
