# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the time-value estimator and the resale curve.

Covers useful life resolution, aging, inflation-adjusted replacement cost
and expected resale.
"""

from __future__ import annotations

from datetime import date

import pytest

from fleetbook.core import InvalidUsefulLifeError
from fleetbook.core.primitives import (
    GlobalSettings,
    ReplacementCostSourceEnum,
    ResaleCurveMethodEnum,
    ResaleSettings,
    year_fraction,
)
from fleetbook.equipment import STANDARD_CATEGORY_DEFAULTS, CategoryDefaults
from fleetbook.valuation import ResaleCurve, estimate_time_value, inflate, resolve_useful_life
from tests.conftest import AS_OF, make_record

EXCAVATION = STANDARD_CATEGORY_DEFAULTS.lookup("Excavation")


class TestUsefulLife:
    """Test useful life resolution and remaining life."""

    def test_category_default(self):
        """Test the category default applies without an override."""
        assert resolve_useful_life(make_record(), EXCAVATION) == 7.0

    def test_override_wins(self):
        """Test the record override replaces the category default."""
        assert resolve_useful_life(make_record(useful_life_override=9.5), EXCAVATION) == 9.5

    def test_non_positive_category_life_raises(self):
        """Test a broken defaults entry raises rather than dividing by zero."""
        broken = CategoryDefaults.model_construct(
            category="Excavation", default_useful_life=0.0, default_resale_percent=25.0
        )
        with pytest.raises(InvalidUsefulLifeError):
            estimate_time_value(make_record(), broken, AS_OF)

    def test_years_left_worked_example(self):
        """Test two years into a seven-year life leaves about five years."""
        estimate = estimate_time_value(make_record(), EXCAVATION, AS_OF)
        assert estimate.estimated_years_left == pytest.approx(5.0, abs=0.01)
        assert 0.0 <= estimate.estimated_years_left <= estimate.useful_life_used

    def test_years_left_monotonic(self):
        """Test remaining life never increases as the as-of date advances."""
        record = make_record()
        as_of_dates = [date(2021, 6, 1), date(2022, 1, 15), date(2024, 1, 15), date(2029, 1, 15), date(2035, 1, 1)]
        years_left = [estimate_time_value(record, EXCAVATION, d).estimated_years_left for d in as_of_dates]
        assert years_left == sorted(years_left, reverse=True)
        assert years_left[0] == 7.0  # as-of before purchase: age clamps to 0
        assert years_left[-1] == 0.0

    def test_end_of_life_date(self):
        """Test nothing is left on the end-of-life date."""
        record = make_record()
        estimate = estimate_time_value(record, EXCAVATION, AS_OF)
        at_end = estimate_time_value(record, EXCAVATION, estimate.end_of_life_date)
        assert at_end.estimated_years_left == 0.0
        assert at_end.life_consumed_fraction == 1.0

    def test_whole_year_life_ends_after_anniversary(self):
        """Test a 10-year life still has half a day left on the tenth anniversary."""
        trailer = STANDARD_CATEGORY_DEFAULTS.lookup("Trailer")
        record = make_record(category="Trailer", purchase_date=date(2014, 1, 15))
        anniversary = estimate_time_value(record, trailer, date(2024, 1, 15))
        assert anniversary.estimated_years_left == pytest.approx(0.5 / 365.25)
        assert anniversary.end_of_life_date == date(2024, 1, 16)
        next_day = estimate_time_value(record, trailer, date(2024, 1, 16))
        assert next_day.estimated_years_left == 0.0


class TestReplacementCost:
    """Test inflation-adjusted replacement cost."""

    def test_inflate_exact_at_zero_years(self):
        """Test no inflation is applied on the base date."""
        assert inflate(80_000.0, AS_OF, AS_OF, 0.03) == (80_000.0, 0.0)

    def test_inflate_never_deflates(self):
        """Test an as-of date before the base date returns the base."""
        value, years = inflate(80_000.0, date(2025, 1, 1), AS_OF, 0.03)
        assert value == 80_000.0
        assert years == 0.0

    def test_manual_estimate_inflated_from_its_own_date(self):
        """Test a manual estimate is carried forward from its as-of date."""
        record = make_record(
            replacement_cost_new=120_000.0, replacement_cost_as_of_date=date(2023, 1, 15)
        )
        estimate = estimate_time_value(record, EXCAVATION, AS_OF)
        years = year_fraction(date(2023, 1, 15), AS_OF)
        assert estimate.replacement_cost_source == ReplacementCostSourceEnum.MANUAL
        assert estimate.inflation_years == pytest.approx(years)
        assert estimate.replacement_cost_used == pytest.approx(120_000.0 * 1.03**years)

    def test_manual_estimate_defaults_to_purchase_date(self):
        """Test a manual estimate without a date is inflated from the purchase date."""
        record = make_record(replacement_cost_new=120_000.0)
        estimate = estimate_time_value(record, EXCAVATION, AS_OF)
        assert estimate.inflation_years == pytest.approx(year_fraction(record.purchase_date, AS_OF))

    def test_purchase_price_fallback(self):
        """Test the purchase price is inflated when no estimate exists."""
        estimate = estimate_time_value(make_record(), EXCAVATION, AS_OF)
        assert estimate.replacement_cost_source == ReplacementCostSourceEnum.INFLATION_ADJUSTED
        assert estimate.replacement_cost_used > 100_000.0

    def test_zero_estimate_is_used(self):
        """Test a stored zero estimate is a real value, not a missing one."""
        estimate = estimate_time_value(make_record(replacement_cost_new=0.0), EXCAVATION, AS_OF)
        assert estimate.replacement_cost_source == ReplacementCostSourceEnum.MANUAL
        assert estimate.replacement_cost_used == 0.0

    def test_custom_inflation_rate(self):
        """Test the inflation rate comes from settings."""
        settings = GlobalSettings(inflation={"annual_rate": 0.0})
        estimate = estimate_time_value(make_record(), EXCAVATION, AS_OF, settings)
        assert estimate.replacement_cost_used == 100_000.0


class TestResale:
    """Test the resale curve and expected resale."""

    def test_straight_line_curve(self):
        """Test the default curve runs from 1.0 down to the floor."""
        curve = ResaleCurve(floor=0.25)
        assert curve(0.0) == 1.0
        assert curve(0.5) == pytest.approx(0.625)
        assert curve(1.0) == pytest.approx(0.25)
        assert curve(3.0) == pytest.approx(0.25)

    @pytest.mark.parametrize("method", list(ResaleCurveMethodEnum))
    def test_curve_monotonic_with_positive_floor(self, method):
        """Test every curve is non-increasing and never reaches zero."""
        curve = ResaleCurve.for_category(0.0, ResaleSettings(curve_method=method))
        points = [curve(f / 10) for f in range(11)]
        assert points == sorted(points, reverse=True)
        assert points[-1] == pytest.approx(0.01)
        assert all(p > 0 for p in points)

    def test_floor_never_below_minimum_salvage(self):
        """Test a 0% category resale still keeps the minimum salvage."""
        curve = ResaleCurve.for_category(0.0, ResaleSettings(minimum_salvage_fraction=0.05))
        assert curve.floor == 0.05

    def test_resale_at_end_of_life_is_category_floor(self):
        """Test fully consumed equipment resells at the category percentage."""
        estimate = estimate_time_value(make_record(), EXCAVATION, date(2035, 1, 1))
        assert estimate.expected_resale_default == pytest.approx(
            estimate.replacement_cost_used * 0.25
        )

    def test_override_used_verbatim(self):
        """Test a resale override wins, even when it is zero."""
        estimate = estimate_time_value(make_record(expected_resale_override=0.0), EXCAVATION, AS_OF)
        assert estimate.expected_resale_used == 0.0
        assert estimate.expected_resale_default > 0.0
