# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Time-Value Estimator - age, remaining life, replacement cost and resale.

All figures are computed for an explicit ``as_of`` date. Fractional years
use elapsed days / 365.25 throughout, both for age and for inflation.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Tuple

from ..core.exceptions import InvalidUsefulLifeError
from ..core.primitives import (
    GlobalSettings,
    Model,
    ReplacementCostSourceEnum,
    add_years_fractional,
    year_fraction,
)
from ..equipment.categories import CategoryDefaults
from ..equipment.record import EquipmentRecord
from .resale import ResaleCurve

logger = logging.getLogger(__name__)


class TimeValueEstimate(Model):
    """
    Time-dependent valuation figures for one record.

    Attributes:
        useful_life_used: Override or category default, in years
        age_years: Fractional years since purchase (>= 0)
        estimated_years_left: max(0, useful_life_used - age_years)
        life_consumed_fraction: age / life, clamped to [0, 1]
        end_of_life_date: Purchase date plus the useful life
        replacement_cost_used: Base cost inflated forward to the as-of date
        replacement_cost_source: MANUAL estimate or INFLATION_ADJUSTED purchase price
        inflation_years: Fractional years of inflation applied
        default_resale_percent: Category resale percentage (curve floor)
        expected_resale_default: Curve-derived resale value
        expected_resale_used: Override when present, else the curve value
    """

    useful_life_used: float
    age_years: float
    estimated_years_left: float
    life_consumed_fraction: float
    end_of_life_date: date
    replacement_cost_used: float
    replacement_cost_source: ReplacementCostSourceEnum
    inflation_years: float
    default_resale_percent: float
    expected_resale_default: float
    expected_resale_used: float


def resolve_useful_life(record: EquipmentRecord, category_default: CategoryDefaults) -> float:
    """
    Useful life in years: the record override, else the category default.

    Raises:
        InvalidUsefulLifeError: If the resolved life is not positive.
    """
    if record.useful_life_override is not None:
        life = record.useful_life_override
    else:
        life = category_default.default_useful_life
    if life <= 0:
        raise InvalidUsefulLifeError(record.category, life)
    return float(life)


def inflate(base: float, base_date: date, as_of: date, annual_rate: float) -> Tuple[float, float]:
    """
    Carry ``base`` forward from ``base_date`` to ``as_of`` at a compounded annual rate.

    The exponent is clamped at 0, so an as-of date on or before the base
    date returns the base unchanged.

    Returns:
        Tuple of (inflated value, fractional years applied)
    """
    years = year_fraction(base_date, as_of)
    if years == 0.0:
        return base, 0.0
    return base * (1.0 + annual_rate) ** years, years


def replacement_cost(
    record: EquipmentRecord, as_of: date, annual_rate: float
) -> Tuple[float, ReplacementCostSourceEnum, float]:
    """
    Replacement cost of a new equivalent as of ``as_of``.

    A manual ``replacement_cost_new`` estimate is inflated from its own
    as-of date (the purchase date when absent). Without an estimate the
    purchase price is inflated from the purchase date, so every record
    still yields a replacement figure.

    Returns:
        Tuple of (replacement cost, source, inflation years)
    """
    if record.replacement_cost_new is not None:
        base_date = record.replacement_cost_as_of_date or record.purchase_date
        value, years = inflate(record.replacement_cost_new, base_date, as_of, annual_rate)
        return value, ReplacementCostSourceEnum.MANUAL, years

    value, years = inflate(record.purchase_price, record.purchase_date, as_of, annual_rate)
    return value, ReplacementCostSourceEnum.INFLATION_ADJUSTED, years


def estimate_time_value(
    record: EquipmentRecord,
    category_default: CategoryDefaults,
    as_of: date,
    settings: Optional[GlobalSettings] = None,
) -> TimeValueEstimate:
    """
    Compute age, remaining life, replacement cost and expected resale.

    Status is not special-cased: sold, retired and lost equipment still get
    figures, but their years left carry no operational meaning.

    Args:
        record: Validated equipment record
        category_default: Defaults entry for the record's category
        as_of: Date the figures are computed for
        settings: Engine settings (inflation rate, resale curve)

    Returns:
        TimeValueEstimate for the record at ``as_of``
    """
    settings = settings or GlobalSettings()

    life = resolve_useful_life(record, category_default)
    age = year_fraction(record.purchase_date, as_of)
    years_left = max(0.0, life - age)
    consumed = min(1.0, max(0.0, age / life))

    replacement, source, inflation_years = replacement_cost(
        record, as_of, settings.inflation.annual_rate
    )

    curve = ResaleCurve.for_category(category_default.default_resale_percent, settings.resale)
    resale_default = replacement * curve(consumed)
    if record.expected_resale_override is not None:
        resale_used = record.expected_resale_override
    else:
        resale_used = resale_default

    logger.debug(
        f"Time value for {record.name or record.category!r}: age={age:.3f}y "
        f"life={life}y left={years_left:.3f}y replacement=${replacement:,.0f} "
        f"({source.value}) resale=${resale_used:,.0f}"
    )

    return TimeValueEstimate(
        useful_life_used=life,
        age_years=age,
        estimated_years_left=years_left,
        life_consumed_fraction=consumed,
        end_of_life_date=add_years_fractional(record.purchase_date, life),
        replacement_cost_used=replacement,
        replacement_cost_source=source,
        inflation_years=inflation_years,
        default_resale_percent=category_default.default_resale_percent,
        expected_resale_default=resale_default,
        expected_resale_used=resale_used,
    )
