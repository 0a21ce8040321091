# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Buy vs Rent - annual cost of owning a machine against renting it.

Ownership cost is straight-line depreciation plus the annual carrying
costs. Rental cost uses the cheapest of the quoted rates for the expected
usage. Near break-even the recommendation is a close call rather than a
hard BUY or RENT.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import pandas as pd
from pydantic import Field

from ..core.primitives import (
    BuyVsRentRecommendationEnum,
    BuyVsRentSettings,
    GlobalSettings,
    Model,
    PositiveFloat,
    StrictlyPositiveFloat,
)

logger = logging.getLogger(__name__)


class BuyVsRentInput(Model):
    """
    A purchase being weighed against renting.

    Weekly and monthly rates are optional; a missing or zero rate is not
    considered when picking the cheapest rental option.
    """

    category: str
    description: str = ""
    purchase_price: PositiveFloat
    useful_life: StrictlyPositiveFloat
    resale_value: PositiveFloat = 0.0
    rental_rate_daily: PositiveFloat
    rental_rate_weekly: Optional[PositiveFloat] = None
    rental_rate_monthly: Optional[PositiveFloat] = None
    usage_days_per_year: PositiveFloat
    annual_maintenance: PositiveFloat = 0.0
    annual_insurance: PositiveFloat = 0.0
    annual_storage: PositiveFloat = 0.0
    annual_operating: PositiveFloat = 0.0


class OwnershipBreakdown(Model):
    depreciation: float
    maintenance: float
    insurance: float
    storage: float
    operating: float

    @property
    def total(self) -> float:
        return (
            self.depreciation + self.maintenance + self.insurance + self.storage + self.operating
        )


class BuyVsRentResult(Model):
    """
    Outcome of a buy-vs-rent comparison.

    Attributes:
        annual_ownership_cost: Depreciation plus annual carrying costs
        ownership_breakdown: Components of the ownership cost
        annual_rental_cost: Cheapest rental cost for the usage
        break_even_days: Usage at which owning costs the same as renting daily
        recommendation: BUY, RENT or CLOSE_CALL
        annual_savings: Absolute yearly difference between the two options
        total_savings_over_life: Annual savings over the useful life
        year_by_year: Cumulative comparison indexed by year
    """

    annual_ownership_cost: float
    ownership_breakdown: OwnershipBreakdown
    annual_rental_cost: float
    break_even_days: float
    recommendation: BuyVsRentRecommendationEnum
    annual_savings: float
    total_savings_over_life: float
    year_by_year: pd.DataFrame = Field(repr=False)


def ownership_breakdown(data: BuyVsRentInput) -> OwnershipBreakdown:
    return OwnershipBreakdown(
        depreciation=(data.purchase_price - data.resale_value) / data.useful_life,
        maintenance=data.annual_maintenance,
        insurance=data.annual_insurance,
        storage=data.annual_storage,
        operating=data.annual_operating,
    )


def optimal_rental_cost(data: BuyVsRentInput, settings: Optional[BuyVsRentSettings] = None) -> float:
    """
    Cheapest annual rental cost across the quoted rates.

    Weekly and monthly rentals are billed in whole periods of working days
    (5-day weeks and 22-day months by default), rounded up.
    """
    settings = settings or BuyVsRentSettings()
    days = data.usage_days_per_year

    options = [days * data.rental_rate_daily]
    if data.rental_rate_weekly:
        options.append(math.ceil(days / settings.working_days_per_week) * data.rental_rate_weekly)
    if data.rental_rate_monthly:
        options.append(
            math.ceil(days / settings.working_days_per_month) * data.rental_rate_monthly
        )
    return min(options)


def recommend(
    usage_days: float, break_even_days: float, settings: Optional[BuyVsRentSettings] = None
) -> BuyVsRentRecommendationEnum:
    """BUY above break-even plus the buffer, RENT below break-even minus it."""
    buffer = (settings or BuyVsRentSettings()).close_call_buffer
    if usage_days > break_even_days * (1 + buffer):
        return BuyVsRentRecommendationEnum.BUY
    if usage_days < break_even_days * (1 - buffer):
        return BuyVsRentRecommendationEnum.RENT
    return BuyVsRentRecommendationEnum.CLOSE_CALL


def year_by_year_comparison(
    useful_life: float, annual_ownership_cost: float, annual_rental_cost: float
) -> pd.DataFrame:
    """
    Cumulative costs for each whole year of the useful life.

    Savings are rent minus own, so a positive value means buying saves money.
    """
    years = list(range(1, int(math.floor(useful_life)) + 1))
    own = [annual_ownership_cost * year for year in years]
    rent = [annual_rental_cost * year for year in years]
    return pd.DataFrame(
        {
            "Own Cumulative": own,
            "Rent Cumulative": rent,
            "Savings": [r - o for o, r in zip(own, rent)],
        },
        index=pd.Index(years, name="Year"),
    )


def calculate_buy_vs_rent(
    data: BuyVsRentInput, settings: Optional[GlobalSettings] = None
) -> BuyVsRentResult:
    """
    Compare owning against renting for the expected usage.

    Break-even days are the ownership cost divided by the daily rate, and
    are 0 when no daily rate is quoted.

    Example:
        >>> result = calculate_buy_vs_rent(BuyVsRentInput(
        ...     category="Excavation", purchase_price=60_000.0, useful_life=7.0,
        ...     resale_value=18_000.0, rental_rate_daily=400.0, usage_days_per_year=60.0,
        ...     annual_maintenance=2_000.0, annual_insurance=1_000.0))
        >>> result.annual_ownership_cost, result.break_even_days, result.recommendation.value
        (9000.0, 22.5, 'BUY')
    """
    settings = settings or GlobalSettings()
    bvr = settings.buy_vs_rent

    breakdown = ownership_breakdown(data)
    ownership_cost = breakdown.total
    rental_cost = optimal_rental_cost(data, bvr)
    break_even = ownership_cost / data.rental_rate_daily if data.rental_rate_daily > 0 else 0.0
    recommendation = recommend(data.usage_days_per_year, break_even, bvr)
    annual_savings = abs(ownership_cost - rental_cost)

    logger.debug(
        f"Buy vs rent for {data.description or data.category!r}: "
        f"own=${ownership_cost:,.0f}/yr rent=${rental_cost:,.0f}/yr "
        f"break-even={break_even:.1f} days -> {recommendation.value}"
    )

    return BuyVsRentResult(
        annual_ownership_cost=ownership_cost,
        ownership_breakdown=breakdown,
        annual_rental_cost=rental_cost,
        break_even_days=break_even,
        recommendation=recommendation,
        annual_savings=annual_savings,
        total_savings_over_life=annual_savings * data.useful_life,
        year_by_year=year_by_year_comparison(data.useful_life, ownership_cost, rental_cost),
    )
