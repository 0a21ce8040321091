# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fleet Dashboard - aggregates across many composed valuations.

Reports only format and sum engine output; they never re-derive cost,
life or financing figures. Only ACTIVE equipment is counted.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

import pandas as pd

from ..core.primitives import FinancingTypeEnum, GlobalSettings, Model
from ..valuation.composer import DerivedValuation


class FleetSummary(Model):
    """Headline dashboard figures for the active fleet."""

    active_count: int
    total_cost_basis: float
    total_monthly_payments: float
    total_outstanding_debt: float
    aging_count: int


class UpcomingPayoff(Model):
    """A financed or leased item whose schedule ends inside the payoff window."""

    equipment_id: Optional[str] = None
    name: str
    category: str
    financing_type: FinancingTypeEnum
    payoff_date: date
    months_until_payoff: int
    monthly_payment: float


class ReplacementBucket(Model):
    """Active equipment due for replacement within a band of years."""

    label: str
    min_years_exclusive: Optional[float] = None
    max_years_inclusive: float
    count: int
    total_replacement_cost: float
    names: List[str]


def active_only(valuations: Iterable[DerivedValuation]) -> List[DerivedValuation]:
    """Filter to equipment still in the fleet."""
    return [v for v in valuations if v.is_active]


def summarize_fleet(
    valuations: Iterable[DerivedValuation], settings: Optional[GlobalSettings] = None
) -> FleetSummary:
    """
    Dashboard headline metrics.

    Monthly payments and outstanding debt only count financed or leased
    equipment; owned equipment contributes zero to both by construction.
    An item is "aging" with ``aging_threshold_years`` or fewer years left.
    """
    settings = settings or GlobalSettings()
    active = active_only(valuations)
    financed = [v for v in active if v.financing_type != FinancingTypeEnum.OWNED]
    threshold = settings.fleet.aging_threshold_years

    return FleetSummary(
        active_count=len(active),
        total_cost_basis=sum(v.total_cost_basis for v in active),
        total_monthly_payments=sum(v.monthly_payment for v in financed),
        total_outstanding_debt=sum(v.financing.outstanding_debt for v in financed),
        aging_count=sum(1 for v in active if v.estimated_years_left <= threshold),
    )


def upcoming_payoffs(
    valuations: Iterable[DerivedValuation],
    within_months: Optional[int] = None,
    settings: Optional[GlobalSettings] = None,
) -> List[UpcomingPayoff]:
    """
    Active financed or leased items paying off within the next window.

    Months are counted from each valuation's own ``as_of`` date. Payoffs
    must be strictly in the future (at least one calendar month away) and
    no more than ``within_months`` away (default from
    ``FleetSettings.payoff_window_months``). Sorted soonest first.
    """
    settings = settings or GlobalSettings()
    window = within_months if within_months is not None else settings.fleet.payoff_window_months

    payoffs = []
    for v in active_only(valuations):
        if v.financing_type == FinancingTypeEnum.OWNED or v.term_months <= 0:
            continue
        months = v.financing.months_until_payoff(v.as_of)
        if months is None or not (0 < months <= window):
            continue
        payoffs.append(
            UpcomingPayoff(
                equipment_id=v.equipment_id,
                name=v.name,
                category=v.category,
                financing_type=v.financing_type,
                payoff_date=v.financing.payoff_date,
                months_until_payoff=months,
                monthly_payment=v.monthly_payment,
            )
        )
    return sorted(payoffs, key=lambda p: (p.months_until_payoff, p.payoff_date))


def replacement_forecast(valuations: Iterable[DerivedValuation]) -> List[ReplacementBucket]:
    """
    Replacement needs over the next three years.

    Buckets are (<= 1 year], (1, 2], (2, 3] years left, each with the count
    and summed replacement cost of the active equipment falling in it.
    """
    active = active_only(valuations)
    bands = [("Within 1 year", None, 1.0), ("1-2 years", 1.0, 2.0), ("2-3 years", 2.0, 3.0)]

    buckets = []
    for label, low, high in bands:
        members = [
            v
            for v in active
            if v.estimated_years_left <= high and (low is None or v.estimated_years_left > low)
        ]
        buckets.append(
            ReplacementBucket(
                label=label,
                min_years_exclusive=low,
                max_years_inclusive=high,
                count=len(members),
                total_replacement_cost=sum(v.replacement_cost_used for v in members),
                names=[v.name for v in members],
            )
        )
    return buckets


def valuations_to_frame(valuations: Iterable[DerivedValuation]) -> pd.DataFrame:
    """
    One row per valuation with the flat derived figures as columns.

    Financing state is flattened into ``months_elapsed``,
    ``remaining_payments``, ``outstanding_debt`` and ``payoff_date``; enum
    columns hold their string values.
    """
    rows = []
    for v in valuations:
        row = v.model_dump(mode="json", exclude={"financing"})
        row.update(
            months_elapsed=v.financing.months_elapsed,
            remaining_payments=v.financing.remaining_payments,
            outstanding_debt=v.financing.outstanding_debt,
            payoff_date=v.financing.payoff_date,
            as_of=v.as_of,
            end_of_life_date=v.end_of_life_date,
        )
        rows.append(row)
    return pd.DataFrame(rows)
