# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio cashflow - fleet-wide recovery versus financing payments.

Payments for a calendar year are prorated by payoff month: a schedule that
ends in May contributes five monthly payments to that year. Informational
only; nothing here affects pricing.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from ..core.primitives import CashflowStatusEnum, FinancingTypeEnum, GlobalSettings, Model
from ..financing.cashflow import EquipmentCashflow, classify_cashflow
from ..valuation.composer import DerivedValuation

ValuedCashflow = Tuple[DerivedValuation, EquipmentCashflow]


class PortfolioCashflow(Model):
    """Fleet-wide cashflow for the as-of calendar year."""

    total_annual_recovery: float
    total_annual_payments: float
    net_annual_cashflow: float
    total_deposits: float
    total_remaining_obligations: float
    overall_status: CashflowStatusEnum


class Stabilization(Model):
    """When financing payments end and the fleet runs on recovery alone."""

    stabilization_date: Optional[date] = None
    stabilized_net_cashflow: float
    years_until_stabilization: int
    items_with_active_payments: int


def _active(items: Iterable[ValuedCashflow]) -> List[ValuedCashflow]:
    return [(v, cf) for v, cf in items if v.is_active]


def payments_in_year(valuation: DerivedValuation, cashflow: EquipmentCashflow, year: int) -> float:
    """
    Financing payments a single item makes during calendar ``year``.

    Owned equipment pays nothing. Without a payoff date the full annual
    outflow counts. A payoff on or before Jan 1 contributes nothing, one on
    or after Dec 31 a full year, anything in between is prorated by the
    payoff month.
    """
    if valuation.financing_type == FinancingTypeEnum.OWNED:
        return 0.0
    if cashflow.payoff_date is None:
        return cashflow.annual_cash_outflow

    year_start = date(year, 1, 1)
    year_end = date(year, 12, 31)
    if cashflow.payoff_date <= year_start:
        return 0.0
    if cashflow.payoff_date >= year_end:
        return cashflow.annual_cash_outflow
    return valuation.monthly_payment * cashflow.payoff_date.month


def calculate_portfolio_cashflow(
    items: Iterable[ValuedCashflow],
    as_of: date,
    settings: Optional[GlobalSettings] = None,
) -> PortfolioCashflow:
    """
    Portfolio summary for the calendar year containing ``as_of``.

    Args:
        items: (valuation, cashflow) pairs; only ACTIVE equipment is counted
        as_of: Date whose calendar year is summarised
        settings: Engine settings (neutral band for the overall status)
    """
    settings = settings or GlobalSettings()
    active = _active(items)

    recovery = sum(cf.annual_economic_recovery for _, cf in active)
    payments = sum(payments_in_year(v, cf, as_of.year) for v, cf in active)

    return PortfolioCashflow(
        total_annual_recovery=recovery,
        total_annual_payments=payments,
        net_annual_cashflow=recovery - payments,
        total_deposits=sum(cf.effective_deposit for _, cf in active),
        total_remaining_obligations=sum(cf.remaining_cash_obligations for _, cf in active),
        overall_status=classify_cashflow(recovery, payments, settings.cashflow),
    )


def calculate_cashflow_projection(
    items: Sequence[ValuedCashflow], as_of: date
) -> Tuple[pd.DataFrame, Stabilization]:
    """
    Year-by-year projection of recovery versus payments.

    The projection runs from the as-of year to two years past the last
    payoff, and covers at least four calendar years. Recovery is held
    constant; payments fall away as schedules end.

    Returns:
        Tuple containing:
        - DataFrame indexed by year with columns:
            - Annual Recovery, Annual Payments, Net Annual Cashflow
            - Active Payments: items still paying during the year
            - Events: "<name> paid off" for schedules ending that year
        - Stabilization summary
    """
    current_year = as_of.year
    active = _active(items)
    financed = [
        (v, cf)
        for v, cf in active
        if v.financing_type != FinancingTypeEnum.OWNED and cf.payoff_date is not None
    ]
    total_recovery = sum(cf.annual_economic_recovery for _, cf in active)

    max_payoff_year = max([current_year] + [cf.payoff_date.year for _, cf in financed])
    end_year = max(max_payoff_year + 2, current_year + 3)

    rows = []
    for year in range(current_year, end_year + 1):
        year_start = date(year, 1, 1)
        year_end = date(year, 12, 31)
        paying = [v for v, cf in financed if cf.payoff_date > year_start]
        paying_off = [v for v, cf in financed if year_start <= cf.payoff_date <= year_end]
        payments = sum(payments_in_year(v, cf, year) for v, cf in active)
        rows.append(
            {
                "Year": year,
                "Annual Recovery": total_recovery,
                "Annual Payments": payments,
                "Net Annual Cashflow": total_recovery - payments,
                "Active Payments": len(paying),
                "Events": [f"{v.name} paid off" for v in paying_off],
            }
        )
    projection = pd.DataFrame(rows).set_index("Year")

    future_payoffs = [cf.payoff_date for _, cf in financed if cf.payoff_date > as_of]
    latest = max(future_payoffs) if future_payoffs else None

    stabilization = Stabilization(
        stabilization_date=latest,
        stabilized_net_cashflow=total_recovery,
        years_until_stabilization=(latest.year - current_year) if latest else 0,
        items_with_active_payments=len(future_payoffs),
    )
    return projection, stabilization
