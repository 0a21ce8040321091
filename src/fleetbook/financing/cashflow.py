# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Equipment cashflow - financing outflow versus pricing recovery.

Informational only: nothing here feeds back into pricing, allocation or
exports. Recovery is the replacement value spread over the useful life,
i.e. what job pricing recovers each year to fund the next unit.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np
import pandas as pd

from ..core.primitives import (
    CashflowSettings,
    CashflowStatusEnum,
    FinancingTypeEnum,
    GlobalSettings,
    Model,
)

if TYPE_CHECKING:
    from ..valuation.composer import DerivedValuation

logger = logging.getLogger(__name__)

# Minimum length of a payback timeline, in months
MIN_TIMELINE_MONTHS = 60


class EquipmentCashflow(Model):
    """
    Cashflow position of one piece of equipment.

    Attributes:
        effective_deposit: Cash paid up front (the whole cost basis when owned)
        annual_cash_outflow: Monthly payment x 12
        payments_completed: Whole months of payments made to date
        total_cash_outlaid_to_date: Deposit plus payments made
        remaining_payments: Payments still scheduled
        remaining_cash_obligations: Outstanding debt, including a lease buyout
        annual_economic_recovery: Replacement cost / useful life
        annual_surplus_shortfall: Recovery minus outflow
        cashflow_status: SURPLUS, NEUTRAL or SHORTFALL
        payoff_date: End of the schedule, None when owned
    """

    effective_deposit: float
    annual_cash_outflow: float
    payments_completed: int
    total_cash_outlaid_to_date: float
    remaining_payments: int
    remaining_cash_obligations: float
    annual_economic_recovery: float
    annual_surplus_shortfall: float
    cashflow_status: CashflowStatusEnum
    payoff_date: Optional[date] = None


def effective_deposit(valuation: "DerivedValuation") -> float:
    """Cash paid up front: the total cost basis when owned, the deposit otherwise."""
    if valuation.financing_type == FinancingTypeEnum.OWNED:
        return valuation.total_cost_basis
    return valuation.deposit_amount


def annual_economic_recovery(valuation: "DerivedValuation") -> float:
    """Replacement value recovered through pricing each year of useful life."""
    if valuation.useful_life_used <= 0:
        return 0.0
    return valuation.replacement_cost_used / valuation.useful_life_used


def classify_cashflow(
    recovery: float, outflow: float, settings: Optional[CashflowSettings] = None
) -> CashflowStatusEnum:
    """
    Compare outflow to recovery with a neutral band around a 1.0 ratio.

    Below ``1 - band`` is a surplus, above ``1 + band`` a shortfall. Zero
    recovery with any outflow is a shortfall; nothing on either side is neutral.
    """
    band = (settings or CashflowSettings()).neutral_band
    if recovery == 0 and outflow == 0:
        return CashflowStatusEnum.NEUTRAL
    ratio = outflow / recovery if recovery > 0 else float("inf")
    if ratio < 1 - band:
        return CashflowStatusEnum.SURPLUS
    if ratio > 1 + band:
        return CashflowStatusEnum.SHORTFALL
    return CashflowStatusEnum.NEUTRAL


def calculate_equipment_cashflow(
    valuation: "DerivedValuation", settings: Optional[GlobalSettings] = None
) -> EquipmentCashflow:
    """
    Cashflow metrics for a single valuation.

    Payment counts and remaining obligations come straight from the
    valuation's financing state, so they agree with the dashboard figures.
    """
    settings = settings or GlobalSettings()
    financing = valuation.financing

    deposit = effective_deposit(valuation)
    outflow = valuation.monthly_payment * 12
    completed = financing.months_elapsed
    recovery = annual_economic_recovery(valuation)

    return EquipmentCashflow(
        effective_deposit=deposit,
        annual_cash_outflow=outflow,
        payments_completed=completed,
        total_cash_outlaid_to_date=deposit + completed * valuation.monthly_payment,
        remaining_payments=financing.remaining_payments,
        remaining_cash_obligations=financing.outstanding_debt,
        annual_economic_recovery=recovery,
        annual_surplus_shortfall=recovery - outflow,
        cashflow_status=classify_cashflow(recovery, outflow, settings.cashflow),
        payoff_date=financing.payoff_date,
    )


def calculate_payback_timeline(
    valuation: "DerivedValuation",
) -> Tuple[pd.DataFrame, Optional[int]]:
    """
    Cumulative cash outlay versus cumulative pricing recovery, month by month.

    The timeline runs from month 0 to the longest of the financing term,
    the useful life in months and five years.

    Returns:
        Tuple containing:
        - DataFrame indexed by month with columns:
            - Cumulative Outlay: Deposit plus payments made by that month
            - Cumulative Recovery: Monthly recovery x month
            - Net Position: Recovery minus outlay
        - First month (> 0) where recovery covers a positive outlay, or None
    """
    deposit = effective_deposit(valuation)
    monthly_recovery = annual_economic_recovery(valuation) / 12
    term = valuation.term_months if valuation.financing_type != FinancingTypeEnum.OWNED else 0
    max_months = int(max(term, np.ceil(valuation.useful_life_used * 12), MIN_TIMELINE_MONTHS))

    months = np.arange(0, max_months + 1)
    outlay = deposit + np.minimum(months, term) * valuation.monthly_payment
    recovery = months * monthly_recovery

    df = pd.DataFrame(
        {
            "Cumulative Outlay": outlay,
            "Cumulative Recovery": recovery,
            "Net Position": recovery - outlay,
        },
        index=pd.Index(months, name="Month"),
    )

    covered = (df.index > 0) & (recovery >= outlay) & (outlay > 0)
    payback_month = int(df.index[covered][0]) if covered.any() else None

    logger.debug(
        f"Payback timeline for {valuation.name or valuation.category!r}: "
        f"{max_months} months, payback month {payback_month}"
    )
    return df, payback_month
