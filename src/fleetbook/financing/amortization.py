# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Financing amortization state - elapsed and remaining payments, debt, payoff."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import pandas as pd

from ..core.primitives import (
    FinancingTypeEnum,
    Model,
    PositiveFloat,
    PositiveInt,
    add_months,
    calendar_months_between,
    whole_months_between,
)
from ..equipment.record import EquipmentRecord

logger = logging.getLogger(__name__)


class FinancingState(Model):
    """
    Position in a loan or lease payment schedule as of a given date.

    Owned equipment has every figure at zero and no payoff date.

    Attributes:
        months_elapsed: Whole months since the financing start, within [0, term]
        remaining_payments: term - months_elapsed, never negative
        outstanding_debt: Remaining payments plus the buyout for leases
        payoff_date: Financing start plus the term in months
    """

    financing_type: FinancingTypeEnum = FinancingTypeEnum.OWNED
    months_elapsed: PositiveInt = 0
    remaining_payments: PositiveInt = 0
    outstanding_debt: PositiveFloat = 0.0
    payoff_date: Optional[date] = None

    @property
    def is_paid_off(self) -> bool:
        """True once no scheduled payments remain."""
        return self.remaining_payments == 0

    def months_until_payoff(self, as_of: date) -> Optional[int]:
        """Calendar months from ``as_of`` to the payoff date (negative once past)."""
        if self.payoff_date is None:
            return None
        return calendar_months_between(as_of, self.payoff_date)


def amortize(record: EquipmentRecord, as_of: date) -> FinancingState:
    """
    Financing position of a record as of ``as_of``.

    The buyout is added to the outstanding debt only for leases: a lease's
    terminal obligation is the buyout option, while a loan's is already
    captured by its payment stream. A zero term on financed equipment is a
    valid "no remaining schedule" state.

    Example:
        >>> state = amortize(financed_record, as_of=date(2024, 1, 15))
        >>> state.months_elapsed, state.remaining_payments, state.outstanding_debt
        (24, 36, 43200.0)
    """
    if record.financing_type == FinancingTypeEnum.OWNED:
        return FinancingState()

    start = record.effective_financing_start_date
    term = max(0, record.term_months)
    if term == 0:
        logger.warning(
            f"{record.name or record.category!r} is {record.financing_type.value} "
            f"with a zero-month term; treating the schedule as complete"
        )

    elapsed = min(term, whole_months_between(start, as_of))
    remaining = max(0, term - elapsed)

    outstanding = remaining * record.monthly_payment
    if record.financing_type == FinancingTypeEnum.LEASED:
        outstanding += record.buyout_amount

    return FinancingState(
        financing_type=record.financing_type,
        months_elapsed=elapsed,
        remaining_payments=remaining,
        outstanding_debt=outstanding,
        payoff_date=add_months(start, term),
    )


def payment_schedule(record: EquipmentRecord) -> pd.DataFrame:
    """
    Scheduled payments for a financed or leased record.

    One row per payment, indexed by payment number (1..term), with the
    payment date (start + n months), payment amount, and the outstanding
    obligation remaining after the payment. A lease's buyout is kept in the
    remaining obligation until the final row. Owned equipment returns an
    empty frame.
    """
    columns = ["Payment Date", "Payment", "Remaining Obligation"]
    if record.financing_type == FinancingTypeEnum.OWNED or record.term_months == 0:
        return pd.DataFrame(columns=columns, index=pd.Index([], name="Period"))

    start = record.effective_financing_start_date
    term = record.term_months
    buyout = record.buyout_amount if record.financing_type == FinancingTypeEnum.LEASED else 0.0
    periods = range(1, term + 1)

    df = pd.DataFrame(
        {
            "Payment Date": [add_months(start, n) for n in periods],
            "Payment": [record.monthly_payment] * term,
            "Remaining Obligation": [
                (term - n) * record.monthly_payment + buyout for n in periods
            ],
        },
        index=pd.Index(periods, name="Period"),
    )
    return df
