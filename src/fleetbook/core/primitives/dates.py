# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar arithmetic shared by the valuation and financing calculations.

All functions take explicit dates. Nothing in this module (or anything
built on it) reads the system clock.
"""

from __future__ import annotations

import math
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from .settings import DAYS_PER_YEAR


def year_fraction(start: date, end: date) -> float:
    """
    Elapsed fractional years between two dates (elapsed days / 365.25).

    Never negative: when ``end`` precedes ``start`` the result is 0.0.
    """
    days = (end - start).days
    if days <= 0:
        return 0.0
    return days / DAYS_PER_YEAR


def add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping to the end of shorter months."""
    return start + relativedelta(months=months)


def add_years_fractional(start: date, years: float) -> date:
    """
    First date on which at least ``years`` fractional years have elapsed.

    Uses the same day count as :func:`year_fraction`, so
    ``year_fraction(start, add_years_fractional(start, y)) >= y``.
    """
    return start + timedelta(days=math.ceil(years * DAYS_PER_YEAR))


def whole_months_between(start: date, end: date) -> int:
    """
    Number of whole months elapsed from ``start`` to ``end``.

    Defined as the largest k >= 0 with ``add_months(start, k) <= end``, so
    the count agrees exactly with dates produced by :func:`add_months`
    (e.g. a payoff date ``add_months(start, term)`` is reached on that day,
    not a day later). Returns 0 when ``end`` precedes ``start``.
    """
    if end <= start:
        return 0
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if add_months(start, months) > end:
        months -= 1
    return max(0, months)


def calendar_months_between(start: date, end: date) -> int:
    """Signed calendar-month difference, ignoring the day of month."""
    return (end.year - start.year) * 12 + (end.month - start.month)
