# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, model_validator

from .enums import ResaleCurveMethodEnum
from .model import Model
from .types import FloatBetween0And1, PositiveFloat, PositiveInt

# Days per year used by every fractional-year calculation
DAYS_PER_YEAR = 365.25


class InflationSettings(Model):
    """Inflation assumption used to carry replacement costs forward in time."""

    annual_rate: FloatBetween0And1 = Field(
        default=0.03,
        description="Fixed annual inflation rate, compounded on fractional years.",
    )


class ResaleSettings(Model):
    """
    Settings for the expected-resale depreciation curve.

    The curve starts at 1.0 (brand new) and decays to the category's default
    resale percentage once the useful life is fully consumed. The floor is
    never allowed below ``minimum_salvage_fraction`` so fully depreciated
    equipment always keeps some salvage value.

    Usage Examples:
        # Default straight-line decay to the category floor
        resale = ResaleSettings()

        # Faster early depreciation, typical of trucks and vehicles
        resale = ResaleSettings(curve_method=ResaleCurveMethodEnum.DECLINING_BALANCE)
    """

    curve_method: ResaleCurveMethodEnum = Field(
        default=ResaleCurveMethodEnum.STRAIGHT_LINE,
        description="Shape of the decay between new (1.0) and the salvage floor.",
    )
    minimum_salvage_fraction: FloatBetween0And1 = Field(
        default=0.01,
        description="Lowest salvage floor allowed, as a fraction of replacement cost.",
    )

    @model_validator(mode="after")
    def check_minimum_salvage(self) -> "ResaleSettings":
        """Ensure the salvage floor is strictly positive."""
        if self.minimum_salvage_fraction <= 0:
            raise ValueError("minimum_salvage_fraction must be greater than 0")
        return self


class CashflowSettings(Model):
    """Settings for the informational cashflow status."""

    neutral_band: FloatBetween0And1 = Field(
        default=0.10,
        description=(
            "Tolerance around an outflow/recovery ratio of 1.0 that is still "
            "reported as neutral (0.10 = within 10% either way)."
        ),
    )


class FleetSettings(Model):
    """Settings for fleet dashboard aggregation."""

    aging_threshold_years: PositiveFloat = Field(
        default=1.0,
        description="Equipment with this many years left or fewer counts as aging.",
    )
    payoff_window_months: PositiveInt = Field(
        default=12, description="Horizon for the upcoming payoffs list."
    )


class BuyVsRentSettings(Model):
    """Assumptions for the buy-vs-rent comparison."""

    close_call_buffer: FloatBetween0And1 = Field(
        default=0.15,
        description="Band around break-even usage reported as a close call.",
    )
    working_days_per_week: PositiveInt = Field(default=5, ge=1, le=7)
    working_days_per_month: PositiveInt = Field(default=22, ge=1, le=31)


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global engine settings

    Groups every tunable assumption by functional area. Settings never carry
    an as-of date; "today" is always passed explicitly to each calculation.
    """

    inflation: InflationSettings = Field(default_factory=InflationSettings)
    resale: ResaleSettings = Field(default_factory=ResaleSettings)
    cashflow: CashflowSettings = Field(default_factory=CashflowSettings)
    fleet: FleetSettings = Field(default_factory=FleetSettings)
    buy_vs_rent: BuyVsRentSettings = Field(default_factory=BuyVsRentSettings)
