# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Expected-resale depreciation curve.

Maps the fraction of useful life consumed (0 = brand new, 1 = fully used)
to the share of replacement cost the equipment is expected to fetch on
resale. Every curve is monotonically non-increasing, starts at 1.0 and
ends at a strictly positive salvage floor.
"""

from __future__ import annotations

from pydantic import Field

from ..core.primitives import (
    FloatBetween0And1,
    Model,
    ResaleCurveMethodEnum,
    ResaleSettings,
)


class ResaleCurve(Model):
    """
    Depreciation curve from 1.0 (new) to ``floor`` (end of useful life).

    Attributes:
        floor: Salvage fraction retained at end of life, always > 0
        method: STRAIGHT_LINE decays linearly; DECLINING_BALANCE decays by a
            constant percentage per unit of life, front-loading depreciation

    Examples:
        >>> curve = ResaleCurve(floor=0.25)
        >>> curve(0.0), curve(0.5), curve(1.0)
        (1.0, 0.625, 0.25)

        >>> curve = ResaleCurve(floor=0.25, method=ResaleCurveMethodEnum.DECLINING_BALANCE)
        >>> curve(0.5)
        0.5
    """

    floor: FloatBetween0And1 = Field(gt=0)
    method: ResaleCurveMethodEnum = ResaleCurveMethodEnum.STRAIGHT_LINE

    @classmethod
    def for_category(
        cls, default_resale_percent: float, settings: ResaleSettings
    ) -> "ResaleCurve":
        """Curve whose floor is the category resale percentage, kept above the minimum salvage."""
        floor = max(default_resale_percent / 100.0, settings.minimum_salvage_fraction)
        return cls(floor=min(floor, 1.0), method=settings.curve_method)

    def __call__(self, life_consumed_fraction: float) -> float:
        fraction = min(1.0, max(0.0, life_consumed_fraction))
        if self.method == ResaleCurveMethodEnum.DECLINING_BALANCE:
            return self.floor**fraction
        return 1.0 - (1.0 - self.floor) * fraction
