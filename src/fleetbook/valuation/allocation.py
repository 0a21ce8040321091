# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
COGS / overhead allocation of the cost basis.
"""

from __future__ import annotations

from ..core.primitives import AllocationTypeEnum, Model


class AllocationSplit(Model):
    """Cost basis divided between job cost (COGS) and overhead."""

    cogs_allocated_cost: float
    overhead_allocated_cost: float
    cogs_percent: float
    overhead_percent: float


def effective_cogs_percent(cogs_percent: float, allocation_type: AllocationTypeEnum) -> float:
    """
    COGS percentage actually applied to the cost basis.

    Owner-perk equipment is excluded from job costing and always gets 0.
    Anything else is clamped to [0, 100].
    """
    if allocation_type == AllocationTypeEnum.OWNER_PERK:
        return 0.0
    return min(100.0, max(0.0, float(cogs_percent)))


def split_allocation(
    total_cost_basis: float,
    cogs_percent: float,
    allocation_type: AllocationTypeEnum = AllocationTypeEnum.OPERATIONAL,
) -> AllocationSplit:
    """
    Divide the cost basis into COGS and overhead portions.

    Overhead is the basis minus COGS, and COGS is then re-derived from that
    overhead so the two portions sum back to the basis exactly in floating
    point.

    Example:
        >>> split = split_allocation(115_000.0, 80.0)
        >>> split.cogs_allocated_cost, split.overhead_allocated_cost
        (92000.0, 23000.0)
    """
    pct = effective_cogs_percent(cogs_percent, allocation_type)
    cogs = total_cost_basis * pct / 100.0
    overhead = total_cost_basis - cogs
    cogs = total_cost_basis - overhead
    return AllocationSplit(
        cogs_allocated_cost=cogs,
        overhead_allocated_cost=overhead,
        cogs_percent=pct,
        overhead_percent=100.0 - pct,
    )
