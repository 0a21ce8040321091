# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Budget rollup - per-category equipment lines for an external FMS budget.

Active equipment is split into two sections:

- Field equipment (``operational`` allocation), grouped by category and
  by leased versus owned. Financed equipment is owned for budgeting.
- Overhead equipment (``overhead_only`` and ``owner_perk``), grouped by
  category only.

Each line averages replacement value, useful life and end value across its
items, which is the shape the budget templates expect.
"""

from __future__ import annotations

import csv
import io
import logging
import math
from collections import OrderedDict
from typing import Dict, Iterable, List, Tuple

from ..core.primitives import AllocationTypeEnum, FinancingTypeEnum, Model, UsageUnitEnum
from ..equipment.categories import CategoryDefaultsTable
from ..valuation.composer import DerivedValuation

logger = logging.getLogger(__name__)

FIELD_SECTION_TITLE = "FIELD EQUIPMENT — LMN Equipment Budget"
OVERHEAD_SECTION_TITLE = "OVERHEAD EQUIPMENT — LMN Overhead Budget"


class RollupLine(Model):
    """
    One budget line: a category (and, for field equipment, a financing type).

    Attributes:
        category: Category the items share
        item_names: Names of the items rolled into the line
        qty: Number of items
        avg_replacement_value: Mean replacement cost used
        avg_useful_life: Mean useful life used, in years
        avg_end_value: Mean expected resale used
        total_annual_recovery: Sum of (replacement - resale) / life
        total_cogs: Sum of COGS allocated cost
        total_overhead: Sum of overhead allocated cost
        financing_type: OWNED or LEASED (overhead lines are always OWNED)
        unit: Usage unit from the category defaults
    """

    category: str
    item_names: List[str]
    qty: int
    avg_replacement_value: float
    avg_useful_life: float
    avg_end_value: float
    total_annual_recovery: float
    total_cogs: float
    total_overhead: float
    financing_type: FinancingTypeEnum
    unit: UsageUnitEnum = UsageUnitEnum.HOURS


class RollupTotals(Model):
    """Section totals."""

    total_qty: int = 0
    total_annual_recovery: float = 0.0
    total_cogs: float = 0.0
    total_overhead: float = 0.0


class RollupResult(Model):
    field_lines: List[RollupLine]
    overhead_lines: List[RollupLine]
    field_totals: RollupTotals
    overhead_totals: RollupTotals


def _budget_financing_type(valuation: DerivedValuation) -> FinancingTypeEnum:
    if valuation.financing_type == FinancingTypeEnum.LEASED:
        return FinancingTypeEnum.LEASED
    return FinancingTypeEnum.OWNED


def _category_unit(category: str, category_defaults: CategoryDefaultsTable) -> UsageUnitEnum:
    if category in category_defaults:
        return category_defaults.lookup(category).unit
    return UsageUnitEnum.HOURS


def _annual_recovery(valuation: DerivedValuation) -> float:
    # A zero life is treated as one year so a bad line cannot divide by zero
    life = valuation.useful_life_used or 1.0
    return (valuation.replacement_cost_used - valuation.expected_resale_used) / life


def _build_line(
    items: List[DerivedValuation],
    financing_type: FinancingTypeEnum,
    category_defaults: CategoryDefaultsTable,
) -> RollupLine:
    qty = len(items)
    category = items[0].category
    return RollupLine(
        category=category,
        item_names=[v.name for v in items],
        qty=qty,
        avg_replacement_value=sum(v.replacement_cost_used for v in items) / qty,
        avg_useful_life=sum(v.useful_life_used for v in items) / qty,
        avg_end_value=sum(v.expected_resale_used for v in items) / qty,
        total_annual_recovery=sum(_annual_recovery(v) for v in items),
        total_cogs=sum(v.cogs_allocated_cost for v in items),
        total_overhead=sum(v.overhead_allocated_cost for v in items),
        financing_type=financing_type,
        unit=_category_unit(category, category_defaults),
    )


def _totals(lines: List[RollupLine]) -> RollupTotals:
    return RollupTotals(
        total_qty=sum(line.qty for line in lines),
        total_annual_recovery=sum(line.total_annual_recovery for line in lines),
        total_cogs=sum(line.total_cogs for line in lines),
        total_overhead=sum(line.total_overhead for line in lines),
    )


def rollup_equipment(
    valuations: Iterable[DerivedValuation], category_defaults: CategoryDefaultsTable
) -> RollupResult:
    """
    Group active equipment into field and overhead budget lines.

    Field lines are sorted by category then financing type ("leased" before
    "owned"); overhead lines by category.

    Example:
        >>> result = rollup_equipment(valuations, STANDARD_CATEGORY_DEFAULTS)
        >>> [(line.category, line.financing_type.value, line.qty) for line in result.field_lines]
        [('Excavation', 'owned', 2), ('Truck / Vehicle', 'leased', 1)]
    """
    field_groups: Dict[Tuple[str, FinancingTypeEnum], List[DerivedValuation]] = OrderedDict()
    overhead_groups: Dict[str, List[DerivedValuation]] = OrderedDict()

    for v in valuations:
        if not v.is_active:
            continue
        if v.allocation_type == AllocationTypeEnum.OPERATIONAL:
            field_groups.setdefault((v.category, _budget_financing_type(v)), []).append(v)
        else:
            overhead_groups.setdefault(v.category, []).append(v)

    field_lines = [
        _build_line(items, financing_type, category_defaults)
        for (_, financing_type), items in field_groups.items()
    ]
    overhead_lines = [
        _build_line(items, FinancingTypeEnum.OWNED, category_defaults)
        for items in overhead_groups.values()
    ]
    field_lines.sort(key=lambda line: (line.category, line.financing_type.value))
    overhead_lines.sort(key=lambda line: line.category)

    logger.debug(
        f"Rolled up {len(field_lines)} field and {len(overhead_lines)} overhead budget lines"
    )

    return RollupResult(
        field_lines=field_lines,
        overhead_lines=overhead_lines,
        field_totals=_totals(field_lines),
        overhead_totals=_totals(overhead_lines),
    )


def _whole(value: float) -> str:
    """Round half up to a whole number, as budget spreadsheets do."""
    return str(int(math.floor(value + 0.5)))


def rollup_to_csv(result: RollupResult) -> str:
    """
    Render the rollup as a two-section CSV.

    Field lines carry a Type column (Leased/Owned); overhead lines do not.
    Currency and life values are rounded to whole numbers. Each section
    ends with a Total row carrying the item count, and a blank row
    separates the sections.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    writer.writerow([FIELD_SECTION_TITLE])
    writer.writerow(
        ["Category", "Qty", "Avg Replacement Value", "Life (Yrs)", "Avg End Value", "Type"]
    )
    for line in result.field_lines:
        writer.writerow(
            [
                line.category,
                line.qty,
                _whole(line.avg_replacement_value),
                _whole(line.avg_useful_life),
                _whole(line.avg_end_value),
                "Leased" if line.financing_type == FinancingTypeEnum.LEASED else "Owned",
            ]
        )
    writer.writerow(["Total", result.field_totals.total_qty, "", "", "", ""])
    writer.writerow([])

    writer.writerow([OVERHEAD_SECTION_TITLE])
    writer.writerow(["Category", "Qty", "Avg Replacement Value", "Life (Yrs)", "Avg End Value"])
    for line in result.overhead_lines:
        writer.writerow(
            [
                line.category,
                line.qty,
                _whole(line.avg_replacement_value),
                _whole(line.avg_useful_life),
                _whole(line.avg_end_value),
            ]
        )
    writer.writerow(["Total", result.overhead_totals.total_qty, "", "", ""])

    return buffer.getvalue()
