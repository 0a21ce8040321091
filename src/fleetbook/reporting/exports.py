# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
FMS / LMN export rows.

Flat per-item rows in the column order external financial management
systems expect. FMS rows also carry the attachment value and fold it into
the replacement value; LMN rows do not.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Union

import pandas as pd

from ..core.primitives import Model
from ..valuation.composer import DerivedValuation


class LMNExportRow(Model):
    equipment_name: str
    purchase_price: float
    additional_purchase_fees: float
    replacement_value: float
    expected_value_at_end_of_life: float
    useful_life: float
    cogs_percent: float
    overhead_percent: float
    cogs_allocated_cost: float
    overhead_allocated_cost: float


class FMSExportRow(LMNExportRow):
    attachment_value: float = 0.0


ExportRow = Union[LMNExportRow, FMSExportRow]

# Display headers, in export column order
EXPORT_COLUMNS: Dict[str, str] = {
    "equipment_name": "Equipment Name",
    "purchase_price": "Purchase Price",
    "additional_purchase_fees": "Additional Purchase Fees",
    "attachment_value": "Attachment Value",
    "replacement_value": "Replacement Value",
    "expected_value_at_end_of_life": "Expected Value at End of Life",
    "useful_life": "Useful Life (Years)",
    "cogs_percent": "COGS %",
    "overhead_percent": "Overhead %",
    "cogs_allocated_cost": "COGS Allocated Cost",
    "overhead_allocated_cost": "Overhead Allocated Cost",
}


def export_name(valuation: DerivedValuation) -> str:
    """``"Category - Name"``, the naming convention FMS item lists use."""
    return f"{valuation.category} - {valuation.name}"


def to_lmn_export(valuation: DerivedValuation) -> LMNExportRow:
    """LMN export row for one valuation."""
    return LMNExportRow(
        equipment_name=export_name(valuation),
        purchase_price=valuation.purchase_price,
        additional_purchase_fees=valuation.additional_purchase_fees,
        replacement_value=valuation.replacement_cost_used,
        expected_value_at_end_of_life=valuation.expected_resale_used,
        useful_life=valuation.useful_life_used,
        cogs_percent=valuation.cogs_percent,
        overhead_percent=valuation.overhead_percent,
        cogs_allocated_cost=valuation.cogs_allocated_cost,
        overhead_allocated_cost=valuation.overhead_allocated_cost,
    )


def to_fms_export(
    valuation: DerivedValuation, attachment_total: Optional[float] = None
) -> FMSExportRow:
    """
    FMS export row for one valuation.

    The replacement value includes attachments so the FMS budgets for
    replacing the whole unit. ``attachment_total`` defaults to the total
    the valuation was composed with.
    """
    if attachment_total is None:
        attachment_total = valuation.attachment_total
    lmn = to_lmn_export(valuation)
    return FMSExportRow(
        **lmn.model_dump(exclude={"replacement_value"}),
        replacement_value=valuation.replacement_cost_used + attachment_total,
        attachment_value=attachment_total,
    )


def export_frame(rows: Iterable[ExportRow]) -> pd.DataFrame:
    """
    Export rows as a DataFrame with display headers.

    Columns follow ``EXPORT_COLUMNS`` order; "Attachment Value" only
    appears when the rows carry it.
    """
    records = [row.model_dump() for row in rows]
    df = pd.DataFrame(records)
    if df.empty:
        return pd.DataFrame(columns=[h for k, h in EXPORT_COLUMNS.items() if k != "attachment_value"])
    ordered = [key for key in EXPORT_COLUMNS if key in df.columns]
    return df[ordered].rename(columns=EXPORT_COLUMNS)
