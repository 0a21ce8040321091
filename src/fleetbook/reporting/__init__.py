# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reporting over composed valuations.

Fleet dashboard figures, portfolio cashflow, budget rollup and FMS/LMN
export rows. Every report consumes ``DerivedValuation`` output and never
re-derives engine figures.
"""

from .exports import (
    EXPORT_COLUMNS,
    FMSExportRow,
    LMNExportRow,
    export_frame,
    export_name,
    to_fms_export,
    to_lmn_export,
)
from .fleet import (
    FleetSummary,
    ReplacementBucket,
    UpcomingPayoff,
    active_only,
    replacement_forecast,
    summarize_fleet,
    upcoming_payoffs,
    valuations_to_frame,
)
from .portfolio import (
    PortfolioCashflow,
    Stabilization,
    calculate_cashflow_projection,
    calculate_portfolio_cashflow,
    payments_in_year,
)
from .rollup import (
    FIELD_SECTION_TITLE,
    OVERHEAD_SECTION_TITLE,
    RollupLine,
    RollupResult,
    RollupTotals,
    rollup_equipment,
    rollup_to_csv,
)

__all__ = [
    # Fleet dashboard
    "FleetSummary",
    "ReplacementBucket",
    "UpcomingPayoff",
    "active_only",
    "replacement_forecast",
    "summarize_fleet",
    "upcoming_payoffs",
    "valuations_to_frame",
    # Portfolio cashflow
    "PortfolioCashflow",
    "Stabilization",
    "calculate_cashflow_projection",
    "calculate_portfolio_cashflow",
    "payments_in_year",
    # Budget rollup
    "FIELD_SECTION_TITLE",
    "OVERHEAD_SECTION_TITLE",
    "RollupLine",
    "RollupResult",
    "RollupTotals",
    "rollup_equipment",
    "rollup_to_csv",
    # Exports
    "EXPORT_COLUMNS",
    "FMSExportRow",
    "LMNExportRow",
    "export_frame",
    "export_name",
    "to_fms_export",
    "to_lmn_export",
]
