# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Total cost basis of a piece of equipment."""

from __future__ import annotations

from ..equipment.record import EquipmentRecord


def total_cost_basis(record: EquipmentRecord, attachment_total: float = 0.0) -> float:
    """
    Sum every acquisition-related charge into a single cost basis.

    ``attachment_total`` is the externally computed declared value of all
    attachments linked to the equipment and is added as-is. This is a pure
    sum: inputs are validated non-negative at the record boundary and are
    not clamped here.
    """
    return (
        record.purchase_price
        + record.sales_tax
        + record.freight_setup
        + record.other_capex
        + attachment_total
    )


def additional_purchase_fees(record: EquipmentRecord) -> float:
    """Charges on top of the purchase price (tax, freight/setup, other capex)."""
    return record.sales_tax + record.freight_setup + record.other_capex
