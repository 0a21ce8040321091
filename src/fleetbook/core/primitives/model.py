# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models: equipment records come in, derived figures go out,
    and nothing in between is ever mutated. A new value is produced with
    ``model_copy(update=...)`` instead.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Inputs and derived figures are never mutated in place
        extra="forbid",  # Unknown fields are rejected
    )
