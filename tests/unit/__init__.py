# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for Fleetbook components.

Every test injects a fixed as-of date; none reads the clock.
"""
