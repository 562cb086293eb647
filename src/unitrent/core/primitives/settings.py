# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .model import Model
from .types import PositiveInt, PositiveIntGt0


class RentCalculationSettings(Model):
    """
    Configuration settings for the rent calculation.

    The defaults reproduce the standard policy: prorated first payments use a
    fixed 30-day month regardless of the actual month length, amounts are
    rounded to cents, and the recurring due-date loop stops after 500 due
    dates (roughly 41 years of monthly payments).

    Usage Examples:
        # Standard policy
        settings = RentCalculationSettings()

        # Long observation windows
        settings = RentCalculationSettings(max_iterations=1200)
    """

    proration_days: PositiveIntGt0 = Field(
        default=30,
        description="Fixed month length used as the denominator for first-payment proration.",
    )
    decimal_precision: PositiveInt = Field(
        default=2, description="Number of decimal places for rent amounts."
    )
    max_iterations: PositiveIntGt0 = Field(
        default=500,
        description=(
            "Upper bound on recurring due dates walked per calculation. "
            "Guarantees termination; windows needing more due dates are truncated."
        ),
    )
