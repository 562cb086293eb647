# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from decimal import ROUND_HALF_UP, Decimal
from typing import Union


def round_amount(amount: Union[int, float], precision: int = 2) -> float:
    """
    Round a monetary amount half-up to `precision` decimal places.

    Rounds the float's shortest decimal representation, so 46.665 rounds to
    46.67 rather than following the binary value just below it.
    """
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(repr(float(amount))).quantize(quantum, rounding=ROUND_HALF_UP))
