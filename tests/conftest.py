# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Unitrent testing.

Provides a factory for rent calculation parameters so each test only spells
out the values it cares about.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Dict, List

import pytest

from unitrent.rent import RentRecord, RentTerms, calculate_monthly_rent


def default_rent_params(**overrides: Any) -> Dict[str, Any]:
    """
    Default parameters for `calculate_monthly_rent`, with overrides applied.

    Defaults describe a tenant moving in on 2023-01-01 with rent due on the
    1st, observed over Q1 2023, with rent rising 10% every month.
    """
    params = {
        "base_monthly_rent": 100.0,
        "lease_start_date": date(2023, 1, 1),
        "window_start_date": date(2023, 1, 1),
        "window_end_date": date(2023, 3, 31),
        "day_of_month_rent_due": 1,
        "rent_rate_change_frequency": 1,
        "rent_change_rate": 0.1,
    }
    params.update(overrides)
    return params


@pytest.fixture
def make_rent_params() -> Callable[..., Dict[str, Any]]:
    """
    Factory for `calculate_monthly_rent` keyword arguments.

    Usage:
        def test_something(make_rent_params):
            params = make_rent_params(day_of_month_rent_due=15)
    """
    return default_rent_params


@pytest.fixture
def run_rent() -> Callable[..., List[RentRecord]]:
    """Run `calculate_monthly_rent` with default parameters and overrides."""

    def _run(**overrides: Any) -> List[RentRecord]:
        return calculate_monthly_rent(**default_rent_params(**overrides))

    return _run


@pytest.fixture
def as_pairs() -> Callable[[List[RentRecord]], List[tuple]]:
    """(amount, due date) pairs for compact assertions."""

    def _pairs(records: List[RentRecord]) -> List[tuple]:
        return [(r.rent_amount, r.rent_due_date) for r in records]

    return _pairs


@pytest.fixture
def default_terms() -> RentTerms:
    return RentTerms(**default_rent_params())
