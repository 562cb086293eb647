# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent-change application.

A scheduled change only moves the rent when its direction matches the
occupancy state on the change date:

    | state    | increase (rate > 0) | decrease (rate < 0) |
    |----------|---------------------|---------------------|
    | VACANT   | no change           | applied             |
    | OCCUPIED | applied             | no change           |

Occupants never see rent decreases and vacant units never see rent
increases. Changes that accrue during vacancy are carried into the rent the
first occupant pays.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..core.primitives import OccupancyStateEnum, RentChangeDirectionEnum
from .schedule import RentChangeSchedule

logger = logging.getLogger(__name__)


def occupancy_at(on_date: date, lease_start_date: date) -> OccupancyStateEnum:
    """Occupancy state of the unit on `on_date`."""
    if on_date >= lease_start_date:
        return OccupancyStateEnum.OCCUPIED
    return OccupancyStateEnum.VACANT


def rent_change_direction(rent_change_rate: float) -> RentChangeDirectionEnum:
    """Classify a rent change rate by the direction it moves the rent."""
    if rent_change_rate > 0:
        return RentChangeDirectionEnum.INCREASE
    if rent_change_rate < 0:
        return RentChangeDirectionEnum.DECREASE
    return RentChangeDirectionEnum.NONE


def change_applies(
    state: OccupancyStateEnum, direction: RentChangeDirectionEnum
) -> bool:
    """Whether a change in `direction` takes effect while the unit is in `state`."""
    if state == OccupancyStateEnum.OCCUPIED:
        return direction == RentChangeDirectionEnum.INCREASE
    return direction == RentChangeDirectionEnum.DECREASE


def calculate_new_monthly_rent(current_rent: float, rent_change_rate: float) -> float:
    """Returns current_rent * (1 + rent_change_rate)."""
    return current_rent * (1 + rent_change_rate)


def apply_rent_changes(
    current_rent: float,
    rent_change_rate: float,
    schedule: RentChangeSchedule,
    previous_date: Optional[date],
    upcoming_date: date,
    lease_start_date: date,
) -> float:
    """
    Apply every qualifying scheduled change in `(previous_date, upcoming_date]`.

    Qualifying changes compound in chronological order. A `previous_date`
    of None covers every change dated on or before `upcoming_date`, which is
    how vacancy-period changes are folded in before the first payment.

    Args:
        current_rent: Monthly rent before the interval
        rent_change_rate: Fractional rate (0.1 = +10%, -0.1 = -10%)
        schedule: Rent-change dates for the observation window
        previous_date: Exclusive lower bound, or None for unbounded
        upcoming_date: Inclusive upper bound
        lease_start_date: Date the unit becomes occupied

    Returns:
        Monthly rent after the interval
    """
    direction = rent_change_direction(rent_change_rate)
    for change_date in schedule.dates_between(previous_date, upcoming_date):
        state = occupancy_at(change_date, lease_start_date)
        if not change_applies(state, direction):
            continue
        new_rent = calculate_new_monthly_rent(current_rent, rent_change_rate)
        logger.debug(
            f"Rent change on {change_date} ({state.value}): {current_rent:.2f} -> {new_rent:.2f}"
        )
        current_rent = new_rent
    return current_rent
