# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent-change schedule generation.

Rent-change dates are anchored to the 1st of a month and spaced a fixed
number of months apart, starting one interval after the month in which the
observation window opens. The schedule is independent of occupancy; the
rent-change applier decides whether each date actually moves the rent.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Tuple

from ..core.primitives import Model, first_of_month

logger = logging.getLogger(__name__)


def generate_rent_change_dates(
    window_start_date: date,
    window_end_date: date,
    frequency_months: int,
) -> Tuple[date, ...]:
    """
    Generate rent-change dates within the observation window.

    The first change falls on the 1st of the month `frequency_months` after
    the window-start month; e.g. a window opening 2023-03-15 with a
    frequency of 2 yields 2023-05-01, 2023-07-01, ... up to the window end.

    Args:
        window_start_date: First date of the observation window
        window_end_date: Last date of the observation window
        frequency_months: Months between changes; `<= 0` disables changes

    Returns:
        Ordered tuple of change dates, empty when changes are disabled
    """
    if frequency_months <= 0:
        return ()

    dates = []
    offset = frequency_months
    change_date = first_of_month(window_start_date, offset)
    while change_date is not None and change_date <= window_end_date:
        dates.append(change_date)
        offset += frequency_months
        change_date = first_of_month(window_start_date, offset)

    logger.debug(
        f"Generated {len(dates)} rent change dates every {frequency_months} months"
    )
    return tuple(dates)


class RentChangeSchedule(Model):
    """
    Ordered rent-change dates for one observation window.

    Attributes:
        change_dates: Change dates in ascending order, each the 1st of a month
    """

    change_dates: Tuple[date, ...] = ()

    @classmethod
    def for_window(
        cls,
        window_start_date: date,
        window_end_date: date,
        frequency_months: int,
    ) -> "RentChangeSchedule":
        """Build the schedule for a window and change frequency."""
        return cls(
            change_dates=generate_rent_change_dates(
                window_start_date, window_end_date, frequency_months
            )
        )

    def dates_between(
        self, previous_date: Optional[date], upcoming_date: date
    ) -> Tuple[date, ...]:
        """
        Change dates in `(previous_date, upcoming_date]`.

        A `previous_date` of None leaves the interval unbounded below.
        """
        return tuple(
            cd
            for cd in self.change_dates
            if (previous_date is None or cd > previous_date) and cd <= upcoming_date
        )
