# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar utilities for monthly due dates.

Every clamping path in the package goes through `last_day_of_month`, so a
due day beyond a month's length resolves to the same date no matter which
code path derives it.
"""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, date
from typing import Optional, Tuple

import pandas as pd
from dateutil.relativedelta import relativedelta


def last_day_of_month(year: int, month: int) -> int:
    """Number of days in the given month (28-31)."""
    return pd.Period(year=year, month=month, freq="M").days_in_month


def is_leap_year(year: int) -> bool:
    """Gregorian leap year test (2000 is a leap year, 1900 is not)."""
    return pd.Period(year=year, month=1, freq="M").is_leap_year


def due_date_in_month(year: int, month: int, day_of_month: int) -> date:
    """
    Due date for `day_of_month` in the given month.

    Clamps to the month's last day when the month is shorter than
    `day_of_month` (e.g. day 31 in February 2023 resolves to Feb 28).

    Args:
        year: Calendar year
        month: Calendar month (1-12)
        day_of_month: Requested due day (1-31)

    Returns:
        The effective due date within that month
    """
    return date(year, month, min(day_of_month, last_day_of_month(year, month)))


def clamp_to_month(d: date, day_of_month: int) -> date:
    """Due date for `day_of_month` in the same month as `d`."""
    return due_date_in_month(d.year, d.month, day_of_month)


def shift_month(year: int, month: int, months: int) -> Tuple[int, int]:
    """(year, month) `months` months after the given month."""
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def first_of_month(d: date, months: int = 0) -> Optional[date]:
    """
    1st of the month `months` months after the month containing `d`.

    Returns None when that month falls outside the supported calendar
    (years 1-9999), so callers walking forward can stop instead of failing.
    """
    year, _ = shift_month(d.year, d.month, months)
    if not MINYEAR <= year <= MAXYEAR:
        return None
    return d.replace(day=1) + relativedelta(months=months)


def next_month_due_date(current: date, day_of_month: int) -> Optional[date]:
    """
    Due date for `day_of_month` in the month after `current`.

    The requested day is applied to the following month, not carried over
    from `current`, so a clamped Feb 28 is followed by Mar 31 for day 31.
    Returns None after December 9999.
    """
    following = first_of_month(current, 1)
    if following is None:
        return None
    return clamp_to_month(following, day_of_month)
