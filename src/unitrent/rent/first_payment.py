# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
First-payment calculation.

The occupant's first payment is always due on the lease start date. When the
lease starts on a day other than the rent due day the payment is prorated
against a fixed 30-day month (configurable via `proration_days`), not the
actual length of the month:

- start day before the due day: pays `(due_day - start_day) / 30` of a
  month, and the second payment is due on the month's due date, or next
  month when that due date is clamped onto the start date itself;
- start day on the due day: pays a full month, second payment next month;
- start day after the due day: pays `1 - (start_day - due_day) / 30` of a
  month, second payment next month.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..core.primitives import (
    Model,
    RentCalculationSettings,
    clamp_to_month,
    next_month_due_date,
)
from .changes import apply_rent_changes
from .schedule import RentChangeSchedule

logger = logging.getLogger(__name__)


class FirstPayment(Model):
    """
    The occupant's first payment and the date the recurring payments start.

    Attributes:
        payment_date: Due date of the first payment (the lease start date)
        amount: Unrounded first-payment amount
        monthly_rent: Monthly rent in effect on the first payment date,
            after any vacancy-period changes
        fraction: Share of `monthly_rent` owed for the first payment
        second_payment_date: Due date of the second payment; None when it
            would fall after December 9999
    """

    payment_date: date
    amount: float
    monthly_rent: float
    fraction: float
    second_payment_date: Optional[date]


def proration_fraction(start_day: int, due_day: int, proration_days: int = 30) -> float:
    """Share of a monthly rent owed for a lease starting on `start_day`."""
    if start_day < due_day:
        return (due_day - start_day) / proration_days
    if start_day == due_day:
        return 1.0
    return 1 - (start_day - due_day) / proration_days


def second_payment_date(lease_start_date: date, due_day: int) -> Optional[date]:
    """
    Due date following the first payment, clamped to the month's length.

    The comparison is made against the clamped date, so a lease starting on
    Feb 28 with rent due on the 31st is still prorated on the 31st but pays
    next on Mar 31.
    """
    same_month_due_date = clamp_to_month(lease_start_date, due_day)
    if same_month_due_date > lease_start_date:
        return same_month_due_date
    return next_month_due_date(lease_start_date, due_day)


def calculate_first_payment(
    base_monthly_rent: float,
    lease_start_date: date,
    day_of_month_rent_due: int,
    rent_change_rate: float,
    schedule: RentChangeSchedule,
    settings: Optional[RentCalculationSettings] = None,
) -> FirstPayment:
    """
    Compute the occupant's first payment.

    Every scheduled change dated on or before the lease start is applied
    first, so reductions accrued while the unit sat vacant are reflected in
    the rent the occupant starts paying.

    Args:
        base_monthly_rent: Starting monthly rent for the unit
        lease_start_date: Date the occupant's lease starts
        day_of_month_rent_due: Day of each month rent is due (1-31)
        rent_change_rate: Fractional rent change rate
        schedule: Rent-change dates for the observation window
        settings: Calculation settings (defaults apply when omitted)

    Returns:
        FirstPayment with the amount, monthly rent and second due date
    """
    settings = settings or RentCalculationSettings()

    monthly_rent = apply_rent_changes(
        base_monthly_rent,
        rent_change_rate,
        schedule,
        None,
        lease_start_date,
        lease_start_date,
    )
    fraction = proration_fraction(
        lease_start_date.day, day_of_month_rent_due, settings.proration_days
    )
    payment = FirstPayment(
        payment_date=lease_start_date,
        amount=monthly_rent * fraction,
        monthly_rent=monthly_rent,
        fraction=fraction,
        second_payment_date=second_payment_date(
            lease_start_date, day_of_month_rent_due
        ),
    )
    logger.debug(
        f"First payment on {payment.payment_date}: {fraction:.4f} of {monthly_rent:.2f}, "
        f"next due {payment.second_payment_date}"
    )
    return payment
