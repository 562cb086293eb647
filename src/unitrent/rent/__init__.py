# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unitrent Rent Calculation

Rent-change schedules, the rent-change applier, first-payment proration and
the recurring due-date calculation.
"""

from .calculator import RentTerms, calculate_monthly_rent
from .changes import (
    apply_rent_changes,
    calculate_new_monthly_rent,
    change_applies,
    occupancy_at,
    rent_change_direction,
)
from .first_payment import (
    FirstPayment,
    calculate_first_payment,
    proration_fraction,
    second_payment_date,
)
from .records import RentRecord, RentRecords, records_to_dataframe
from .schedule import RentChangeSchedule, generate_rent_change_dates

__all__ = [
    # Entry points
    "calculate_monthly_rent",
    "RentTerms",
    # Records
    "RentRecord",
    "RentRecords",
    "records_to_dataframe",
    # Schedule
    "RentChangeSchedule",
    "generate_rent_change_dates",
    # Rent changes
    "apply_rent_changes",
    "calculate_new_monthly_rent",
    "change_applies",
    "occupancy_at",
    "rent_change_direction",
    # First payment
    "FirstPayment",
    "calculate_first_payment",
    "proration_fraction",
    "second_payment_date",
]
