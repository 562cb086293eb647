# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Monthly rent calculation.

Entry point for computing the rent records owed on a leased unit within an
observation window. The calculation runs in three steps:

1. Build the rent-change schedule for the window.
2. Compute the occupant's first (possibly prorated) payment, folding in any
   changes that accrued while the unit was vacant.
3. Walk the recurring due dates from the second payment onward, applying
   scheduled changes between consecutive due dates, until the window ends.

Example:
    ```python
    from datetime import date
    from unitrent import calculate_monthly_rent

    records = calculate_monthly_rent(
        base_monthly_rent=100.0,
        lease_start_date=date(2023, 1, 1),
        window_start_date=date(2023, 1, 1),
        window_end_date=date(2023, 3, 31),
        day_of_month_rent_due=1,
        rent_rate_change_frequency=1,
        rent_change_rate=0.1,
    )
    # -> 100.00 on Jan 1, 110.00 on Feb 1, 121.00 on Mar 1
    ```
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterator, Optional

from pydantic import Field

from ..core.primitives import (
    DayOfMonth,
    Model,
    ObservationWindow,
    PositiveFloat,
    RentCalculationSettings,
    RentChangeRate,
    next_month_due_date,
)
from ..utils.money import round_amount
from .changes import apply_rent_changes
from .first_payment import FirstPayment, calculate_first_payment
from .records import RentRecord, RentRecords
from .schedule import RentChangeSchedule

logger = logging.getLogger(__name__)


class RentTerms(Model):
    """
    Rent terms for a single unit observed over a window.

    Attributes:
        base_monthly_rent: Starting monthly rent for the unit
        lease_start_date: Date the occupant's lease starts; the unit is
            vacant before it and occupied from it onward
        window_start_date: First date of the observation window (inclusive)
        window_end_date: Last date of the observation window (inclusive)
        day_of_month_rent_due: Day of each month rent is due (1-31); months
            without that day use their last day instead
        rent_rate_change_frequency: Months between rent changes; `<= 0`
            disables changes
        rent_change_rate: Fractional rate per change (0.1 = +10%,
            -0.1 = -10%); increases only apply while occupied and decreases
            only while vacant
        settings: Calculation settings
    """

    base_monthly_rent: PositiveFloat
    lease_start_date: date = Field(strict=True)
    window_start_date: date = Field(strict=True)
    window_end_date: date = Field(strict=True)
    day_of_month_rent_due: DayOfMonth
    rent_rate_change_frequency: int = Field(strict=True)
    rent_change_rate: RentChangeRate
    settings: RentCalculationSettings = Field(default_factory=RentCalculationSettings)

    @property
    def window(self) -> ObservationWindow:
        return ObservationWindow(
            start_date=self.window_start_date, end_date=self.window_end_date
        )

    def schedule(self) -> RentChangeSchedule:
        """Rent-change schedule for the observation window."""
        return RentChangeSchedule.for_window(
            self.window_start_date,
            self.window_end_date,
            self.rent_rate_change_frequency,
        )

    def first_payment(
        self, schedule: Optional[RentChangeSchedule] = None
    ) -> FirstPayment:
        """The occupant's first payment, regardless of whether it is in the window."""
        return calculate_first_payment(
            self.base_monthly_rent,
            self.lease_start_date,
            self.day_of_month_rent_due,
            self.rent_change_rate,
            schedule if schedule is not None else self.schedule(),
            self.settings,
        )

    def iter_records(self) -> Iterator[RentRecord]:
        """
        Yield rent records in due-date order.

        Yields nothing when the window is inverted or the lease starts after
        the window ends. The first payment is always computed to seed the
        recurring due dates but is only yielded when it falls inside the
        window.
        """
        window = self.window
        if window.is_empty:
            logger.debug(
                f"Empty observation window {self.window_start_date} > {self.window_end_date}"
            )
            return

        schedule = self.schedule()

        if self.lease_start_date > self.window_end_date:
            logger.debug(
                f"Lease starts {self.lease_start_date}, after window end {self.window_end_date}"
            )
            return

        precision = self.settings.decimal_precision
        first = self.first_payment(schedule)
        if window.contains(first.payment_date):
            yield RentRecord(
                vacancy=False,
                rent_amount=round_amount(first.amount, precision),
                rent_due_date=first.payment_date,
            )

        current_monthly_rent = first.monthly_rent
        previous_due_date = first.payment_date
        current_due_date = first.second_payment_date

        for _ in range(self.settings.max_iterations):
            if (
                current_due_date is None
                or current_due_date > self.window_end_date
            ):
                break

            current_monthly_rent = apply_rent_changes(
                current_monthly_rent,
                self.rent_change_rate,
                schedule,
                previous_due_date,
                current_due_date,
                self.lease_start_date,
            )

            if window.contains(current_due_date):
                yield RentRecord(
                    vacancy=False,
                    rent_amount=round_amount(current_monthly_rent, precision),
                    rent_due_date=current_due_date,
                )

            previous_due_date = current_due_date
            current_due_date = next_month_due_date(
                current_due_date, self.day_of_month_rent_due
            )
        else:
            if (
                current_due_date is not None
                and current_due_date <= self.window_end_date
            ):
                logger.warning(
                    f"Stopped after {self.settings.max_iterations} due dates; "
                    f"records from {current_due_date} to {self.window_end_date} were not generated"
                )

    def calculate(self) -> RentRecords:
        """Compute the rent records owed within the observation window."""
        records = list(self.iter_records())
        logger.debug(f"Calculated {len(records)} rent records")
        return records


def calculate_monthly_rent(
    base_monthly_rent: float,
    lease_start_date: date,
    window_start_date: date,
    window_end_date: date,
    day_of_month_rent_due: int,
    rent_rate_change_frequency: int,
    rent_change_rate: float,
    *,
    settings: Optional[RentCalculationSettings] = None,
) -> RentRecords:
    """
    Calculate the monthly rent payments (including a prorated first payment)
    owed in a given window.

    Args:
        base_monthly_rent: The base or starting monthly rent for the unit
        lease_start_date: The date that the tenant's lease starts
        window_start_date: The first date of the window (inclusive)
        window_end_date: The last date of the window (inclusive)
        day_of_month_rent_due: The day of each month on which rent is due
            (1-31). If that day doesn't exist (e.g. 31 in February), rent is
            due on the last day of that month.
        rent_rate_change_frequency: The frequency in months the rent is
            changed; `<= 0` disables changes
        rent_change_rate: The rate to increase/decrease rent (0.1 = +10%,
            -0.1 = -10%)
        settings: Optional calculation settings

    Returns:
        Rent records within the window, in increasing due-date order

    Raises:
        pydantic.ValidationError: If an input is out of range (e.g. a due day
            outside 1-31 or a negative base rent)
    """
    terms = RentTerms(
        base_monthly_rent=base_monthly_rent,
        lease_start_date=lease_start_date,
        window_start_date=window_start_date,
        window_end_date=window_end_date,
        day_of_month_rent_due=day_of_month_rent_due,
        rent_rate_change_frequency=rent_rate_change_frequency,
        rent_change_rate=rent_change_rate,
        settings=settings or RentCalculationSettings(),
    )
    return terms.calculate()
