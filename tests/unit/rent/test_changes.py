# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the rent-change applier."""

from datetime import date

import pytest

from unitrent.core.primitives import OccupancyStateEnum, RentChangeDirectionEnum
from unitrent.rent import (
    RentChangeSchedule,
    apply_rent_changes,
    calculate_new_monthly_rent,
    change_applies,
    occupancy_at,
    rent_change_direction,
)

LEASE_START = date(2023, 6, 15)


@pytest.fixture
def schedule() -> RentChangeSchedule:
    # Changes on 5/1, 6/1, 7/1, 8/1
    return RentChangeSchedule.for_window(date(2023, 4, 1), date(2023, 8, 31), 1)


def test_occupancy_transitions_on_lease_start():
    assert occupancy_at(date(2023, 6, 14), LEASE_START) == OccupancyStateEnum.VACANT
    assert occupancy_at(LEASE_START, LEASE_START) == OccupancyStateEnum.OCCUPIED
    assert occupancy_at(date(2024, 1, 1), LEASE_START) == OccupancyStateEnum.OCCUPIED


@pytest.mark.parametrize(
    "rate, expected",
    [
        (0.1, RentChangeDirectionEnum.INCREASE),
        (-0.1, RentChangeDirectionEnum.DECREASE),
        (0.0, RentChangeDirectionEnum.NONE),
    ],
)
def test_rent_change_direction(rate, expected):
    assert rent_change_direction(rate) == expected


@pytest.mark.parametrize(
    "state, direction, expected",
    [
        (OccupancyStateEnum.OCCUPIED, RentChangeDirectionEnum.INCREASE, True),
        (OccupancyStateEnum.OCCUPIED, RentChangeDirectionEnum.DECREASE, False),
        (OccupancyStateEnum.OCCUPIED, RentChangeDirectionEnum.NONE, False),
        (OccupancyStateEnum.VACANT, RentChangeDirectionEnum.INCREASE, False),
        (OccupancyStateEnum.VACANT, RentChangeDirectionEnum.DECREASE, True),
        (OccupancyStateEnum.VACANT, RentChangeDirectionEnum.NONE, False),
    ],
)
def test_change_applies_decision_table(state, direction, expected):
    assert change_applies(state, direction) is expected


def test_calculate_new_monthly_rent():
    assert calculate_new_monthly_rent(200.0, 0.1) == pytest.approx(220.0)
    assert calculate_new_monthly_rent(300.0, -0.1) == pytest.approx(270.0)


class TestApplyRentChanges:
    """Tests for apply_rent_changes."""

    def test_negative_rate_applies_only_while_vacant(self, schedule):
        # 5/1 and 6/1 are before the lease start, 7/1 and 8/1 after
        rent = apply_rent_changes(300.0, -0.1, schedule, None, date(2023, 8, 31), LEASE_START)
        assert rent == pytest.approx(243.0)

    def test_positive_rate_applies_only_while_occupied(self, schedule):
        rent = apply_rent_changes(100.0, 0.1, schedule, None, date(2023, 8, 31), LEASE_START)
        assert rent == pytest.approx(121.0)

    def test_changes_compound_in_interval(self, schedule):
        rent = apply_rent_changes(
            100.0, 0.1, schedule, None, date(2023, 8, 1), date(2023, 1, 1)
        )
        assert rent == pytest.approx(100.0 * 1.1**4)

    def test_previous_date_is_exclusive(self, schedule):
        rent = apply_rent_changes(
            100.0, 0.1, schedule, date(2023, 7, 1), date(2023, 7, 31), date(2023, 1, 1)
        )
        assert rent == 100.0

    def test_upcoming_date_is_inclusive(self, schedule):
        rent = apply_rent_changes(
            100.0, 0.1, schedule, date(2023, 6, 15), date(2023, 7, 1), date(2023, 1, 1)
        )
        assert rent == pytest.approx(110.0)

    def test_zero_rate_is_no_op(self, schedule):
        rent = apply_rent_changes(100.0, 0.0, schedule, None, date(2023, 8, 31), LEASE_START)
        assert rent == 100.0

    def test_empty_schedule_is_no_op(self):
        rent = apply_rent_changes(
            100.0, 0.5, RentChangeSchedule(), None, date(2030, 1, 1), date(2020, 1, 1)
        )
        assert rent == 100.0
