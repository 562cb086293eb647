# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class OccupancyStateEnum(str, Enum):
    """
    Occupancy of the unit at a point in time.

    A unit is VACANT before the lease start date and OCCUPIED from the lease
    start date onward. The transition happens once and never reverses.
    """

    VACANT = "Vacant"
    OCCUPIED = "Occupied"


class RentChangeDirectionEnum(str, Enum):
    """Direction in which a rent change rate moves the rent."""

    INCREASE = "Increase"  # rate > 0, applies only while occupied
    DECREASE = "Decrease"  # rate < 0, applies only while vacant
    NONE = "None"
