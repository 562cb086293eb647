# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unitrent Core Primitives

Essential building blocks for rent calculations: the base model, constrained
types, occupancy enums, calendar utilities, the observation window and the
calculation settings.
"""

from .calendar import (
    clamp_to_month,
    due_date_in_month,
    first_of_month,
    is_leap_year,
    last_day_of_month,
    next_month_due_date,
    shift_month,
)
from .enums import OccupancyStateEnum, RentChangeDirectionEnum
from .model import Model
from .settings import RentCalculationSettings
from .types import (
    DayOfMonth,
    PositiveFloat,
    PositiveInt,
    PositiveIntGt0,
    RentChangeRate,
)
from .window import ObservationWindow

__all__ = [
    # Base model
    "Model",
    # Window
    "ObservationWindow",
    # Settings
    "RentCalculationSettings",
    # Enums
    "OccupancyStateEnum",
    "RentChangeDirectionEnum",
    # Types
    "DayOfMonth",
    "PositiveFloat",
    "PositiveInt",
    "PositiveIntGt0",
    "RentChangeRate",
    # Calendar utilities
    "clamp_to_month",
    "due_date_in_month",
    "first_of_month",
    "is_leap_year",
    "last_day_of_month",
    "next_month_due_date",
    "shift_month",
]
