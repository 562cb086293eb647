# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unitrent Core Framework

Foundational building blocks shared by the rent calculation modules.
"""

from . import primitives
from .primitives import (
    Model,
    ObservationWindow,
    OccupancyStateEnum,
    RentCalculationSettings,
    RentChangeDirectionEnum,
)

__all__ = [
    "primitives",
    "Model",
    "ObservationWindow",
    "OccupancyStateEnum",
    "RentCalculationSettings",
    "RentChangeDirectionEnum",
]
