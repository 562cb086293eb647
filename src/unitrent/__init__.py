# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Unitrent - Rent schedule calculation for a single leased unit

Computes the rent records owed on a unit over an observation window,
accounting for move-in proration, periodic rent changes (including changes
that accrue while the unit is vacant) and short months.

Key Entry Points:
- unitrent.calculate_monthly_rent() - Rent records for a window
- unitrent.RentTerms - Validated rent terms with step-by-step accessors
- unitrent.records_to_dataframe() - Records as a pandas DataFrame

Example Usage:
    ```python
    from datetime import date
    from unitrent import calculate_monthly_rent, records_to_dataframe

    records = calculate_monthly_rent(
        base_monthly_rent=100.0,
        lease_start_date=date(2023, 1, 1),
        window_start_date=date(2023, 1, 1),
        window_end_date=date(2023, 3, 31),
        day_of_month_rent_due=15,
        rent_rate_change_frequency=1,
        rent_change_rate=0.1,
    )
    print(records_to_dataframe(records))
    ```
"""

# Add a NullHandler so applications that don't configure logging see no
# "No handlers could be found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "rent",
    "utils",
    "calculate_monthly_rent",
    "records_to_dataframe",
    "RentCalculationSettings",
    "RentRecord",
    "RentTerms",
]


_LAZY_MODULES = {
    "core": "unitrent.core",
    "rent": "unitrent.rent",
    "utils": "unitrent.utils",
}

_LAZY_ATTRIBUTES = {
    "calculate_monthly_rent": "unitrent.rent",
    "records_to_dataframe": "unitrent.rent",
    "RentCalculationSettings": "unitrent.core.primitives",
    "RentRecord": "unitrent.rent",
    "RentTerms": "unitrent.rent",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is not None:
        value = importlib.import_module(module_path)
    else:
        module_path = _LAZY_ATTRIBUTES.get(name)
        if module_path is None:
            raise AttributeError(f"module 'unitrent' has no attribute '{name}'")
        value = getattr(importlib.import_module(module_path), name)
    globals()[name] = value
    return value
