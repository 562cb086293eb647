# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent record structures.

A `RentRecord` is the single output unit of a rent calculation: the amount
owed on one due date. Records are plain immutable values so callers can
persist or present them however they like.
"""

from __future__ import annotations

import datetime
from dataclasses import asdict, dataclass
from typing import Iterable, List

import pandas as pd

RECORD_COLUMNS = ["rent_due_date", "rent_amount", "vacancy"]


@dataclass(frozen=True, slots=True)
class RentRecord:
    """
    Immutable record of rent owed on a single due date.

    Attributes:
        vacancy: Whether the record describes a vacant period. Always False
            for records produced by the calculator; rent changes during
            vacancy surface in the first occupied payment instead.
        rent_amount: Amount owed, rounded to the configured precision
        rent_due_date: Calendar date the payment is owed
    """

    vacancy: bool
    rent_amount: float
    rent_due_date: datetime.date


RentRecords = List[RentRecord]


def records_to_dataframe(records: Iterable[RentRecord]) -> pd.DataFrame:
    """
    Convert rent records into a DataFrame, one row per due date.

    Columns are `rent_due_date`, `rent_amount` and `vacancy`, in due-date
    order as produced by the calculator. An empty input yields an empty
    frame with the same columns.
    """
    rows = [asdict(record) for record in records]
    if not rows:
        return pd.DataFrame(
            {
                "rent_due_date": pd.Series(dtype="object"),
                "rent_amount": pd.Series(dtype="float64"),
                "vacancy": pd.Series(dtype="bool"),
            }
        )
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)
