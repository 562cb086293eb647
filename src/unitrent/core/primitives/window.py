# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

from pydantic import Field

from .model import Model


class ObservationWindow(Model):
    """
    Inclusive date range over which rent records are reported.

    The window may be degenerate (`start_date > end_date`); such a window
    contains no dates and yields no records. Ordering is intentionally not
    validated.

    Attributes:
        start_date: First date of the window (inclusive).
        end_date: Last date of the window (inclusive).

    Examples:
        >>> from datetime import date
        >>> window = ObservationWindow(
        ...     start_date=date(2023, 1, 1), end_date=date(2023, 3, 31)
        ... )
        >>> window.contains(date(2023, 3, 31))
        True
        >>> ObservationWindow(
        ...     start_date=date(2023, 1, 1), end_date=date(2022, 6, 30)
        ... ).is_empty
        True
    """

    start_date: date = Field(strict=True)
    end_date: date = Field(strict=True)

    @property
    def is_empty(self) -> bool:
        """True when the window is inverted and contains no dates."""
        return self.start_date > self.end_date

    def contains(self, d: date) -> bool:
        """Check whether `d` falls within `[start_date, end_date]`."""
        return self.start_date <= d <= self.end_date
