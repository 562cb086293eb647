# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
PositiveIntGt0 = Annotated[int, Field(strict=True, gt=0)]
PositiveFloat = Annotated[float, Field(strict=True, ge=0)]
DayOfMonth = Annotated[int, Field(strict=True, ge=1, le=31)]
RentChangeRate = Annotated[float, Field(strict=True, ge=-1)]
