"""
Ordinary least-squares trend extraction over an equally spaced index, returning slope, intercept and R² with explicit fallbacks for short and constant series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class LinearFit:
    slope: float
    intercept: float
    r2: float

    def at(self, index: float) -> float:
        return self.intercept + self.slope * index


def linear_regression(values: Sequence[float]) -> LinearFit:
    n = len(values)
    if n < 2:
        return LinearFit(slope=0.0, intercept=float(values[0]) if n else 0.0, r2=0.0)

    y = np.asarray(values, dtype=float)
    x = np.arange(n, dtype=float)
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_x2 = float(np.sum(x * x))
    mean_y = sum_y / n

    denom = n * sum_x2 - sum_x * sum_x
    if denom == 0:
        return LinearFit(slope=0.0, intercept=mean_y, r2=0.0)

    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n

    ss_tot = float(np.sum((y - mean_y) ** 2))
    ss_res = float(np.sum((y - (intercept + slope * x)) ** 2))
    # a flat series has nothing to explain; report no fit rather than a perfect one
    r2 = 1.0 - ss_res / ss_tot if ss_tot > 0 else 0.0

    return LinearFit(slope=slope, intercept=intercept, r2=r2)
