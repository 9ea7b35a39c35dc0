"""
Confidence interval estimation around point forecasts, using the dispersion of the most recent observations and widening the band with forecast distance.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np


def recent_std(historical: Sequence[float], window: int = 6) -> float:
    n = len(historical)
    if n == 0 or window < 1:
        return 0.0
    recent = np.asarray(historical[-min(window, n):], dtype=float)
    return float(np.std(recent))


def confidence_bounds(
    historical: Sequence[float],
    predicted: Sequence[float],
    z_score: float = 1.645,
    window: int = 6,
    variance_inflation: float = 0.15,
) -> Tuple[List[float], List[float]]:
    std = recent_std(historical, window)
    lower: List[float] = []
    upper: List[float] = []
    for i, p in enumerate(predicted):
        spread = std * z_score * math.sqrt(1 + i * variance_inflation)
        lower.append(max(0.0, p - spread))
        upper.append(p + spread)
    return lower, upper
