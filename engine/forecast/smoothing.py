"""
Holt's linear trend exponential smoothing, producing non-negative multi-step point forecasts from a level and trend state.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence, Tuple


def _holt_state(vals: Sequence[float], alpha: float, beta: float) -> Tuple[float, float]:
    level = float(vals[0])
    trend = float(vals[1]) - float(vals[0])
    for i in range(1, len(vals)):
        prev_level = level
        level = alpha * vals[i] + (1 - alpha) * (prev_level + trend)
        trend = beta * (level - prev_level) + (1 - beta) * trend
    return level, trend


def holt_forecast(
    values: Sequence[float],
    horizon: int,
    alpha: float = 0.35,
    beta: float = 0.15,
) -> List[float]:
    horizon = max(0, horizon)
    if len(values) < 2:
        return [float(values[0]) if len(values) else 0.0] * horizon

    level, trend = _holt_state(values, alpha, beta)
    # no negative revenue or order counts
    return [max(0.0, level + trend * h) for h in range(1, horizon + 1)]
