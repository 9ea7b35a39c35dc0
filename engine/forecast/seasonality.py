"""
Fixed-period seasonality detection for aggregated business series: detrends with the linear fit, averages the residuals per phase, and rejects patterns too weak relative to the series mean.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from engine.forecast.regression import linear_regression


def detect_seasonality(
    values: Sequence[float],
    period: int = 12,
    threshold: float = 0.05,
) -> Optional[List[float]]:
    n = len(values)
    if period < 1 or n < period * 2:
        return None

    arr = np.asarray(values, dtype=float)
    fit = linear_regression(arr)
    detrended = arr - (fit.intercept + fit.slope * np.arange(n, dtype=float))

    phases = np.arange(n) % period
    sums = np.bincount(phases, weights=detrended, minlength=period)
    counts = np.bincount(phases, minlength=period)
    seasonal = np.divide(sums, counts, out=np.zeros(period), where=counts > 0)

    mean_val = float(np.mean(arr))
    rms = float(np.sqrt(np.mean(seasonal ** 2)))
    if rms < mean_val * threshold:
        return None
    return [float(s) for s in seasonal]


def deseasonalize(values: Sequence[float], seasonal: Sequence[float]) -> List[float]:
    period = len(seasonal)
    return [float(v) - seasonal[i % period] for i, v in enumerate(values)]


def reseasonalize(predicted: Sequence[float], seasonal: Sequence[float], offset: int) -> List[float]:
    # step h (0-indexed here) continues the phase right after the history
    period = len(seasonal)
    return [max(0.0, p + seasonal[(offset + i) % period]) for i, p in enumerate(predicted)]
