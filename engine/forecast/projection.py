"""
Forecast orchestration for business metrics: combines linear trend extraction, seasonality detection, Holt smoothing and confidence estimation into one result per series, with trend classification and growth-rate summary.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np

from engine.enums import Cadence, Trend
from engine.forecast.confidence import confidence_bounds
from engine.forecast.models import DataPoint, ForecastConfig, ForecastPoint, ForecastResult
from engine.forecast.periods import future_periods
from engine.forecast.regression import LinearFit, linear_regression
from engine.forecast.seasonality import deseasonalize, detect_seasonality, reseasonalize
from engine.forecast.smoothing import holt_forecast

log = logging.getLogger(__name__)


def classify_trend(fit: LinearFit, values: Sequence[float], config: ForecastConfig) -> Trend:
    mean_val = float(np.mean(values)) if len(values) else 0.0
    slope_percent = fit.slope / mean_val * 100 if mean_val > 0 else 0.0
    # a low r2 means the slope is mostly noise, whatever its size
    if fit.r2 > config.trend_r2_gate:
        if slope_percent > config.trend_slope_percent:
            return Trend.growing
        if slope_percent < -config.trend_slope_percent:
            return Trend.declining
    return Trend.stable


def average_growth_rate(values: Sequence[float]) -> float:
    # steps out of a zero (or negative) value have no defined percentage and are skipped
    rates = [
        (values[i] - values[i - 1]) / values[i - 1] * 100
        for i in range(1, len(values))
        if values[i - 1] > 0
    ]
    return float(np.mean(rates)) if rates else 0.0


def forecast_monthly(
    data: Sequence[DataPoint],
    horizon: int = 6,
    cadence: Optional[Cadence] = None,
    config: Optional[ForecastConfig] = None,
) -> ForecastResult:
    """Forecast one metric series ``horizon`` periods ahead.

    ``data`` must be ordered and contiguous at ``cadence``; when ``cadence``
    is omitted it is resolved once from the last period label. Series shorter
    than ``config.min_points`` yield an empty result instead of an error.
    """
    if config is None:
        config = ForecastConfig.from_settings()
    if len(data) < max(config.min_points, 1):
        log.debug("forecast skipped: %d points, need %d", len(data), config.min_points)
        return ForecastResult.empty()

    horizon = max(0, horizon)
    values: List[float] = [float(d.value) for d in data]
    last_period = data[-1].period
    if cadence is None:
        cadence = Cadence.infer(last_period)

    fit = linear_regression(values)

    seasonal = detect_seasonality(
        values,
        period=config.seasonal_period,
        threshold=config.seasonality_threshold,
    )
    adjusted = deseasonalize(values, seasonal) if seasonal else values

    predicted = holt_forecast(adjusted, horizon, alpha=config.alpha, beta=config.beta)
    if seasonal:
        log.debug("seasonality detected over %d points (period=%d)", len(values), config.seasonal_period)
        predicted = reseasonalize(predicted, seasonal, offset=len(values))

    lower, upper = confidence_bounds(
        values,
        predicted,
        z_score=config.z_score,
        window=config.recent_window,
        variance_inflation=config.variance_inflation,
    )
    labels = future_periods(last_period, horizon, cadence)

    forecasts = [
        ForecastPoint(
            period=labels[i],
            predicted=round(p, 2),
            lower=round(lower[i], 2),
            upper=round(upper[i], 2),
        )
        for i, p in enumerate(predicted)
    ]

    return ForecastResult(
        forecasts=forecasts,
        trend=classify_trend(fit, values, config),
        trend_strength=min(1.0, abs(fit.r2)),
        seasonality=seasonal is not None,
        avg_growth_rate=round(average_growth_rate(values), 2),
        r2=round(fit.r2, 3),
    )


def forecast_multiple_metrics(
    datasets: Mapping[str, Sequence[DataPoint]],
    horizon: int = 6,
    cadence: Optional[Cadence] = None,
    config: Optional[ForecastConfig] = None,
) -> Dict[str, ForecastResult]:
    if config is None:
        config = ForecastConfig.from_settings()
    return {
        name: forecast_monthly(series, horizon, cadence=cadence, config=config)
        for name, series in datasets.items()
    }
