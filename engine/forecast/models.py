"""
Data model for the forecasting engine: observations, forecast points, per-metric results, and the tunable configuration injected into each forecast call.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from config import settings
from engine.enums import Trend


@dataclass(frozen=True)
class DataPoint:
    period: str
    value: float


@dataclass(frozen=True)
class ForecastPoint:
    period: str
    predicted: float
    lower: float
    upper: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "period": self.period,
            "predicted": self.predicted,
            "lower": self.lower,
            "upper": self.upper,
        }


@dataclass(frozen=True)
class ForecastResult:
    forecasts: List[ForecastPoint] = field(default_factory=list)
    trend: Trend = Trend.stable
    trend_strength: float = 0.0
    seasonality: bool = False
    avg_growth_rate: float = 0.0
    r2: float = 0.0

    @classmethod
    def empty(cls) -> ForecastResult:
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "forecasts": [p.to_dict() for p in self.forecasts],
            "trend": self.trend.value,
            "trendStrength": self.trend_strength,
            "seasonality": self.seasonality,
            "avgGrowthRate": self.avg_growth_rate,
            "r2": self.r2,
        }


@dataclass(frozen=True)
class ForecastConfig:
    """Tunables for a single forecast call.

    The defaults mirror :class:`config.Settings`; ``from_settings`` picks up
    any environment overrides. None of these values are derived, they were
    chosen empirically and are meant to be adjusted per deployment or test.

    * ``alpha`` / ``beta``: Holt level and trend smoothing factors.
    * ``seasonal_period``: cycle length in periods (12 for monthly data).
    * ``seasonality_threshold``: fraction of the series mean the RMS of the
      seasonal indices must reach for seasonality to be accepted.
    * ``z_score``: two-sided normal quantile for the interval (1.645 = 90%).
    * ``variance_inflation``: per-step variance growth of the interval.
    * ``recent_window``: trailing observations used to estimate dispersion.
    * ``min_points``: shortest series that gets a forecast.
    * ``trend_r2_gate`` / ``trend_slope_percent``: trend classification cutoffs.
    """

    alpha: float = 0.35
    beta: float = 0.15
    seasonal_period: int = 12
    seasonality_threshold: float = 0.05
    z_score: float = 1.645
    variance_inflation: float = 0.15
    recent_window: int = 6
    min_points: int = 3
    trend_r2_gate: float = 0.2
    trend_slope_percent: float = 1.0

    @classmethod
    def from_settings(cls, source: Optional[Any] = None) -> ForecastConfig:
        if source is None:
            source = settings
        return cls(
            alpha=source.forecast_holt_alpha,
            beta=source.forecast_holt_beta,
            seasonal_period=source.forecast_seasonal_period,
            seasonality_threshold=source.forecast_seasonality_threshold,
            z_score=source.forecast_ci_z_score,
            variance_inflation=source.forecast_ci_variance_inflation,
            recent_window=source.forecast_ci_recent_window,
            min_points=source.forecast_min_points,
            trend_r2_gate=source.forecast_trend_r2_gate,
            trend_slope_percent=source.forecast_trend_slope_percent,
        )

    def as_dict(self) -> Dict[str, float]:
        return {
            "alpha": self.alpha,
            "beta": self.beta,
            "seasonal_period": self.seasonal_period,
            "seasonality_threshold": self.seasonality_threshold,
            "z_score": self.z_score,
            "variance_inflation": self.variance_inflation,
            "recent_window": self.recent_window,
            "min_points": self.min_points,
            "trend_r2_gate": self.trend_r2_gate,
            "trend_slope_percent": self.trend_slope_percent,
        }
