"""
Constants and configuration for the CleanLoop forecast engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict

from pydantic_settings import BaseSettings


CLEANLOOP_HOST = os.getenv("CLEANLOOP_HOST", "0.0.0.0")
CLEANLOOP_PORT = int(os.getenv("CLEANLOOP_PORT", "4323"))
CLEANLOOP_LOG_LEVEL = os.getenv("CLEANLOOP_LOG_LEVEL", "info").lower()


MODELS_USED: Dict[str, str] = {
    "statistical": "Holt linear trend + linear regression",
    "narrative": "none",
}

HEALTH_PATH = "/health"


class Settings(BaseSettings):
    host: str = CLEANLOOP_HOST
    port: int = CLEANLOOP_PORT
    log_level: str = CLEANLOOP_LOG_LEVEL

    # Holt's linear trend smoothing; picked empirically, not derived
    forecast_holt_alpha: float = float(os.getenv("CLEANLOOP_HOLT_ALPHA", "0.35"))
    forecast_holt_beta: float = float(os.getenv("CLEANLOOP_HOLT_BETA", "0.15"))

    # seasonal cycle length in periods and the share of the series mean the
    # RMS of the seasonal indices must reach before seasonality is accepted
    forecast_seasonal_period: int = 12
    forecast_seasonality_threshold: float = float(
        os.getenv("CLEANLOOP_SEASONALITY_THRESHOLD", "0.05")
    )

    # 90% two-sided normal interval, widened by variance_inflation per step
    forecast_ci_z_score: float = 1.645
    forecast_ci_variance_inflation: float = 0.15
    forecast_ci_recent_window: int = 6

    # below this many observations no forecast is produced
    forecast_min_points: int = 3

    # trend classification gates
    forecast_trend_r2_gate: float = 0.2
    forecast_trend_slope_percent: float = 1.0

    # horizons used by the predictions bundle
    forecast_monthly_horizon: int = 6
    forecast_yearly_horizon: int = 3


settings = Settings()
