"""
Forecasting logic for aggregated business metrics, including linear trend extraction, seasonality detection, Holt's linear trend smoothing and confidence interval estimation, to project revenue, order and customer counts with uncertainty bands.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.models import DataPoint, ForecastConfig, ForecastPoint, ForecastResult
from engine.forecast.exceptions import ForecastError, InvalidPeriodLabel
from engine.forecast.periods import generate_future_months, generate_future_years, future_periods
from engine.forecast.projection import forecast_monthly, forecast_multiple_metrics

__all__ = [
    "DataPoint",
    "ForecastConfig",
    "ForecastPoint",
    "ForecastResult",
    "ForecastError",
    "InvalidPeriodLabel",
    "generate_future_months",
    "generate_future_years",
    "future_periods",
    "forecast_monthly",
    "forecast_multiple_metrics",
]
