"""
Predictions service that bundles monthly and yearly metric forecasts for the admin dashboards.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Mapping, Optional, Sequence

from api.requests import PredictionsRequest, to_points
from api.responses import ForecastResultModel, PredictionsResponse
from config import MODELS_USED, settings
from engine.enums import Cadence
from engine.forecast import DataPoint, ForecastConfig, forecast_multiple_metrics

log = logging.getLogger(__name__)


def build_predictions(
    monthly: Mapping[str, Sequence[DataPoint]],
    yearly: Mapping[str, Sequence[DataPoint]],
    config: Optional[ForecastConfig] = None,
) -> PredictionsResponse:
    if config is None:
        config = ForecastConfig.from_settings()

    monthly_results = forecast_multiple_metrics(
        monthly, settings.forecast_monthly_horizon, cadence=Cadence.monthly, config=config
    )
    yearly_results = forecast_multiple_metrics(
        yearly, settings.forecast_yearly_horizon, cadence=Cadence.yearly, config=config
    )

    sparse: List[str] = [name for name, r in monthly_results.items() if not r.forecasts]
    if sparse:
        log.info("predictions: insufficient monthly history for %s", ", ".join(sorted(sparse)))

    return PredictionsResponse(
        forecasts={k: ForecastResultModel.from_result(v) for k, v in monthly_results.items()},
        yearly_forecasts={k: ForecastResultModel.from_result(v) for k, v in yearly_results.items()},
        generated_at=datetime.now(timezone.utc),
        models_used=dict(MODELS_USED),
    )


async def run_predictions(req: PredictionsRequest) -> PredictionsResponse:
    monthly = {name: to_points(series) for name, series in req.monthly.items()}
    yearly = {name: to_points(series) for name, series in req.yearly.items()}
    return build_predictions(monthly, yearly)
