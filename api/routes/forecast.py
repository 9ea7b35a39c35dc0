"""
Forecast routes projecting caller-supplied period series with the statistical engine.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Dict

from fastapi import APIRouter

from api.requests import BatchForecastRequest, ForecastRequest
from api.responses import ForecastResultModel
from api.routes.exception import handle_exceptions
from engine.forecast import ForecastConfig, forecast_monthly, forecast_multiple_metrics

router = APIRouter(tags=["Forecast"])


@router.post(
    "/forecast",
    response_model=ForecastResultModel,
    summary="Point forecasts, 90% bands and trend summary for one series",
)
@handle_exceptions
async def forecast_series(req: ForecastRequest) -> ForecastResultModel:
    result = forecast_monthly(
        req.points(),
        req.horizon,
        cadence=req.resolved_cadence(),
        config=ForecastConfig.from_settings(),
    )
    return ForecastResultModel.from_result(result)


@router.post(
    "/forecast/batch",
    response_model=Dict[str, ForecastResultModel],
    summary="Independent forecasts for several named series",
)
@handle_exceptions
async def forecast_batch(req: BatchForecastRequest) -> Dict[str, ForecastResultModel]:
    results = forecast_multiple_metrics(
        req.points(),
        req.horizon,
        cadence=req.resolved_cadence(),
        config=ForecastConfig.from_settings(),
    )
    return {name: ForecastResultModel.from_result(r) for name, r in results.items()}
