"""
Predictions route returning the dashboard bundle of monthly and yearly forecasts.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.requests import PredictionsRequest
from api.responses import PredictionsResponse
from api.routes.exception import handle_exceptions
from services.predictions_service import run_predictions

router = APIRouter(tags=["Predictions"])


@router.post(
    "/predictions",
    response_model=PredictionsResponse,
    summary="Monthly (6 periods) and yearly (3 periods) projections per metric",
)
@handle_exceptions
async def predictions(req: PredictionsRequest) -> PredictionsResponse:
    return await run_predictions(req)
