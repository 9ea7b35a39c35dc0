"""
Response models for API endpoints, serialized with the camelCase field names the dashboard charts consume.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from engine.enums import Trend
from engine.forecast.models import ForecastResult


class CamelModel(BaseModel):

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ForecastPointModel(CamelModel):

    period: str
    predicted: float
    lower: float
    upper: float


class ForecastResultModel(CamelModel):

    forecasts: List[ForecastPointModel] = Field(default_factory=list)
    trend: Trend = Trend.stable
    trend_strength: float = 0.0
    seasonality: bool = False
    avg_growth_rate: float = 0.0
    r2: float = 0.0

    @classmethod
    def from_result(cls, result: ForecastResult) -> ForecastResultModel:
        return cls.model_validate(result.to_dict())


class PredictionsResponse(CamelModel):

    forecasts: Dict[str, ForecastResultModel] = Field(default_factory=dict)
    yearly_forecasts: Dict[str, ForecastResultModel] = Field(default_factory=dict)
    generated_at: datetime
    models_used: Dict[str, str] = Field(default_factory=dict)
