from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from engine.enums import Cadence
from engine.forecast.models import DataPoint

PERIOD_PATTERN = r"^\d{4}(-(0[1-9]|1[0-2]))?$"


class SeriesPoint(BaseModel):
    period: str = Field(pattern=PERIOD_PATTERN)
    value: float = Field(ge=0.0, allow_inf_nan=False)

    @field_validator("period", mode="before")
    @classmethod
    def _period_to_str(cls, v: Any) -> Any:
        # yearly aggregates often arrive as integer years
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("value", mode="before")
    @classmethod
    def _null_value_is_zero(cls, v: Any) -> Any:
        # SUM() over an empty group comes back as NULL
        return 0.0 if v is None else v


def series_cadence(series: List[SeriesPoint]) -> Optional[Cadence]:
    cadences = {Cadence.infer(p.period) for p in series}
    if len(cadences) > 1:
        raise ValueError("series mixes monthly and yearly periods")
    return cadences.pop() if cadences else None


def to_points(series: List[SeriesPoint]) -> List[DataPoint]:
    return [DataPoint(period=p.period, value=p.value) for p in series]


def _check_series(series: List[SeriesPoint], expected: Optional[Cadence]) -> Optional[Cadence]:
    found = series_cadence(series)
    if expected is not None and found is not None and found != expected:
        raise ValueError(f"series periods are {found.value} but cadence is {expected.value}")
    return found


class ForecastRequest(BaseModel):
    data: List[SeriesPoint] = Field(default_factory=list)
    horizon: int = Field(default=6, ge=1, le=36)
    cadence: Optional[Cadence] = None

    @model_validator(mode="after")
    def _uniform_cadence(self) -> ForecastRequest:
        _check_series(self.data, self.cadence)
        return self

    def resolved_cadence(self) -> Cadence:
        if self.cadence is not None:
            return self.cadence
        return series_cadence(self.data) or Cadence.monthly

    def points(self) -> List[DataPoint]:
        return to_points(self.data)


class BatchForecastRequest(BaseModel):
    datasets: Dict[str, List[SeriesPoint]] = Field(default_factory=dict)
    horizon: int = Field(default=6, ge=1, le=36)
    cadence: Optional[Cadence] = None

    @model_validator(mode="after")
    def _uniform_cadence(self) -> BatchForecastRequest:
        found = {c for c in (_check_series(s, self.cadence) for s in self.datasets.values()) if c}
        if len(found) > 1:
            raise ValueError("datasets mix monthly and yearly series")
        return self

    def resolved_cadence(self) -> Cadence:
        if self.cadence is not None:
            return self.cadence
        for series in self.datasets.values():
            found = series_cadence(series)
            if found is not None:
                return found
        return Cadence.monthly

    def points(self) -> Dict[str, List[DataPoint]]:
        return {name: to_points(series) for name, series in self.datasets.items()}


class PredictionsRequest(BaseModel):
    monthly: Dict[str, List[SeriesPoint]] = Field(default_factory=dict)
    yearly: Dict[str, List[SeriesPoint]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _cadence_per_bucket(self) -> PredictionsRequest:
        for series in self.monthly.values():
            _check_series(series, Cadence.monthly)
        for series in self.yearly.values():
            _check_series(series, Cadence.yearly)
        return self
