import os
import sys
from typing import List

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.forecast import DataPoint, ForecastConfig


def monthly_series(values: List[float], start_year: int = 2024, start_month: int = 1) -> List[DataPoint]:
    points = []
    year, month = start_year, start_month
    for v in values:
        points.append(DataPoint(period=f"{year}-{month:02d}", value=float(v)))
        month += 1
        if month > 12:
            month, year = 1, year + 1
    return points


def yearly_series(values: List[float], start_year: int = 2020) -> List[DataPoint]:
    return [DataPoint(period=str(start_year + i), value=float(v)) for i, v in enumerate(values)]


# zero-mean, uncorrelated with the time index over two full cycles, so an
# additive trend underneath is recovered exactly by the linear fit
QUARTERLY_PATTERN = [30.0, -30.0, -30.0, 30.0] * 3


@pytest.fixture
def config() -> ForecastConfig:
    return ForecastConfig()


@pytest.fixture
def seasonal_values() -> List[float]:
    # +-0.01 alternating jitter stands in for measurement noise
    return [100.0 + 5.0 * i + QUARTERLY_PATTERN[i % 12] + (0.01 if i % 2 == 0 else -0.01) for i in range(24)]
