"""
Test cases for forecast orchestration, including degenerate inputs, horizon length, interval containment, trend classification, growth rate policy, seasonality round-trip and per-call configuration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from dataclasses import replace

import pytest

from conftest import QUARTERLY_PATTERN, monthly_series, yearly_series
from config import settings
from engine.enums import Cadence, Trend
from engine.forecast import ForecastConfig, ForecastResult, forecast_monthly, forecast_multiple_metrics
from engine.forecast.projection import average_growth_rate, classify_trend
from engine.forecast.regression import linear_regression


@pytest.mark.parametrize("n", [0, 1, 2])
def test_short_series_give_empty_result(n, config):
    res = forecast_monthly(monthly_series([10.0] * n), 6, config=config)
    assert res == ForecastResult.empty()
    assert res.forecasts == []
    assert res.trend == Trend.stable
    assert res.seasonality is False


@pytest.mark.parametrize("horizon", [1, 3, 6, 12])
def test_horizon_length(horizon, config):
    res = forecast_monthly(monthly_series([5, 8, 6]), horizon, config=config)
    assert len(res.forecasts) == horizon


def test_intervals_contain_prediction_and_are_non_negative(config):
    data = monthly_series([120, 95, 140, 60, 30, 45, 20, 10])
    res = forecast_monthly(data, 12, config=config)
    for p in res.forecasts:
        assert 0.0 <= p.lower <= p.predicted <= p.upper


def test_declining_series_never_negative(config):
    res = forecast_monthly(monthly_series([500, 400, 300, 200, 100, 50]), 12, config=config)
    assert res.trend == Trend.declining
    assert all(p.predicted >= 0.0 and p.lower >= 0.0 for p in res.forecasts)
    assert res.forecasts[-1].predicted == 0.0


def test_perfect_linear_series(config):
    res = forecast_monthly(monthly_series([10, 20, 30, 40, 50, 60]), 6, config=config)
    assert res.r2 == pytest.approx(1.0)
    assert res.trend == Trend.growing
    assert res.trend_strength == pytest.approx(1.0)
    assert [p.predicted for p in res.forecasts] == pytest.approx([70, 80, 90, 100, 110, 120])


def test_constant_series(config):
    res = forecast_monthly(monthly_series([50] * 6), 3, config=config)
    assert res.r2 == 0.0
    assert res.trend == Trend.stable
    assert res.avg_growth_rate == 0.0
    # zero dispersion collapses the band onto the forecast
    assert all(p.lower == p.predicted == p.upper == 50.0 for p in res.forecasts)


def test_seasonality_round_trip(seasonal_values, config):
    data = monthly_series(seasonal_values, start_year=2023)
    res = forecast_monthly(data, 12, config=config)
    assert res.seasonality is True
    assert len(res.forecasts) == 12
    for h, point in enumerate(res.forecasts):
        k = len(seasonal_values) + h
        expected = 100.0 + 5.0 * k + QUARTERLY_PATTERN[k % 12]
        assert point.predicted == pytest.approx(expected, abs=0.05)
    assert res.forecasts[0].period == "2025-01"


def test_end_to_end_compound_growth(config):
    data = monthly_series([1000, 1100, 1210, 1331], start_year=2025)
    res = forecast_monthly(data, 2, config=config)
    assert len(res.forecasts) == 2
    assert res.forecasts[0].period == "2025-05"
    assert res.forecasts[1].period == "2025-06"
    assert res.trend == Trend.growing
    assert res.avg_growth_rate == pytest.approx(10.0)
    assert res.seasonality is False


def test_yearly_cadence_labels(config):
    data = yearly_series([510000, 604000, 688000, 742000], start_year=2021)
    res = forecast_monthly(data, 3, cadence=Cadence.yearly, config=config)
    assert [p.period for p in res.forecasts] == ["2025", "2026", "2027"]


def test_yearly_cadence_inferred_when_omitted(config):
    res = forecast_monthly(yearly_series([100, 120, 140], start_year=2022), 3, config=config)
    assert [p.period for p in res.forecasts] == ["2025", "2026", "2027"]


def test_multiple_metrics_infer_cadence_per_series(config):
    datasets = {
        "revenue": yearly_series([100, 120, 140], start_year=2022),
        "orders": monthly_series([5, 6, 7], start_year=2024, start_month=11),
    }
    out = forecast_multiple_metrics(datasets, 3, config=config)
    assert [p.period for p in out["revenue"].forecasts] == ["2025", "2026", "2027"]
    assert [p.period for p in out["orders"].forecasts] == ["2025-02", "2025-03", "2025-04"]


def test_growth_rate_skips_zero_steps():
    assert average_growth_rate([0, 0, 10, 20]) == pytest.approx(100.0)
    assert average_growth_rate([0, 0, 0]) == 0.0
    assert average_growth_rate([]) == 0.0
    assert average_growth_rate([100, 50]) == pytest.approx(-50.0)


def test_growth_rate_rounded(config):
    res = forecast_monthly(monthly_series([3, 4, 5]), 1, config=config)
    # (33.333... + 25) / 2
    assert res.avg_growth_rate == 29.17


def test_noisy_flat_series_is_stable(config):
    vals = [100, 140, 70, 130, 80, 125, 90, 135]
    fit = linear_regression(vals)
    assert fit.r2 < 0.2
    assert classify_trend(fit, vals, config) == Trend.stable


def test_zero_mean_series_is_stable(config):
    vals = [0.0, 0.0, 0.0, 0.0]
    assert classify_trend(linear_regression(vals), vals, config) == Trend.stable


def test_config_injection_changes_smoothing():
    data = monthly_series([10, 30, 20, 50, 40, 70])
    loose = forecast_monthly(data, 3, config=ForecastConfig(alpha=0.9, beta=0.9))
    tight = forecast_monthly(data, 3, config=ForecastConfig(alpha=0.1, beta=0.1))
    assert [p.predicted for p in loose.forecasts] != [p.predicted for p in tight.forecasts]


def test_config_injection_disables_seasonality(seasonal_values, config):
    data = monthly_series(seasonal_values)
    res = forecast_monthly(data, 6, config=replace(config, seasonality_threshold=10.0))
    assert res.seasonality is False


def test_config_min_points(config):
    data = monthly_series([1, 2, 3, 4])
    assert forecast_monthly(data, 2, config=replace(config, min_points=5)).forecasts == []


def test_defaults_come_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "forecast_min_points", 10)
    assert forecast_monthly(monthly_series([1, 2, 3, 4]), 2).forecasts == []
    monkeypatch.setattr(settings, "forecast_min_points", 3)
    assert len(forecast_monthly(monthly_series([1, 2, 3, 4]), 2).forecasts) == 2


def test_multiple_metrics_are_independent(config):
    datasets = {
        "revenue": monthly_series([1000, 1100, 1210, 1331]),
        "orders": monthly_series([5, 6]),
        "customers": monthly_series([50] * 6),
    }
    out = forecast_multiple_metrics(datasets, 6, config=config)
    assert set(out) == {"revenue", "orders", "customers"}
    assert len(out["revenue"].forecasts) == 6
    assert out["orders"].forecasts == []
    assert out["customers"].trend == Trend.stable
    assert out["revenue"] == forecast_monthly(datasets["revenue"], 6, config=config)


def test_result_wire_shape(config):
    res = forecast_monthly(monthly_series([1000, 1100, 1210, 1331], start_year=2025), 1, config=config)
    payload = res.to_dict()
    assert set(payload) == {"forecasts", "trend", "trendStrength", "seasonality", "avgGrowthRate", "r2"}
    assert payload["trend"] == "growing"
    assert set(payload["forecasts"][0]) == {"period", "predicted", "lower", "upper"}
