"""
End-to-end request tests through the FastAPI application.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

import main as app_main


def _client() -> TestClient:
    return TestClient(app_main.app)


def test_health_endpoint():
    resp = _client().get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_forecast_endpoint_serializes_aliases():
    body = {
        "data": [
            {"period": "2025-01", "value": 1000},
            {"period": "2025-02", "value": 1100},
            {"period": "2025-03", "value": 1210},
            {"period": "2025-04", "value": 1331},
        ],
        "horizon": 2,
    }
    resp = _client().post("/api/v1/forecast", json=body)
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["trend"] == "growing"
    assert payload["forecasts"][0]["period"] == "2025-05"
    assert "avgGrowthRate" in payload and "trendStrength" in payload


def test_validation_errors_are_422():
    client = _client()
    mixed = {"data": [{"period": "2024", "value": 1}, {"period": "2024-02", "value": 2}]}
    assert client.post("/api/v1/forecast", json=mixed).status_code == 422
    negative = {"data": [{"period": "2024-01", "value": -5}]}
    assert client.post("/api/v1/forecast", json=negative).status_code == 422
    too_far = {"data": [], "horizon": 100}
    assert client.post("/api/v1/forecast", json=too_far).status_code == 422


def test_predictions_endpoint():
    body = {
        "monthly": {"orders": [{"period": f"2025-0{i + 1}", "value": 300 + 10 * i} for i in range(6)]},
        "yearly": {"revenue": [{"period": 2022, "value": 5}, {"period": 2023, "value": 6}, {"period": 2024, "value": 8}]},
    }
    resp = _client().post("/api/v1/predictions", json=body)
    assert resp.status_code == 200
    payload = resp.json()
    assert len(payload["forecasts"]["orders"]["forecasts"]) == 6
    assert payload["yearlyForecasts"]["revenue"]["forecasts"][0]["period"] == "2025"
