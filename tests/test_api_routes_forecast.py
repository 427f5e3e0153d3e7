"""
Test Suite for API Routes - Forecast and Prediction

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest
from fastapi import HTTPException

from api.requests import ForecastRequest, PredictionRequest
from api.routes import forecast as forecast_route
from engine.enums import PredictionMethod, Trend


@pytest.mark.asyncio
async def test_forecast_route():
    resp = await forecast_route.forecast_series(ForecastRequest(series=[10, 20, 30, 40, 50], periods=3))
    assert resp.forecast == pytest.approx([60, 70, 80])
    assert resp.trend == Trend.up
    assert resp.fit.slope == pytest.approx(10)
    assert resp.model_dump()["trend"] == "up"


@pytest.mark.asyncio
async def test_forecast_route_empty_series():
    resp = await forecast_route.forecast_series(ForecastRequest(series=[], periods=2))
    assert resp.forecast == [0.0, 0.0]
    assert resp.trend == Trend.stable


@pytest.mark.asyncio
async def test_prediction_route():
    req = PredictionRequest(series=[100, 110, 120, 130], horizon=2, method="exponential", alpha=1.0)
    resp = await forecast_route.prediction(req)
    assert resp.method == PredictionMethod.exponential
    assert [p.value for p in resp.points] == [140.0, 150.0]
    assert resp.trend == Trend.up


@pytest.mark.asyncio
async def test_prediction_route_too_short():
    with pytest.raises(HTTPException) as exc:
        await forecast_route.prediction(PredictionRequest(series=[1, 2], horizon=2))
    assert exc.value.status_code == 422
