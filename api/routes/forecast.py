"""
Forecast routes: floored linear projection of a KPI series and method-specific prediction summaries with intervals.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from api.requests import ForecastRequest, PredictionRequest
from api.responses import ForecastResponse, PredictionSummaryResponse
from api.routes.exception import handle_exceptions
from engine.forecast import forecast, summarize_prediction
from engine.regression import fit
from engine.trend import detect_trend
from config import settings

router = APIRouter(tags=["Forecast"])


@router.post("/forecast", summary="Linear trend projection floored at zero")
@handle_exceptions
async def forecast_series(req: ForecastRequest) -> ForecastResponse:
    return ForecastResponse(
        fit=asdict(fit(req.series)),
        trend=detect_trend(req.series),
        forecast=forecast(req.series, req.periods),
    )


@router.post("/prediction", summary="Prediction summary with confidence intervals")
@handle_exceptions
async def prediction(req: PredictionRequest) -> PredictionSummaryResponse:
    summary = summarize_prediction(
        req.series,
        horizon=req.horizon,
        method=req.method,
        window=req.window,
        alpha=req.alpha,
    )
    if summary is None:
        raise HTTPException(
            status_code=422,
            detail=f"At least {settings.prediction_min_points} points are required for a prediction",
        )
    return PredictionSummaryResponse(**asdict(summary))
