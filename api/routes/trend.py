"""
Trend routes: direction and strength of a KPI series, smoothing baselines and outlying periods.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from api.requests import AnomalyRequest, SeriesRequest, SmoothingRequest
from api.responses import AnomaliesResponse, SmoothingResponse, TrendAnalysisResponse
from api.routes.exception import handle_exceptions
from engine.anomaly import detect_anomalies
from engine.smoothing import exponential_smoothing, moving_average
from engine.trend import analyze_trend
from config import settings

router = APIRouter(tags=["Trend"])


@router.post("/trend", summary="Trend direction, strength and per-period change rate")
@handle_exceptions
async def trend(req: SeriesRequest) -> TrendAnalysisResponse:
    return TrendAnalysisResponse(**asdict(analyze_trend(req.series)))


@router.post("/smoothing", summary="Moving average and exponential smoothing baselines")
@handle_exceptions
async def smoothing(req: SmoothingRequest) -> SmoothingResponse:
    window = req.window or settings.moving_average_window
    return SmoothingResponse(
        moving_average=moving_average(req.series, window),
        exponential=exponential_smoothing(req.series, req.alpha),
    )


@router.post("/anomalies", summary="Periods deviating from the series mean")
@handle_exceptions
async def anomalies(req: AnomalyRequest) -> AnomaliesResponse:
    found = detect_anomalies(req.series, req.threshold)
    return AnomaliesResponse(anomalies=[asdict(a) for a in found])
