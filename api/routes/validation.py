"""
Validation routes: error metrics between two series and cross-validation of a prediction method over a KPI history.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from api.requests import CrossValidationRequest, MetricsRequest
from api.responses import CrossValidationResponse, ValidationMetrics
from api.routes.exception import handle_exceptions
from engine.forecast import get_predictor
from engine.validation import calculate_metrics, cross_validate

router = APIRouter(prefix="/validation", tags=["Validation"])


@router.post("/metrics", summary="MSE, RMSE, MAE, MAPE and R² between actual and predicted")
@handle_exceptions
async def metrics(req: MetricsRequest) -> ValidationMetrics:
    return ValidationMetrics(**asdict(calculate_metrics(req.actual, req.predicted)))


@router.post("/cross", summary="Cross-validate a prediction method and rate its reliability")
@handle_exceptions
async def cross_validation(req: CrossValidationRequest) -> CrossValidationResponse:
    predict_fn = get_predictor(req.method, window=req.window, alpha=req.alpha)
    result = cross_validate(
        req.series,
        predict_fn,
        strategy=req.strategy,
        k=req.k,
        min_train_size=req.min_train_size,
        horizon=req.horizon,
    )
    return CrossValidationResponse(**asdict(result))
