"""
Response models for API endpoints, mirroring the engine's result dataclasses.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, List

import numpy as np
from pydantic import BaseModel, model_serializer
from engine.enums import ConfidenceLevel, PredictionMethod, Trend, TrendStrength, ValidationStrategy


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class RegressionFitModel(NpModel):

    slope: float
    intercept: float
    r2: float


class ForecastResponse(NpModel):

    fit: RegressionFitModel
    trend: Trend
    forecast: List[float]


class TrendAnalysisResponse(NpModel):

    trend: Trend
    strength: TrendStrength
    fit: RegressionFitModel
    change_rate_pct: float


class SmoothingResponse(NpModel):

    moving_average: List[float]
    exponential: List[float]


class PredictionPointModel(NpModel):

    step: int
    value: float
    lower: float
    upper: float


class PredictionSummaryResponse(NpModel):

    method: PredictionMethod
    horizon: int
    current_value: float
    predicted_value: float
    change: float
    change_pct: float
    trend: Trend
    confidence: float
    points: List[PredictionPointModel]


class AnomalyModel(NpModel):

    index: int
    value: float
    deviation: float


class AnomaliesResponse(NpModel):

    anomalies: List[AnomalyModel]


class ValidationMetrics(NpModel):

    mse: float
    rmse: float
    mae: float
    mape: float
    r2: float


class CrossValidationResponse(NpModel):

    folds: List[ValidationMetrics]
    average: ValidationMetrics
    standard_deviation: ValidationMetrics
    is_reliable: bool
    confidence_level: ConfidenceLevel
    strategy: ValidationStrategy
