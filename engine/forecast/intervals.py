"""
Prediction intervals and per-indicator prediction summaries. The interval half-width grows with the horizon as z * sigma * sqrt(1 + step / n), where sigma is the in-sample error of the chosen method, and the summary reduces a horizon of points to the figures shown on an indicator card.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from engine.enums import PredictionMethod, Trend
from engine.forecast.predictors import resolve_method, project
from engine.regression import fit
from config import settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PredictionPoint:
    step: int
    value: float
    lower: float
    upper: float


@dataclass(frozen=True)
class PredictionSummary:
    method: PredictionMethod
    horizon: int
    current_value: float
    predicted_value: float
    change: float
    change_pct: float
    trend: Trend
    confidence: float
    points: List[PredictionPoint]


def predict_with_intervals(
    series: Sequence[float],
    horizon: int,
    method: Union[PredictionMethod, str] = PredictionMethod.linear,
    window: int | None = None,
    alpha: float | None = None,
    z: float | None = None,
) -> List[PredictionPoint]:
    if z is None:
        z = settings.prediction_interval_z
    vals = [float(v) for v in series]
    n = len(vals)
    if n == 0 or horizon <= 0:
        return []

    projection = project(vals, horizon, method, window=window, alpha=alpha)
    points: List[PredictionPoint] = []
    for step, value in enumerate(projection.values, start=1):
        margin = z * projection.spread * math.sqrt(1 + step / n)
        points.append(PredictionPoint(
            step=step,
            value=value,
            lower=value - margin,
            upper=value + margin,
        ))
    return points


def summarize_prediction(
    series: Sequence[float],
    horizon: int | None = None,
    method: Union[PredictionMethod, str] = PredictionMethod.linear,
    window: int | None = None,
    alpha: float | None = None,
) -> Optional[PredictionSummary]:
    if horizon is None:
        horizon = settings.prediction_default_horizon
    method = resolve_method(method)
    vals = [float(v) for v in series]
    if len(vals) < settings.prediction_min_points:
        log.debug(
            "summarize_prediction: %d points, need %d",
            len(vals), settings.prediction_min_points,
        )
        return None
    if horizon < 1:
        return None

    points = predict_with_intervals(vals, horizon, method, window=window, alpha=alpha)
    current = vals[-1]
    predicted = points[-1].value
    change = predicted - current
    change_pct = change / current * 100.0 if current != 0 else 0.0

    band = settings.prediction_trend_change_pct
    if change_pct > band:
        trend = Trend.up
    elif change_pct < -band:
        trend = Trend.down
    else:
        trend = Trend.stable

    # confidence always reflects the linear fit of the history, whatever the method
    confidence = max(0.0, min(100.0, fit(vals).r2 * 100.0))

    return PredictionSummary(
        method=method,
        horizon=horizon,
        current_value=current,
        predicted_value=predicted,
        change=change,
        change_pct=change_pct,
        trend=trend,
        confidence=confidence,
        points=points,
    )
