"""
Trend classification for KPI series: the fitted slope is compared against a band proportional to the series mean, so indicators of very different magnitude (occupancy rates, revenue, footfall) share one sensitivity setting.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from engine.enums import Trend, TrendStrength
from engine.regression import RegressionFit, fit
from config import settings


@dataclass(frozen=True)
class TrendAnalysis:
    trend: Trend
    strength: TrendStrength
    fit: RegressionFit
    change_rate_pct: float


def _classify(slope: float, mean: float, threshold_ratio: float) -> Trend:
    # |mean| keeps the band symmetric for negative-valued series
    threshold = abs(mean) * threshold_ratio
    if slope > threshold:
        return Trend.up
    if slope < -threshold:
        return Trend.down
    return Trend.stable


def _from_change_rate(rate: float, change_pct: float) -> Trend:
    if rate > change_pct:
        return Trend.up
    if rate < -change_pct:
        return Trend.down
    return Trend.stable


def detect_trend(series: Sequence[float], threshold_ratio: float | None = None) -> Trend:
    if threshold_ratio is None:
        threshold_ratio = settings.trend_threshold_ratio
    arr = np.asarray(series, dtype=float).reshape(-1)
    if len(arr) < 2:
        return Trend.stable
    return _classify(fit(arr).slope, float(np.mean(arr)), threshold_ratio)


def analyze_trend(series: Sequence[float], change_pct: float | None = None) -> TrendAnalysis:
    if change_pct is None:
        change_pct = settings.trend_analysis_change_pct
    arr = np.asarray(series, dtype=float).reshape(-1)
    model = fit(arr)
    mean = float(np.mean(arr)) if len(arr) else 0.0
    change_rate = model.slope / mean * 100.0 if mean != 0 else 0.0

    return TrendAnalysis(
        trend=_from_change_rate(change_rate, change_pct),
        strength=TrendStrength.from_r2(model.r2),
        fit=model,
        change_rate_pct=round(change_rate, 4),
    )
