"""
Ordinary least squares fit of a KPI series against its period index, computed in one pass from the closed-form sums so that degenerate series (empty, single point, constant) resolve to well-defined fits instead of raising.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class RegressionFit:
    slope: float
    intercept: float
    r2: float

    def predict(self, index: float) -> float:
        return self.intercept + self.slope * index


def _as_array(series: Sequence[float]) -> np.ndarray:
    return np.asarray(series, dtype=float).reshape(-1)


def fit(series: Sequence[float]) -> RegressionFit:
    arr = _as_array(series)
    n = len(arr)

    if n == 0:
        return RegressionFit(slope=0.0, intercept=0.0, r2=0.0)
    if n == 1:
        return RegressionFit(slope=0.0, intercept=float(arr[0]), r2=0.0)
    if np.all(arr == arr[0]):
        # zero total variance: a flat line explains it completely
        return RegressionFit(slope=0.0, intercept=float(arr[0]), r2=1.0)

    x = np.arange(n, dtype=float)
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(arr))
    sum_xy = float(np.sum(x * arr))
    sum_x2 = float(np.sum(x * x))

    denominator = n * sum_x2 - sum_x * sum_x
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    predicted = intercept + slope * x
    ss_res = float(np.sum((arr - predicted) ** 2))
    ss_tot = float(np.sum((arr - sum_y / n) ** 2))
    r2 = 1.0 - ss_res / ss_tot if ss_tot > 0 else 1.0

    return RegressionFit(slope=float(slope), intercept=float(intercept), r2=float(r2))


def residual_std(series: Sequence[float], model: RegressionFit | None = None) -> float:
    """Population standard deviation of the residuals around ``model``.

    Used as the spread of prediction intervals. Returns 0.0 for fewer than
    two points, where there is nothing to measure.
    """
    arr = _as_array(series)
    if len(arr) < 2:
        return 0.0
    if model is None:
        model = fit(arr)
    x = np.arange(len(arr), dtype=float)
    residuals = arr - (model.intercept + model.slope * x)
    return float(np.sqrt(np.mean(residuals ** 2)))
