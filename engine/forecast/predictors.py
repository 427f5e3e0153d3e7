"""
Prediction functions for the three estimators the dashboard offers (linear regression, moving average, exponential smoothing). Each one takes a training series and a count and returns that many future values, which is the shape the cross-validator expects from a prediction function.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Sequence, Union

import numpy as np

from engine.enums import PredictionMethod
from engine.exceptions import UnknownMethodError
from engine.regression import fit, residual_std
from engine.smoothing import exponential_smoothing
from config import settings

PredictFn = Callable[[List[float], int], Sequence[float]]


@dataclass(frozen=True)
class Projection:
    values: List[float]
    spread: float


def _trailing_means(arr: np.ndarray, window: int) -> np.ndarray:
    # partial windows at the start average whatever is available
    csum = np.concatenate(([0.0], np.cumsum(arr)))
    ends = np.arange(1, len(arr) + 1)
    starts = np.maximum(0, ends - window)
    return (csum[ends] - csum[starts]) / (ends - starts)


def project_linear(series: Sequence[float], count: int) -> Projection:
    arr = np.asarray(series, dtype=float).reshape(-1)
    model = fit(arr)
    n = len(arr)
    values = [model.predict(n + i) for i in range(max(count, 0))]
    return Projection(values=values, spread=residual_std(arr, model))


def project_moving_average(series: Sequence[float], count: int, window: int | None = None) -> Projection:
    if window is None or window <= 0:
        window = settings.moving_average_window
    arr = np.asarray(series, dtype=float).reshape(-1)
    if len(arr) == 0:
        return Projection(values=[0.0] * max(count, 0), spread=0.0)

    tail = _trailing_means(arr, window)[-window:]
    model = fit(tail)
    # short histories still extrapolate from the full window position
    values = [model.predict(window + i) for i in range(max(count, 0))]
    return Projection(values=values, spread=residual_std(tail, model))


def project_exponential(series: Sequence[float], count: int, alpha: float | None = None) -> Projection:
    arr = np.asarray(series, dtype=float).reshape(-1)
    if len(arr) == 0:
        return Projection(values=[0.0] * max(count, 0), spread=0.0)

    smoothed = exponential_smoothing(arr, alpha)
    last = smoothed[-1]
    step = smoothed[-1] - smoothed[-2] if len(smoothed) > 1 else 0.0
    values = [last + step * k for k in range(1, max(count, 0) + 1)]

    # one-step-ahead error of the smoother against what actually came next
    if len(arr) > 1:
        errors = arr[1:] - np.asarray(smoothed[:-1])
        spread = float(np.sqrt(np.sum(errors ** 2) / (len(arr) - 1)))
    else:
        spread = 0.0
    return Projection(values=values, spread=spread)


def project(
    series: Sequence[float],
    count: int,
    method: Union[PredictionMethod, str] = PredictionMethod.linear,
    window: int | None = None,
    alpha: float | None = None,
) -> Projection:
    method = resolve_method(method)
    if method is PredictionMethod.moving_average:
        return project_moving_average(series, count, window)
    if method is PredictionMethod.exponential:
        return project_exponential(series, count, alpha)
    return project_linear(series, count)


def linear_predict(train: Sequence[float], count: int) -> List[float]:
    return project_linear(train, count).values


def moving_average_predict(train: Sequence[float], count: int, window: int | None = None) -> List[float]:
    return project_moving_average(train, count, window).values


def exponential_predict(train: Sequence[float], count: int, alpha: float | None = None) -> List[float]:
    return project_exponential(train, count, alpha).values


def resolve_method(method: Union[PredictionMethod, str]) -> PredictionMethod:
    if isinstance(method, PredictionMethod):
        return method
    try:
        return PredictionMethod(str(method))
    except ValueError:
        raise UnknownMethodError(f"Unknown prediction method: {method!r}") from None


def get_predictor(
    method: Union[PredictionMethod, str],
    window: int | None = None,
    alpha: float | None = None,
) -> PredictFn:
    method = resolve_method(method)
    if method is PredictionMethod.moving_average:
        return partial(moving_average_predict, window=window)
    if method is PredictionMethod.exponential:
        return partial(exponential_predict, alpha=alpha)
    return linear_predict
