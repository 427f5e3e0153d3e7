"""
Detection logic for identifying outlying periods in a KPI series using the z-score against the population standard deviation of the whole series, so that a single exceptional month (a one-off rent catch-up, a closure) can be flagged before it distorts a trend or forecast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from config import settings


@dataclass(frozen=True)
class Anomaly:
    index: int
    value: float
    deviation: float


def _zscores(arr: np.ndarray) -> np.ndarray:
    sigma = arr.std()
    if sigma == 0:
        return np.zeros_like(arr)
    return (arr - arr.mean()) / sigma


def detect_anomalies(series: Sequence[float], threshold: float | None = None) -> List[Anomaly]:
    if threshold is None:
        threshold = settings.anomaly_zscore_threshold
    arr = np.asarray(series, dtype=float).reshape(-1)
    if len(arr) < settings.anomaly_min_points:
        return []

    scores = np.abs(_zscores(arr))
    return [
        Anomaly(index=int(i), value=float(arr[i]), deviation=float(scores[i]))
        for i in np.where(scores > threshold)[0]
    ]
