"""
Moving average and single exponential smoothing over KPI series, the two independent estimators the dashboard shows beside the regression trend. Both are permissive: empty input, oversized windows and out-of-range smoothing factors resolve to defined outputs.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from config import settings

log = logging.getLogger(__name__)


def moving_average(series: Sequence[float], window: int) -> List[float]:
    arr = np.asarray(series, dtype=float).reshape(-1)
    n = len(arr)
    if window <= 0 or n == 0:
        return []
    if window > n:
        return [float(np.mean(arr))]

    # running sum: each window total is the difference of two prefix sums
    csum = np.concatenate(([0.0], np.cumsum(arr)))
    sums = csum[window:] - csum[:-window]
    return (sums / window).tolist()


def exponential_smoothing(series: Sequence[float], alpha: float | None = None) -> List[float]:
    default_alpha = settings.smoothing_alpha
    if alpha is None:
        alpha = default_alpha
    vals = np.asarray(series, dtype=float).reshape(-1)
    if len(vals) == 0:
        return []
    if not 0.0 <= alpha <= 1.0:
        log.debug("exponential_smoothing: alpha=%s out of range, using %s", alpha, default_alpha)
        alpha = default_alpha

    result = np.zeros(len(vals))
    result[0] = vals[0]
    for i in range(1, len(vals)):
        result[i] = alpha * vals[i] + (1 - alpha) * result[i - 1]
    return result.tolist()
