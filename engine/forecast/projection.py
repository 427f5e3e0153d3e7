"""
Forecast projection for KPI series: the regression line is extended past the last observed period and floored so that occupancy, revenue or headcount forecasts never report negative values.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from engine.regression import fit
from config import settings


def forecast(series: Sequence[float], periods: int, floor: float | None = None) -> List[float]:
    if floor is None:
        floor = settings.forecast_floor
    if periods <= 0:
        return []

    arr = np.asarray(series, dtype=float).reshape(-1)
    model = fit(arr)
    n = len(arr)
    future = np.arange(n, n + periods, dtype=float)
    projected = model.intercept + model.slope * future
    return np.maximum(projected, floor).tolist()
