"""
Error and fit metrics between an actual series and a predicted one (MSE, RMSE, MAE, MAPE, R²), rounded to the reporting precision. Unlike the permissive forecasting helpers this is a gate: mismatched or empty inputs raise instead of producing a misleading score.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Sequence

import numpy as np

from engine.exceptions import MetricsShapeError
from config import settings

log = logging.getLogger(__name__)

METRIC_NAMES = ("mse", "rmse", "mae", "mape", "r2")


@dataclass(frozen=True)
class ValidationResult:
    mse: float
    rmse: float
    mae: float
    mape: float
    r2: float

    @classmethod
    def rounded(cls, mse: float, rmse: float, mae: float, mape: float, r2: float) -> ValidationResult:
        p = settings.metric_precision
        return cls(
            mse=round(float(mse), p),
            rmse=round(float(rmse), p),
            mae=round(float(mae), p),
            mape=round(float(mape), p),
            r2=round(float(r2), settings.r2_precision),
        )

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def calculate_metrics(actual: Sequence[float], predicted: Sequence[float]) -> ValidationResult:
    a = np.asarray(actual, dtype=float).reshape(-1)
    p = np.asarray(predicted, dtype=float).reshape(-1)
    if len(a) != len(p) or len(a) == 0:
        raise MetricsShapeError(
            f"actual and predicted must be non-empty and of equal length "
            f"(got {len(a)} and {len(p)})"
        )

    errors = a - p
    mse = float(np.mean(errors ** 2))
    mae = float(np.mean(np.abs(errors)))

    nonzero = a != 0
    excluded = int(len(a) - np.count_nonzero(nonzero))
    if excluded:
        log.debug("calculate_metrics: %d of %d points excluded from MAPE (actual == 0)", excluded, len(a))
    if nonzero.any():
        mape = float(np.mean(np.abs(errors[nonzero] / a[nonzero]))) * 100.0
    else:
        mape = 0.0

    ss_total = float(np.sum((a - np.mean(a)) ** 2))
    ss_residual = float(np.sum(errors ** 2))
    r2 = 1.0 if ss_total == 0 else 1.0 - ss_residual / ss_total

    return ValidationResult.rounded(mse=mse, rmse=np.sqrt(mse), mae=mae, mape=mape, r2=r2)
