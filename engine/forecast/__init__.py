"""
Forecasting logic for KPI series, including floored linear projection, method-specific prediction functions (regression, moving average, exponential smoothing) usable by the cross-validator, and prediction intervals with per-indicator summaries.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.projection import forecast
from engine.forecast.predictors import (
    PredictFn,
    exponential_predict,
    get_predictor,
    linear_predict,
    moving_average_predict,
)
from engine.forecast.intervals import (
    PredictionPoint,
    PredictionSummary,
    predict_with_intervals,
    summarize_prediction,
)

__all__ = [
    "forecast",
    "PredictFn",
    "linear_predict",
    "moving_average_predict",
    "exponential_predict",
    "get_predictor",
    "PredictionPoint",
    "PredictionSummary",
    "predict_with_intervals",
    "summarize_prediction",
]
