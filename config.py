"""
Constants and configuration for the KPI forecast engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


KPICAST_API_HOST = os.getenv("KPICAST_API_HOST", "0.0.0.0")
KPICAST_API_PORT = int(os.getenv("KPICAST_API_PORT", "4330"))
KPICAST_LOG_LEVEL = os.getenv("KPICAST_LOG_LEVEL", "INFO").upper()

STRATEGY_WALK_FORWARD = "walk_forward"
STRATEGY_K_FOLD = "k_fold"


class Settings(BaseSettings):
    api_host: str = KPICAST_API_HOST
    api_port: int = KPICAST_API_PORT
    log_level: str = KPICAST_LOG_LEVEL

    # smoothing baselines
    smoothing_alpha: float = 0.3
    moving_average_window: int = 3

    # trend classification: band is this fraction of |mean| per period
    trend_threshold_ratio: float = 0.02
    trend_strength_strong_r2: float = 0.7
    trend_strength_moderate_r2: float = 0.4
    # analyze_trend: per-period change rate, in percent of the mean
    trend_analysis_change_pct: float = 1.0

    # forecasts are floored here; KPIs never go negative
    forecast_floor: float = 0.0

    # reporting precision for validation metrics
    metric_precision: int = 2
    r2_precision: int = 3

    # cross-validation defaults
    kfold_default_k: int = 5
    walk_forward_min_train_size: int = 10
    walk_forward_horizon: int = 3
    default_validation_strategy: str = STRATEGY_WALK_FORWARD

    # reliability verdict
    reliability_r2: float = 0.7
    reliability_mape: float = 20.0
    confidence_high_r2: float = 0.9
    confidence_high_mape: float = 10.0
    confidence_high_r2_std: float = 0.05

    # prediction summaries and intervals
    prediction_min_points: int = 3
    prediction_default_horizon: int = 12
    prediction_interval_z: float = 1.96
    prediction_trend_change_pct: float = 2.0

    # anomaly detection
    anomaly_zscore_threshold: float = 2.0
    anomaly_min_points: int = 3

    model_config = {
        "env_prefix": "KPICAST_",
        "extra": "ignore",
    }


settings = Settings()
