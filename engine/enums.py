"""
Enumerations for Trend Direction, Trend Strength, Confidence Levels, Prediction Methods and Validation Strategies

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from config import STRATEGY_K_FOLD, STRATEGY_WALK_FORWARD


class Trend(str, Enum):
    up = "up"
    down = "down"
    stable = "stable"


class TrendStrength(str, Enum):
    strong = "strong"
    moderate = "moderate"
    weak = "weak"

    @classmethod
    def from_r2(cls, r2: float) -> TrendStrength:
        # cutoffs come from settings so they can be tuned per deployment
        from config import settings

        if r2 > settings.trend_strength_strong_r2:
            return cls.strong
        if r2 > settings.trend_strength_moderate_r2:
            return cls.moderate
        return cls.weak


class ConfidenceLevel(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class PredictionMethod(str, Enum):
    linear = "linear"
    moving_average = "moving_average"
    exponential = "exponential"


class ValidationStrategy(str, Enum):
    walk_forward = STRATEGY_WALK_FORWARD
    k_fold = STRATEGY_K_FOLD
