"""
Validation subpackage for the forecast engine.

This module re-exports the metric calculator from
:mod:`engine.validation.metrics` and the cross-validation strategies from
:mod:`engine.validation.cross`, giving consumers a single ``engine.validation``
import path for scoring prediction functions.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.validation.metrics import ValidationResult, calculate_metrics
from engine.validation.cross import (
    ConfidenceRules,
    CrossValidationResult,
    CrossValidator,
    cross_validate,
    k_fold_cross_validation,
    resolve_strategy,
    time_series_cross_validation,
)

__all__ = [
    "ValidationResult",
    "calculate_metrics",
    "ConfidenceRules",
    "CrossValidationResult",
    "CrossValidator",
    "cross_validate",
    "k_fold_cross_validation",
    "resolve_strategy",
    "time_series_cross_validation",
]
