"""
Cross-validation of KPI prediction functions.

Two splitting strategies share one aggregation step:

* walk-forward: trains on a growing chronological prefix and tests on the
  periods immediately after it; this is the default because it never trains
  on the future.
* k-fold: contiguous equal blocks, each tested against every other point.
  For time-ordered data the training set includes periods after the test
  block, so it is kept for non-temporal diagnostics only.

Fold metrics are averaged, their population standard deviation is taken, and
the averages are compared against :class:`ConfidenceRules` to produce a
reliability verdict. The rules are injected when building a
:class:`CrossValidator` so thresholds can be tuned per indicator.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Sequence, Union

import numpy as np

from engine.enums import ConfidenceLevel, ValidationStrategy
from engine.exceptions import InsufficientDataError, UnknownStrategyError
from engine.forecast.predictors import PredictFn
from engine.validation.metrics import METRIC_NAMES, ValidationResult, calculate_metrics
from config import settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfidenceRules:
    reliable_r2: float = 0.7
    reliable_mape: float = 20.0
    high_r2: float = 0.9
    high_mape: float = 10.0
    high_r2_std: float = 0.05

    @classmethod
    def from_settings(cls) -> ConfidenceRules:
        return cls(
            reliable_r2=settings.reliability_r2,
            reliable_mape=settings.reliability_mape,
            high_r2=settings.confidence_high_r2,
            high_mape=settings.confidence_high_mape,
            high_r2_std=settings.confidence_high_r2_std,
        )

    def is_reliable(self, average: ValidationResult) -> bool:
        return average.r2 > self.reliable_r2 and average.mape < self.reliable_mape

    def level(self, average: ValidationResult, std: ValidationResult) -> ConfidenceLevel:
        if average.r2 > self.high_r2 and average.mape < self.high_mape and std.r2 < self.high_r2_std:
            return ConfidenceLevel.high
        if self.is_reliable(average):
            return ConfidenceLevel.medium
        return ConfidenceLevel.low


@dataclass(frozen=True)
class CrossValidationResult:
    folds: List[ValidationResult]
    average: ValidationResult
    standard_deviation: ValidationResult
    is_reliable: bool
    confidence_level: ConfidenceLevel
    strategy: ValidationStrategy


class CrossValidator:
    def __init__(self, rules: ConfidenceRules | None = None) -> None:
        self.rules = rules or ConfidenceRules.from_settings()

    def k_fold(
        self,
        series: Sequence[float],
        predict_fn: PredictFn,
        k: int | None = None,
    ) -> CrossValidationResult:
        if k is None:
            k = settings.kfold_default_k
        data = [float(v) for v in series]
        if k < 1:
            raise InsufficientDataError(f"k-fold needs at least one fold (got k={k})")
        if len(data) < 2 * k:
            raise InsufficientDataError(
                f"Not enough data for {k} folds: need {2 * k} points, got {len(data)}"
            )

        # points past k * fold_size are never tested but stay in training
        fold_size = len(data) // k
        folds: List[ValidationResult] = []
        for i in range(k):
            start, end = i * fold_size, (i + 1) * fold_size
            test = data[start:end]
            train = data[:start] + data[end:]
            folds.append(calculate_metrics(test, predict_fn(train, len(test))))

        return self._aggregate(folds, ValidationStrategy.k_fold)

    def walk_forward(
        self,
        series: Sequence[float],
        predict_fn: PredictFn,
        min_train_size: int | None = None,
        horizon: int | None = None,
    ) -> CrossValidationResult:
        if min_train_size is None:
            min_train_size = settings.walk_forward_min_train_size
        if horizon is None:
            horizon = settings.walk_forward_horizon
        data = [float(v) for v in series]
        if min_train_size < 1 or horizon < 1:
            raise InsufficientDataError(
                f"walk-forward needs min_train_size >= 1 and horizon >= 1 "
                f"(got {min_train_size} and {horizon})"
            )

        folds: List[ValidationResult] = []
        for train_end in range(min_train_size, len(data) - horizon + 1):
            train = data[:train_end]
            test = data[train_end:train_end + horizon]
            folds.append(calculate_metrics(test, predict_fn(train, horizon)))

        if not folds:
            raise InsufficientDataError(
                f"Not enough data for walk-forward validation: need "
                f"{min_train_size + horizon} points, got {len(data)}"
            )
        return self._aggregate(folds, ValidationStrategy.walk_forward)

    def validate(
        self,
        series: Sequence[float],
        predict_fn: PredictFn,
        strategy: Union[ValidationStrategy, str, None] = None,
        **options: Any,
    ) -> CrossValidationResult:
        strategy = resolve_strategy(strategy or settings.default_validation_strategy)
        if strategy is ValidationStrategy.k_fold:
            return self.k_fold(series, predict_fn, k=options.get("k"))
        return self.walk_forward(
            series,
            predict_fn,
            min_train_size=options.get("min_train_size"),
            horizon=options.get("horizon"),
        )

    def _aggregate(self, folds: List[ValidationResult], strategy: ValidationStrategy) -> CrossValidationResult:
        table = np.array([[getattr(f, name) for name in METRIC_NAMES] for f in folds], dtype=float)
        means = table.mean(axis=0)
        stds = table.std(axis=0)

        raw_average = ValidationResult(*(float(v) for v in means))
        raw_std = ValidationResult(*(float(v) for v in stds))
        is_reliable = self.rules.is_reliable(raw_average)
        level = self.rules.level(raw_average, raw_std)

        log.info(
            "cross-validation %s: folds=%d r2=%.3f mape=%.2f confidence=%s",
            strategy.value, len(folds), raw_average.r2, raw_average.mape, level.value,
        )

        return CrossValidationResult(
            folds=folds,
            average=ValidationResult.rounded(*means),
            standard_deviation=ValidationResult.rounded(*stds),
            is_reliable=is_reliable,
            confidence_level=level,
            strategy=strategy,
        )


def resolve_strategy(strategy: Union[ValidationStrategy, str]) -> ValidationStrategy:
    if isinstance(strategy, ValidationStrategy):
        return strategy
    try:
        return ValidationStrategy(str(strategy))
    except ValueError:
        raise UnknownStrategyError(f"Unknown validation strategy: {strategy!r}") from None


def k_fold_cross_validation(
    series: Sequence[float],
    predict_fn: PredictFn,
    k: int | None = None,
) -> CrossValidationResult:
    return CrossValidator().k_fold(series, predict_fn, k)


def time_series_cross_validation(
    series: Sequence[float],
    predict_fn: PredictFn,
    min_train_size: int | None = None,
    horizon: int | None = None,
) -> CrossValidationResult:
    return CrossValidator().walk_forward(series, predict_fn, min_train_size, horizon)


def cross_validate(
    series: Sequence[float],
    predict_fn: PredictFn,
    strategy: Union[ValidationStrategy, str, None] = None,
    **options: Any,
) -> CrossValidationResult:
    return CrossValidator().validate(series, predict_fn, strategy, **options)
