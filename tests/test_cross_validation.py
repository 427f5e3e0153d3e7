"""
Test cases for k-fold and walk-forward cross-validation, including split layout, aggregation, confidence rules and insufficient-data gating.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import settings
from engine.enums import ConfidenceLevel, ValidationStrategy
from engine.exceptions import (
    ForecastEngineError,
    InsufficientDataError,
    MetricsShapeError,
    UnknownStrategyError,
)
from engine.forecast import exponential_predict, linear_predict, moving_average_predict
from engine.validation import (
    ConfidenceRules,
    CrossValidationResult,
    CrossValidator,
    ValidationResult,
    cross_validate,
    k_fold_cross_validation,
    resolve_strategy,
    time_series_cross_validation,
)


class RecordingPredictor:
    def __init__(self):
        self.calls = []

    def __call__(self, train, count):
        self.calls.append((list(train), count))
        return [train[-1]] * count if train else [0.0] * count


def test_k_fold_requires_two_points_per_fold():
    with pytest.raises(InsufficientDataError):
        k_fold_cross_validation(list(range(9)), linear_predict, k=5)
    with pytest.raises(InsufficientDataError):
        k_fold_cross_validation(list(range(9)), linear_predict, k=0)


def test_k_fold_split_layout():
    data = [float(v) for v in range(1, 12)]
    rec = RecordingPredictor()
    result = k_fold_cross_validation(data, rec, k=5)

    assert len(result.folds) == 5
    assert [count for _, count in rec.calls] == [2] * 5
    assert rec.calls[0][0] == data[2:]
    assert rec.calls[1][0] == data[:2] + data[4:]
    # the remainder point is never tested but always trained on
    for train, _ in rec.calls:
        assert data[-1] in train
        assert len(train) == 9


def test_k_fold_default_k(monkeypatch):
    monkeypatch.setattr(settings, "kfold_default_k", 2)
    result = k_fold_cross_validation([1, 2, 3, 4], RecordingPredictor())
    assert len(result.folds) == 2


def test_k_fold_constant_series_is_high_confidence():
    result = k_fold_cross_validation([100.0] * 10, linear_predict, k=5)
    assert result.strategy == ValidationStrategy.k_fold
    assert result.average == ValidationResult(mse=0.0, rmse=0.0, mae=0.0, mape=0.0, r2=1.0)
    assert result.is_reliable is True
    assert result.confidence_level == ConfidenceLevel.high


def test_k_fold_linear_series_extrapolates_past_the_gap(linear_series):
    # training on points after the test block makes the chronological
    # forecaster predict the wrong end of the line
    result = k_fold_cross_validation(linear_series, linear_predict, k=5)
    assert result.is_reliable is False
    assert result.confidence_level == ConfidenceLevel.low


def test_walk_forward_requires_a_window(linear_series):
    with pytest.raises(InsufficientDataError):
        time_series_cross_validation(linear_series, linear_predict)
    with pytest.raises(InsufficientDataError):
        time_series_cross_validation([1, 2, 3], linear_predict, min_train_size=2, horizon=2)
    with pytest.raises(InsufficientDataError):
        time_series_cross_validation(linear_series, linear_predict, min_train_size=5, horizon=0)


def test_walk_forward_split_layout():
    data = [float(v) for v in range(20)]
    rec = RecordingPredictor()
    result = time_series_cross_validation(data, rec, min_train_size=10, horizon=3)

    assert len(result.folds) == 8
    assert [len(train) for train, _ in rec.calls] == list(range(10, 18))
    assert all(count == 3 for _, count in rec.calls)
    assert rec.calls[0][0] == data[:10]


def test_walk_forward_linear_series_is_high_confidence(linear_series):
    result = time_series_cross_validation(linear_series, linear_predict, min_train_size=5, horizon=3)
    assert isinstance(result, CrossValidationResult)
    assert result.strategy == ValidationStrategy.walk_forward
    assert len(result.folds) == 4
    assert result.average.mse == 0.0
    assert result.average.r2 == 1.0
    assert result.standard_deviation.r2 == 0.0
    assert result.is_reliable is True
    assert result.confidence_level == ConfidenceLevel.high


def test_walk_forward_accepts_every_predictor(linear_series):
    for predictor in (linear_predict, moving_average_predict, exponential_predict):
        result = time_series_cross_validation(linear_series, predictor, min_train_size=5, horizon=2)
        assert len(result.folds) == 5
        assert result.confidence_level in ConfidenceLevel


def test_wrong_prediction_length_fails_loudly(linear_series):
    with pytest.raises(MetricsShapeError):
        time_series_cross_validation(linear_series, lambda train, n: [1.0], min_train_size=5, horizon=3)


def test_aggregate_uses_population_std():
    folds = [
        ValidationResult(mse=1.0, rmse=1.0, mae=1.0, mape=1.0, r2=1.0),
        ValidationResult(mse=3.0, rmse=3.0, mae=3.0, mape=3.0, r2=0.5),
    ]
    result = CrossValidator()._aggregate(folds, ValidationStrategy.k_fold)
    assert result.average == ValidationResult(mse=2.0, rmse=2.0, mae=2.0, mape=2.0, r2=0.75)
    assert result.standard_deviation == ValidationResult(mse=1.0, rmse=1.0, mae=1.0, mape=1.0, r2=0.25)
    assert result.folds == folds


def test_confidence_rules():
    rules = ConfidenceRules()
    tight = ValidationResult(mse=0, rmse=0, mae=0, mape=0, r2=0.01)
    loose = ValidationResult(mse=0, rmse=0, mae=0, mape=0, r2=0.1)

    excellent = ValidationResult(mse=0, rmse=0, mae=0, mape=5.0, r2=0.95)
    assert rules.level(excellent, tight) == ConfidenceLevel.high
    assert rules.level(excellent, loose) == ConfidenceLevel.medium

    decent = ValidationResult(mse=0, rmse=0, mae=0, mape=15.0, r2=0.8)
    assert rules.is_reliable(decent)
    assert rules.level(decent, tight) == ConfidenceLevel.medium

    assert rules.level(ValidationResult(0, 0, 0, 5.0, 0.6), tight) == ConfidenceLevel.low
    assert rules.level(ValidationResult(0, 0, 0, 25.0, 0.99), tight) == ConfidenceLevel.low
    assert not rules.is_reliable(ValidationResult(0, 0, 0, 20.0, 0.99))


def test_confidence_rules_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "confidence_high_r2", 0.95)
    monkeypatch.setattr(settings, "reliability_mape", 12.0)
    rules = ConfidenceRules.from_settings()
    assert rules.high_r2 == 0.95
    assert rules.reliable_mape == 12.0


def test_injected_rules(linear_series):
    validator = CrossValidator(rules=ConfidenceRules(high_r2=1.5))
    result = validator.walk_forward(linear_series, linear_predict, min_train_size=5, horizon=3)
    assert result.confidence_level == ConfidenceLevel.medium


def test_cross_validate_dispatch(linear_series, monkeypatch):
    assert cross_validate(linear_series, linear_predict, min_train_size=5).strategy == ValidationStrategy.walk_forward
    assert cross_validate(linear_series, linear_predict, "k_fold", k=5).strategy == ValidationStrategy.k_fold

    monkeypatch.setattr(settings, "default_validation_strategy", "k_fold")
    assert cross_validate(linear_series, linear_predict).strategy == ValidationStrategy.k_fold


def test_cross_validate_unknown_strategy(linear_series):
    with pytest.raises(UnknownStrategyError) as exc:
        cross_validate(linear_series, linear_predict, "leave_one_out")
    assert isinstance(exc.value, ForecastEngineError)
    assert isinstance(exc.value, ValueError)


def test_resolve_strategy():
    assert resolve_strategy("k_fold") is ValidationStrategy.k_fold
    assert resolve_strategy(ValidationStrategy.walk_forward) is ValidationStrategy.walk_forward
    with pytest.raises(UnknownStrategyError):
        resolve_strategy("bootstrap")
