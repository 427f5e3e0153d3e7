"""
Test cases for the least-squares regression core, including exact fits, degenerate series and residual spread.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import numpy as np
import pytest

from engine.regression import RegressionFit, fit, residual_std


def test_fit_slope_and_intercept():
    res = fit([10, 20, 30, 40, 50])
    assert res.slope == 10
    assert res.intercept == 10
    assert res.r2 == pytest.approx(1.0, abs=1e-9)


def test_fit_constant_series_is_perfect():
    assert fit([50, 50, 50, 50]) == RegressionFit(slope=0.0, intercept=50.0, r2=1.0)


@pytest.mark.parametrize("value", [0.0, -3.5, 1e9])
def test_fit_constant_series_any_value(value):
    res = fit([value] * 7)
    assert res.slope == 0.0
    assert res.intercept == value
    assert res.r2 == 1.0


def test_fit_single_value():
    assert fit([100]) == RegressionFit(slope=0.0, intercept=100.0, r2=0.0)


def test_fit_empty():
    assert fit([]) == RegressionFit(slope=0.0, intercept=0.0, r2=0.0)


def test_fit_imperfect(noisy_series):
    res = fit(noisy_series)
    assert res.slope == pytest.approx(9.6)
    assert res.intercept == pytest.approx(10.8)
    assert 0.9 < res.r2 < 1.0
    assert res.r2 == pytest.approx(1 - 14.4 / 936)


def test_fit_accepts_arrays_and_tuples():
    assert fit(np.array([1.0, 3.0, 5.0])) == fit((1, 3, 5))
    assert fit((1, 3, 5)).slope == pytest.approx(2.0)


def test_fit_predict():
    res = fit([10, 20, 30])
    assert res.predict(3) == pytest.approx(40.0)


def test_fit_never_returns_nan():
    for series in ([], [1.0], [2.0, 2.0], [1.0, 2.0]):
        res = fit(series)
        assert not any(math.isnan(v) for v in (res.slope, res.intercept, res.r2))


def test_residual_std(noisy_series):
    assert residual_std(noisy_series) == pytest.approx(math.sqrt(14.4 / 5))
    assert residual_std([10, 20, 30, 40]) == pytest.approx(0.0, abs=1e-9)
    assert residual_std([5]) == 0.0
    assert residual_std([]) == 0.0
