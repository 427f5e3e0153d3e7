"""
Regression subpackage for the forecast engine.

Re-exports :class:`RegressionFit`, :func:`fit` and :func:`residual_std` from
:mod:`engine.regression.ols`, the closed-form least-squares fit of a series
against its index that trend detection and forecasting are built on.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.regression.ols import RegressionFit, fit, residual_std

__all__ = ["RegressionFit", "fit", "residual_std"]
