from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field

from engine.enums import PredictionMethod, ValidationStrategy


class SeriesRequest(BaseModel):
    series: List[float] = Field(default_factory=list)


class ForecastRequest(SeriesRequest):
    periods: int = Field(default=3, ge=0, le=120)


class SmoothingRequest(SeriesRequest):
    window: Optional[int] = Field(default=None, ge=1)
    alpha: Optional[float] = None


class PredictionRequest(SeriesRequest):
    horizon: Optional[int] = Field(default=None, ge=1, le=120)
    method: PredictionMethod = PredictionMethod.linear
    window: Optional[int] = Field(default=None, ge=1)
    alpha: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class AnomalyRequest(SeriesRequest):
    threshold: Optional[float] = Field(default=None, gt=0.0)


class MetricsRequest(BaseModel):
    actual: List[float]
    predicted: List[float]


class CrossValidationRequest(SeriesRequest):
    method: PredictionMethod = PredictionMethod.linear
    strategy: Optional[ValidationStrategy] = None
    k: Optional[int] = Field(default=None, ge=1, le=50)
    min_train_size: Optional[int] = Field(default=None, ge=1)
    horizon: Optional[int] = Field(default=None, ge=1, le=120)
    window: Optional[int] = Field(default=None, ge=1)
    alpha: Optional[float] = Field(default=None, ge=0.0, le=1.0)
