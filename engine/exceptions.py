# engine/exceptions.py

class ForecastEngineError(Exception):
    pass


class MetricsShapeError(ForecastEngineError, ValueError):
    pass


class InsufficientDataError(ForecastEngineError, ValueError):
    pass


class UnknownMethodError(ForecastEngineError, ValueError):
    pass


class UnknownStrategyError(ForecastEngineError, ValueError):
    pass
