"""
Data quality error classifications for indicator inputs.

These exceptions are raised before any arithmetic runs, so invalid values
never propagate into indicator results.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for caller-side input problems."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidParameterError(DataQualityError):
    """Indicator parameter outside its contract (e.g. non-positive period)."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value


class MissingDataError(DataQualityError):
    """Required data is completely missing."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Data exists but holds NaN, infinities, missing fields or inconsistent OHLC."""

    def __init__(self, message: str, index: Optional[int] = None,
                 field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.field = field


class ParseError(MalformedDataError):
    """Raised when a candle payload cannot be decoded."""
