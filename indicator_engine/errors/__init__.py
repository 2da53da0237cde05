"""
Error classification for the indicator engine.

Insufficient history is not an error: calculators fall back to neutral
defaults. The exceptions here cover genuine contract violations (bad
parameters, malformed inputs) and unexpected calculation failures.
"""

from .data_quality import (
    DataQualityError,
    InvalidParameterError,
    MalformedDataError,
    MissingDataError,
    ParseError,
)
from .system_failures import (
    ConfigurationError,
    IndicatorCalculationError,
    SystemFailureError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "InvalidParameterError",
    "MalformedDataError",
    "MissingDataError",
    "ParseError",
    # System Failures
    "SystemFailureError",
    "IndicatorCalculationError",
    "ConfigurationError",
]
