"""
Result models.

Immutable value objects returned by the calculators, the composer and the
analysis engine. Signals are exposed as semantic enums only.
"""

from .results import (
    AnalysisSnapshot,
    CompositeSignal,
    MACDResult,
    OscillatorSignal,
    RSIResult,
    StochasticResult,
    Trend,
)

__all__ = [
    "AnalysisSnapshot",
    "CompositeSignal",
    "MACDResult",
    "OscillatorSignal",
    "RSIResult",
    "StochasticResult",
    "Trend",
]
