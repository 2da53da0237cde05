"""
Indicator Engine - Technical Indicator Signal Engine

Deterministic RSI, EMA, MACD and Stochastic oscillator calculations plus a
voting step that fuses them into one composite trade signal with a
confidence score.
"""

from .data.models import Candle
from .engine import IndicatorAnalyzer
from .indicators import compute_ema, compute_macd, compute_rsi, compute_stochastic
from .models.results import (
    AnalysisSnapshot,
    CompositeSignal,
    MACDResult,
    OscillatorSignal,
    RSIResult,
    StochasticResult,
    Trend,
)
from .signals import compose_signal

__version__ = "0.1.0"

__all__ = [
    "AnalysisSnapshot",
    "Candle",
    "CompositeSignal",
    "IndicatorAnalyzer",
    "MACDResult",
    "OscillatorSignal",
    "RSIResult",
    "StochasticResult",
    "Trend",
    "compose_signal",
    "compute_ema",
    "compute_macd",
    "compute_rsi",
    "compute_stochastic",
]
