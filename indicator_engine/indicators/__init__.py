"""Indicator calculators: EMA, RSI, MACD and Stochastic oscillator."""

from .ema import compute_ema
from .macd import compute_macd
from .rsi import compute_rsi
from .stochastic import compute_stochastic
from .streaming import EMATracker, MACDTracker, RSITracker

__all__ = [
    "compute_ema",
    "compute_rsi",
    "compute_macd",
    "compute_stochastic",
    "EMATracker",
    "RSITracker",
    "MACDTracker",
]
