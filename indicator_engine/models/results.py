"""Indicator result value objects."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

import orjson


class OscillatorSignal(str, Enum):
    """Classification of a bounded oscillator reading."""
    OVERBOUGHT = "overbought"
    OVERSOLD = "oversold"
    NEUTRAL = "neutral"


class Trend(str, Enum):
    """Directional classification."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class RSIResult:
    """Relative Strength Index reading."""
    value: float
    signal: OscillatorSignal

    @classmethod
    def neutral_default(cls) -> "RSIResult":
        """Result used when the series is shorter than the lookback window."""
        return cls(value=50.0, signal=OscillatorSignal.NEUTRAL)


@dataclass(frozen=True)
class MACDResult:
    """MACD reading; histogram is always macd - signal."""
    macd: float
    signal: float
    histogram: float
    trend: Trend

    @classmethod
    def neutral_default(cls) -> "MACDResult":
        """Result used when the series is shorter than the slow period."""
        return cls(macd=0.0, signal=0.0, histogram=0.0, trend=Trend.NEUTRAL)


@dataclass(frozen=True)
class StochasticResult:
    """Stochastic oscillator %K/%D reading."""
    k: float
    d: float
    signal: OscillatorSignal

    @classmethod
    def neutral_default(cls) -> "StochasticResult":
        """Result used when there are fewer candles than the %K period."""
        return cls(k=50.0, d=50.0, signal=OscillatorSignal.NEUTRAL)


@dataclass(frozen=True)
class CompositeSignal:
    """Fused directional signal across RSI, MACD and Stochastic."""
    signal: Trend
    confidence: float
    description: str
    bullish_votes: int = 0
    bearish_votes: int = 0


@dataclass(frozen=True)
class AnalysisSnapshot:
    """Complete indicator analysis for one symbol at one point in time"""
    symbol: str
    rsi: RSIResult
    macd: MACDResult
    stochastic: StochasticResult
    composite: CompositeSignal
    candle_count: int
    last_close: Optional[float] = None
    as_of: Optional[datetime] = None  # timestamp of the last candle, if known

    def has_sufficient_data(self, warmup_period: int) -> bool:
        """Check whether every indicator had its full lookback window"""
        return self.candle_count >= warmup_period

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping of the snapshot"""
        return {
            "symbol": self.symbol,
            "rsi": {"value": self.rsi.value, "signal": self.rsi.signal.value},
            "macd": {
                "macd": self.macd.macd,
                "signal": self.macd.signal,
                "histogram": self.macd.histogram,
                "trend": self.macd.trend.value,
            },
            "stochastic": {
                "k": self.stochastic.k,
                "d": self.stochastic.d,
                "signal": self.stochastic.signal.value,
            },
            "composite": {
                "signal": self.composite.signal.value,
                "confidence": self.composite.confidence,
                "description": self.composite.description,
            },
            "candle_count": self.candle_count,
            "last_close": self.last_close,
            "as_of": self.as_of.isoformat() if self.as_of else None,
        }

    def to_json(self) -> bytes:
        """Serialize the snapshot with orjson"""
        return orjson.dumps(self.to_dict())
