"""
Canonical input data models.

Candles are frozen value objects. A price series is any ordered sequence of
floats, oldest first; candle series are ordered sequences of Candle.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

PriceSeries = Sequence[float]


@dataclass(frozen=True)
class Candle:
    """OHLC bar, volume and timestamp optional."""
    open: float
    high: float
    low: float
    close: float
    volume: Optional[float] = None
    timestamp: Optional[datetime] = None  # UTC market timestamp


CandleSeries = Sequence[Candle]


def closes(candles: CandleSeries) -> list[float]:
    """Extract the close-price series from candles, preserving order."""
    return [candle.close for candle in candles]
