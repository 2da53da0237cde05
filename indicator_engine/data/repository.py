"""
Candle source interface for the analysis engine.

The engine never reads global state; callers inject a repository that
returns an immutable snapshot of a symbol's candle history.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Optional

from .models import Candle


class CandleRepository(ABC):
    @abstractmethod
    def get_candles(self, symbol: str) -> Optional[tuple[Candle, ...]]: ...


class InMemoryCandleRepository(CandleRepository):
    """Dict-backed repository; every read returns a tuple snapshot."""

    def __init__(self, candles: Optional[dict[str, Iterable[Candle]]] = None):
        self._candles: dict[str, tuple[Candle, ...]] = {
            symbol: tuple(series) for symbol, series in (candles or {}).items()
        }

    def get_candles(self, symbol: str) -> Optional[tuple[Candle, ...]]:
        return self._candles.get(symbol)

    def put_candles(self, symbol: str, candles: Iterable[Candle]) -> None:
        """Replace a symbol's candle history."""
        self._candles[symbol] = tuple(candles)

    def append_candle(self, symbol: str, candle: Candle) -> None:
        self._candles[symbol] = self._candles.get(symbol, ()) + (candle,)

    def symbols(self) -> list[str]:
        return sorted(self._candles)
