"""
Incremental indicator trackers.

Each tracker consumes one price at a time and, after every update, reports
exactly what the batch function would return for all prices seen so far.
Trackers reuse the batch helpers for every arithmetic step so the results
match bit for bit. Unlike the batch functions they hold mutable state; keep
one tracker per series and do not share it across threads.
"""

from typing import Optional

from ..data.validators import validate_computed, validate_period, validate_prices
from ..models.results import MACDResult, RSIResult
from .ema import ema_multiplier, ema_series, ema_step
from .macd import macd_lines, macd_result
from .rsi import initial_averages, rsi_from_averages, wilder_step


class EMATracker:
    """Incremental counterpart of compute_ema (reports the last value)."""

    def __init__(self, period: int):
        self.period = validate_period("period", period)
        self._multiplier = ema_multiplier(period)
        # Prices are buffered until the seed window is complete; the seed
        # (and so every earlier value) changes with each price before that.
        self._warmup: Optional[list[float]] = []
        self.count = 0
        self.value: Optional[float] = None

    def update(self, price: float) -> float:
        """Add a price and return the current EMA."""
        validate_prices((price,))
        value = self._advance(price)
        validate_computed("ema", ema=value)
        return value

    def _advance(self, price: float) -> float:
        # unchecked step; MACDTracker checks its own result instead
        self.count += 1

        if self._warmup is None:
            self.value = ema_step(price, self.value, self._multiplier)
            return self.value

        self._warmup.append(price)
        self.value = ema_series(self._warmup, self.period)[-1]
        if len(self._warmup) >= self.period:
            self._warmup = None

        return self.value


class RSITracker:
    """Incremental counterpart of compute_rsi."""

    def __init__(self, period: int = 14):
        self.period = validate_period("period", period)
        self._warmup: Optional[list[float]] = []
        self._avg_gain: Optional[float] = None
        self._avg_loss: Optional[float] = None
        self._last_price: Optional[float] = None
        self.count = 0
        self.result = RSIResult.neutral_default()

    def update(self, price: float) -> RSIResult:
        """Add a price and return the current RSI."""
        validate_prices((price,))
        self.count += 1

        if self._warmup is not None:
            self._warmup.append(price)
            if len(self._warmup) == self.period + 1:
                self._avg_gain, self._avg_loss = initial_averages(self._warmup, self.period)
                self._warmup = None
                self.result = rsi_from_averages(self._avg_gain, self._avg_loss)
        else:
            self._avg_gain, self._avg_loss = wilder_step(
                self._avg_gain, self._avg_loss, price - self._last_price, self.period
            )
            self.result = rsi_from_averages(self._avg_gain, self._avg_loss)

        self._last_price = price
        return self.result


class MACDTracker:
    """Incremental counterpart of compute_macd."""

    def __init__(self, fast_period: int = 12, slow_period: int = 26, signal_period: int = 9):
        self.fast_period = validate_period("fast_period", fast_period)
        self.slow_period = validate_period("slow_period", slow_period)
        self.signal_period = validate_period("signal_period", signal_period)

        self._fast = EMATracker(fast_period)
        self._slow = EMATracker(slow_period)
        self._signal: Optional[EMATracker] = None

        # Early MACD values are revised until both EMA seeds are settled
        self._settle_count = max(fast_period, slow_period)
        self._warmup: Optional[list[float]] = []
        self.count = 0
        self.result = MACDResult.neutral_default()

    def update(self, price: float) -> MACDResult:
        """Add a price and return the current MACD reading."""
        validate_prices((price,))
        self.count += 1
        fast = self._fast._advance(price)
        slow = self._slow._advance(price)

        if self._warmup is not None:
            self._warmup.append(price)
            if len(self._warmup) < self._settle_count:
                if self.count >= self.slow_period:
                    macd_line, signal_line = macd_lines(
                        self._warmup, self.fast_period, self.slow_period, self.signal_period
                    )
                    self.result = macd_result(macd_line[-1], signal_line[-1])
                return self.result

            macd_line, _ = macd_lines(
                self._warmup, self.fast_period, self.slow_period, self.signal_period
            )
            self._signal = EMATracker(self.signal_period)
            for value in macd_line:
                signal = self._signal._advance(value)
            macd = macd_line[-1]
            self._warmup = None
        else:
            macd = fast - slow
            signal = self._signal._advance(macd)

        if self.count >= self.slow_period:
            self.result = macd_result(macd, signal)

        return self.result
