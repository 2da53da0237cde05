"""MACD (Moving Average Convergence Divergence) calculations"""

from ..data.models import PriceSeries
from ..data.validators import validate_computed, validate_period, validate_prices
from ..models.results import MACDResult, Trend
from .ema import ema_series


def macd_lines(prices: PriceSeries, fast_period: int, slow_period: int,
               signal_period: int) -> tuple[list[float], list[float]]:
    """
    MACD and signal lines over validated prices

    Both EMAs are full length, so the MACD line covers every index with
    no alignment offset between fast and slow.
    """
    fast_ema = ema_series(prices, fast_period)
    slow_ema = ema_series(prices, slow_period)
    macd_line = [fast - slow for fast, slow in zip(fast_ema, slow_ema)]
    return macd_line, ema_series(macd_line, signal_period)


def macd_result(macd: float, signal: float) -> MACDResult:
    """Build a MACDResult and classify its trend"""
    histogram = macd - signal
    validate_computed("macd", macd=macd, signal=signal, histogram=histogram)

    # Direction and histogram sign must agree
    if macd > signal and histogram > 0:
        trend = Trend.BULLISH
    elif macd < signal and histogram < 0:
        trend = Trend.BEARISH
    else:
        trend = Trend.NEUTRAL

    return MACDResult(macd=macd, signal=signal, histogram=histogram, trend=trend)


def compute_macd(
    prices: PriceSeries,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> MACDResult:
    """
    Calculate MACD for the latest price

    Args:
        prices: Prices in chronological order
        fast_period: Fast EMA period (default 12)
        slow_period: Slow EMA period (default 26)
        signal_period: Signal line EMA period (default 9)

    Returns:
        MACDResult; all zeros / neutral when fewer than slow_period prices

    Raises:
        InvalidParameterError: If any period is not a positive integer
        MalformedDataError: If any price is missing, NaN or infinite
        IndicatorCalculationError: If the arithmetic overflows
    """
    validate_period("fast_period", fast_period)
    validate_period("slow_period", slow_period)
    validate_period("signal_period", signal_period)
    validate_prices(prices)

    if len(prices) < slow_period:
        return MACDResult.neutral_default()

    macd_line, signal_line = macd_lines(prices, fast_period, slow_period, signal_period)
    return macd_result(macd_line[-1], signal_line[-1])
