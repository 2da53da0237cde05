"""Stochastic oscillator (%K / %D) calculations"""

from ..data.models import CandleSeries
from ..data.validators import validate_candles, validate_computed, validate_period
from ..models.results import OscillatorSignal, StochasticResult

STOCH_OVERBOUGHT = 80.0
STOCH_OVERSOLD = 20.0

# %K reported for a window whose high equals its low
FLAT_WINDOW_K = 50.0
# %D reported until d_period %K values exist
DEFAULT_D = 50.0


def percent_k(window: CandleSeries) -> float:
    """
    Position of the last close within the window's high-low range (0-100)

    Args:
        window: Trailing candles, last one is current

    Returns:
        %K value, FLAT_WINDOW_K when the range is zero
    """
    highest_high = max(candle.high for candle in window)
    lowest_low = min(candle.low for candle in window)

    if highest_high == lowest_low:
        return FLAT_WINDOW_K

    return (window[-1].close - lowest_low) / (highest_high - lowest_low) * 100


def classify_stochastic(k: float, d: float) -> OscillatorSignal:
    if k > STOCH_OVERBOUGHT and d > STOCH_OVERBOUGHT:
        return OscillatorSignal.OVERBOUGHT
    if k < STOCH_OVERSOLD and d < STOCH_OVERSOLD:
        return OscillatorSignal.OVERSOLD
    return OscillatorSignal.NEUTRAL


def compute_stochastic(candles: CandleSeries, k_period: int = 14, d_period: int = 3) -> StochasticResult:
    """
    Calculate the Stochastic oscillator for the latest candle

    Args:
        candles: Candles in chronological order
        k_period: Lookback for %K (default 14)
        d_period: SMA length for %D (default 3)

    Returns:
        StochasticResult; k = d = 50 / neutral when fewer than k_period candles

    Raises:
        InvalidParameterError: If any period is not a positive integer
        MalformedDataError: If any candle has missing, non-finite or inconsistent OHLC
        IndicatorCalculationError: If the high-low range overflows
    """
    validate_period("k_period", k_period)
    validate_period("d_period", d_period)
    validate_candles(candles)

    if len(candles) < k_period:
        return StochasticResult.neutral_default()

    candle_list = list(candles)
    k_values = [
        percent_k(candle_list[i - k_period + 1:i + 1])
        for i in range(k_period - 1, len(candle_list))
    ]

    current_k = k_values[-1]
    if len(k_values) >= d_period:
        current_d = sum(k_values[-d_period:]) / d_period
    else:
        current_d = DEFAULT_D

    validate_computed("stochastic", k=current_k, d=current_d)
    return StochasticResult(k=current_k, d=current_d, signal=classify_stochastic(current_k, current_d))
