"""RSI (Relative Strength Index) calculations using Wilder smoothing"""

from ..data.models import PriceSeries
from ..data.validators import validate_computed, validate_period, validate_prices
from ..models.results import OscillatorSignal, RSIResult

RSI_OVERBOUGHT = 70.0
RSI_OVERSOLD = 30.0


def initial_averages(prices: PriceSeries, period: int) -> tuple[float, float]:
    """
    Average gain and loss over the first `period` price changes

    Args:
        prices: At least period + 1 prices

    Returns:
        (average gain, average loss), loss as a positive magnitude
    """
    gains = 0.0
    losses = 0.0
    for i in range(1, period + 1):
        change = prices[i] - prices[i - 1]
        if change > 0:
            gains += change
        else:
            losses += -change

    return gains / period, losses / period


def wilder_step(avg_gain: float, avg_loss: float, change: float, period: int) -> tuple[float, float]:
    """Apply one Wilder smoothing step for a single price change"""
    gain = max(change, 0.0)
    loss = max(-change, 0.0)
    avg_gain = (avg_gain * (period - 1) + gain) / period
    avg_loss = (avg_loss * (period - 1) + loss) / period
    return avg_gain, avg_loss


def classify_rsi(value: float) -> OscillatorSignal:
    if value > RSI_OVERBOUGHT:
        return OscillatorSignal.OVERBOUGHT
    if value < RSI_OVERSOLD:
        return OscillatorSignal.OVERSOLD
    return OscillatorSignal.NEUTRAL


def rsi_from_averages(avg_gain: float, avg_loss: float) -> RSIResult:
    """Turn smoothed averages into an RSI reading"""
    validate_computed("rsi", avg_gain=avg_gain, avg_loss=avg_loss)

    # No losses at all: RSI saturates at 100
    if avg_loss == 0:
        return RSIResult(value=100.0, signal=OscillatorSignal.OVERBOUGHT)

    rs = avg_gain / avg_loss
    rsi = 100 - (100 / (1 + rs))
    return RSIResult(value=rsi, signal=classify_rsi(rsi))


def compute_rsi(prices: PriceSeries, period: int = 14) -> RSIResult:
    """
    Calculate RSI over a close-price series

    Args:
        prices: Prices in chronological order
        period: RSI period (default 14)

    Returns:
        RSIResult; value 50 / neutral when fewer than period + 1 prices

    Raises:
        InvalidParameterError: If period is not a positive integer
        MalformedDataError: If any price is missing, NaN or infinite
        IndicatorCalculationError: If the arithmetic overflows
    """
    validate_period("period", period)
    validate_prices(prices)

    if len(prices) < period + 1:
        return RSIResult.neutral_default()

    avg_gain, avg_loss = initial_averages(prices, period)

    for i in range(period + 1, len(prices)):
        avg_gain, avg_loss = wilder_step(avg_gain, avg_loss, prices[i] - prices[i - 1], period)

    return rsi_from_averages(avg_gain, avg_loss)
