"""EMA (Exponential Moving Average) calculations"""

from itertools import islice

from ..data.models import PriceSeries
from ..data.validators import validate_computed, validate_period, validate_prices


def ema_multiplier(period: int) -> float:
    """Smoothing factor k = 2 / (period + 1)"""
    return 2 / (period + 1)


def ema_step(price: float, previous: float, multiplier: float) -> float:
    """Advance an EMA by one price"""
    return price * multiplier + previous * (1 - multiplier)


def ema_seed(prices: PriceSeries, period: int) -> float:
    """Simple average of the first min(period, len(prices)) prices"""
    window = list(islice(prices, min(period, len(prices))))
    return sum(window) / len(window)


def ema_series(prices: PriceSeries, period: int) -> list[float]:
    """EMA over already-validated input; see compute_ema"""
    if len(prices) == 0:
        return []

    multiplier = ema_multiplier(period)
    ema = [ema_seed(prices, period)]
    for i in range(1, len(prices)):
        ema.append(ema_step(prices[i], ema[i - 1], multiplier))

    return ema


def compute_ema(prices: PriceSeries, period: int) -> list[float]:
    """
    Calculate the Exponential Moving Average sequence

    The first value is seeded with the simple average of the first
    min(period, len(prices)) prices, so every prefix of the series, however
    short, yields a value. Each later value is
    price[i] * k + ema[i-1] * (1 - k) with k = 2 / (period + 1).

    Args:
        prices: Prices in chronological order
        period: EMA period

    Returns:
        EMA values, same length as prices

    Raises:
        InvalidParameterError: If period is not a positive integer
        MalformedDataError: If any price is missing, NaN or infinite
        IndicatorCalculationError: If the arithmetic overflows
    """
    validate_period("period", period)
    validate_prices(prices)

    ema = ema_series(prices, period)
    # once a value overflows every later value stays non-finite
    if ema:
        validate_computed("ema", ema=ema[-1])
    return ema
