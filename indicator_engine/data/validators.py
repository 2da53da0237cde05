"""
Input validation for indicator calculations.

Every check raises a typed error instead of letting NaN or infinities flow
into the arithmetic or out of it.
"""

import math
from numbers import Real
from typing import Any

from ..errors import IndicatorCalculationError, InvalidParameterError, MalformedDataError
from .models import CandleSeries, PriceSeries


def validate_period(name: str, value: Any) -> int:
    """
    Validate an indicator period.

    Raises:
        InvalidParameterError: If the period is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(
            f"{name} must be an integer, got {type(value).__name__}",
            parameter=name,
            value=value
        )
    if value <= 0:
        raise InvalidParameterError(
            f"{name} must be positive, got {value}",
            parameter=name,
            value=value
        )
    return value


def _check_number(value: Any, index: int, field: str) -> None:
    if value is None:
        raise MalformedDataError(f"Missing {field} at index {index}", index=index, field=field)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise MalformedDataError(
            f"Invalid {field} type at index {index}: {type(value).__name__}",
            index=index,
            field=field
        )
    if math.isnan(value) or math.isinf(value):
        raise MalformedDataError(f"Invalid {field} value at index {index}: {value}", index=index, field=field)


def validate_prices(prices: PriceSeries) -> None:
    """
    Validate a price series.

    Raises:
        MalformedDataError: If any element is missing, non-numeric, NaN or infinite
    """
    for i, price in enumerate(prices):
        _check_number(price, i, "price")


def validate_candles(candles: CandleSeries) -> None:
    """
    Validate a candle series.

    Raises:
        MalformedDataError: If any OHLC field is missing, non-finite or inconsistent
    """
    for i, candle in enumerate(candles):
        for field in ("open", "high", "low", "close"):
            _check_number(getattr(candle, field, None), i, field)

        if candle.volume is not None:
            _check_number(candle.volume, i, "volume")

        if candle.high < candle.low:
            raise MalformedDataError(
                f"High below low at index {i}: H={candle.high}, L={candle.low}",
                index=i,
                field="high"
            )
        if not candle.low <= candle.close <= candle.high:
            raise MalformedDataError(
                f"Close outside high-low range at index {i}: "
                f"H={candle.high}, L={candle.low}, C={candle.close}",
                index=i,
                field="close"
            )


def validate_computed(indicator_name: str, **values: float) -> None:
    """
    Check that computed values are finite.

    Finite inputs near the float limit can still overflow inside sums and
    differences; the result must then fail instead of classifying NaN.

    Raises:
        IndicatorCalculationError: If any value is NaN or infinite
    """
    for name, value in values.items():
        if not math.isfinite(value):
            raise IndicatorCalculationError(
                f"{indicator_name} {name} overflowed to {value}; input magnitudes exceed float range",
                indicator_name=indicator_name,
                calculation_input={name: value}
            )
