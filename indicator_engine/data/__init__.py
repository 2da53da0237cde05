"""
Input data module.

Immutable candle model, payload parsing and input validation.
"""

from .models import Candle, closes
from .parsers import parse_candles
from .repository import CandleRepository, InMemoryCandleRepository
from .validators import validate_candles, validate_computed, validate_period, validate_prices

__all__ = [
    "Candle",
    "CandleRepository",
    "InMemoryCandleRepository",
    "closes",
    "parse_candles",
    "validate_candles",
    "validate_computed",
    "validate_period",
    "validate_prices",
]
