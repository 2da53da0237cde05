"""Pytest configuration and shared fixtures."""

import random
from datetime import datetime, timedelta, timezone

import pytest

from indicator_engine.data.models import Candle

BASE_TS = datetime(2024, 1, 2, 14, 30, tzinfo=timezone.utc)


def make_rising_candles(count: int = 20) -> list[Candle]:
    """Steadily rising candles closing near their highs."""
    return [
        Candle(open=90 + i, high=95 + i, low=85 + i, close=92 + i, volume=1000.0,
               timestamp=BASE_TS + timedelta(minutes=i))
        for i in range(count)
    ]


def make_falling_candles(count: int = 20) -> list[Candle]:
    """Steadily falling candles closing near their lows."""
    return [
        Candle(open=110 - i, high=115 - i, low=105 - i, close=107 - i, volume=1000.0,
               timestamp=BASE_TS + timedelta(minutes=i))
        for i in range(count)
    ]


def make_random_walk(count: int, seed: int = 7, start: float = 100.0) -> list[float]:
    """Deterministic random-walk close prices."""
    rng = random.Random(seed)
    prices = [start]
    for _ in range(count - 1):
        prices.append(max(1.0, prices[-1] + rng.uniform(-2.0, 2.0)))
    return prices


def make_random_candles(count: int, seed: int = 11) -> list[Candle]:
    """Deterministic random candles with consistent OHLC."""
    rng = random.Random(seed)
    candles = []
    previous_close = 100.0
    for i in range(count):
        open_price = previous_close
        close_price = max(1.0, open_price + rng.uniform(-3.0, 3.0))
        high = max(open_price, close_price) + rng.uniform(0.0, 2.0)
        low = max(0.5, min(open_price, close_price) - rng.uniform(0.0, 2.0))
        candles.append(Candle(open=open_price, high=high, low=low, close=close_price,
                              timestamp=BASE_TS + timedelta(minutes=i)))
        previous_close = close_price
    return candles


@pytest.fixture
def sample_prices() -> list[float]:
    """Fifteen closes from a classic RSI worked example."""
    return [44, 44.34, 44.09, 44.15, 43.61, 44.33, 44.83, 45.85, 46.08,
            45.89, 46.03, 46.83, 47.69, 46.49, 46.26]


@pytest.fixture
def sample_candles() -> list[Candle]:
    """Fourteen candles around the sample closes."""
    rows = [
        (44, 44.5, 43.5, 44.34),
        (44.34, 44.5, 44, 44.09),
        (44.09, 44.2, 43.8, 44.15),
        (44.15, 44.2, 43.5, 43.61),
        (43.61, 44.5, 43.5, 44.33),
        (44.33, 45, 44.2, 44.83),
        (44.83, 46, 44.8, 45.85),
        (45.85, 46.2, 45.8, 46.08),
        (46.08, 46.1, 45.8, 45.89),
        (45.89, 46.1, 45.8, 46.03),
        (46.03, 47, 46, 46.83),
        (46.83, 48, 46.8, 47.69),
        (47.69, 47.7, 46.4, 46.49),
        (46.49, 46.5, 46.2, 46.26),
    ]
    return [Candle(open=o, high=h, low=l, close=c) for o, h, l, c in rows]


@pytest.fixture
def rising_candles() -> list[Candle]:
    return make_rising_candles(40)


@pytest.fixture
def falling_candles() -> list[Candle]:
    return make_falling_candles(40)


@pytest.fixture
def empty_config_dir(tmp_path):
    """Config directory without symbols.yaml, so only defaults apply."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def random_walk():
    """Factory for deterministic random-walk closes: random_walk(count, seed=7)."""
    return make_random_walk


@pytest.fixture
def random_candles():
    """Factory for deterministic random candles: random_candles(count, seed=11)."""
    return make_random_candles


@pytest.fixture
def candle_trend():
    """Factories for trending candle series keyed by direction."""
    return {"rising": make_rising_candles, "falling": make_falling_candles}
