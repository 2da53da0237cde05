"""Tests for RSI calculation"""

import math

import pytest

from indicator_engine.errors import InvalidParameterError, MalformedDataError
from indicator_engine.indicators.rsi import (
    RSI_OVERBOUGHT,
    RSI_OVERSOLD,
    classify_rsi,
    compute_rsi,
    initial_averages,
    wilder_step,
)
from indicator_engine.models.results import OscillatorSignal, RSIResult


class TestRSIInsufficientData:
    """Test the neutral default below the lookback window"""

    def test_two_prices_returns_neutral_default(self):
        assert compute_rsi([44, 45], 14) == RSIResult(value=50, signal=OscillatorSignal.NEUTRAL)

    def test_empty_series_returns_neutral_default(self):
        assert compute_rsi([]) == RSIResult.neutral_default()

    def test_exactly_period_prices_is_still_insufficient(self):
        prices = [100 + i for i in range(14)]
        assert compute_rsi(prices, 14) == RSIResult.neutral_default()

    def test_period_plus_one_prices_is_computed(self):
        prices = [100 + i for i in range(15)]
        result = compute_rsi(prices, 14)
        assert result.value == 100.0


class TestRSICalculation:
    """Test RSI values and classification"""

    def test_rising_series_is_overbought(self):
        prices = [100 + i * 2 for i in range(20)]
        result = compute_rsi(prices, 14)
        assert result.signal == OscillatorSignal.OVERBOUGHT
        assert result.value == 100.0

    def test_falling_series_is_oversold(self):
        prices = [100 - i * 2 for i in range(20)]
        result = compute_rsi(prices, 14)
        assert result.signal == OscillatorSignal.OVERSOLD
        assert result.value == 0.0

    def test_no_losses_saturates_at_100(self):
        """Flat series: avg loss is zero, so the guard returns 100"""
        result = compute_rsi([50.0] * 20, 14)
        assert result == RSIResult(value=100.0, signal=OscillatorSignal.OVERBOUGHT)

    def test_balanced_changes_give_50(self):
        result = compute_rsi([1, 2, 1], 2)
        assert result.value == 50.0
        assert result.signal == OscillatorSignal.NEUTRAL

    def test_wilder_smoothing_applied(self):
        """Initial averages 0.5/0.5, then a +1 change: gain 0.75, loss 0.25 -> RSI 75"""
        result = compute_rsi([1, 2, 1, 2], 2)
        assert result.value == 75.0
        assert result.signal == OscillatorSignal.OVERBOUGHT

    def test_sample_prices_within_bounds(self, sample_prices):
        result = compute_rsi(sample_prices, 14)
        assert 0 < result.value < 100
        assert result.signal in set(OscillatorSignal)

    @pytest.mark.parametrize("seed", range(5))
    def test_value_always_within_bounds(self, random_walk, seed):
        result = compute_rsi(random_walk(120, seed=seed), 14)
        assert 0.0 <= result.value <= 100.0

    def test_initial_averages(self):
        assert initial_averages([10, 12, 11, 14], 3) == (5 / 3, 1 / 3)

    def test_wilder_step(self):
        assert wilder_step(1.0, 1.0, -2.0, 4) == (0.75, 1.25)


class TestRSIClassification:
    """Test fixed RSI thresholds"""

    def test_thresholds(self):
        assert RSI_OVERBOUGHT == 70.0
        assert RSI_OVERSOLD == 30.0

    def test_boundaries_are_exclusive(self):
        assert classify_rsi(70.0) == OscillatorSignal.NEUTRAL
        assert classify_rsi(30.0) == OscillatorSignal.NEUTRAL
        assert classify_rsi(70.01) == OscillatorSignal.OVERBOUGHT
        assert classify_rsi(29.99) == OscillatorSignal.OVERSOLD


class TestRSIContractViolations:
    """Test RSI input validation"""

    def test_zero_period_raises(self):
        with pytest.raises(InvalidParameterError):
            compute_rsi([1, 2, 3], 0)

    def test_nan_raises_instead_of_propagating(self):
        prices = [100 + i for i in range(20)]
        prices[10] = math.nan
        with pytest.raises(MalformedDataError):
            compute_rsi(prices)

    def test_nan_in_short_series_still_raises(self):
        with pytest.raises(MalformedDataError):
            compute_rsi([1.0, math.nan])
