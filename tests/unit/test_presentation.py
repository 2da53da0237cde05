"""Unit tests for the presentation adapter."""

import pytest

from indicator_engine.models.results import (
    AnalysisSnapshot,
    CompositeSignal,
    MACDResult,
    OscillatorSignal,
    RSIResult,
    StochasticResult,
    Trend,
)
from indicator_engine.presentation import (
    build_summary_prompt,
    fallback_summary,
    format_indicator_value,
    signal_color,
    signal_symbol,
)


@pytest.fixture
def snapshot() -> AnalysisSnapshot:
    return AnalysisSnapshot(
        symbol="BTC",
        rsi=RSIResult(value=75.0, signal=OscillatorSignal.OVERBOUGHT),
        macd=MACDResult(macd=1.23456, signal=1.0, histogram=0.23456, trend=Trend.BULLISH),
        stochastic=StochasticResult(k=85.0, d=82.5, signal=OscillatorSignal.OVERBOUGHT),
        composite=CompositeSignal(
            signal=Trend.BEARISH,
            confidence=2 / 3,
            description="Bearish signals from 2/3 indicators",
        ),
        candle_count=40,
    )


class TestFormatting:
    """Test fixed-decimal formatting."""

    @pytest.mark.parametrize("decimals,expected", [(2, "12.35"), (0, "12"), (4, "12.3456")])
    def test_decimals(self, decimals, expected):
        assert format_indicator_value(12.3456, decimals) == expected

    def test_negative(self):
        assert format_indicator_value(-0.5) == "-0.50"


class TestSignalMapping:
    """Test enum to color and symbol mapping."""

    def test_colors(self):
        assert signal_color(Trend.BULLISH) == "#10B981"
        assert signal_color(Trend.BEARISH) == "#EF4444"
        assert signal_color(Trend.NEUTRAL) == "#6B7280"

    def test_symbols(self):
        assert signal_symbol(Trend.BULLISH) == "📈"
        assert signal_symbol(Trend.BEARISH) == "📉"
        assert signal_symbol(Trend.NEUTRAL) == "➖"

    def test_plain_strings(self):
        assert signal_color("bullish") == "#10B981"
        assert signal_symbol("bearish") == "📉"

    def test_unknown_renders_neutral(self):
        assert signal_color("sideways") == "#6B7280"
        assert signal_symbol("sideways") == "➖"


class TestSummaryText:
    """Test text handed to and used in place of the summary generator."""

    def test_prompt_contents(self, snapshot):
        prompt = build_summary_prompt(snapshot)

        assert prompt.startswith("As an experienced trader, analyze these technical indicators for BTC:")
        assert "- RSI: 75.00 (overbought)" in prompt
        assert "- MACD: 1.23 (signal 1.00, histogram 0.23, bullish)" in prompt
        assert "%K 85.00, %D 82.50 (overbought)" in prompt
        assert "confidence 0.67" in prompt

    def test_fallback_summary(self, snapshot):
        assert fallback_summary(snapshot) == (
            "BTC shows bullish RSI at 75.00 with MACD positive at 1.23. "
            "Momentum is strong with Stochastic at 85.00."
        )

    def test_fallback_summary_weak(self, snapshot):
        weak = AnalysisSnapshot(
            symbol="ES",
            rsi=RSIResult(value=25.0, signal=OscillatorSignal.OVERSOLD),
            macd=MACDResult(macd=-0.5, signal=0.0, histogram=-0.5, trend=Trend.BEARISH),
            stochastic=StochasticResult(k=10.0, d=12.0, signal=OscillatorSignal.OVERSOLD),
            composite=snapshot.composite,
            candle_count=40,
        )
        assert fallback_summary(weak) == (
            "ES shows bearish RSI at 25.00 with MACD negative at -0.50. "
            "Momentum is weakening with Stochastic at 10.00."
        )
