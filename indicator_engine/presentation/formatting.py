"""Display formatting for indicator results"""

from typing import Optional, Union

from ..models.results import AnalysisSnapshot, Trend

NEUTRAL_COLOR = "#6B7280"

_SIGNAL_COLORS = {
    Trend.BULLISH: "#10B981",
    Trend.BEARISH: "#EF4444",
    Trend.NEUTRAL: NEUTRAL_COLOR,
}

_SIGNAL_SYMBOLS = {
    Trend.BULLISH: "📈",
    Trend.BEARISH: "📉",
    Trend.NEUTRAL: "➖",
}


def _as_trend(signal: Union[Trend, str]) -> Optional[Trend]:
    try:
        return Trend(signal)
    except ValueError:
        return None


def format_indicator_value(value: float, decimals: int = 2) -> str:
    """Format a value with a fixed number of decimals, e.g. 12.3456 -> '12.35'"""
    return f"{value:.{decimals}f}"


def signal_color(signal: Union[Trend, str]) -> str:
    """Hex color for a directional signal; unknown values render neutral"""
    return _SIGNAL_COLORS.get(_as_trend(signal), NEUTRAL_COLOR)


def signal_symbol(signal: Union[Trend, str]) -> str:
    """Emoji for a directional signal; unknown values render neutral"""
    return _SIGNAL_SYMBOLS.get(_as_trend(signal), _SIGNAL_SYMBOLS[Trend.NEUTRAL])


def build_summary_prompt(snapshot: AnalysisSnapshot) -> str:
    """
    Prompt text for the external summary generator.

    Only the computed numbers are supplied; the generated text is never
    parsed by the engine.
    """
    return (
        f"As an experienced trader, analyze these technical indicators for {snapshot.symbol}:\n"
        f"- RSI: {format_indicator_value(snapshot.rsi.value)} ({snapshot.rsi.signal.value})\n"
        f"- MACD: {format_indicator_value(snapshot.macd.macd)} "
        f"(signal {format_indicator_value(snapshot.macd.signal)}, "
        f"histogram {format_indicator_value(snapshot.macd.histogram)}, {snapshot.macd.trend.value})\n"
        f"- Stochastic: %K {format_indicator_value(snapshot.stochastic.k)}, "
        f"%D {format_indicator_value(snapshot.stochastic.d)} ({snapshot.stochastic.signal.value})\n"
        f"- Composite: {snapshot.composite.signal.value} "
        f"(confidence {format_indicator_value(snapshot.composite.confidence)})\n"
        "\n"
        "Explain what these numbers mean in 2 concise sentences. "
        "Be specific about potential trade setups."
    )


def fallback_summary(snapshot: AnalysisSnapshot) -> str:
    """Deterministic summary for when the summary generator is unavailable"""
    rsi = snapshot.rsi.value
    macd = snapshot.macd.macd
    stoch_k = snapshot.stochastic.k

    rsi_bias = "bullish" if rsi > 50 else "bearish"
    macd_sign = "positive" if macd > 0 else "negative"
    momentum = "Momentum is strong" if stoch_k > 50 else "Momentum is weakening"

    return (
        f"{snapshot.symbol} shows {rsi_bias} RSI at {format_indicator_value(rsi)} "
        f"with MACD {macd_sign} at {format_indicator_value(macd)}. "
        f"{momentum} with Stochastic at {format_indicator_value(stoch_k)}."
    )
