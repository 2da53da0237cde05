"""Composite signal from RSI, MACD and Stochastic votes"""

from ..models.results import (
    CompositeSignal,
    MACDResult,
    OscillatorSignal,
    RSIResult,
    StochasticResult,
    Trend,
)

# Both constants change classifications if altered; the denominator counts
# every indicator, voting or not.
TOTAL_SIGNALS = 3
MIN_CONFIDENCE = 0.6

_OSCILLATOR_VOTES = {
    OscillatorSignal.OVERSOLD: Trend.BULLISH,
    OscillatorSignal.OVERBOUGHT: Trend.BEARISH,
    OscillatorSignal.NEUTRAL: Trend.NEUTRAL,
}


def indicator_votes(rsi: RSIResult, macd: MACDResult, stoch: StochasticResult) -> dict[str, Trend]:
    """
    Directional vote cast by each indicator

    Oversold oscillators vote bullish, overbought ones bearish; MACD votes
    its trend. Neutral readings cast no vote.
    """
    return {
        "rsi": _OSCILLATOR_VOTES[rsi.signal],
        "macd": macd.trend,
        "stochastic": _OSCILLATOR_VOTES[stoch.signal],
    }


def compose_signal(rsi: RSIResult, macd: MACDResult, stoch: StochasticResult) -> CompositeSignal:
    """
    Fuse three indicator readings into a composite signal

    confidence = max(bullish votes, bearish votes) / 3. A direction wins only
    with a strict majority over the other direction and confidence >= 0.6,
    i.e. at least two agreeing votes.

    Args:
        rsi: RSI reading
        macd: MACD reading
        stoch: Stochastic reading

    Returns:
        CompositeSignal with direction, confidence and description
    """
    votes = indicator_votes(rsi, macd, stoch).values()
    bullish_votes = sum(1 for vote in votes if vote is Trend.BULLISH)
    bearish_votes = sum(1 for vote in votes if vote is Trend.BEARISH)

    confidence = max(bullish_votes, bearish_votes) / TOTAL_SIGNALS

    if bullish_votes > bearish_votes and confidence >= MIN_CONFIDENCE:
        signal = Trend.BULLISH
        description = f"Bullish signals from {bullish_votes}/{TOTAL_SIGNALS} indicators"
    elif bearish_votes > bullish_votes and confidence >= MIN_CONFIDENCE:
        signal = Trend.BEARISH
        description = f"Bearish signals from {bearish_votes}/{TOTAL_SIGNALS} indicators"
    else:
        signal = Trend.NEUTRAL
        description = "Mixed signals, no clear direction"

    return CompositeSignal(
        signal=signal,
        confidence=confidence,
        description=description,
        bullish_votes=bullish_votes,
        bearish_votes=bearish_votes,
    )
