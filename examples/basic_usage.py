#!/usr/bin/env python3
"""
Basic Usage Example - Indicator Engine

This script demonstrates the basic usage of the indicator engine with
simulated candles. It shows how to:
- Parse an exchange-style candle payload
- Analyze a symbol through a candle repository
- Follow a live series with the streaming trackers
- Render the result with the presentation adapter

Run: python examples/basic_usage.py
"""

import math
from datetime import datetime, timezone

import orjson

from indicator_engine.data.parsers import parse_candles
from indicator_engine.data.repository import InMemoryCandleRepository
from indicator_engine.engine import IndicatorAnalyzer
from indicator_engine.indicators import MACDTracker, RSITracker
from indicator_engine.logging import configure_logging
from indicator_engine.presentation import fallback_summary, signal_color, signal_symbol


def create_candle_payload(count: int, start_price: float = 100.0) -> bytes:
    """Create an OKX-style payload of array rows [ts_ms, o, h, l, c, vol]."""
    start_ms = int(datetime(2024, 1, 2, 14, 30, tzinfo=timezone.utc).timestamp() * 1000)
    rows = []
    price = start_price
    for i in range(count):
        open_price = price
        close_price = open_price + 1.5 * math.sin(i / 4.0) + 0.3
        high = max(open_price, close_price) + 0.5
        low = min(open_price, close_price) - 0.5
        rows.append([str(start_ms + i * 60_000), str(open_price), str(high),
                     str(low), str(close_price), "1000"])
        price = close_price
    return orjson.dumps({"code": "0", "msg": "", "data": rows})


def main():
    configure_logging(level="INFO")

    candles = parse_candles(create_candle_payload(60))
    print(f"📥 Parsed {len(candles)} candles")

    repository = InMemoryCandleRepository({"BTC": candles})
    analyzer = IndicatorAnalyzer(repository=repository)

    snapshot = analyzer.analyze_symbol("BTC")
    composite = snapshot.composite
    print(f"\n{signal_symbol(composite.signal)} {snapshot.symbol}: {composite.signal.value} "
          f"({composite.confidence:.0%}, color {signal_color(composite.signal)})")
    print(f"   {composite.description}")
    print(f"   {fallback_summary(snapshot)}")

    print("\n📈 Streaming the same closes...")
    rsi_tracker = RSITracker(period=10)
    macd_tracker = MACDTracker()
    for candle in candles:
        rsi = rsi_tracker.update(candle.close)
        macd = macd_tracker.update(candle.close)
    print(f"   RSI(10) {rsi.value:.2f} {rsi.signal.value}, MACD trend {macd.trend.value}")

    print("\n📄 Snapshot JSON:")
    print(snapshot.to_json().decode())


if __name__ == "__main__":
    main()
