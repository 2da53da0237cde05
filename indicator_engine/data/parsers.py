"""
Candle payload parsers.

Converts raw payloads handed over by the market-data collaborator into
Candle objects. Accepted row shapes:

- mapping: {"open", "high", "low", "close", "volume"?, "timestamp"?}
- array:   [timestamp_ms, open, high, low, close, volume?]

Timestamps may be epoch milliseconds (int or numeric string) or ISO-8601
strings; all are returned as UTC datetimes.
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional, Union

import orjson

from ..errors import ParseError
from .models import Candle


def parse_json_payload(raw_data: Union[bytes, str]) -> Any:
    """
    Decode a raw JSON payload with orjson.

    Raises:
        ParseError: If the payload is not valid JSON
    """
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}")


def parse_candles(payload: Union[bytes, str, list]) -> list[Candle]:
    """
    Parse a candle payload into Candle objects.

    Args:
        payload: JSON text/bytes, or an already decoded list of rows.
            A top-level mapping with a "data" list is also accepted.

    Returns:
        Candles in payload order

    Raises:
        ParseError: If the payload or any row is malformed
    """
    if isinstance(payload, (bytes, str)):
        payload = parse_json_payload(payload)

    if isinstance(payload, Mapping):
        if "data" not in payload:
            raise ParseError("Missing 'data' field in payload")
        payload = payload["data"]

    if not isinstance(payload, list):
        raise ParseError("Candle payload must be a list")

    candles = []
    for i, row in enumerate(payload):
        try:
            if isinstance(row, Mapping):
                candles.append(_parse_candle_record(row))
            elif isinstance(row, (list, tuple)):
                candles.append(_parse_candle_row(row))
            else:
                raise ValueError(f"unsupported row type {type(row).__name__}")
        except (ParseError, ValueError, TypeError, KeyError) as e:
            raise ParseError(f"Invalid candle at index {i}: {e}", index=i)

    return candles


def _parse_candle_record(record: Mapping) -> Candle:
    """Parse a mapping row."""
    missing = [name for name in ("open", "high", "low", "close") if record.get(name) is None]
    if missing:
        raise ParseError(f"missing fields {missing}", field=missing[0])

    volume = record.get("volume")
    return Candle(
        open=float(record["open"]),
        high=float(record["high"]),
        low=float(record["low"]),
        close=float(record["close"]),
        volume=float(volume) if volume is not None else None,
        timestamp=_parse_timestamp(record.get("timestamp")),
    )


def _parse_candle_row(row: Union[list, tuple]) -> Candle:
    """Parse an array row [ts_ms, open, high, low, close, volume?]."""
    if len(row) < 5:
        raise ParseError(f"row must have at least 5 elements, got {len(row)}")

    volume = row[5] if len(row) > 5 else None
    return Candle(
        open=float(row[1]),
        high=float(row[2]),
        low=float(row[3]),
        close=float(row[4]),
        volume=float(volume) if volume is not None else None,
        timestamp=_parse_timestamp(row[0]),
    )


def _parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse epoch milliseconds or ISO-8601 text into a UTC datetime."""
    if value is None:
        return None

    if isinstance(value, str):
        stripped = value.strip()
        if stripped.lstrip("-").isdigit():
            value = int(stripped)
        else:
            try:
                parsed = datetime.fromisoformat(stripped.replace("Z", "+00:00"))
            except ValueError as e:
                raise ParseError(f"invalid timestamp '{value}': {e}", field="timestamp")
            if parsed.tzinfo is None:
                return parsed.replace(tzinfo=timezone.utc)
            return parsed.astimezone(timezone.utc)

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"invalid timestamp type {type(value).__name__}", field="timestamp")

    try:
        return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
    except (ValueError, OSError, OverflowError) as e:
        raise ParseError(f"invalid timestamp '{value}': {e}", field="timestamp")
