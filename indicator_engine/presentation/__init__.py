"""
Presentation adapter.

Maps the engine's semantic signals to display values and builds the text
handed to the external summary generator. Nothing in the engine imports
this package.
"""

from .formatting import (
    build_summary_prompt,
    fallback_summary,
    format_indicator_value,
    signal_color,
    signal_symbol,
)

__all__ = [
    "build_summary_prompt",
    "fallback_summary",
    "format_indicator_value",
    "signal_color",
    "signal_symbol",
]
