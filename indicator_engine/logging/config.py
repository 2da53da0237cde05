"""
Centralized logging configuration for the indicator engine.

All logging uses structlog on top of the standard library so that output is
structured and consistent. The pure indicator functions never log; only the
orchestration layer does.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def get_signal_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for composite signal decisions.

    Args:
        name: Logger name (typically __name__)
    """
    return get_logger(name).bind(
        subsystem="signals",
        audit_trail=True
    )


def log_signal_decision(
    logger: FilteringBoundLogger,
    symbol: str,
    signal: str,
    confidence: float,
    votes: dict[str, str],
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a composite signal decision with standardized format.

    Args:
        logger: Structlog logger instance
        symbol: Symbol the decision was made for
        signal: Composite direction (bullish, bearish, neutral)
        confidence: Composite confidence in [0, 1]
        votes: Per-indicator classification, e.g. {"rsi": "oversold"}
        context: Additional context data
    """
    bound_logger = logger.bind(
        symbol=symbol,
        signal=signal,
        confidence=round(confidence, 4),
        votes=votes,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if signal == "neutral":
        bound_logger.debug("Composite signal decided")
    else:
        bound_logger.info("Composite signal decided")
