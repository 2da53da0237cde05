"""
Logging configuration and utilities for the indicator engine.
"""
from .config import configure_logging, get_logger, get_signal_logger, log_signal_decision

__all__ = ["configure_logging", "get_logger", "get_signal_logger", "log_signal_decision"]
