"""
Signal fusion module.

Combines indicator readings into one composite directional signal.
"""

from .composer import compose_signal

__all__ = ["compose_signal"]
