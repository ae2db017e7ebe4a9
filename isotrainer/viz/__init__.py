"""Visualization module."""

from .ranges import RangeDisplay, display_range, display_strategy

__all__ = [
    "RangeDisplay",
    "display_range",
    "display_strategy",
]
