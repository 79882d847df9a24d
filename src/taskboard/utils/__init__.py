"""Utility functions."""

from .color import parse_hex_color
from .datetime import later_than, now_utc

__all__ = [
    "later_than",
    "now_utc",
    "parse_hex_color",
]
