"""Number formatting helpers shared by the renderers."""

from __future__ import annotations

import math


def format_fixed(value: float, decimals: int = 1) -> str:
    """Format with exactly ``decimals`` places and no grouping."""
    return f"{value:.{decimals}f}"


def format_number(value: float, decimals: int = 1) -> str:
    """Round to ``decimals`` places, group thousands and drop trailing zeros.

    >>> format_number(12345.678)
    '12,345.7'
    >>> format_number(26.0, 2)
    '26'
    """
    text = f"{round(value, decimals):,.{decimals}f}"
    if decimals > 0:
        text = text.rstrip("0").rstrip(".")
    return text


def format_large_number(value: float) -> str:
    """Abbreviate values of a thousand or more with K / M suffixes."""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return f"{value:g}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return int(math.floor(value + 0.5))
