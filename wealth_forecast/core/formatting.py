"""Display formatting for ages and dollar figures."""

from __future__ import annotations

import math


def _non_finite(amount: float) -> str:
    if math.isnan(amount):
        return "$NaN"
    return "-$∞" if amount < 0 else "$∞"


def format_currency(amount: float) -> str:
    """Whole US dollars with thousands separators, e.g. -$1,235. Halves round away from zero."""
    if not math.isfinite(amount):
        return _non_finite(amount)
    rounded = math.floor(abs(amount) + 0.5)
    sign = "-" if amount < 0 and rounded else ""
    return f"{sign}${rounded:,}"


def format_axis_label(value: float) -> str:
    """Compact y-axis label: $1.2M, $50K, $950."""
    if not math.isfinite(value):
        return _non_finite(value)
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"${value / 1_000:.0f}K"
    return f"${value:.0f}"


def format_age(age: float) -> str:
    return f"{age:g}"


def format_percent(rate: float) -> str:
    return f"{rate * 100:g}%"
