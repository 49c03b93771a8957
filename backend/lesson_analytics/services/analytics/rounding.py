"""Integer rounding and percentage guards shared by the analytics modules."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def ratio_percent(numerator: float, denominator: float) -> float:
    """Unrounded ``numerator / denominator * 100`` capped at 100; 0 for an empty denominator."""
    if denominator <= 0:
        return 0.0
    return min(numerator / denominator, 1.0) * 100


def percentage(numerator: float, denominator: float) -> int:
    return round_half_up(ratio_percent(numerator, denominator))


__all__ = ["percentage", "ratio_percent", "round_half_up"]
