"""
Value types passed between the series helpers and the indicators.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class PriceSample:
    """One period of a price series.

    Expected to satisfy low <= close <= high; the momentum indicators
    enforce it, construction does not.
    """
    close: float
    high: float
    low: float


@dataclass(frozen=True)
class GainLoss:
    """Average upward / downward movement over a lookback window."""
    gain: float
    loss: float
