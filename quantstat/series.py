"""
Series helpers: run the scalar indicators across a whole price series
=====================================================================
Every helper slides a fixed-size window over the series (oldest first,
most recent last) and calls the scalar indicator on each window, so the
validation and error behavior is exactly that of quantstat.momentum and
quantstat.trend.

Omitted periods fall back to config.toml (see quantstat.config).
"""
import logging
from typing import List, Optional, Sequence, Tuple

from quantstat.config import get_config
from quantstat.errors import AnalysisError, AnalysisErrorKind
from quantstat.momentum import (
    check_range,
    relative_strength_index,
    stochastic_oscillator,
    williams_percent_r,
)
from quantstat.trend import exponential_moving_average, simple_moving_average
from quantstat.types import GainLoss, PriceSample

logger = logging.getLogger(__name__)


def _check_period(period) -> int:
    if not isinstance(period, int) or period < 1:
        raise ValueError(f"period must be a positive integer, got {period!r}")
    return period


def _resolve_period(period: Optional[int], setting: str) -> int:
    """Explicit period, or the configured one, e.g. setting="trend.sma_period"."""
    if period is None:
        section, name = setting.split(".")
        period = getattr(getattr(get_config(), section), name)
    return _check_period(period)


def windows(values: Sequence, period: int) -> List[Sequence]:
    """All contiguous windows of `period` items, oldest window first.

    Returns [] when the series is shorter than one window.
    """
    _check_period(period)
    if len(values) < period:
        logger.debug(f"Series of {len(values)} too short for period {period}")
        return []
    return [values[i - period + 1: i + 1] for i in range(period - 1, len(values))]


def simple_moving_averages(values: Sequence[float],
                           period: Optional[int] = None) -> List[float]:
    period = _resolve_period(period, "trend.sma_period")
    return [simple_moving_average(w) for w in windows(values, period)]


def exponential_moving_averages(values: Sequence[float],
                                period: Optional[int] = None,
                                previous: Optional[float] = None) -> List[float]:
    """Running EMA: each window is fed the EMA of the window before it.

    The first window uses `previous` when given, otherwise it is seeded
    with its SMA. Pass the last returned value as `previous` to continue
    the series later.
    """
    period = _resolve_period(period, "trend.ema_period")
    result = []
    for window in windows(values, period):
        previous = exponential_moving_average(window, previous)
        result.append(previous)
    return result


def price_changes(closes: Sequence[float]) -> List[float]:
    """Differences between consecutive closes."""
    return [closes[i] - closes[i - 1] for i in range(1, len(closes))]


def _mean_gain_loss(changes: Sequence[float]) -> GainLoss:
    if len(changes) == 0:
        raise AnalysisError(AnalysisErrorKind.SLICE_IS_EMPTY)
    gain = sum(c for c in changes if c > 0) / len(changes)
    loss = sum(-c for c in changes if c < 0) / len(changes)
    return GainLoss(gain=gain, loss=loss)


def average_gain_loss(closes: Sequence[float],
                      period: Optional[int] = None) -> GainLoss:
    """Average gain and loss over the last `period` price changes.

    Uses every available change when there are fewer than `period`.
    Needs at least two closes.
    """
    period = _resolve_period(period, "momentum.rsi_period")
    return _mean_gain_loss(price_changes(closes)[-period:])


def relative_strength_indexes(closes: Sequence[float],
                              period: Optional[int] = None) -> List[float]:
    """RSI for every close with `period` price changes behind it.

    Output has len(closes) - period values (none when too short).
    """
    period = _resolve_period(period, "momentum.rsi_period")
    result = []
    for changes in windows(price_changes(closes), period):
        gl = _mean_gain_loss(changes)
        result.append(relative_strength_index(gl.gain, gl.loss))
    return result


def price_range(samples: Sequence[PriceSample]) -> Tuple[float, float]:
    """(highest high, lowest low) of the samples.

    Every sample must satisfy low <= close <= high.
    """
    if len(samples) == 0:
        raise AnalysisError(AnalysisErrorKind.SLICE_IS_EMPTY)
    for s in samples:
        check_range(s.close, s.high, s.low)
    return max(s.high for s in samples), min(s.low for s in samples)


def stochastic_oscillators(samples: Sequence[PriceSample],
                           period: Optional[int] = None) -> List[float]:
    """Stochastic oscillator of each window's last close against its range."""
    period = _resolve_period(period, "momentum.stochastic_period")
    result = []
    for window in windows(samples, period):
        high, low = price_range(window)
        result.append(stochastic_oscillator(window[-1].close, high, low))
    return result


def williams_percent_rs(samples: Sequence[PriceSample],
                        period: Optional[int] = None) -> List[float]:
    period = _resolve_period(period, "momentum.stochastic_period")
    result = []
    for window in windows(samples, period):
        high, low = price_range(window)
        result.append(williams_percent_r(window[-1].close, high, low))
    return result
