"""
Trend indicators: SMA, EMA
==========================
Both take an ordered sequence of values, most recent last. Nothing is
copied or cached: a running EMA is built by the caller feeding the previous
result back in (see quantstat.series.exponential_moving_averages).
"""
from typing import Optional, Sequence

from quantstat.errors import AnalysisError, AnalysisErrorKind


def simple_moving_average(values: Sequence[float]) -> float:
    """Simple Moving Average: unweighted mean of the values.

    Typical periods: 5-20 short term, 20-60 medium, 100-200 long.
    """
    if len(values) == 0:
        raise AnalysisError(AnalysisErrorKind.SLICE_IS_EMPTY)
    return sum(values) / len(values)


def exponential_moving_average(values: Sequence[float],
                               previous: Optional[float] = None) -> float:
    """Exponential Moving Average for one window.

    Weighting factor comes from the window length: k = 2 / (1 + n).
    With `previous` (the EMA of the prior window):
        EMA = (values[-1] - previous) * k + previous
    Only the last value and the length are read in that case.
    Without `previous` this is the first computation and the result is the
    SMA of the window.

    >>> round(exponential_moving_average([3.5, 3.4, 3.3, 3.6, 3.7], 3.4), 1)
    3.5
    """
    length = len(values)
    if length == 0:
        raise AnalysisError(AnalysisErrorKind.SLICE_IS_EMPTY)
    if previous is None:
        return simple_moving_average(values)
    k = 2 / (1 + length)
    return (values[-1] - previous) * k + previous
