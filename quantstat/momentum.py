"""
Momentum indicators: RSI, stochastic oscillator, Williams %R
============================================================
Each function compares the period's close with recent movement and returns
a bounded oscillator value. Pure math: callers compute averages, highs and
lows for the lookback window themselves (see quantstat.series).

Validation order matters and is part of the contract: when several inputs
are wrong at once, the first failing check below wins.
"""
from quantstat.errors import AnalysisError, AnalysisErrorKind


def relative_strength_index(gain: float, loss: float) -> float:
    """Relative Strength Index (J. Welles Wilder Jr.).

    Oscillates between 0 and 100. Wilder suggested a 14 period lookback;
    gain and loss are the average gain / loss over that period.

    Args:
        gain: average gain for the period, >= 0
        loss: average loss for the period, >= 0

    Returns:
        100.0 when loss is 0, otherwise 100 - 100 / (1 + gain / loss).

    Raises:
        AnalysisError: GAIN_LESS_THAN_ZERO, then LOSS_LESS_THAN_ZERO.

    >>> relative_strength_index(60., 20.)
    75.0
    """
    if gain < 0:
        raise AnalysisError(AnalysisErrorKind.GAIN_LESS_THAN_ZERO)
    if loss < 0:
        raise AnalysisError(AnalysisErrorKind.LOSS_LESS_THAN_ZERO)
    if loss == 0:
        return 100.0
    return 100 - 100 / (1 + gain / loss)


def check_range(close: float, high: float, low: float) -> None:
    """Raise the first range violation: high < low, close > high, close < low."""
    if high < low:
        raise AnalysisError(AnalysisErrorKind.HIGH_LESS_THAN_LOW)
    if close > high:
        raise AnalysisError(AnalysisErrorKind.CLOSE_GREATER_THAN_HIGH)
    if close < low:
        raise AnalysisError(AnalysisErrorKind.CLOSE_LESS_THAN_LOW)


def stochastic_oscillator(close: float, high: float, low: float) -> float:
    """Stochastic oscillator (George Lane), 0 to 100.

    Location of the close within the high-low range of the period. Typical
    periods are 5, 9 or 14; `high` and `low` are the highest high and the
    lowest low of that period.

    A flat range (high == low) returns the midpoint 50 instead of 0/0.

    Raises:
        AnalysisError: HIGH_LESS_THAN_LOW, then CLOSE_GREATER_THAN_HIGH,
            then CLOSE_LESS_THAN_LOW.

    >>> stochastic_oscillator(80., 90., 50.)
    75.0
    """
    check_range(close, high, low)
    if high == low:
        return 50.0
    return 100 * (close - low) / (high - low)


def williams_percent_r(close: float, high: float, low: float) -> float:
    """Williams %R (Larry R. Williams), -100 to 0.

    Inverse of the stochastic oscillator: distance of the close from the
    high. Flat range returns -50. Same validation as stochastic_oscillator.

    >>> williams_percent_r(80., 90., 50.)
    -25.0
    """
    check_range(close, high, low)
    if high == low:
        return -50.0
    return -100 * (high - close) / (high - low)
