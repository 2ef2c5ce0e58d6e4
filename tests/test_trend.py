"""Tests for trend.py: SMA / EMA correctness and edge cases"""
import pytest

from price_data import CLOSES_30, EMA_10, SMA_10
from quantstat.errors import AnalysisError, AnalysisErrorKind
from quantstat.trend import exponential_moving_average, simple_moving_average

SHORT = [3.5, 3.4, 3.3, 3.6, 3.7]


class TestSimpleMovingAverage:
    def test_empty(self):
        with pytest.raises(AnalysisError) as exc:
            simple_moving_average([])
        assert exc.value.kind is AnalysisErrorKind.SLICE_IS_EMPTY

    def test_known_value(self):
        assert round(simple_moving_average(SHORT), 1) == 3.5

    def test_single(self):
        assert simple_moving_average([42.0]) == 42.0

    def test_tuple_input(self):
        assert simple_moving_average((1.0, 2.0, 3.0)) == 2.0

    def test_reference_windows(self):
        for i, expected in enumerate(SMA_10):
            window = CLOSES_30[i:i + 10]
            assert simple_moving_average(window) == pytest.approx(expected, abs=1e-3)

    def test_input_untouched(self):
        data = list(SHORT)
        simple_moving_average(data)
        assert data == SHORT


class TestExponentialMovingAverage:
    def test_empty(self):
        with pytest.raises(AnalysisError) as exc:
            exponential_moving_average([])
        assert exc.value.kind is AnalysisErrorKind.SLICE_IS_EMPTY

    def test_empty_with_previous(self):
        """Emptiness is checked even when a previous value is given"""
        with pytest.raises(AnalysisError) as exc:
            exponential_moving_average([], 3.4)
        assert exc.value.description == "slice is empty"

    def test_known_value(self):
        assert round(exponential_moving_average(SHORT, 3.4), 1) == 3.5

    def test_no_previous_is_sma(self):
        assert exponential_moving_average(SHORT) == simple_moving_average(SHORT)
        assert exponential_moving_average(CLOSES_30, None) == simple_moving_average(CLOSES_30)

    def test_single_element_k_is_one(self):
        """n=1 → k = 2/(1+1) = 1 → EMA collapses to the element"""
        assert exponential_moving_average([7.5], 2.5) == 7.5
        assert exponential_moving_average([-4.0], 12.0) == -4.0

    def test_only_last_element_used(self):
        a = exponential_moving_average([1.0, 2.0, 3.0, 10.0], 5.0)
        b = exponential_moving_average([100.0, -50.0, 0.0, 10.0], 5.0)
        # k = 2/5 → (10 - 5) * 0.4 + 5 = 7
        assert a == b
        assert a == pytest.approx(7.0)

    def test_constant_input(self):
        assert exponential_moving_average([50.0] * 20, 50.0) == 50.0

    def test_chained_reference(self):
        """Caller re-feeds each result as previous for the next window"""
        previous = None
        for i, expected in enumerate(EMA_10):
            previous = exponential_moving_average(CLOSES_30[i:i + 10], previous)
            assert previous == pytest.approx(expected, abs=1e-6)

    def test_deterministic(self):
        first = exponential_moving_average(CLOSES_30[:10], 22.2)
        for _ in range(5):
            assert exponential_moving_average(CLOSES_30[:10], 22.2) == first
