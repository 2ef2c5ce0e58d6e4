"""
Shared price series fixtures for indicator tests.
"""
import pytest

from price_data import CLOSES_30
from quantstat.types import PriceSample


@pytest.fixture
def closes_30():
    return list(CLOSES_30)


@pytest.fixture
def samples():
    """Five bars around 10-14, high/low one point either side of close."""
    return [PriceSample(close=c, high=c + 1, low=c - 1)
            for c in [10.0, 11.0, 12.0, 14.0, 13.0]]
