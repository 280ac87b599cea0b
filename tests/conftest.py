"""Pytest configuration and shared fixtures."""

import pytest

from quant_signals.logging import configure_logging
from quant_signals.models.observation import Observation
from quant_signals.signals.series import SignalSeries


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    """Keep structlog output off stdout for the whole session."""
    configure_logging(level="WARNING")


@pytest.fixture
def btc_observations() -> list[Observation]:
    """BTC/USD sample trades in insertion order."""
    return [
        Observation(96601.02, 1.23, 4500),
        Observation(96601.08, 0.56, 4501),
        Observation(96601.10, 0.22, 4502),
        Observation(96601.09, 1.57, 4503),
    ]


@pytest.fixture
def btc_series(btc_observations: list[Observation]) -> SignalSeries:
    """Series populated with the BTC/USD sample trades."""
    series = SignalSeries()
    for observation in btc_observations:
        series.insert(observation)
    return series
