"""Tests for SignalSeries aggregation"""

import math
from collections.abc import Sequence

import pytest

from quant_signals.models.observation import Observation, RiskLevel
from quant_signals.signals.series import (
    ObservationView,
    SignalSeries,
    SignalSnapshot,
    risk_multiplier,
)


class TestSignalSeriesInsert:
    """Test insertion, cardinality and ordering"""

    def test_empty_series(self):
        """Test a new series is empty"""
        series = SignalSeries()

        assert series.cardinality() == 0
        assert len(series) == 0
        assert list(series.observations()) == []

    def test_cardinality_tracks_inserts(self):
        """Test each insert increases cardinality by exactly one"""
        series = SignalSeries()

        for count in range(1, 6):
            series.insert(Observation(float(count), 1.0, count))
            assert series.cardinality() == count

    def test_insertion_order_preserved(self, btc_observations):
        """Test observations come back in insertion order"""
        series = SignalSeries()
        for obs in btc_observations:
            series.insert(obs)

        assert list(series.observations()) == btc_observations
        assert list(series) == btc_observations

    def test_duplicates_permitted(self):
        """Test identical observations are all kept"""
        obs = Observation(10.0, 1.0, 1)
        series = SignalSeries()

        series.insert(obs)
        series.insert(obs)

        assert series.cardinality() == 2
        assert series.observations()[0] == series.observations()[1]

    def test_out_of_order_timestamps_kept_in_insert_order(self):
        """Test series does not sort by timestamp"""
        series = SignalSeries()
        series.insert(Observation(1.0, 1.0, 10))
        series.insert(Observation(2.0, 1.0, 5))

        assert [obs.get_time() for obs in series.observations()] == [10, 5]

    def test_seeded_construction(self, btc_observations):
        """Test constructing from an iterable inserts in order"""
        series = SignalSeries(btc_observations)

        assert series.cardinality() == 4
        assert list(series.observations()) == btc_observations


class TestObservationView:
    """Test read-only observations view"""

    def test_view_is_sequence(self, btc_series):
        """Test view supports the Sequence protocol"""
        view = btc_series.observations()

        assert isinstance(view, ObservationView)
        assert isinstance(view, Sequence)
        assert len(view) == 4
        assert view[0].get_time() == 4500
        assert view[-1].get_time() == 4503

    def test_view_has_no_mutators(self, btc_series):
        """Test view cannot be used to modify the series"""
        view = btc_series.observations()

        assert not hasattr(view, "append")
        with pytest.raises(TypeError):
            view[0] = Observation(0.0, 0.0, 0)  # type: ignore[index]
        with pytest.raises(TypeError):
            del view[0]  # type: ignore[attr-defined]

    def test_slice_returns_tuple(self, btc_series):
        """Test slicing returns an immutable copy"""
        head = btc_series.observations()[:2]

        assert isinstance(head, tuple)
        assert [obs.get_time() for obs in head] == [4500, 4501]

    def test_view_reflects_later_inserts(self):
        """Test a view stays valid and current across inserts"""
        series = SignalSeries()
        view = series.observations()

        series.insert(Observation(1.0, 1.0, 1))
        series.insert(Observation(2.0, 1.0, 2))

        assert len(view) == 2
        assert view is series.observations()


class TestRiskMultiplier:
    """Test risk level resolution"""

    @pytest.mark.parametrize("level,expected", [
        (RiskLevel.LOW, 0.35),
        (RiskLevel.MEDIUM, 0.67),
        (RiskLevel.HIGH, 1.0),
    ])
    def test_known_levels(self, level, expected):
        """Test table lookup for each level"""
        assert risk_multiplier(level) == expected
        assert SignalSeries().risk_multiplier(level) == expected

    @pytest.mark.parametrize("level", [None, "HIGH", 2, 1.0])
    def test_unrecognized_level_is_zero(self, level):
        """Test anything that is not a RiskLevel resolves to 0.0"""
        assert risk_multiplier(level) == 0.0


class TestWeightedSignal:
    """Test weighted signal computation"""

    @pytest.mark.parametrize("level", list(RiskLevel))
    def test_empty_series_is_zero(self, level):
        """Test empty series yields 0.0 at every level"""
        signal = SignalSeries().weighted_signal(level)

        assert signal == 0.0
        assert isinstance(signal, float)

    def test_high_is_plain_sum(self, btc_series, btc_observations):
        """Test HIGH equals the unweighted sum of dollar values"""
        expected = 0.0
        for obs in btc_observations:
            expected += obs.dollar_value()

        assert btc_series.weighted_signal(RiskLevel.HIGH) == expected

    def test_medium_and_low_scale_high(self, btc_series):
        """Test MEDIUM and LOW are fixed fractions of HIGH"""
        high = btc_series.weighted_signal(RiskLevel.HIGH)

        assert btc_series.weighted_signal(RiskLevel.MEDIUM) == pytest.approx(0.67 * high)
        assert btc_series.weighted_signal(RiskLevel.LOW) == pytest.approx(0.35 * high)

    def test_unrecognized_level_yields_zero(self, btc_series):
        """Test unknown level resolves to a zero multiplier"""
        assert btc_series.weighted_signal("EXTREME") == 0.0  # type: ignore[arg-type]

    def test_deterministic(self, btc_observations):
        """Test identical data gives bit-identical results"""
        first = SignalSeries(btc_observations).weighted_signal(RiskLevel.MEDIUM)
        second = SignalSeries(btc_observations).weighted_signal(RiskLevel.MEDIUM)

        assert first == second

    def test_does_not_mutate(self, btc_series, btc_observations):
        """Test computing a signal leaves contents untouched"""
        btc_series.weighted_signal(RiskLevel.LOW)

        assert btc_series.cardinality() == 4
        assert list(btc_series.observations()) == btc_observations

    def test_nan_propagates(self):
        """Test NaN dollar value propagates silently"""
        series = SignalSeries([Observation(1.0, 1.0, 0), Observation(float("nan"), 1.0, 1)])

        assert math.isnan(series.weighted_signal(RiskLevel.HIGH))

    def test_negative_values_not_rejected(self):
        """Test negative prices contribute as given"""
        series = SignalSeries([Observation(-10.0, 2.0, 0), Observation(5.0, 2.0, 1)])

        assert series.weighted_signal(RiskLevel.HIGH) == -10.0


class TestSnapshot:
    """Test signal snapshots"""

    def test_snapshot_fields(self, btc_series):
        """Test snapshot captures the computation inputs"""
        snapshot = btc_series.snapshot(RiskLevel.LOW)

        assert isinstance(snapshot, SignalSnapshot)
        assert snapshot.risk_level is RiskLevel.LOW
        assert snapshot.multiplier == 0.35
        assert snapshot.cardinality == 4
        assert snapshot.total_dollar_value == btc_series.weighted_signal(RiskLevel.HIGH)
        assert snapshot.weighted_signal == btc_series.weighted_signal(RiskLevel.LOW)

    def test_empty_snapshot(self):
        """Test snapshot of an empty series"""
        snapshot = SignalSeries().snapshot(RiskLevel.HIGH)

        assert snapshot.cardinality == 0
        assert snapshot.total_dollar_value == 0.0
        assert snapshot.weighted_signal == 0.0
