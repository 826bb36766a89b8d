"""Tests for seasonality detection."""

import pytest

from finforecast.forecasting import (
    ForecastConfigError,
    autocorrelation,
    detect_seasonality,
    initial_seasonal_factors
)


class TestDetectSeasonality:
    """Test detect_seasonality."""

    def test_detects_q4_boost(self, q4_boost_values, make_series):
        seasonality = detect_seasonality(make_series(q4_boost_values))

        assert seasonality.factors[9] > 1
        assert seasonality.factors[10] > 1
        assert seasonality.factors[11] > 1
        assert seasonality.factors[0] < 1
        assert seasonality.strength > 0

    def test_neutral_for_short_series(self, make_series):
        seasonality = detect_seasonality(make_series([10000, 12000, 11000]))

        assert seasonality.strength == 0
        assert seasonality.factors == [1.0] * 12
        assert seasonality.detected is False

    def test_neutral_just_below_two_cycles(self, q4_boost_values):
        seasonality = detect_seasonality(q4_boost_values[:23])

        assert seasonality.strength == 0
        assert all(f == 1 for f in seasonality.factors)

    def test_custom_period(self):
        values = [100, 200, 300, 400] * 4
        seasonality = detect_seasonality(values, period=4)

        assert len(seasonality.factors) == 4
        assert seasonality.factors[3] > seasonality.factors[0]
        assert seasonality.detected

    def test_perfect_cycle_over_three_years_is_detected(self):
        cycle = [0.70, 0.75, 0.85, 0.90, 0.95, 0.90, 0.85, 0.90, 0.95, 1.05, 1.35, 1.85]
        values = [10000 * f for f in cycle * 3]

        seasonality = detect_seasonality(values)

        # 24 of 36 lagged pairs line up exactly
        assert seasonality.strength == pytest.approx(2 / 3)
        assert seasonality.detected

    def test_zero_mean_series_has_unit_factors(self):
        values = [1, -1] * 12
        seasonality = detect_seasonality(values)

        assert seasonality.factors == [1.0] * 12

    def test_flat_series(self):
        seasonality = detect_seasonality([500] * 30)

        assert seasonality.strength == 0
        assert seasonality.factors == pytest.approx([1.0] * 12)

    def test_invalid_period(self):
        with pytest.raises(ForecastConfigError):
            detect_seasonality([1, 2, 3], period=0)


class TestAutocorrelation:
    """Test the lag autocorrelation helper."""

    def test_constant_series(self):
        assert autocorrelation([3, 3, 3, 3], 1) == 0

    def test_lag_longer_than_series(self):
        assert autocorrelation([1, 2, 3], 5) == 0

    def test_alternating_series_is_negative_at_lag_one(self):
        assert autocorrelation([1, -1] * 6, 1) < 0


class TestInitialSeasonalFactors:
    """Test Holt-Winters seasonal seeding."""

    def test_first_cycle_over_its_mean(self):
        factors = initial_seasonal_factors([50, 100, 150, 999], period=3)
        assert factors == pytest.approx([0.5, 1.0, 1.5])

    def test_short_series_defaults_to_ones(self):
        assert initial_seasonal_factors([1, 2], period=3) == [1.0, 1.0, 1.0]

    def test_zero_mean_defaults_to_ones(self):
        assert initial_seasonal_factors([0, 0, 0], period=3) == [1.0, 1.0, 1.0]
