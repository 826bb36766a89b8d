"""Tests for runway scenarios."""

import pytest

from finforecast.scenarios import (
    UNBOUNDED_RUNWAY_MONTHS,
    RunwayScenario,
    calculate_runway,
    calculate_runway_scenarios
)


class TestCalculateRunwayScenarios:
    """Test calculate_runway_scenarios."""

    def test_scenario_ordering(self):
        scenarios = calculate_runway_scenarios(500000, 50000, 10000, 5)

        assert scenarios.optimistic > scenarios.base > scenarios.pessimistic

    def test_base_case(self):
        scenarios = calculate_runway_scenarios(500000, 50000, 10000, 5)

        assert scenarios.base == 12.5
        # revenue 10500 -> 500000 / 39500
        assert scenarios.optimistic == 12.7
        # revenue 9750 -> 500000 / 40250
        assert scenarios.pessimistic == 12.4

    def test_negative_cash(self):
        scenarios = calculate_runway_scenarios(-10000, 50000, 0, 0)

        assert scenarios.base == 0
        assert scenarios.pessimistic == 0
        assert scenarios.optimistic == 0

    def test_zero_burn_is_unbounded(self):
        scenarios = calculate_runway_scenarios(100000, 0, 1000, 0)

        assert scenarios.base > 12
        assert scenarios.base == UNBOUNDED_RUNWAY_MONTHS
        assert scenarios.is_unbounded()

    def test_revenue_exceeds_burn(self):
        scenarios = calculate_runway_scenarios(100000, 30000, 50000, 10)

        assert all(scenarios.is_unbounded(s) for s in RunwayScenario)

    def test_growth_extends_optimistic_runway(self):
        with_growth = calculate_runway_scenarios(200000, 30000, 10000, 20)
        no_growth = calculate_runway_scenarios(200000, 30000, 10000, 0)

        assert with_growth.optimistic > no_growth.optimistic
        assert no_growth.optimistic == no_growth.base == no_growth.pessimistic

    def test_optimistic_can_reach_break_even(self):
        scenarios = calculate_runway_scenarios(50000, 11000, 10000, 20)

        assert scenarios.is_unbounded(RunwayScenario.OPTIMISTIC)
        assert scenarios.base == 50.0
        assert scenarios.pessimistic == 25.0
        assert scenarios.optimistic >= scenarios.base >= scenarios.pessimistic

    def test_long_runway_capped_at_sentinel(self):
        scenarios = calculate_runway_scenarios(10_000_000, 20000, 5000, 10)

        assert scenarios.optimistic >= scenarios.base >= scenarios.pessimistic
        assert scenarios.base == UNBOUNDED_RUNWAY_MONTHS

    def test_capped_runway_reports_unbounded(self):
        # still burning 15000 a month, but 666 months of cash
        scenarios = calculate_runway_scenarios(10_000_000, 20000, 5000, 0)

        assert scenarios.base == UNBOUNDED_RUNWAY_MONTHS
        assert scenarios.is_unbounded()
        assert scenarios.to_dict()["unbounded"]["base"] is True

    def test_negative_growth_uses_magnitude(self):
        assert (calculate_runway_scenarios(500000, 50000, 10000, -5)
                == calculate_runway_scenarios(500000, 50000, 10000, 5))

    def test_to_dict(self):
        data = calculate_runway_scenarios(500000, 50000, 10000, 5).to_dict()

        assert data["base"] == 12.5
        assert data["unbounded"] == {"optimistic": False, "base": False, "pessimistic": False}


class TestCalculateRunway:
    """Test the single-scenario helper."""

    def test_simple_runway(self):
        assert calculate_runway(500000, 50000) == 10.0

    def test_revenue_reduces_burn(self):
        assert calculate_runway(500000, 50000, 30000) == 25.0

    def test_profitable(self):
        assert calculate_runway(100000, 30000, 50000) == UNBOUNDED_RUNWAY_MONTHS

    def test_no_cash(self):
        assert calculate_runway(0, 30000) == 0

    def test_rounds_to_one_decimal(self):
        assert calculate_runway(100000, 30000) == pytest.approx(3.3)
