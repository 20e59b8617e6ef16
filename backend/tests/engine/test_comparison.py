"""Tests for engine.economics.comparison -- normal vs optimised day."""

from __future__ import annotations

import pytest

from engine.economics.comparison import (
    compare,
    savings_percentage,
    source_breakdown,
)
from engine.generation.sources import SourceType
from engine.simulation.models import SimulationConfig
from engine.simulation.runner import run_simulation


class TestSavingsPercentage:

    def test_regular(self):
        assert savings_percentage(1.0, 4.0) == pytest.approx(25.0)

    def test_zero_baseline(self):
        assert savings_percentage(0.0, 0.0) == 0.0
        assert savings_percentage(2.0, 0.0) == 0.0


class TestSourceBreakdown:

    def test_shares_sum_to_100(self, all_sources, household, seeded_profile):
        config = SimulationConfig(energy_sources=all_sources)
        breakdown = source_breakdown(run_simulation(config, household, seeded_profile))
        assert [b.source for b in breakdown] == list(SourceType)
        assert sum(b.percentage for b in breakdown) == pytest.approx(100.0)

    def test_solar_only(self, solar_config, household, flat_profile):
        breakdown = source_breakdown(run_simulation(solar_config, household, flat_profile))
        solar = breakdown[0]
        assert solar.source is SourceType.SOLAR
        assert solar.total_kwh == pytest.approx(37.0)
        assert solar.percentage == pytest.approx(100.0)

    def test_no_generation(self, household, flat_profile):
        breakdown = source_breakdown(run_simulation(SimulationConfig(), household, flat_profile))
        assert all(b.total_kwh == 0.0 and b.percentage == 0.0 for b in breakdown)


class TestCompare:
    """Tests for compare()."""

    def test_savings_from_raw_totals(self, solar_battery_config, household, flat_profile):
        result = compare(solar_battery_config, household, flat_profile)
        assert result.cost_savings == pytest.approx(
            result.normal.raw_totals["total_cost"] - result.optimized.raw_totals["total_cost"]
        )
        assert result.co2_savings == pytest.approx(
            result.normal.raw_totals["total_co2"] - result.optimized.raw_totals["total_co2"]
        )
        assert result.cost_savings >= 0.0

    def test_normal_run_uses_input_schedule(self, solar_config, household, flat_profile):
        result = compare(solar_config, household, flat_profile)
        expected = run_simulation(solar_config, household, flat_profile)
        assert result.normal.raw_totals == expected.raw_totals

    def test_optimized_run_matches_returned_schedule(self, solar_config, household, flat_profile):
        result = compare(solar_config, household, flat_profile)
        rerun = run_simulation(solar_config, result.optimized_appliances, flat_profile)
        assert result.optimized.raw_totals == rerun.raw_totals

    def test_grid_only_washing_machine_saves_money(self, washing_machine, flat_profile):
        """Moving 20:00-22:00 to the 13:00-15:00 tariff dip saves 0.34 of 1.12."""
        result = compare(SimulationConfig(), [washing_machine], flat_profile)
        assert result.optimized_appliances[0].start_hour == 13
        assert result.normal.raw_totals["total_cost"] == pytest.approx(1.12)
        assert result.cost_savings == pytest.approx(0.34)
        assert result.cost_savings_percentage == pytest.approx(0.34 / 1.12 * 100)

    def test_percentage_sign_follows_negative_baseline(
        self, solar_config, washing_machine, flat_profile
    ):
        """A day with net export income has a negative baseline cost, so a
        positive saving reports a negative percentage."""
        result = compare(solar_config, [washing_machine], flat_profile)
        normal_cost = result.normal.raw_totals["total_cost"]
        assert normal_cost < 0.0
        assert result.cost_savings > 0.0
        assert result.cost_savings_percentage == pytest.approx(
            result.cost_savings / normal_cost * 100
        )
        assert result.cost_savings_percentage < 0.0

    def test_empty_household_has_zero_percentages(self, flat_profile):
        result = compare(SimulationConfig(), [], flat_profile)
        assert result.cost_savings == 0.0
        assert result.cost_savings_percentage == 0.0
        assert result.co2_savings_percentage == 0.0

    def test_seeded_config_shares_one_day(self, all_sources, household):
        config = SimulationConfig(energy_sources=all_sources, seed=9)
        result = compare(config, household)
        assert result.normal.total_generation == result.optimized.total_generation
