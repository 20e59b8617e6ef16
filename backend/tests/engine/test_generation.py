"""Tests for engine.generation -- shape tables and per-hour source output."""

from __future__ import annotations

import numpy as np
import pytest

from engine.generation.profile import (
    HOURS_PER_DAY,
    KINETIC_ACTIVE_HOURS,
    GenerationProfile,
)
from engine.generation.sources import (
    EnergySourceConfig,
    SourceType,
    calculate_generation,
)


# ======================================================================
# GenerationProfile
# ======================================================================


class TestGenerationProfile:
    """Tests for GenerationProfile.from_seed() and validation."""

    def test_solar_zero_at_night(self, seeded_profile):
        """No solar output from 19:00 through 05:00."""
        night = list(range(0, 6)) + list(range(19, 24))
        assert np.all(seeded_profile.solar[night] == 0.0)

    def test_solar_peaks_at_noon(self, seeded_profile):
        assert int(np.argmax(seeded_profile.solar)) == 12
        assert seeded_profile.solar[12] == 1.0

    def test_solar_symmetric_around_noon(self, seeded_profile):
        for k in range(1, 7):
            assert seeded_profile.solar[12 - k] == pytest.approx(seeded_profile.solar[12 + k])

    def test_heat_pump_constant(self, seeded_profile):
        assert np.all(seeded_profile.heat_pump == 1.0)

    def test_wind_range(self):
        for seed in range(20):
            wind = GenerationProfile.from_seed(seed).wind
            assert np.all(wind >= 0.3)
            assert np.all(wind < 1.0)

    def test_kinetic_ranges(self):
        """Busy hours draw from [0.7, 1.0), the rest from [0.2, 0.7)."""
        for seed in range(20):
            kinetic = GenerationProfile.from_seed(seed).kinetic
            for hour in range(HOURS_PER_DAY):
                if hour in KINETIC_ACTIVE_HOURS:
                    assert 0.7 <= kinetic[hour] < 1.0
                else:
                    assert 0.2 <= kinetic[hour] < 0.7

    def test_same_seed_reproducible(self):
        a = GenerationProfile.from_seed(7)
        b = GenerationProfile.from_seed(7)
        np.testing.assert_array_equal(a.wind, b.wind)
        np.testing.assert_array_equal(a.kinetic, b.kinetic)

    def test_negative_seed_raises(self):
        with pytest.raises(ValueError, match="seed must be >= 0"):
            GenerationProfile.from_seed(-1)

    def test_different_seeds_differ(self):
        a = GenerationProfile.from_seed(1)
        b = GenerationProfile.from_seed(2)
        assert not np.array_equal(a.wind, b.wind)

    def test_wrong_length_raises(self):
        with pytest.raises(ValueError, match="24 values"):
            GenerationProfile(
                solar=np.zeros(23),
                wind=np.zeros(24),
                heat_pump=np.zeros(24),
                kinetic=np.zeros(24),
            )

    def test_negative_values_raise(self):
        with pytest.raises(ValueError, match="non-negative"):
            GenerationProfile(
                solar=np.zeros(24),
                wind=np.full(24, -0.1),
                heat_pump=np.zeros(24),
                kinetic=np.zeros(24),
            )

    def test_shape_lookup_by_enum_and_string(self, seeded_profile):
        np.testing.assert_array_equal(
            seeded_profile.shape(SourceType.WIND), seeded_profile.shape("wind")
        )

    def test_unknown_shape_raises(self, seeded_profile):
        with pytest.raises(ValueError, match="Unknown source type"):
            seeded_profile.shape("tidal")


# ======================================================================
# EnergySourceConfig
# ======================================================================


class TestEnergySourceConfig:

    def test_type_coerced_from_string(self):
        src = EnergySourceConfig(type="heat_pump", capacity_kw=1.0)
        assert src.type is SourceType.HEAT_PUMP

    def test_negative_capacity_raises(self):
        with pytest.raises(ValueError, match="capacity_kw must be >= 0"):
            EnergySourceConfig(type=SourceType.SOLAR, capacity_kw=-1.0)

    def test_contributes(self):
        assert EnergySourceConfig(type=SourceType.SOLAR, capacity_kw=1.0).contributes
        assert not EnergySourceConfig(type=SourceType.SOLAR, capacity_kw=0.0).contributes
        assert not EnergySourceConfig(
            type=SourceType.SOLAR, capacity_kw=1.0, is_active=False
        ).contributes


# ======================================================================
# calculate_generation
# ======================================================================


class TestCalculateGeneration:

    def test_no_sources(self, flat_profile):
        gen = calculate_generation(12, [], flat_profile)
        assert gen == {"solar": 0.0, "wind": 0.0, "heat_pump": 0.0, "kinetic": 0.0, "total": 0.0}

    def test_solar_scales_with_capacity(self, flat_profile, solar_5kw):
        gen = calculate_generation(9, [solar_5kw], flat_profile)
        assert gen["solar"] == pytest.approx(0.70 * 5.0)
        assert gen["total"] == pytest.approx(gen["solar"])

    def test_inactive_source_ignored(self, flat_profile):
        src = EnergySourceConfig(type=SourceType.WIND, capacity_kw=2.0, is_active=False)
        assert calculate_generation(3, [src], flat_profile)["total"] == 0.0

    def test_zero_capacity_ignored(self, flat_profile):
        src = EnergySourceConfig(type=SourceType.KINETIC, capacity_kw=0.0)
        assert calculate_generation(8, [src], flat_profile)["total"] == 0.0

    def test_heat_pump_cop_applied(self, flat_profile):
        src = EnergySourceConfig(type=SourceType.HEAT_PUMP, capacity_kw=1.5, efficiency=3.0)
        gen = calculate_generation(0, [src], flat_profile)
        assert gen["heat_pump"] == pytest.approx(4.5)

    def test_heat_pump_default_cop(self, flat_profile):
        src = EnergySourceConfig(type=SourceType.HEAT_PUMP, capacity_kw=2.0)
        assert calculate_generation(0, [src], flat_profile)["heat_pump"] == pytest.approx(2.0)

    def test_efficiency_ignored_for_other_sources(self, flat_profile):
        src = EnergySourceConfig(type=SourceType.WIND, capacity_kw=2.0, efficiency=3.0)
        assert calculate_generation(0, [src], flat_profile)["wind"] == pytest.approx(1.0)

    def test_total_is_sum_of_sources(self, seeded_profile, all_sources):
        for hour in range(HOURS_PER_DAY):
            gen = calculate_generation(hour, all_sources, seeded_profile)
            parts = gen["solar"] + gen["wind"] + gen["heat_pump"] + gen["kinetic"]
            assert gen["total"] == pytest.approx(parts)
