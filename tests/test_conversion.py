"""
Unit tests for length unit conversions.

Tests cover:
- Conversion factors for every adjacent unit pair
- Round-trip invertibility within a few ULPs
- Explicit chaining across several pairs
- Array inputs
"""

import pytest
import numpy as np

from stargen.conversion import (
    meter_to_km,
    km_to_meter,
    km_to_sol_rad,
    sol_rad_to_km,
    km_to_au,
    au_to_km,
    au_to_ly,
    ly_to_au,
)

PAIRS = [
    (meter_to_km, km_to_meter),
    (km_to_sol_rad, sol_rad_to_km),
    (km_to_au, au_to_km),
    (au_to_ly, ly_to_au),
]

SAMPLE_VALUES = np.concatenate([
    np.geomspace(1e-6, 1e12, 40),
    -np.geomspace(1e-3, 1e6, 10),
    [0.0, 1.0, 0.978, 25200.0],
])


class TestConversionFactors:
    """One unit of the larger scale converts to exactly its factor."""

    def test_kilometer(self):
        np.testing.assert_array_max_ulp(meter_to_km(1000.0), 1.0, maxulp=5)
        np.testing.assert_array_max_ulp(km_to_meter(1.0), 1000.0, maxulp=5)

    def test_solar_radius(self):
        np.testing.assert_array_max_ulp(km_to_sol_rad(695700.0), 1.0, maxulp=5)
        np.testing.assert_array_max_ulp(sol_rad_to_km(1.0), 695700.0, maxulp=5)

    def test_astronomical_unit(self):
        np.testing.assert_array_max_ulp(km_to_au(149597870.7), 1.0, maxulp=5)
        np.testing.assert_array_max_ulp(au_to_km(1.0), 149597870.7, maxulp=5)

    def test_light_year(self):
        np.testing.assert_array_max_ulp(au_to_ly(63241.077), 1.0, maxulp=5)
        np.testing.assert_array_max_ulp(ly_to_au(1.0), 63241.077, maxulp=5)


class TestInvertibility:
    """Converting there and back returns the input."""

    @pytest.mark.parametrize("forward,backward", PAIRS)
    def test_forward_then_backward(self, forward, backward):
        for x in SAMPLE_VALUES:
            np.testing.assert_array_max_ulp(backward(forward(x)), x, maxulp=4)

    @pytest.mark.parametrize("forward,backward", PAIRS)
    def test_backward_then_forward(self, forward, backward):
        for x in SAMPLE_VALUES:
            np.testing.assert_array_max_ulp(forward(backward(x)), x, maxulp=4)

    @pytest.mark.parametrize("forward,backward", PAIRS)
    def test_arrays(self, forward, backward):
        result = backward(forward(SAMPLE_VALUES))
        assert result.shape == SAMPLE_VALUES.shape
        np.testing.assert_array_max_ulp(result, SAMPLE_VALUES, maxulp=4)


class TestChaining:
    """Non-adjacent units are reached by chaining pairs."""

    def test_meter_to_light_year(self):
        # One light-year is about 9.4607e15 m
        meters = 9.4607e15
        ly = au_to_ly(km_to_au(meter_to_km(meters)))
        assert abs(ly - 1.0) < 1e-3

    def test_sun_radius_in_au(self):
        # The Sun's radius is about 0.00465 AU
        au = km_to_au(sol_rad_to_km(1.0))
        assert abs(au - 0.00465047) / 0.00465047 < 1e-5

    def test_chain_round_trip(self):
        x = 123.456
        there = au_to_ly(km_to_au(meter_to_km(x)))
        back = km_to_meter(au_to_km(ly_to_au(there)))
        np.testing.assert_array_max_ulp(back, x, maxulp=8)
