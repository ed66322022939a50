"""
Unit tests for the capability protocols.

Tests cover:
- White dwarfs satisfy every capability
- Partial implementations satisfy only what they provide
- Generic code over LuminousObject
"""

from dataclasses import dataclass

from stargen.capabilities import AstronomicalObject, LuminousObject, Reproducible
from stargen.components import Mass, Radius, SolarCorona, SunBase
from stargen.stars import WhiteDwarf


@dataclass(frozen=True)
class Rock:
    """Astronomical but not luminous."""

    mass: float
    radius: float

    @classmethod
    def from_seed(cls, seed: int) -> 'Rock':
        return cls(mass=1e-6 * (seed % 10 + 1), radius=1e-4)


@dataclass(frozen=True)
class Lamp:
    """Has luminosity and temperature but cannot be generated from a seed."""

    mass: float
    radius: float
    luminosity: float
    temperature: float


def total_luminosity(objects) -> float:
    """Generic consumer over any luminous object."""
    return sum(obj.luminosity for obj in objects if isinstance(obj, LuminousObject))


class TestWhiteDwarfCapabilities:
    """White dwarfs provide the full hierarchy."""

    def test_reproducible(self):
        assert isinstance(WhiteDwarf.default(), Reproducible)

    def test_astronomical(self):
        assert isinstance(WhiteDwarf.default(), AstronomicalObject)

    def test_luminous(self):
        assert isinstance(WhiteDwarf.default(), LuminousObject)

    def test_accessors_are_plain_scalars(self):
        star = WhiteDwarf.default()
        for value in (star.mass, star.radius, star.luminosity, star.temperature):
            assert isinstance(value, float)


class TestPartialCapabilities:
    """Capabilities are checked independently."""

    def test_astronomical_but_not_luminous(self):
        rock = Rock.from_seed(3)
        assert isinstance(rock, Reproducible)
        assert isinstance(rock, AstronomicalObject)
        assert not isinstance(rock, LuminousObject)

    def test_not_reproducible(self):
        lamp = Lamp(mass=1.0, radius=1.0, luminosity=1.0, temperature=5778.0)
        assert not isinstance(lamp, Reproducible)
        assert not isinstance(lamp, AstronomicalObject)
        assert not isinstance(lamp, LuminousObject)

    def test_generic_consumer(self):
        stars = [WhiteDwarf.from_seed(seed) for seed in range(5)]
        objects = stars + [Rock.from_seed(1)]
        expected = sum(star.luminosity for star in stars)
        assert total_luminosity(objects) == expected


class TestComponents:
    """Tests for the attribute components."""

    def test_mass_radius_are_lossless_scalars(self):
        assert float(Mass(0.6)) == 0.6
        assert Mass(float(Mass(0.6))) == Mass(0.6)
        assert float(Radius(0.0125)) == 0.0125
        assert repr(Mass(0.6)) == "Mass(0.6)"

    def test_sun_base_default_activeness(self):
        base = SunBase(temperature=5778.0, luminosity=1.0)
        assert base.activeness == 1.0

    def test_solar_corona_fields(self):
        corona = SolarCorona(
            activeness=1.0, flare_threshold=0.8, flare_density=0.05, flare_intensity=2.0
        )
        assert corona.flare_threshold == 0.8
        assert corona.flare_density == 0.05
