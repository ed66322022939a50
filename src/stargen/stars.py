"""
Star generators, one per stellar category.

Every star is a frozen StarBundle: mass, radius, surface attributes
(SunBase) and exactly one StellarCategory. Radius and luminosity are never
set on their own; each category derives them from mass and temperature in
its constructor, and WhiteDwarf rejects direct construction with values the
formulas would not give.

CATEGORIES:
- WhiteDwarf: fully specified (explicit parameters, Sirius B default,
  seeded generation)
- MainSequenceStar, GiantStar, NeutronStar: declared extension points
  with no generation formulas yet; constructing them raises
  NotImplementedError

Dispatch over categories goes through STAR_TYPES, which holds an entry for
every StellarCategory member.
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Type

import numpy as np

from stargen import constants as const
from stargen.components import Mass, Radius, StellarCategory, SunBase
from stargen.physics import FORMULA_RTOL, white_dwarf_luminosity, white_dwarf_radius
from stargen.sampling import make_rng, range_normal, range_uniform


@dataclass(frozen=True)
class StarBundle:
    """
    Common shape of a generated star.

    Satisfies LuminousObject through mass, radius, luminosity and
    temperature; subclasses provide from_seed.
    """

    mass: Mass
    radius: Radius
    base: SunBase

    category: ClassVar[StellarCategory]

    @property
    def luminosity(self) -> float:
        """Luminosity [L_sun]."""
        return self.base.luminosity

    @property
    def temperature(self) -> float:
        """Surface temperature [K]."""
        return self.base.temperature

    @property
    def activeness(self) -> float:
        """Time multiplier (1.0 = unscaled physical time)."""
        return self.base.activeness

    @classmethod
    def from_parameters(cls, mass: float, temperature: float) -> 'StarBundle':
        raise NotImplementedError(
            f"No generation formula for {cls.category.label} stars"
        )

    @classmethod
    def default(cls) -> 'StarBundle':
        raise NotImplementedError(
            f"No default {cls.category.label} star"
        )

    @classmethod
    def from_seed(cls, seed: int) -> 'StarBundle':
        raise NotImplementedError(
            f"No generation formula for {cls.category.label} stars"
        )

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(mass={float(self.mass):.4f} M_sun, "
                f"radius={float(self.radius):.4e} R_sun, "
                f"T={self.temperature:.1f} K, L={self.luminosity:.4e} L_sun)")


@dataclass(frozen=True, repr=False)
class WhiteDwarf(StarBundle):
    """
    A white dwarf.

    Construction:
        WhiteDwarf.from_parameters(mass, temperature)
        WhiteDwarf.default()        # Sirius B
        WhiteDwarf.from_seed(seed)  # procedural
    """

    category: ClassVar[StellarCategory] = StellarCategory.WHITE_DWARF

    MIN_MASS: ClassVar[float] = const.WHITE_DWARF_MIN_MASS
    MAX_MASS: ClassVar[float] = const.WHITE_DWARF_MAX_MASS
    MEAN_MASS: ClassVar[float] = const.WHITE_DWARF_MEAN_MASS
    MIN_TEMPERATURE: ClassVar[float] = const.WHITE_DWARF_MIN_TEMPERATURE
    MAX_TEMPERATURE: ClassVar[float] = const.WHITE_DWARF_MAX_TEMPERATURE

    def __post_init__(self):
        """
        Reject radius or luminosity not derived from mass and temperature.

        Raises:
            ValueError: If radius or luminosity disagree with the formulas
        """
        expected_radius = white_dwarf_radius(float(self.mass))
        if not np.isclose(self.radius, expected_radius,
                          rtol=FORMULA_RTOL, atol=0.0, equal_nan=True):
            raise ValueError(
                f"radius {float(self.radius):.6e} R_sun does not follow from "
                f"mass {float(self.mass)} M_sun (expected {expected_radius:.6e} R_sun)"
            )

        expected_luminosity = white_dwarf_luminosity(float(self.temperature))
        if not np.isclose(self.luminosity, expected_luminosity,
                          rtol=FORMULA_RTOL, atol=0.0, equal_nan=True):
            raise ValueError(
                f"luminosity {self.luminosity:.6e} L_sun does not follow from "
                f"temperature {self.temperature} K (expected {expected_luminosity:.6e} L_sun)"
            )

    @classmethod
    def from_parameters(cls, mass: float, temperature: float) -> 'WhiteDwarf':
        """
        Build a white dwarf from its mass and surface temperature.

        Args:
            mass: Mass [M_sun]
            temperature: Surface temperature [K]

        Returns:
            WhiteDwarf with radius and luminosity derived from the inputs
        """
        mass = float(mass)
        temperature = float(temperature)

        radius = white_dwarf_radius(mass)
        luminosity = white_dwarf_luminosity(temperature)

        return cls(
            mass=Mass(mass),
            radius=Radius(radius),
            base=SunBase(
                temperature=temperature,
                luminosity=float(luminosity),
                activeness=const.DEFAULT_ACTIVENESS,
            ),
        )

    @classmethod
    def default(cls) -> 'WhiteDwarf':
        """Sirius B."""
        return cls.from_parameters(const.SIRIUS_B_MASS, const.SIRIUS_B_TEMPERATURE)

    @classmethod
    def from_seed(cls, seed: int) -> 'WhiteDwarf':
        """
        Generate a white dwarf from a 64-bit seed.

        Mass is drawn first from a normal distribution around 0.6 M_sun
        clamped to [0.17, 1.40] M_sun, then temperature uniformly from
        [6000, 30000] K. Both come from the same engine in that order.

        Args:
            seed: Unsigned 64-bit integer seed

        Returns:
            WhiteDwarf, bit-identical for equal seeds
        """
        rng = make_rng(seed)
        mass = range_normal(cls.MIN_MASS, cls.MEAN_MASS, cls.MAX_MASS, rng)
        temperature = range_uniform(cls.MIN_TEMPERATURE, cls.MAX_TEMPERATURE, rng)
        return cls.from_parameters(mass, temperature)


@dataclass(frozen=True, repr=False)
class MainSequenceStar(StarBundle):
    """A main sequence star. No generation formula yet."""

    category: ClassVar[StellarCategory] = StellarCategory.MAIN_SEQUENCE


@dataclass(frozen=True, repr=False)
class GiantStar(StarBundle):
    """A giant star. No generation formula yet."""

    category: ClassVar[StellarCategory] = StellarCategory.GIANT


@dataclass(frozen=True, repr=False)
class NeutronStar(StarBundle):
    """
    A neutron star. No generation formula yet.

    Its mass bound from below is the Chandrasekhar limit.
    """

    category: ClassVar[StellarCategory] = StellarCategory.NEUTRON_STAR

    MIN_MASS: ClassVar[float] = const.CHANDRASEKHAR_LIMIT


STAR_TYPES: Dict[StellarCategory, Type[StarBundle]] = {
    StellarCategory.MAIN_SEQUENCE: MainSequenceStar,
    StellarCategory.GIANT: GiantStar,
    StellarCategory.NEUTRON_STAR: NeutronStar,
    StellarCategory.WHITE_DWARF: WhiteDwarf,
}


def star_type(category: StellarCategory) -> Type[StarBundle]:
    """Look up the star class for a category."""
    return STAR_TYPES[category]


def is_implemented(category: StellarCategory) -> bool:
    """Whether a category has its own generation formulas."""
    return star_type(category).from_seed.__func__ is not StarBundle.from_seed.__func__


def generate_star(category: StellarCategory, seed: int) -> StarBundle:
    """
    Generate a star of the given category from a seed.

    Args:
        category: Stellar category
        seed: Unsigned 64-bit integer seed

    Returns:
        StarBundle subclass instance for the category

    Raises:
        NotImplementedError: If the category has no generation formula
    """
    return star_type(category).from_seed(seed)
