"""
Attribute components shared by generated stars.

Mass and Radius are float subclasses so they read as plain scalars while
keeping their unit in the type. SunBase and SolarCorona are frozen
attribute bundles; StellarCategory is the closed set of stellar classes.

Units:
- Mass: solar masses (M_sun)
- Radius: solar radii (R_sun)
- Temperature: kelvin (K)
- Luminosity: solar luminosities (L_sun)
"""

from dataclasses import dataclass
from enum import Enum

from stargen import constants as const


class Mass(float):
    """Mass of an astronomical object [M_sun]."""

    __slots__ = ()

    def __repr__(self):
        return f"Mass({float(self)!r})"


class Radius(float):
    """Radius of an astronomical object [R_sun]."""

    __slots__ = ()

    def __repr__(self):
        return f"Radius({float(self)!r})"


class StellarCategory(Enum):
    """
    Evolutionary class of a star.

    Values are the integer codes stored in catalog files.
    """

    MAIN_SEQUENCE = 0
    GIANT = 1
    NEUTRON_STAR = 2
    WHITE_DWARF = 3

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'white dwarf'."""
        return self.name.lower().replace('_', ' ')


@dataclass(frozen=True)
class SunBase:
    """Surface attributes of a sun-like object."""

    temperature: float  # K
    luminosity: float  # L_sun
    activeness: float = const.DEFAULT_ACTIVENESS  # time multiplier


@dataclass(frozen=True)
class SolarCorona:
    """
    Corona and flare attributes.

    Declared for hosts that animate flares; no category generates one yet.
    """

    activeness: float  # time multiplier
    flare_threshold: float  # surface level above which flares may appear
    flare_density: float  # probability of a flare above the threshold
    flare_intensity: float  # flare height
