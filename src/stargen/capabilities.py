"""
Capability protocols for generated objects.

Reproducible -> AstronomicalObject -> LuminousObject

Each capability is a runtime-checkable Protocol, so a concrete class
satisfies it by providing the members; it never has to inherit from it.
Consumers test for what they need:

    if isinstance(obj, LuminousObject):
        flux = obj.luminosity / distance**2
"""

from typing import Protocol, Type, TypeVar, runtime_checkable

T = TypeVar('T', bound='Reproducible')


@runtime_checkable
class Reproducible(Protocol):
    """Can be generated from a 64-bit seed."""

    @classmethod
    def from_seed(cls: Type[T], seed: int) -> T:
        """
        Generate an instance from seed.

        The same seed must give bit-identical numeric fields across runs
        and platforms.
        """
        ...


@runtime_checkable
class AstronomicalObject(Reproducible, Protocol):
    """Anything with a mass and a radius."""

    @property
    def mass(self) -> float:
        """Mass [M_sun]."""
        ...

    @property
    def radius(self) -> float:
        """Radius [R_sun]."""
        ...


@runtime_checkable
class LuminousObject(AstronomicalObject, Protocol):
    """An astronomical object that radiates."""

    @property
    def luminosity(self) -> float:
        """Luminosity [L_sun]."""
        ...

    @property
    def temperature(self) -> float:
        """Surface temperature [K]."""
        ...
