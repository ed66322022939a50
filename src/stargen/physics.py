"""
Empirical stellar formulas.

Functions are JIT-compiled with Numba and take plain floats, so they can
be called from Python per star or from other nopython code over arrays.

All inputs and outputs use stellar units:
- mass: M_sun
- radius: R_sun
- temperature: K
- luminosity: L_sun
"""

import numpy as np
from numba import jit


# Quadratic fit of ln(L) against ln(T) for white dwarfs
WD_LUMINOSITY_A = 1.73444446
WD_LUMINOSITY_B = -30.48605897
WD_LUMINOSITY_C = 125.58164008

# Relative tolerance when comparing stored values to the formulas
FORMULA_RTOL = 1e-12


@jit(nopython=True)
def white_dwarf_radius(mass):
    """
    Radius of a white dwarf from its mass.

    R = 0.01 × M^(-1/3)

    Args:
        mass: White dwarf mass [M_sun]

    Returns:
        float: Radius [R_sun]

    Notes:
        - Degenerate-matter mass-radius relation: heavier white dwarfs
          are smaller
        - source: https://en.wikipedia.org/wiki/White_dwarf
    """
    return 0.01 * mass ** (-1.0 / 3.0)


@jit(nopython=True)
def white_dwarf_luminosity(temperature):
    """
    Luminosity of a white dwarf from its surface temperature.

    x = ln(T)
    L = exp(a x² + b x + c)

    Args:
        temperature: Surface temperature [K]

    Returns:
        float: Luminosity [L_sun]

    Notes:
        - Zero or non-finite temperature gives NaN/Inf
    """
    x = np.log(temperature)
    return np.exp(WD_LUMINOSITY_A * x**2 + WD_LUMINOSITY_B * x + WD_LUMINOSITY_C)


@jit(nopython=True)
def white_dwarf_radii(masses):
    """Vectorized white_dwarf_radius over an array of masses [M_sun]."""
    radii = np.empty_like(masses)
    for i in range(len(masses)):
        radii[i] = white_dwarf_radius(masses[i])
    return radii


@jit(nopython=True)
def white_dwarf_luminosities(temperatures):
    """Vectorized white_dwarf_luminosity over an array of temperatures [K]."""
    luminosities = np.empty_like(temperatures)
    for i in range(len(temperatures)):
        luminosities[i] = white_dwarf_luminosity(temperatures[i])
    return luminosities
