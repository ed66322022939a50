"""
Length unit conversions between chained scales.

Each adjacent pair of units is defined by a single multiplicative factor:
    a_to_b(x) = x / factor
    b_to_a(x) = x * factor

Chain: meter <-> km <-> sol_rad
                  km <-> au <-> ly

There is no direct conversion between non-adjacent units (e.g. meter to AU);
chain the pairs explicitly:
    au = km_to_au(meter_to_km(x))

All functions are pure and work on floats and NumPy arrays alike.
"""

from stargen import constants as const


def meter_to_km(x):
    """Convert meters to kilometers."""
    return x / const.meter_per_km


def km_to_meter(x):
    """Convert kilometers to meters."""
    return x * const.meter_per_km


def km_to_sol_rad(x):
    """Convert kilometers to solar radii."""
    return x / const.km_per_sol_rad


def sol_rad_to_km(x):
    """Convert solar radii to kilometers."""
    return x * const.km_per_sol_rad


def km_to_au(x):
    """Convert kilometers to astronomical units."""
    return x / const.km_per_au


def au_to_km(x):
    """Convert astronomical units to kilometers."""
    return x * const.km_per_au


def au_to_ly(x):
    """Convert astronomical units to light-years."""
    return x / const.au_per_ly


def ly_to_au(x):
    """Convert light-years to astronomical units."""
    return x * const.au_per_ly
