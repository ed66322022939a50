"""
Physical consistency checks for generated stars.

This module provides functions to detect:
- Non-finite mass, radius, luminosity or temperature
- Values outside a category's bounds
- Catalog radius or luminosity that no longer match the category formulas
"""

import numpy as np

from stargen.catalog import StarCatalog
from stargen.components import StellarCategory
from stargen.physics import (
    FORMULA_RTOL,
    white_dwarf_luminosities,
    white_dwarf_radii,
)
from stargen.stars import StarBundle, WhiteDwarf


def check_star(star: StarBundle) -> list:
    """
    Check one star for physical consistency.

    Args:
        star: Generated star

    Returns:
        List of warning messages. Empty list if all checks pass.
    """
    warnings = []
    name = star.category.label

    values = {
        'mass': float(star.mass),
        'radius': float(star.radius),
        'luminosity': star.luminosity,
        'temperature': star.temperature,
    }
    for field, value in values.items():
        if not np.isfinite(value):
            warnings.append(f"CRITICAL: {name} {field} is NaN or Inf")

    if warnings:
        return warnings

    if star.category == StellarCategory.WHITE_DWARF:
        if not WhiteDwarf.MIN_MASS <= values['mass'] <= WhiteDwarf.MAX_MASS:
            warnings.append(
                f"WARNING: {name} mass ({values['mass']:.3f} M_sun) outside "
                f"[{WhiteDwarf.MIN_MASS}, {WhiteDwarf.MAX_MASS}] M_sun"
            )
        if not WhiteDwarf.MIN_TEMPERATURE <= values['temperature'] <= WhiteDwarf.MAX_TEMPERATURE:
            warnings.append(
                f"WARNING: {name} temperature ({values['temperature']:.1f} K) outside "
                f"[{WhiteDwarf.MIN_TEMPERATURE}, {WhiteDwarf.MAX_TEMPERATURE}] K"
            )

    return warnings


def check_catalog(catalog: StarCatalog) -> dict:
    """
    Check a whole catalog for physical consistency.

    Args:
        catalog: StarCatalog

    Returns:
        dict with:
            - is_consistent: bool
            - n_checked: int
            - warnings: list of warning messages
    """
    warnings = []

    finite = (
        np.isfinite(catalog.mass)
        & np.isfinite(catalog.radius)
        & np.isfinite(catalog.luminosity)
        & np.isfinite(catalog.temperature)
    )
    n_bad = int(np.sum(~finite))
    if n_bad > 0:
        warnings.append(f"CRITICAL: {n_bad} stars have NaN or Inf values")

    wd_mask = catalog.get_category_mask(StellarCategory.WHITE_DWARF) & finite
    if np.any(wd_mask):
        masses = catalog.mass[wd_mask]
        temperatures = catalog.temperature[wd_mask]

        out_of_bounds = (masses < WhiteDwarf.MIN_MASS) | (masses > WhiteDwarf.MAX_MASS)
        if np.any(out_of_bounds):
            warnings.append(
                f"WARNING: {int(np.sum(out_of_bounds))} white dwarfs have mass outside "
                f"[{WhiteDwarf.MIN_MASS}, {WhiteDwarf.MAX_MASS}] M_sun"
            )

        too_hot_or_cold = (
            (temperatures < WhiteDwarf.MIN_TEMPERATURE)
            | (temperatures > WhiteDwarf.MAX_TEMPERATURE)
        )
        if np.any(too_hot_or_cold):
            warnings.append(
                f"WARNING: {int(np.sum(too_hot_or_cold))} white dwarfs have temperature outside "
                f"[{WhiteDwarf.MIN_TEMPERATURE}, {WhiteDwarf.MAX_TEMPERATURE}] K"
            )

        radius_ok = np.isclose(
            catalog.radius[wd_mask], white_dwarf_radii(masses), rtol=FORMULA_RTOL, atol=0.0
        )
        if not np.all(radius_ok):
            warnings.append(
                f"ERROR: {int(np.sum(~radius_ok))} white dwarfs do not match "
                f"the mass-radius relation"
            )

        luminosity_ok = np.isclose(
            catalog.luminosity[wd_mask], white_dwarf_luminosities(temperatures),
            rtol=FORMULA_RTOL, atol=0.0
        )
        if not np.all(luminosity_ok):
            warnings.append(
                f"ERROR: {int(np.sum(~luminosity_ok))} white dwarfs do not match "
                f"the temperature-luminosity fit"
            )

    is_consistent = not any(
        w.startswith("CRITICAL") or w.startswith("ERROR") for w in warnings
    )

    return {
        'is_consistent': is_consistent,
        'n_checked': catalog.n_stars,
        'warnings': warnings,
    }
