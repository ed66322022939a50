"""
Post-generation analysis for star catalogs.

This module provides functions to analyze catalog HDF5 files:
- Per-category star counts
- Mass, radius, temperature and luminosity statistics
- Fraction of masses pinned at the sampling bounds

All functions work with HDF5 file paths (not StarCatalog objects).
"""

import numpy as np
from typing import Dict

from stargen.catalog import StarCatalog
from stargen.components import StellarCategory
from stargen.stars import WhiteDwarf


def summarize(values: np.ndarray) -> Dict[str, float]:
    """
    Basic statistics of an array.

    Args:
        values: 1-D array

    Returns:
        dict with min, max, mean, std, median (NaN for an empty array)
    """
    if len(values) == 0:
        return {key: np.nan for key in ('min', 'max', 'mean', 'std', 'median')}

    return {
        'min': float(np.min(values)),
        'max': float(np.max(values)),
        'mean': float(np.mean(values)),
        'std': float(np.std(values)),
        'median': float(np.median(values)),
    }


def bound_fractions(values: np.ndarray, lb: float, ub: float) -> Dict[str, float]:
    """
    Fraction of samples sitting exactly at each bound.

    Clamped normal sampling puts point masses at its bounds; this measures
    them.

    Args:
        values: 1-D array of samples
        lb: Lower bound
        ub: Upper bound

    Returns:
        dict with at_lower, at_upper fractions in [0, 1]
    """
    if len(values) == 0:
        return {'at_lower': 0.0, 'at_upper': 0.0}

    return {
        'at_lower': float(np.mean(values == lb)),
        'at_upper': float(np.mean(values == ub)),
    }


def analyze_catalog(hdf5_filepath: str) -> dict:
    """
    Complete analysis of a catalog file.

    Args:
        hdf5_filepath: Path to HDF5 catalog file

    Returns:
        results: Dictionary with
            - name, n_stars
            - counts: {category label: count}
            - mass, radius, temperature: statistics dicts
            - log_luminosity: statistics of log10(L / L_sun)
            - white_dwarf_mass_bounds: fractions at the clamp bounds
    """
    catalog = StarCatalog.load_from_hdf5(hdf5_filepath)

    results = {
        'name': catalog.name,
        'n_stars': catalog.n_stars,
        'counts': {
            category.label: catalog.count(category) for category in StellarCategory
        },
        'mass': summarize(catalog.mass),
        'radius': summarize(catalog.radius),
        'temperature': summarize(catalog.temperature),
    }

    positive = catalog.luminosity > 0.0
    results['log_luminosity'] = summarize(np.log10(catalog.luminosity[positive]))

    wd_mask = catalog.get_category_mask(StellarCategory.WHITE_DWARF)
    results['white_dwarf_mass_bounds'] = bound_fractions(
        catalog.mass[wd_mask], WhiteDwarf.MIN_MASS, WhiteDwarf.MAX_MASS
    )

    return results
