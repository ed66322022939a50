"""
Visualization functions for star catalogs.

This module provides functions to create plots from catalog HDF5 files:
- Hertzsprung-Russell diagram (luminosity vs temperature)
- Mass-radius diagram

All plots are saved as PNG files with publication-quality settings (300 DPI).
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for saving files
import matplotlib.pyplot as plt

from stargen.catalog import StarCatalog
from stargen.components import StellarCategory


# Set publication-quality plot defaults
plt.rcParams['figure.dpi'] = 300
plt.rcParams['savefig.dpi'] = 300
plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10

CATEGORY_COLORS = {
    StellarCategory.MAIN_SEQUENCE: 'gold',
    StellarCategory.GIANT: 'red',
    StellarCategory.NEUTRON_STAR: 'purple',
    StellarCategory.WHITE_DWARF: 'blue',
}


def plot_hr_diagram(hdf5_filepath: str, output_path: str):
    """
    Create a Hertzsprung-Russell diagram for a catalog.

    Args:
        hdf5_filepath: Path to HDF5 catalog file
        output_path: Path to save PNG plot

    Creates a scatter plot with:
    - X-axis: Surface temperature (K), decreasing to the right
    - Y-axis: Luminosity (L_sun), log scale
    - Color: one per stellar category
    """
    catalog = StarCatalog.load_from_hdf5(hdf5_filepath)

    fig, ax = plt.subplots(figsize=(8, 6))

    for category in StellarCategory:
        mask = catalog.get_category_mask(category) & (catalog.luminosity > 0.0)
        if np.any(mask):
            ax.scatter(catalog.temperature[mask], catalog.luminosity[mask],
                       c=CATEGORY_COLORS[category], s=8, alpha=0.6,
                       label=category.label.capitalize(), edgecolors='none')

    ax.set_yscale('log')
    ax.invert_xaxis()
    ax.set_xlabel('Surface Temperature (K)')
    ax.set_ylabel('Luminosity (L$_\\odot$)')
    ax.set_title(f'Hertzsprung-Russell Diagram: {catalog.name}')
    if catalog.n_stars > 0:
        ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(output_path, dpi=300, bbox_inches='tight')
    plt.close()


def plot_mass_radius(hdf5_filepath: str, output_path: str):
    """
    Create a mass-radius scatter plot for a catalog.

    Args:
        hdf5_filepath: Path to HDF5 catalog file
        output_path: Path to save PNG plot

    Creates a scatter plot with:
    - X-axis: Mass (M_sun)
    - Y-axis: Radius (R_sun)
    - Color: one per stellar category
    """
    catalog = StarCatalog.load_from_hdf5(hdf5_filepath)

    fig, ax = plt.subplots(figsize=(8, 6))

    for category in StellarCategory:
        mask = catalog.get_category_mask(category)
        if np.any(mask):
            ax.scatter(catalog.mass[mask], catalog.radius[mask],
                       c=CATEGORY_COLORS[category], s=8, alpha=0.6,
                       label=category.label.capitalize(), edgecolors='none')

    ax.set_xlabel('Mass (M$_\\odot$)')
    ax.set_ylabel('Radius (R$_\\odot$)')
    ax.set_title(f'Mass-Radius Relation: {catalog.name}')
    if catalog.n_stars > 0:
        ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(output_path, dpi=300, bbox_inches='tight')
    plt.close()
