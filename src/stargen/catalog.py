"""
Star catalogs: many generated stars stored as parallel arrays.

A StarCatalog holds one row per star. Each star is generated independently
from its own seed, so a catalog is fully determined by its seeds and
categories, regardless of the order stars were produced in.

All physics arrays use stellar units:
- mass: solar masses (M_sun)
- radius: solar radii (R_sun)
- luminosity: solar luminosities (L_sun)
- temperature: kelvin (K)
"""

import numpy as np
from typing import Iterable, Optional
from pathlib import Path
import h5py
from tqdm import tqdm

from stargen.components import Mass, Radius, StellarCategory, SunBase
from stargen.config import CatalogParameters
from stargen.stars import StarBundle, generate_star, star_type


class StarCatalog:
    """
    Parallel arrays describing N generated stars.

    Arrays:
    - seed: generation seed (uint64)
    - category: StellarCategory value (int8)
    - mass, radius, luminosity, temperature, activeness (float64)
    """

    def __init__(self, n_stars: int, name: str = "catalog"):
        """
        Initialize an empty catalog.

        Args:
            n_stars: Number of stars
            name: Catalog name, stored with the file
        """
        self.name = name

        self.seed = np.zeros(n_stars, dtype=np.uint64)
        self.category = np.zeros(n_stars, dtype=np.int8)

        self.mass = np.zeros(n_stars, dtype=np.float64)  # [M_sun]
        self.radius = np.zeros(n_stars, dtype=np.float64)  # [R_sun]
        self.luminosity = np.zeros(n_stars, dtype=np.float64)  # [L_sun]
        self.temperature = np.zeros(n_stars, dtype=np.float64)  # [K]
        self.activeness = np.ones(n_stars, dtype=np.float64)

    @property
    def n_stars(self) -> int:
        """Number of stars in the catalog."""
        return len(self.mass)

    def __len__(self) -> int:
        return self.n_stars

    def get_category_mask(self, category: StellarCategory) -> np.ndarray:
        """Get boolean mask for stars of one category."""
        return self.category == category.value

    def count(self, category: StellarCategory) -> int:
        """Number of stars of one category."""
        return int(np.sum(self.get_category_mask(category)))

    def set_star(self, index: int, star: StarBundle, seed: int) -> None:
        """
        Store a star in row `index`.

        Args:
            index: Row index
            star: Generated star
            seed: Seed the star was generated from
        """
        self.seed[index] = seed
        self.category[index] = star.category.value
        self.mass[index] = star.mass
        self.radius[index] = star.radius
        self.luminosity[index] = star.luminosity
        self.temperature[index] = star.temperature
        self.activeness[index] = star.activeness

    def get_star(self, index: int) -> StarBundle:
        """
        Rebuild the star stored in row `index`.

        Stored values are used as they are; nothing is regenerated.

        Raises:
            ValueError: If a white dwarf row no longer matches its formulas
        """
        cls = star_type(StellarCategory(int(self.category[index])))
        return cls(
            mass=Mass(self.mass[index]),
            radius=Radius(self.radius[index]),
            base=SunBase(
                temperature=float(self.temperature[index]),
                luminosity=float(self.luminosity[index]),
                activeness=float(self.activeness[index]),
            ),
        )

    @classmethod
    def from_stars(
        cls,
        stars: Iterable[StarBundle],
        seeds: Iterable[int],
        name: str = "catalog"
    ) -> 'StarCatalog':
        """
        Build a catalog from already generated stars.

        Args:
            stars: Generated stars
            seeds: Seed of each star, same length as stars
            name: Catalog name

        Raises:
            ValueError: If stars and seeds differ in length
        """
        stars = list(stars)
        seeds = list(seeds)
        if len(stars) != len(seeds):
            raise ValueError(
                f"Got {len(stars)} stars but {len(seeds)} seeds"
            )

        catalog = cls(n_stars=len(stars), name=name)
        for i, (star, seed) in enumerate(zip(stars, seeds)):
            catalog.set_star(i, star, seed)
        return catalog

    def save_to_hdf5(self, filepath: str, compression: Optional[str] = "gzip"):
        """
        Save catalog to HDF5 file.

        Args:
            filepath: Path to HDF5 file
            compression: HDF5 compression method ("gzip", "lzf", or None)
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        # Empty datasets are stored contiguous
        if self.n_stars == 0:
            compression = None

        with h5py.File(filepath, 'w') as f:
            f.attrs['name'] = self.name
            f.attrs['n_stars'] = self.n_stars

            ids = f.create_group('ids')
            ids.create_dataset('seed', data=self.seed, compression=compression)
            ids.create_dataset('category', data=self.category, compression=compression)

            physics = f.create_group('physics')
            physics.create_dataset('mass', data=self.mass, compression=compression)
            physics.create_dataset('radius', data=self.radius, compression=compression)
            physics.create_dataset('luminosity', data=self.luminosity, compression=compression)
            physics.create_dataset('temperature', data=self.temperature, compression=compression)
            physics.create_dataset('activeness', data=self.activeness, compression=compression)

    @classmethod
    def load_from_hdf5(cls, filepath: str) -> 'StarCatalog':
        """
        Load catalog from HDF5 file.

        Args:
            filepath: Path to HDF5 file

        Returns:
            StarCatalog instance loaded from file

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        if not Path(filepath).exists():
            raise FileNotFoundError(f"Catalog file not found: {filepath}")

        with h5py.File(filepath, 'r') as f:
            name = f.attrs['name']
            if isinstance(name, bytes):
                name = name.decode()
            n_stars = int(f.attrs['n_stars'])

            catalog = cls(n_stars=n_stars, name=str(name))

            ids = f['ids']
            catalog.seed[:] = ids['seed'][:]
            catalog.category[:] = ids['category'][:]

            physics = f['physics']
            catalog.mass[:] = physics['mass'][:]
            catalog.radius[:] = physics['radius'][:]
            catalog.luminosity[:] = physics['luminosity'][:]
            catalog.temperature[:] = physics['temperature'][:]
            catalog.activeness[:] = physics['activeness'][:]

        return catalog

    def __repr__(self) -> str:
        """String representation of the catalog."""
        lines = [f"StarCatalog('{self.name}', {self.n_stars} stars)"]
        for category in StellarCategory:
            count = self.count(category)
            if count > 0:
                lines.append(f"  {category.label}: {count}")
        return "\n".join(lines)


def generate_catalog(
    params: CatalogParameters,
    show_progress: bool = False
) -> StarCatalog:
    """
    Generate a complete catalog from parameters.

    Categories are generated in StellarCategory order; the star in row i
    gets seed params.base_seed + i.

    Args:
        params: Catalog parameters
        show_progress: Whether to show a progress bar (tqdm)

    Returns:
        catalog: Populated StarCatalog

    Raises:
        NotImplementedError: If stars are requested for a category without
            generation formulas
    """
    catalog = StarCatalog(n_stars=params.total_count, name=params.catalog_name)

    pbar = None
    if show_progress:
        pbar = tqdm(total=params.total_count, desc="Generating stars", unit="stars")

    try:
        index = 0
        for category, count in params.counts.items():
            for _ in range(count):
                seed = params.base_seed + index
                star = generate_star(category, seed)
                catalog.set_star(index, star, seed)
                index += 1
                if pbar is not None:
                    pbar.update(1)
    finally:
        if pbar is not None:
            pbar.close()

    return catalog
