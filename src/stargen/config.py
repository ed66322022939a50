"""
Configuration management for star catalog generation.

This module handles loading and parsing YAML configuration files into a
CatalogParameters dataclass and sanity-checking the values.
"""

from dataclasses import dataclass
from typing import Any, Dict, List
from pathlib import Path
import yaml

from stargen import constants as const
from stargen.components import StellarCategory
from stargen.stars import is_implemented


@dataclass
class CatalogParameters:
    """
    Container for all catalog generation parameters.

    Stars are generated category by category in StellarCategory order,
    star i of the whole catalog getting seed base_seed + i.
    """

    # Metadata
    catalog_name: str
    output_directory: str

    # Generation
    base_seed: int = 42
    main_sequence_count: int = 0
    giant_count: int = 0
    neutron_star_count: int = 0
    white_dwarf_count: int = 0

    # Diagnostics
    check_physical_consistency: bool = True
    show_progress: bool = True

    @property
    def counts(self) -> Dict[StellarCategory, int]:
        """Number of stars requested per category, in generation order."""
        return {
            StellarCategory.MAIN_SEQUENCE: self.main_sequence_count,
            StellarCategory.GIANT: self.giant_count,
            StellarCategory.NEUTRON_STAR: self.neutron_star_count,
            StellarCategory.WHITE_DWARF: self.white_dwarf_count,
        }

    @property
    def total_count(self) -> int:
        """Total number of stars across all categories."""
        return sum(self.counts.values())

    def validate(self) -> List[str]:
        """
        Perform sanity checks on configuration parameters.

        Returns:
            List of warning/error messages. Empty list if all checks pass.
        """
        warnings = []

        if self.base_seed < 0 or self.base_seed > const.SEED_MAX:
            warnings.append(
                f"ERROR: base_seed must be an unsigned 64-bit integer, got {self.base_seed}"
            )
        elif self.total_count > 0 and self.base_seed + self.total_count - 1 > const.SEED_MAX:
            warnings.append(
                f"ERROR: base_seed ({self.base_seed}) + {self.total_count} stars "
                f"overflows the 64-bit seed range"
            )

        for category, count in self.counts.items():
            if count < 0:
                warnings.append(f"ERROR: {category.label} count must be >= 0, got {count}")
            elif count > 0 and not is_implemented(category):
                warnings.append(
                    f"ERROR: {category.label} stars have no generation formula, "
                    f"but {count} were requested"
                )

        if self.total_count <= 0:
            warnings.append("WARNING: catalog is empty (all counts are 0)")

        return warnings

    @classmethod
    def from_yaml(cls, filepath: str) -> 'CatalogParameters':
        """
        Load configuration from YAML file.

        Args:
            filepath: Path to YAML configuration file

        Returns:
            CatalogParameters object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        def to_int(value: Any) -> int:
            """Convert value to int, rejecting fractional numbers."""
            if isinstance(value, bool):
                raise ValueError(f"Expected an integer, got {value!r}")
            if isinstance(value, float) and not value.is_integer():
                raise ValueError(f"Expected an integer, got {value!r}")
            return int(value)

        def to_bool(value: Any) -> bool:
            """Convert value to bool."""
            if isinstance(value, str):
                return value.lower() in ('true', 'yes', '1')
            return bool(value)

        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise ValueError(f"Configuration file is empty or malformed: {filepath}")

        for key in ('catalog_name', 'output_directory', 'generation'):
            if key not in config:
                raise ValueError(f"Configuration is missing required key '{key}'")

        generation = config['generation']
        diagnostics = config.get('diagnostics', {})

        return cls(
            catalog_name=str(config['catalog_name']),
            output_directory=str(config['output_directory']),
            base_seed=to_int(generation.get('base_seed', 42)),
            main_sequence_count=to_int(generation.get('main_sequence_count', 0)),
            giant_count=to_int(generation.get('giant_count', 0)),
            neutron_star_count=to_int(generation.get('neutron_star_count', 0)),
            white_dwarf_count=to_int(generation.get('white_dwarf_count', 0)),
            check_physical_consistency=to_bool(
                diagnostics.get('check_physical_consistency', True)
            ),
            show_progress=to_bool(diagnostics.get('show_progress', True)),
        )

    def __repr__(self):
        """Human-readable representation."""
        lines = [
            f"Catalog: {self.catalog_name}",
            f"Base seed: {self.base_seed}",
            f"Stars: {self.total_count} total",
        ]
        for category, count in self.counts.items():
            if count > 0:
                lines.append(f"  {category.label}: {count}")
        return "\n".join(lines)
