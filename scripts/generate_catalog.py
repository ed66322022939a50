"""
Star catalog generation script.

Usage:
    python scripts/generate_catalog.py configs/white_dwarf_catalog.yaml

This script:
1. Loads configuration from YAML file and validates it
2. Generates every star from its own seed
3. Checks the catalog for physical consistency
4. Saves the catalog to an HDF5 file
5. Generates plots and prints a summary
"""

import sys
import argparse
import time
from pathlib import Path

# Add src to path so we can import the stargen package
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from stargen.config import CatalogParameters
from stargen.catalog import generate_catalog
from stargen.diagnostics import check_catalog
from stargen.analysis import analyze_catalog
from stargen.visualization import plot_hr_diagram, plot_mass_radius


def main():
    parser = argparse.ArgumentParser(
        description='Generate a seeded star catalog'
    )
    parser.add_argument(
        'config',
        type=str,
        help='Path to YAML configuration file'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Output HDF5 file path (default: auto from config)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Override base_seed from the configuration'
    )
    parser.add_argument(
        '--skip-plots',
        action='store_true',
        help='Skip plot generation'
    )

    args = parser.parse_args()

    # Load configuration
    print(f"Loading configuration from {args.config}...")
    params = CatalogParameters.from_yaml(args.config)
    if args.seed is not None:
        params.base_seed = args.seed

    warnings = params.validate()
    for warning in warnings:
        print(f"  {warning}")
    if any(w.startswith("ERROR") for w in warnings):
        print("Configuration has ERRORS; aborting.")
        sys.exit(1)

    # Determine output path
    if args.output:
        output_path = args.output
    else:
        output_dir = Path(params.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = str(output_dir / f"{params.catalog_name}.h5")

    print(f"Output will be saved to: {output_path}")
    print()

    print("=" * 70)
    print(f"CATALOG: {params.catalog_name}")
    print("=" * 70)
    print(params)
    print("=" * 70)
    print()

    # Generate
    start_time = time.time()
    catalog = generate_catalog(params, show_progress=params.show_progress)
    elapsed_time = time.time() - start_time
    print(f"Generated {catalog.n_stars} stars in {elapsed_time:.2f} seconds")
    print()

    # Consistency checks
    if params.check_physical_consistency:
        print("Checking physical consistency...")
        report = check_catalog(catalog)
        if report['warnings']:
            for warning in report['warnings']:
                print(f"  {warning}")
        else:
            print("  [OK] All stars consistent")
        print()

    catalog.save_to_hdf5(output_path)

    # Summary
    results = analyze_catalog(output_path)

    print("=" * 70)
    print("CATALOG SUMMARY")
    print("=" * 70)
    for label, count in results['counts'].items():
        if count > 0:
            print(f"{label.capitalize()}: {count}")
    print(f"Mass: {results['mass']['mean']:.3f} ± {results['mass']['std']:.3f} M_sun "
          f"[{results['mass']['min']:.3f}, {results['mass']['max']:.3f}]")
    print(f"Temperature: {results['temperature']['mean']:.0f} ± "
          f"{results['temperature']['std']:.0f} K")
    print(f"log10(L/L_sun): [{results['log_luminosity']['min']:.2f}, "
          f"{results['log_luminosity']['max']:.2f}]")
    bounds = results['white_dwarf_mass_bounds']
    print(f"White dwarf masses clamped: {100.0 * bounds['at_lower']:.2f}% at lower bound, "
          f"{100.0 * bounds['at_upper']:.2f}% at upper bound")
    print("=" * 70)
    print()

    # Plots
    if not args.skip_plots:
        print("Generating plots...")
        output_dir = Path(output_path).parent
        plot_files = {
            'hr_diagram': output_dir / 'hr_diagram.png',
            'mass_radius': output_dir / 'mass_radius.png',
        }

        try:
            plot_hr_diagram(output_path, str(plot_files['hr_diagram']))
            print(f"  [OK] {plot_files['hr_diagram'].name}")
        except Exception as e:
            print(f"  [ERROR] hr_diagram: {e}")

        try:
            plot_mass_radius(output_path, str(plot_files['mass_radius']))
            print(f"  [OK] {plot_files['mass_radius'].name}")
        except Exception as e:
            print(f"  [ERROR] mass_radius: {e}")

        print()
        print(f"All outputs saved to: {output_dir}")
    else:
        print("Skipping plot generation (--skip-plots)")

    print()
    print("Done!")


if __name__ == '__main__':
    main()
