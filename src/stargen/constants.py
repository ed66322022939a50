"""
Physical and astronomical constants used throughout star generation.

STELLAR UNITS SYSTEM:
- Mass: solar masses (M_sun)
- Radius: solar radii (R_sun)
- Luminosity: solar luminosities (L_sun)
- Temperature: kelvin (K)
- Orbital distance: astronomical units (AU)

Category bounds below are part of each category's definition, not runtime
configuration.
"""

# Length conversion factors (one unit of the larger scale in the smaller)
meter_per_km = 1000.0  # [m/km]
km_per_sol_rad = 695700.0  # [km/R_sun], IAU 2015 nominal solar radius
km_per_au = 149597870.7  # [km/AU], IAU 2012 exact definition
au_per_ly = 63241.077  # [AU/ly]

# Lightest white dwarf known, SDSS J0917+46
# source: https://ui.adsabs.harvard.edu/abs/2007ApJ...660.1451K/abstract
SDSS_J0917_46_MASS = 0.17  # [M_sun]

# Chandrasekhar limit: upper bound for a white dwarf, and therefore a lower
# bound for a neutron star
# source: https://en.wikipedia.org/wiki/Chandrasekhar_limit
CHANDRASEKHAR_LIMIT = 1.40  # [M_sun]

# White dwarf category bounds
WHITE_DWARF_MIN_MASS = SDSS_J0917_46_MASS  # [M_sun]
WHITE_DWARF_MAX_MASS = CHANDRASEKHAR_LIMIT  # [M_sun]
WHITE_DWARF_MEAN_MASS = 0.6  # [M_sun], peak of the observed mass distribution
WHITE_DWARF_MIN_TEMPERATURE = 6000.0  # [K]
WHITE_DWARF_MAX_TEMPERATURE = 30000.0  # [K]

# Sirius B, used as the default white dwarf
SIRIUS_B_MASS = 0.978  # [M_sun]
SIRIUS_B_TEMPERATURE = 25200.0  # [K]

# Default time multiplier: 1.0 is unscaled physical time
DEFAULT_ACTIVENESS = 1.0

# Seeds are 64-bit unsigned integers
SEED_MAX = 2**64 - 1
