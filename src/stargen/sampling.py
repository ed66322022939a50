"""
Bounded random sampling from an explicitly threaded pseudorandom engine.

Every sampling function takes the engine as its last argument; nothing here
touches global random state. Given the same seed and the same call order,
the returned values are bit-identical across runs and platforms.

ENGINE:
NumPy's PCG64 bit generator wrapped in a numpy.random.Generator. Only
Generator.random() (53-bit uniform doubles) is used to draw from it; normal
deviates come from a Box-Muller transform written out below, so the number
of draws per sample and the floating-point path do not depend on NumPy's
internal normal sampler.
"""

import numpy as np

from stargen import constants as const


def make_rng(seed: int) -> np.random.Generator:
    """
    Create the pinned pseudorandom engine for a 64-bit seed.

    Args:
        seed: Unsigned 64-bit integer seed

    Returns:
        NumPy Generator backed by PCG64

    Raises:
        ValueError: If seed is negative or does not fit in 64 bits
    """
    if seed < 0 or seed > const.SEED_MAX:
        raise ValueError(
            f"seed must be an unsigned 64-bit integer, got {seed}"
        )
    return np.random.Generator(np.random.PCG64(seed))


def standard_normal(rng: np.random.Generator) -> float:
    """
    Draw one standard normal deviate with the Box-Muller transform.

    Consumes exactly two uniform draws from rng.

    Args:
        rng: NumPy random number generator

    Returns:
        float: Sample from N(0, 1)

    Notes:
        - u1 is taken from (0, 1] so that log(u1) is always finite
        - Only the cosine branch is used; the sine partner is discarded
    """
    u1 = 1.0 - rng.random()
    u2 = rng.random()
    return float(np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2))


def range_uniform(lb: float, ub: float, rng: np.random.Generator) -> float:
    """
    Sample uniformly from the closed interval [lb, ub].

    Args:
        lb: Lower bound
        ub: Upper bound (caller guarantees lb <= ub)
        rng: NumPy random number generator

    Returns:
        float: Sample in [lb, ub]
    """
    value = lb + (ub - lb) * rng.random()
    # Rounding in lb + (ub - lb) * u can land one ulp above ub
    return float(min(ub, value))


def range_normal(lb: float, mu: float, ub: float, rng: np.random.Generator) -> float:
    """
    Sample from a normal distribution around mu, clamped into [lb, ub].

    The spread is derived from the bounds rather than supplied:
        distance = min(ub - mu, mu - lb)
        sigma = distance / 3
    so about three standard deviations fit inside the tighter side. The
    distribution is parameterized by its coefficient of variation |sigma / mu|,
    which leaves mu == 0 undefined (the result is NaN).

    Args:
        lb: Lower bound
        mu: Mean, lb <= mu <= ub
        ub: Upper bound
        rng: NumPy random number generator

    Returns:
        float: Sample in [lb, ub]

    Notes:
        - Samples outside the bounds are pulled to the nearest bound, not
          rejected, so the output has point masses at lb and ub
        - Exactly two uniform draws are consumed per call
    """
    distance = min(ub - mu, mu - lb)
    sigma = distance / 3.0
    with np.errstate(divide='ignore', invalid='ignore'):
        cv = np.abs(np.float64(sigma) / np.float64(mu))
        std_dev = cv * mu

    value = mu + std_dev * standard_normal(rng)

    return float(np.clip(value, lb, ub))
