"""
Orbit contract.

An orbit provider computes a body's position directly from time. Callers
only ever pass non-decreasing times, but the spacing between calls is
unpredictable, so implementations must evaluate position in closed form
from `time` and must not integrate forward from the previous call.

Distances are in astronomical units.
"""

from typing import Protocol, runtime_checkable

import numpy as np

from stargen.capabilities import Reproducible


@runtime_checkable
class Orbit(Reproducible, Protocol):
    """Position of a body as a function of time."""

    def position(self, time: float) -> np.ndarray:
        """
        Position at the given time.

        Args:
            time: Time, never earlier than on the previous call

        Returns:
            (3,) array [AU]
        """
        ...

    def apoapsis(self) -> float:
        """Farthest distance from the orbital center [AU]."""
        ...

    def periapsis(self) -> float:
        """Closest distance from the orbital center [AU]."""
        ...


def sample_positions(orbit: Orbit, times) -> np.ndarray:
    """
    Evaluate an orbit at a sequence of times.

    Args:
        orbit: Any object satisfying the Orbit contract
        times: 1-D sequence of non-decreasing times

    Returns:
        positions: (n, 3) array [AU]

    Raises:
        ValueError: If times is not 1-D, contains NaN or decreases anywhere
    """
    times = np.asarray(times, dtype=np.float64)
    if times.ndim != 1:
        raise ValueError(f"times must be 1-D, got shape {times.shape}")
    if np.any(np.isnan(times)):
        raise ValueError("times must not contain NaN")
    if not np.all(np.diff(times) >= 0.0):
        raise ValueError("times must be non-decreasing")

    positions = np.zeros((len(times), 3), dtype=np.float64)
    for i, t in enumerate(times):
        positions[i] = orbit.position(float(t))

    return positions
