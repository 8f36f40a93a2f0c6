"""
core/boundary.py

The cubic search region.

One interval, repeated across every dimension.
Turtles may wander, but never past the fence.
"""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class CubicBoundary:
    """
    Hyper-rectangular feasible region with identical bounds per dimension.

    Reversed bounds are swapped rather than rejected, so
    `lower <= upper` always holds after construction.
    """
    shape: int          # Dimensionality of the search space
    lower: float        # Lower bound, every dimension
    upper: float        # Upper bound, every dimension

    def __post_init__(self):
        if isinstance(self.shape, bool) or int(self.shape) != self.shape or self.shape < 1:
            raise ValueError(f"shape must be a positive integer, got {self.shape!r}")

        lower, upper = float(self.lower), float(self.upper)
        # Just in case someone makes a mistake here.
        if lower > upper:
            lower, upper = upper, lower

        object.__setattr__(self, "shape", int(self.shape))
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)

    @property
    def span(self) -> float:
        """Width of the interval along any one dimension."""
        return self.upper - self.lower

    def contains(self, position: np.ndarray) -> bool:
        """Check if every component lies inside [lower, upper]."""
        position = np.asarray(position, dtype=np.float64)
        if position.shape != (self.shape,):
            return False
        return bool(np.all((position >= self.lower) & (position <= self.upper)))

    def clamp(self, position: np.ndarray) -> np.ndarray:
        """
        Clamp each component independently into [lower, upper].

        Components above `upper` become `upper`, components below
        `lower` become `lower`. No reflection, no projection.
        """
        return np.clip(np.asarray(position, dtype=np.float64), self.lower, self.upper)

    def sample(self, rng: np.random.Generator) -> np.ndarray:
        """Draw one point, each dimension independently uniform over the interval."""
        return rng.uniform(self.lower, self.upper, size=self.shape)
