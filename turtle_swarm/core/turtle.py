"""
core/turtle.py

A turtle is a particle that refuses to hurry.

It remembers the best place it has seen,
and it leans, ever so slightly, toward it.

Inspired by:
- Particle swarm optimization (Kennedy & Eberhart)
- Tortoises, generally
"""

from __future__ import annotations
from typing import Optional
import numpy as np

from .boundary import CubicBoundary


# Turtles move slowly and methodically. Do not raise this value,
# or every advantage of the turtle swarm is lost.
TURTLE_VELOCITY: float = float(np.finfo(np.float64).eps)


class Turtle:
    """
    A single searcher in the swarm.

    Carries a position, a velocity, and its personal best observation.
    Turtles never look at each other directly; the only shared
    knowledge is the swarm's global best, handed in by the optimizer.
    """

    def __init__(
        self,
        boundaries: CubicBoundary,
        rng: Optional[np.random.Generator] = None,
        position: Optional[np.ndarray] = None,
    ):
        rng = rng if rng is not None else np.random.default_rng()

        if position is None:
            position = boundaries.sample(rng)
        self.position = np.asarray(position, dtype=np.float64).copy()
        if self.position.shape != (boundaries.shape,):
            raise ValueError(
                f"position has shape {self.position.shape}, expected ({boundaries.shape},)"
            )

        self.velocity = TURTLE_VELOCITY * np.ones(boundaries.shape)
        self.best_score = float("inf")
        self.best_position = np.zeros(boundaries.shape)

    # ==================== Core Loop ====================

    def observe(self, score: float) -> bool:
        """
        Remember the current position if `score` beats the personal best.

        Returns True when the personal best improved.
        """
        if score < self.best_score:
            self.best_score = score
            self.best_position = self.position.copy()
            return True
        return False

    def accelerate(self, global_best_position: np.ndarray) -> None:
        """
        Lean toward the personal best and the swarm's best.

        v = v + C * (personal_best - x) + C * (global_best - x)
        """
        # We deviate from Kennedy and Eberhart here: no inertia, no
        # social or cognitive weights, no random coefficients.
        self.velocity = (
            self.velocity
            + TURTLE_VELOCITY * (self.best_position - self.position)
            + TURTLE_VELOCITY * (global_best_position - self.position)
        )

    def move(self, boundaries: CubicBoundary) -> None:
        """Step along the velocity, then clamp position into the boundary."""
        self.position = boundaries.clamp(self.position + self.velocity)

    def __repr__(self) -> str:
        return (
            f"Turtle(position={np.array2string(self.position, precision=4)}, "
            f"best_score={self.best_score:.6g})"
        )
