"""
optimization/functions.py

Benchmark objectives for exercising the swarm.

Each one takes a position vector, returns a float, and bottoms out at 0.
The registry pairs every objective with the cube it is usually searched in.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Tuple
import numpy as np


def sphere(x: np.ndarray) -> float:
    """Sum of squares. Minimum at the origin."""
    x = np.asarray(x, dtype=np.float64)
    return float(np.sum(x * x))


def rosenbrock(x: np.ndarray) -> float:
    """Curved valley. Minimum at (1, ..., 1)."""
    x = np.asarray(x, dtype=np.float64)
    head, tail = x[:-1], x[1:]
    return float(np.sum(100.0 * (tail - head * head) ** 2 + (1.0 - head) ** 2))


def rastrigin(x: np.ndarray) -> float:
    """Egg-crate of local minima. Minimum at the origin."""
    x = np.asarray(x, dtype=np.float64)
    ripples = 10.0 * np.cos(2.0 * np.pi * x)
    return float(10.0 * x.size + np.sum(x * x - ripples))


def ackley(x: np.ndarray) -> float:
    """Flat outer plate, deep central well. Minimum at the origin."""
    x = np.asarray(x, dtype=np.float64)
    rms = np.sqrt(np.mean(x * x))
    mean_cos = np.mean(np.cos(2.0 * np.pi * x))
    return float(20.0 + np.e - 20.0 * np.exp(-0.2 * rms) - np.exp(mean_cos))


@dataclass(frozen=True)
class Benchmark:
    """An objective and the cube it is conventionally searched in."""
    name: str
    function: Callable[[np.ndarray], float]
    lower: float
    upper: float

    @property
    def bounds(self) -> Tuple[float, float]:
        return self.lower, self.upper


FUNCTIONS: Dict[str, Benchmark] = {
    b.name: b for b in (
        Benchmark("sphere", sphere, -5.12, 5.12),
        Benchmark("rosenbrock", rosenbrock, -5.0, 10.0),
        Benchmark("rastrigin", rastrigin, -5.12, 5.12),
        Benchmark("ackley", ackley, -32.768, 32.768),
    )
}


def get_function(name: str) -> Benchmark:
    """Look up a benchmark by name (case-insensitive)."""
    benchmark = FUNCTIONS.get(name.lower())
    if benchmark is None:
        raise ValueError(
            f"Unknown objective function: {name!r} "
            f"(available: {', '.join(sorted(FUNCTIONS))})"
        )
    return benchmark
