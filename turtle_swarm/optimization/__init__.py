"""
turtle_swarm/optimization/

The optimizer and the objectives it is usually pointed at.

- optimizer: Swarm ownership and the evaluate / lean / step cycle
- functions: Benchmark objectives with conventional bounds
"""

from .optimizer import Optimizer, ObjectiveFunction
from .functions import FUNCTIONS, Benchmark, get_function, sphere, rosenbrock, rastrigin, ackley

__all__ = [
    "Optimizer",
    "ObjectiveFunction",
    "FUNCTIONS",
    "Benchmark",
    "get_function",
    "sphere",
    "rosenbrock",
    "rastrigin",
    "ackley",
]
