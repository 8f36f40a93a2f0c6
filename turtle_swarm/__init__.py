"""
Turtle Swarm: slow, methodical black-box minimization.

A particle swarm variant in which every turtle carries its own best
observation and drifts toward it, and toward the swarm's best, at machine
epsilon speed until the swarm reaches the caller's goal.
"""

__version__ = "0.1.0"

from .core import CubicBoundary, Turtle, TURTLE_VELOCITY
from .optimization import Optimizer

__all__ = ["CubicBoundary", "Turtle", "TURTLE_VELOCITY", "Optimizer"]
