"""
Core components of the turtle swarm.

- boundary: The cubic search region every turtle lives in
- turtle: A single searcher - position, velocity, memory
"""

from .boundary import CubicBoundary
from .turtle import Turtle, TURTLE_VELOCITY

__all__ = ["CubicBoundary", "Turtle", "TURTLE_VELOCITY"]
