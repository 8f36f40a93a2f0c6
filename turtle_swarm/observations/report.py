"""
observations/report.py

A plain-text account of what the turtles found.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from turtle_swarm.optimization.optimizer import Optimizer


def _fmt_position(position: np.ndarray) -> str:
    return np.array2string(np.asarray(position), precision=6, separator=", ")


def format_report(optimizer: Optimizer) -> str:
    """
    Summarize a run: swarm size, iterations, global best, and every
    turtle's personal best in swarm order.
    """
    lines = [
        f"{len(optimizer.turtles)} turtles performed "
        f"{optimizer.iterations} optimizer iterations for you.",
        f"The best score: {optimizer.best_score:.6g} was observed at position: "
        f"{_fmt_position(optimizer.best_position)}",
        "Below is a complete run down of the best locations:",
    ]
    for number, turtle in enumerate(optimizer.turtles):
        lines.append(
            f"\tTurtle #{number}'s best score {turtle.best_score:.6g}, "
            f"was observed at {_fmt_position(turtle.best_position)}"
        )
    return "\n".join(lines)
