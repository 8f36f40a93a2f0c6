"""
optimization/optimizer.py

The turtle swarm optimizer.

Evaluate, lean, step. Repeat until the goal is met.

One deliberate deviation from classical PSO: there is no early exit.
No iteration cap, no timeout, no stagnation detection. The turtles work
until the best observed score reaches the goal. If the goal is
unreachable, `optimize()` never returns; callers who need bounded
runtime pass a `should_stop` callback.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
import logging
import numpy as np

from turtle_swarm.core.boundary import CubicBoundary
from turtle_swarm.core.turtle import Turtle
from turtle_swarm.observations.report import format_report

logger = logging.getLogger(__name__)

ObjectiveFunction = Callable[[np.ndarray], float]


class Optimizer:
    """
    Owns the swarm and drives the three-phase iteration cycle.

    Phase 1 - evaluate: score every turtle, update personal and global bests
    Phase 2 - update velocities: lean toward personal and global bests
    Phase 3 - update positions: step and clamp into the boundary

    The global best is only ever replaced by a strictly better score, in a
    single left-to-right scan over the swarm, so `best_score` is
    non-increasing across iterations.
    """

    def __init__(
        self,
        turtles: int,
        boundaries: CubicBoundary,
        objective_function: ObjectiveFunction,
        goal: float,
        rng: Union[np.random.Generator, int, None] = None,
        history_limit: int = 1000,
    ):
        if isinstance(turtles, bool) or int(turtles) != turtles or turtles < 1:
            raise ValueError(f"turtles must be a positive integer, got {turtles!r}")
        if history_limit < 2:
            raise ValueError(f"history_limit must be at least 2, got {history_limit!r}")

        self.rng = np.random.default_rng(rng)
        self.boundaries = boundaries
        self.turtles: List[Turtle] = [
            Turtle(boundaries, self.rng) for _ in range(int(turtles))
        ]
        self.iterations = 0
        self.best_score = float("inf")
        self.best_position = np.zeros(boundaries.shape)
        self.objective_function = objective_function
        self.goal = float(goal)

        # History is decimated to at most `history_limit` entries, spread
        # evenly over the run, plus the final iteration.
        self.history: List[Dict[str, Any]] = []
        self.record_history = False
        self.history_limit = history_limit
        self._history_stride = 1
        self._last_record: Optional[Dict[str, Any]] = None

    # ==================== Phases ====================

    def evaluate(self) -> np.ndarray:
        """
        Phase 1: score every turtle at its current position.

        The global best is only considered when a turtle has just improved
        its own personal best. Returns this phase's scores in swarm order.
        """
        scores = np.empty(len(self.turtles))
        for i, turtle in enumerate(self.turtles):
            score = float(self.objective_function(turtle.position))
            scores[i] = score
            if turtle.observe(score):
                if score < self.best_score:
                    self.best_score = score
                    self.best_position = turtle.position.copy()
                    logger.debug(
                        f"New best {score:.6g} at iteration {self.iterations} "
                        f"from turtle #{i}"
                    )
        return scores

    def update_velocities(self) -> None:
        """Phase 2: every turtle leans toward its own best and the swarm's best."""
        for turtle in self.turtles:
            turtle.accelerate(self.best_position)

    def update_positions(self) -> None:
        """Phase 3: every turtle steps along its velocity and is clamped."""
        for turtle in self.turtles:
            turtle.move(self.boundaries)

    def step(self) -> None:
        """Run one full iteration: evaluate, update velocities, update positions."""
        scores = self.evaluate()
        self.update_velocities()
        self.update_positions()
        self.iterations += 1

        if self.record_history:
            self._record(scores)

    def _record(self, scores: np.ndarray) -> None:
        """Keep every `stride`-th iteration; halve the history when it overflows."""
        self._last_record = {
            'iteration': self.iterations,
            'best_score': self.best_score,
            'min_score': float(scores.min()),
            'mean_score': float(scores.mean()),
        }
        if self.iterations % self._history_stride != 0:
            return

        self.history.append(self._last_record)
        if len(self.history) > self.history_limit:
            # Entries sit at multiples of the stride; keep the even multiples
            self.history = [
                h for h in self.history
                if h['iteration'] % (2 * self._history_stride) == 0
            ]
            self._history_stride *= 2

    def _close_history(self) -> None:
        """Make sure the last completed iteration is in the history."""
        if self._last_record is None:
            return
        if not self.history or self.history[-1]['iteration'] != self._last_record['iteration']:
            self.history.append(self._last_record)

    # ==================== Driving Loop ====================

    def optimize(
        self,
        should_stop: Optional[Callable[[Optimizer], bool]] = None,
    ) -> None:
        """
        Iterate until the best observed score reaches the goal.

        There is no iteration cap. If the goal is unreachable this call
        blocks forever unless `should_stop` is given; it is checked before
        every iteration and ends the run early when it returns True.
        """
        logger.info(
            f"Optimizing with {len(self.turtles)} turtles in "
            f"{self.boundaries.shape} dimension(s), goal={self.goal:.6g}"
        )

        while self.best_score > self.goal:
            if should_stop is not None and should_stop(self):
                logger.warning(
                    f"Stopped by caller after {self.iterations} iterations, "
                    f"best={self.best_score:.6g} has not reached goal={self.goal:.6g}"
                )
                self._close_history()
                return
            self.step()

        self._close_history()

        logger.info(
            f"Goal reached after {self.iterations} iterations, "
            f"best={self.best_score:.6g}"
        )

    # ==================== Results ====================

    def get_best(self) -> Tuple[np.ndarray, float]:
        """Return the global best position and its score."""
        return self.best_position.copy(), self.best_score

    def get_statistics(self) -> Dict[str, Any]:
        """Read-only projection of the current swarm state."""
        return {
            'algorithm': self.__class__.__name__,
            'turtles': len(self.turtles),
            'iterations': self.iterations,
            'goal': self.goal,
            'best_score': self.best_score,
            'best_position': self.best_position.tolist(),
            'personal_bests': [
                {'best_score': t.best_score, 'best_position': t.best_position.tolist()}
                for t in self.turtles
            ],
        }

    def report(self) -> None:
        """Print a summary of the run to stdout."""
        print(format_report(self))

    def __repr__(self) -> str:
        return (
            f"Optimizer(turtles={len(self.turtles)}, "
            f"iterations={self.iterations}, "
            f"best_score={self.best_score:.6g}, "
            f"goal={self.goal:.6g})"
        )
