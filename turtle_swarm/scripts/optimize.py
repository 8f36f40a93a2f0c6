#!/usr/bin/env python3
"""
Turtle Swarm Optimization CLI

Minimize a benchmark function with a turtle swarm and report the result.

Usage:
    # Sphere in two dimensions, default bounds
    python -m turtle_swarm.scripts.optimize sphere --dimensions 2

    # Tight bounds, large swarm, reproducible
    python -m turtle_swarm.scripts.optimize sphere --lower -1 --upper 1 --turtles 200 --seed 7

    # From a config file, with a convergence plot
    python -m turtle_swarm.scripts.optimize --config run.yaml --plot convergence.png

There is no iteration cap. An unreachable --goal runs until interrupted.
"""

import argparse
import logging
from typing import List, Optional

from turtle_swarm.config import RunConfig, load_config
from turtle_swarm.core.boundary import CubicBoundary
from turtle_swarm.optimization.functions import FUNCTIONS, get_function
from turtle_swarm.optimization.optimizer import Optimizer
from turtle_swarm.observations.visualize import plot_convergence

logger = logging.getLogger(__name__)


def build_optimizer(config: RunConfig) -> Optimizer:
    """Build an optimizer from a run configuration."""
    objective = get_function(config.function).function
    lower, upper = config.resolve_bounds()
    boundaries = CubicBoundary(config.dimensions, lower, upper)

    optimizer = Optimizer(
        config.turtles,
        boundaries,
        objective,
        config.goal,
        rng=config.seed,
    )
    optimizer.record_history = config.record_history
    return optimizer


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Turtle swarm optimization")

    parser.add_argument("function", nargs="?", default=None, choices=sorted(FUNCTIONS),
                        help="Benchmark function to minimize")
    parser.add_argument("--config", type=str, default=None, help="YAML run configuration")
    parser.add_argument("--dimensions", type=int, default=None)
    parser.add_argument("--lower", type=float, default=None)
    parser.add_argument("--upper", type=float, default=None)
    parser.add_argument("--turtles", type=int, default=None)
    parser.add_argument("--goal", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--plot", type=str, default=None, help="Save a convergence plot here")
    parser.add_argument("--verbose", action="store_true", help="Log every new best")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    config = load_config(args.config) if args.config else RunConfig()
    config = config.with_overrides(
        function=args.function,
        dimensions=args.dimensions,
        lower=args.lower,
        upper=args.upper,
        turtles=args.turtles,
        goal=args.goal,
        seed=args.seed,
        record_history=True if args.plot else None,
    )
    logger.info(f"Run configuration: {config}")

    optimizer = build_optimizer(config)
    try:
        optimizer.optimize()
    except KeyboardInterrupt:
        logger.warning(f"Interrupted after {optimizer.iterations} iterations")

    optimizer.report()

    if args.plot and not optimizer.history:
        logger.warning("No completed iterations to plot, skipping convergence plot")
    elif args.plot:
        plot_convergence(optimizer.history, path=args.plot)
        logger.info(f"Convergence plot saved to {args.plot}")


if __name__ == "__main__":
    main()
