"""
turtle_swarm/config.py

Run configuration for command-line optimization.

Values come from a YAML file, then command-line overrides on top.
Bounds default to the benchmark function's conventional bounds.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Tuple, Union

import yaml

from turtle_swarm.optimization.functions import get_function


@dataclass(frozen=True)
class RunConfig:
    """Everything needed to build and run one optimizer."""
    function: str = "sphere"
    dimensions: int = 2
    lower: Optional[float] = None       # None = function's default
    upper: Optional[float] = None       # None = function's default
    turtles: int = 33
    goal: float = 1e-2
    seed: Optional[int] = None
    record_history: bool = False

    def resolve_bounds(self) -> Tuple[float, float]:
        """Return (lower, upper), filling gaps from the benchmark's bounds."""
        default_lower, default_upper = get_function(self.function).bounds
        lower = default_lower if self.lower is None else self.lower
        upper = default_upper if self.upper is None else self.upper
        return float(lower), float(upper)

    def with_overrides(self, **overrides) -> RunConfig:
        """Apply overrides, ignoring those left as None."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(config_path: Union[str, Path]) -> RunConfig:
    """Load a RunConfig from a YAML mapping."""
    with open(config_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return RunConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config {config_path} must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {config_path}: {unknown}")

    config = RunConfig(**data)
    get_function(config.function)
    return config
