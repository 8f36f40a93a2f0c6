"""
Tests for scripts/optimize.py - the command-line entry point.
"""

import numpy as np
import pytest

from turtle_swarm.config import RunConfig
from turtle_swarm.optimization.optimizer import Optimizer
from turtle_swarm.scripts.optimize import build_optimizer, main, parse_args


class TestBuildOptimizer:

    def test_from_config(self):
        config = RunConfig(function="rastrigin", dimensions=3, turtles=12, goal=0.1, seed=5)
        opt = build_optimizer(config)

        assert len(opt.turtles) == 12
        assert opt.boundaries.shape == 3
        assert opt.boundaries.lower == -5.12
        assert opt.goal == 0.1
        assert opt.record_history is False

    def test_seed_reproducible(self):
        config = RunConfig(dimensions=2, turtles=4, seed=11)
        a, b = build_optimizer(config), build_optimizer(config)
        for ta, tb in zip(a.turtles, b.turtles):
            np.testing.assert_array_equal(ta.position, tb.position)


class TestParseArgs:

    def test_defaults_are_none(self):
        args = parse_args([])
        assert args.function is None
        assert args.turtles is None
        assert args.verbose is False

    def test_unknown_function_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["griewank"])


class TestMain:

    def test_run_and_report(self, capsys):
        main([
            "sphere", "--dimensions", "1", "--lower", "-1", "--upper", "1",
            "--turtles", "200", "--goal", "0.01", "--seed", "7",
        ])
        out = capsys.readouterr().out
        assert "200 turtles performed" in out

    def test_config_file_and_plot(self, tmp_path, capsys):
        pytest.importorskip("matplotlib")
        config_path = tmp_path / "run.yaml"
        config_path.write_text(
            "function: sphere\n"
            "dimensions: 1\n"
            "lower: -1.0\n"
            "upper: 1.0\n"
            "turtles: 200\n"
            "goal: 0.01\n"
            "seed: 3\n"
        )
        plot_path = tmp_path / "convergence.png"

        main(["--config", str(config_path), "--plot", str(plot_path)])

        assert "200 turtles performed" in capsys.readouterr().out
        assert plot_path.exists()

    def test_interrupt_before_first_iteration_skips_plot(self, tmp_path, capsys, monkeypatch):
        """Ctrl-C before any iteration still reports, and writes no plot."""
        def interrupted(self, should_stop=None):
            raise KeyboardInterrupt

        monkeypatch.setattr(Optimizer, "optimize", interrupted)
        plot_path = tmp_path / "convergence.png"

        main(["sphere", "--turtles", "5", "--seed", "1", "--plot", str(plot_path)])

        assert "5 turtles performed 0 optimizer iterations" in capsys.readouterr().out
        assert not plot_path.exists()
