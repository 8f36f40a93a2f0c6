"""
Tests for observations/ - text report and convergence plot.
"""

import numpy as np
import pytest

from turtle_swarm.core.boundary import CubicBoundary
from turtle_swarm.core.turtle import Turtle
from turtle_swarm.optimization.functions import sphere
from turtle_swarm.optimization.optimizer import Optimizer
from turtle_swarm.observations.report import format_report
from turtle_swarm.observations.visualize import plot_convergence


@pytest.fixture
def finished():
    boundary = CubicBoundary(2, -1.0, 1.0)
    opt = Optimizer(3, boundary, sphere, 0.5, rng=0)
    opt.turtles = [
        Turtle(boundary, position=[0.5, 0.5]),
        Turtle(boundary, position=[0.1, -0.2]),
        Turtle(boundary, position=[-0.9, 0.9]),
    ]
    opt.record_history = True
    opt.optimize()
    return opt


class TestFormatReport:

    def test_header(self, finished):
        text = format_report(finished)
        assert text.startswith("3 turtles performed 1 optimizer iterations for you.")

    def test_best_score_listed(self, finished):
        text = format_report(finished)
        assert "The best score: 0.05 was observed at position:" in text

    def test_one_line_per_turtle(self, finished):
        lines = format_report(finished).splitlines()
        turtle_lines = [line for line in lines if line.startswith("\tTurtle #")]
        assert len(turtle_lines) == 3
        assert "Turtle #2's best score 1.62" in turtle_lines[2]

    def test_report_is_read_only(self, finished):
        before = finished.get_statistics()
        format_report(finished)
        assert finished.get_statistics() == before


class TestPlotConvergence:

    def test_empty_history_raises(self):
        with pytest.raises(ValueError):
            plot_convergence([])

    def test_saves_figure(self, finished, tmp_path):
        pytest.importorskip("matplotlib")
        path = tmp_path / "convergence.png"

        plot_convergence(finished.history, path=path)

        assert path.exists()
        assert path.stat().st_size > 0

    def test_zero_scores_stay_linear(self, tmp_path):
        pytest.importorskip("matplotlib")
        history = [
            {'iteration': 1, 'best_score': 1.0, 'mean_score': 2.0},
            {'iteration': 2, 'best_score': 0.0, 'mean_score': 1.5},
        ]
        path = tmp_path / "zero.png"
        plot_convergence(history, path=path)
        assert path.exists()

    def test_save_leaves_backend_alone(self, finished, tmp_path):
        """Saving to a file does not switch the process-wide backend."""
        matplotlib = pytest.importorskip("matplotlib")
        before = matplotlib.get_backend()

        plot_convergence(finished.history, path=tmp_path / "convergence.png")

        assert matplotlib.get_backend() == before

    def test_save_leaves_no_pyplot_figures(self, finished, tmp_path):
        pytest.importorskip("matplotlib")
        import matplotlib.pyplot as plt
        open_before = plt.get_fignums()

        plot_convergence(finished.history, path=tmp_path / "convergence.png")

        assert plt.get_fignums() == open_before
