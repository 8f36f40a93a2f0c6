"""
Observation tools: text reports and convergence plots.
"""

from .report import format_report
from .visualize import plot_convergence

__all__ = ["format_report", "plot_convergence"]
