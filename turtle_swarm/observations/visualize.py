"""
observations/visualize.py

Watch the best score fall. Slowly.

You cannot understand what you do not watch.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


def plot_convergence(
    history: List[Dict[str, Any]],
    path: Optional[Union[str, Path]] = None,
    figsize: tuple = (8, 5),
    log_scale: bool = True,
):
    """
    Plot best and mean score per iteration from an optimizer history.

    With a path, the figure is drawn off-screen and saved without touching
    pyplot or the process-wide backend. Without one, a pyplot figure is
    returned for interactive use.
    """
    if not history:
        raise ValueError("history is empty; set record_history before optimizing")

    iterations = [h['iteration'] for h in history]
    best = [h['best_score'] for h in history]
    mean = [h['mean_score'] for h in history]

    # Lazy import matplotlib
    if path is not None:
        from matplotlib.backends.backend_agg import FigureCanvasAgg
        from matplotlib.figure import Figure
        fig = Figure(figsize=figsize)
        FigureCanvasAgg(fig)
        ax = fig.subplots()
    else:
        import matplotlib.pyplot as plt
        fig, ax = plt.subplots(figsize=figsize)

    ax.plot(iterations, best, color='#2a9d8f', linewidth=2, label='global best')
    ax.plot(iterations, mean, color='#e9c46a', alpha=0.7, label='swarm mean')
    # Log scale needs strictly positive values
    if log_scale and min(min(best), min(mean)) > 0:
        ax.set_yscale('log')
    ax.set_xlabel('iteration')
    ax.set_ylabel('score')
    ax.set_title('Turtle swarm convergence')
    ax.legend()
    fig.tight_layout()

    if path is not None:
        fig.savefig(path)
        return None
    return fig
