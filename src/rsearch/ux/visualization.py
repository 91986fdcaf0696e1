from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np


def _require_matplotlib() -> Any:
    try:
        import matplotlib.pyplot as plt

        return plt
    except ImportError as exc:
        raise ImportError(
            "Visualization requires matplotlib. Install with `pip install rsearch[plot]` or `pip install matplotlib`."
        ) from exc


def _get_ax(ax: Any | None) -> Any:
    plt = _require_matplotlib()
    if ax is not None:
        return ax
    fig = plt.figure()
    return fig.add_subplot(111)


def plot_convergence(
    history: np.ndarray,
    ax: Any | None = None,
    label: str | None = None,
    title: str | None = "Random search convergence",
    log_scale: bool = False,
    show: bool = False,
) -> Any:
    """Plot the best-so-far score against the iteration number."""
    plt = _require_matplotlib()
    history = np.asarray(history, dtype=float).reshape(-1)
    if history.size == 0:
        raise ValueError("history is empty; run with record_history enabled.")
    ax = _get_ax(ax)
    iterations = np.arange(1, history.size + 1)
    ax.step(iterations, history, where="post", label=label)
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Best score")
    if log_scale and np.all(history > 0):
        ax.set_yscale("log")
    if title:
        ax.set_title(title)
    if label:
        ax.legend()
    if show:
        plt.show()
    return ax


def save_convergence_plot(history: np.ndarray, path: str | Path, **kwargs: Any) -> Path:
    """Render :func:`plot_convergence` to ``path`` and close the figure."""
    plt = _require_matplotlib()
    ax = plot_convergence(history, **kwargs)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    ax.figure.savefig(out, dpi=150, bbox_inches="tight")
    plt.close(ax.figure)
    return out


__all__ = ["plot_convergence", "save_convergence_plot"]
