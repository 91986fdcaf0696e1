"""
Observers that report search progress.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from rsearch.foundation.observer import RunContext
from rsearch.foundation.solution import Candidate


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class ProgressLogger:
    """Log ``> iteration=i, best=score`` every ``interval`` iterations."""

    def __init__(self, interval: int = 1, level: int = logging.INFO) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive.")
        self.interval = int(interval)
        self.level = level

    def on_start(self, ctx: RunContext) -> None:
        _logger().log(
            self.level,
            "Starting %s on %r (max_iterations=%d, seed=%s)",
            ctx.algorithm_name,
            ctx.problem,
            ctx.max_iterations,
            ctx.seed,
        )

    def on_iteration(self, iteration: int, best: Candidate, sample: Candidate) -> None:
        if iteration % self.interval == 0:
            _logger().log(self.level, " > iteration=%d, best=%g", iteration, best.score)

    def on_end(self, best: Candidate, stats: dict[str, Any] | None = None) -> None:
        stats = stats or {}
        _logger().log(
            self.level,
            "Finished after %s iterations (%s): best=%g",
            stats.get("n_iter", "?"),
            stats.get("stop_reason", "unknown"),
            best.score,
        )


class HistoryRecorder:
    """Collect the best-so-far score and every sampled score."""

    def __init__(self) -> None:
        self.best_scores: list[float] = []
        self.sample_scores: list[float] = []

    def on_start(self, ctx: RunContext) -> None:
        self.best_scores.clear()
        self.sample_scores.clear()

    def on_iteration(self, iteration: int, best: Candidate, sample: Candidate) -> None:
        self.best_scores.append(best.score)
        self.sample_scores.append(sample.score)

    def on_end(self, best: Candidate, stats: dict[str, Any] | None = None) -> None:
        return None

    def as_array(self) -> np.ndarray:
        return np.asarray(self.best_scores, dtype=float)


__all__ = ["ProgressLogger", "HistoryRecorder"]
