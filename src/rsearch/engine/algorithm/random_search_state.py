"""Random search state container.

This module provides the state dataclass for the random search ask/tell interface.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from rsearch.engine.algorithm.components.termination import TargetTracker
from rsearch.foundation.solution import Candidate


@dataclass
class RandomSearchState:
    """State of a single random search run.

    Attributes
    ----------
    rng : np.random.Generator
        Random number generator seeded for the run.
    xl, xu : np.ndarray
        Per-dimension bounds.
    max_iterations : int
        Iteration cap; one iteration samples and scores one candidate.
    best : Candidate | None
        Retained best candidate; ``None`` until the first candidate is scored.
    iteration : int
        Number of candidates taken into account so far.
    n_eval : int
        Number of objective evaluations, including any evaluated but unused
        rows of the last batch.
    stop_reason : str | None
        ``"max_iterations"``, ``"optimal"`` or ``"target"`` once finished.
    """

    rng: np.random.Generator
    xl: np.ndarray
    xu: np.ndarray
    max_iterations: int
    batch_size: int = 1
    stop_at_optimum: bool = True
    target_tracker: TargetTracker = field(default_factory=lambda: TargetTracker(None))

    best: Candidate | None = None
    iteration: int = 0
    n_eval: int = 0
    stop_reason: str | None = None

    record_history: bool = True
    history: list[float] = field(default_factory=list)
    samples: list[float] = field(default_factory=list)

    @property
    def remaining(self) -> int:
        return max(0, self.max_iterations - self.iteration)

    @property
    def finished(self) -> bool:
        return self.stop_reason is not None


def build_random_search_result(state: RandomSearchState, optimal: bool = False) -> dict[str, Any]:
    """Build the result dictionary from state.

    Parameters
    ----------
    state : RandomSearchState
        Current search state.
    optimal : bool, optional
        Whether the retained best passes the problem's optimality check.

    Returns
    -------
    dict
        ``X`` (best vector), ``F`` (best score), ``n_iter``, ``n_eval``,
        ``optimal``, ``stop_reason`` and, when recorded, ``history`` and
        ``samples``.
    """
    if state.best is None:
        raise RuntimeError("No candidate has been evaluated yet.")
    result: dict[str, Any] = {
        "X": state.best.vector.copy(),
        "F": float(state.best.score),
        "n_iter": state.iteration,
        "n_eval": state.n_eval,
        "optimal": bool(optimal),
        "stop_reason": state.stop_reason,
    }
    if state.record_history:
        result["history"] = np.asarray(state.history, dtype=float)
        result["samples"] = np.asarray(state.samples, dtype=float)
    return result


__all__ = ["RandomSearchState", "build_random_search_result"]
