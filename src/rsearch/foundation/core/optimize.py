from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, Tuple

import numpy as np

from rsearch.engine.algorithm.config import RandomSearchConfig, RandomSearchConfigData
from rsearch.engine.algorithm.random_search import RandomSearch
from rsearch.foundation.problem.types import ProblemProtocol
from rsearch.foundation.solution import Candidate


class OptimizationResult:
    """Simple container returned by optimize()."""

    def __init__(self, payload: Mapping[str, Any]):
        self.X = payload.get("X")
        self.F = payload.get("F")
        self.data = dict(payload)

    @property
    def best(self) -> Candidate:
        return Candidate(np.asarray(self.X, dtype=float), float(self.F))

    @property
    def history(self) -> np.ndarray | None:
        return self.data.get("history")

    def summary(self) -> str:
        vec = np.array2string(np.asarray(self.X, dtype=float), precision=6, separator=", ")
        return f"Done. Best Solution: c={self.F}, v={vec}"

    def __repr__(self) -> str:
        return (
            f"OptimizationResult(F={self.F!r}, n_iter={self.data.get('n_iter')}, "
            f"stop_reason={self.data.get('stop_reason')!r})"
        )


@dataclass
class OptimizeConfig:
    """
    Canonical configuration for a single search run.
    """

    problem: ProblemProtocol
    algorithm_config: RandomSearchConfigData | Mapping[str, Any] | None = None
    termination: Tuple[str, Any] | None = None
    seed: int | None = 0
    observers: Sequence[Any] = field(default_factory=tuple)


def optimize(config: OptimizeConfig) -> OptimizationResult:
    """
    Run a single random search for the provided problem/config pair.
    """
    if not isinstance(config, OptimizeConfig):
        raise TypeError("optimize() expects an OptimizeConfig instance.")
    algo_cfg = config.algorithm_config
    if algo_cfg is None:
        algo_cfg = RandomSearchConfig.default()
    algorithm = RandomSearch(algo_cfg)
    result = algorithm.run(
        config.problem,
        termination=config.termination,
        seed=config.seed,
        observers=config.observers,
    )
    return OptimizationResult(result)


__all__ = ["OptimizeConfig", "optimize", "OptimizationResult"]
