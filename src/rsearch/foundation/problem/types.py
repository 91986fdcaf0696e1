from __future__ import annotations

from typing import Protocol

import numpy as np

from rsearch.foundation.solution import Candidate


class ProblemProtocol(Protocol):
    n_var: int
    xl: float | np.ndarray
    xu: float | np.ndarray
    optimum: float | None
    tolerance: float

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None: ...

    def is_better(self, candidate: Candidate, other: Candidate) -> bool: ...

    def is_optimal(self, candidate: Candidate) -> bool: ...


__all__ = ["ProblemProtocol"]
