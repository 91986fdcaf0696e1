"""
Candidate solution container.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from rsearch.foundation.exceptions import UnsetScoreError


@dataclass
class Candidate:
    """A point in the search space together with its score.

    ``score`` stays NaN until the candidate has been evaluated. Any comparison
    that involves an unevaluated candidate raises :class:`UnsetScoreError`.
    """

    vector: np.ndarray
    score: float = field(default=math.nan)

    def __post_init__(self) -> None:
        self.vector = np.asarray(self.vector, dtype=float).reshape(-1)
        self.score = float(self.score)

    @property
    def is_evaluated(self) -> bool:
        return not math.isnan(self.score)

    def require_score(self) -> float:
        if not self.is_evaluated:
            raise UnsetScoreError(self.vector.tolist())
        return self.score

    def copy(self) -> "Candidate":
        return Candidate(self.vector.copy(), self.score)

    def __repr__(self) -> str:
        vec = np.array2string(self.vector, precision=6, separator=", ")
        return f"Candidate(score={self.score!r}, vector={vec})"


__all__ = ["Candidate"]
