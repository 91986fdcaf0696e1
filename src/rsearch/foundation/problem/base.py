"""
Base class for bounded single-objective minimisation problems.
"""

from __future__ import annotations

import math

import numpy as np

from rsearch.foundation.exceptions import BoundsError, ProblemDimensionError
from rsearch.foundation.solution import Candidate


class Problem:
    """Base class for class-based minimisation problems.

    **Required:** set ``n_var``, ``xl``, ``xu`` in ``__init__`` and override
    :meth:`objective`.
    **Optional:** set ``optimum`` (the known best score) so the search can stop
    once a candidate is within ``tolerance`` of it.

    Example::

        import numpy as np
        from rsearch import Problem, RandomSearchConfig, OptimizeConfig, optimize

        class Shifted(Problem):
            optimum = 0.0

            def __init__(self):
                self.n_var = 3
                self.xl = -5.0
                self.xu = 5.0

            def objective(self, X: np.ndarray) -> np.ndarray:
                # X: (N, n_var) batch of candidate solutions
                return np.sum((X - 1.0) ** 2, axis=1)

        cfg = OptimizeConfig(
            problem=Shifted(),
            algorithm_config=RandomSearchConfig.default(),
            termination=("n_iter", 1000),
            seed=1,
        )
        result = optimize(cfg)
    """

    # ------------------------------------------------------------------
    # Class-level defaults, override at class body level
    # ------------------------------------------------------------------

    optimum: float | None = None
    """Known optimal score, or ``None`` when unknown."""

    tolerance: float = 1e-6
    """Absolute distance to ``optimum`` accepted as optimal."""

    name: str = ""

    # ------------------------------------------------------------------
    # User-overridable interface
    # ------------------------------------------------------------------

    def objective(self, X: np.ndarray) -> np.ndarray:
        """Compute scores for a batch of solutions.

        Args:
            X: Decision matrix of shape ``(N, n_var)`` where each row is a
               candidate solution.

        Returns:
            Array of length ``N`` with scores to **minimise**.
        """
        raise NotImplementedError(f"{type(self).__name__} must implement objective(self, X).")

    # ------------------------------------------------------------------
    # Framework entry points, do not override
    # ------------------------------------------------------------------

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None:
        """Write the scores of ``X`` into ``out["F"]`` as an ``(N, 1)`` column."""
        X = np.asarray(X, dtype=float)
        F_computed = np.asarray(self.objective(X), dtype=float).reshape(-1, 1)
        F_buf = out.get("F")
        if F_buf is not None and F_buf.shape == F_computed.shape:
            F_buf[:] = F_computed
        else:
            out["F"] = F_computed

    def evaluate_candidate(self, candidate: Candidate) -> float:
        """Score a single candidate in place and return the score."""
        out: dict[str, np.ndarray] = {}
        self.evaluate(candidate.vector.reshape(1, -1), out)
        candidate.score = float(out["F"][0, 0])
        return candidate.score

    def is_better(self, candidate: Candidate, other: Candidate) -> bool:
        """Return True when ``candidate`` strictly improves on ``other``."""
        return candidate.require_score() < other.require_score()

    def is_optimal(self, candidate: Candidate) -> bool:
        if self.optimum is None:
            return False
        return math.fabs(candidate.require_score() - self.optimum) <= self.tolerance

    def __repr__(self) -> str:
        label = self.name or type(self).__name__
        return f"{label}(n_var={getattr(self, 'n_var', '?')})"


def resolve_bounds(problem) -> tuple[np.ndarray, np.ndarray]:
    """Broadcast ``problem.xl``/``problem.xu`` to per-dimension arrays and validate them."""
    n_var = getattr(problem, "n_var", None)
    if not isinstance(n_var, (int, np.integer)) or n_var <= 0:
        raise ProblemDimensionError(f"Invalid problem dimensionality: {n_var!r}.", n_var=n_var)
    xl = np.asarray(problem.xl, dtype=float)
    xu = np.asarray(problem.xu, dtype=float)
    if xl.ndim == 0:
        xl = np.full(n_var, xl, dtype=float)
    if xu.ndim == 0:
        xu = np.full(n_var, xu, dtype=float)
    if xl.shape != (n_var,) or xu.shape != (n_var,):
        raise BoundsError(
            f"Bounds must be scalars or length-{n_var} vectors; got xl{xl.shape} and xu{xu.shape}."
        )
    if not (np.all(np.isfinite(xl)) and np.all(np.isfinite(xu))):
        raise BoundsError("Bounds must be finite.")
    if np.any(xl > xu):
        bad = np.flatnonzero(xl > xu).tolist()
        raise BoundsError(f"Lower bound exceeds upper bound for variables {bad}.")
    return np.ascontiguousarray(xl), np.ascontiguousarray(xu)


__all__ = ["Problem", "resolve_bounds"]
