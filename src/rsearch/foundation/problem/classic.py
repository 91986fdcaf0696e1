"""
Classic continuous test functions for single-objective minimisation.

All functions have a known optimum of 0, so ``is_optimal`` works out of the box.
"""

from __future__ import annotations

import numpy as np

from rsearch.foundation.exceptions import ProblemDimensionError
from rsearch.foundation.problem.base import Problem


class RastriginProblem(Problem):
    """Highly multimodal; global optimum 0 at the origin."""

    name = "Rastrigin"
    optimum = 0.0

    def __init__(self, n_var: int = 2, xl: float = -5.12, xu: float = 5.12, a: float = 10.0) -> None:
        self.n_var = n_var
        self.xl = xl
        self.xu = xu
        self.a = float(a)

    def objective(self, X: np.ndarray) -> np.ndarray:
        return self.a * X.shape[1] + np.sum(X**2 - self.a * np.cos(2.0 * np.pi * X), axis=1)


class AckleyProblem(Problem):
    """Nearly flat outer region with a deep hole at the origin."""

    name = "Ackley"
    optimum = 0.0

    def __init__(self, n_var: int = 2, xl: float = -32.768, xu: float = 32.768) -> None:
        self.n_var = n_var
        self.xl = xl
        self.xu = xu

    def objective(self, X: np.ndarray) -> np.ndarray:
        n = X.shape[1]
        term1 = -20.0 * np.exp(-0.2 * np.sqrt(np.sum(X**2, axis=1) / n))
        term2 = -np.exp(np.sum(np.cos(2.0 * np.pi * X), axis=1) / n)
        # Clip tiny negative round-off around the optimum.
        return np.maximum(term1 + term2 + 20.0 + np.e, 0.0)


class RosenbrockProblem(Problem):
    """Curved valley; global optimum 0 at (1, ..., 1). Requires n_var >= 2."""

    name = "Rosenbrock"
    optimum = 0.0

    def __init__(self, n_var: int = 2, xl: float = -2.048, xu: float = 2.048) -> None:
        if n_var < 2:
            raise ProblemDimensionError(f"Rosenbrock needs at least 2 variables; got n_var={n_var}.", n_var=n_var)
        self.n_var = n_var
        self.xl = xl
        self.xu = xu

    def objective(self, X: np.ndarray) -> np.ndarray:
        head = X[:, :-1]
        tail = X[:, 1:]
        return np.sum(100.0 * (tail - head**2) ** 2 + (1.0 - head) ** 2, axis=1)


__all__ = ["RastriginProblem", "AckleyProblem", "RosenbrockProblem"]
