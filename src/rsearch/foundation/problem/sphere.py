# problem/sphere.py
import numpy as np
from rsearch.foundation.problem.base import Problem


class SphereProblem(Problem):
    """Sum of squares ("basin" function): f(x) = sum(x_i^2), optimum 0 at the origin."""

    name = "Sphere"
    optimum = 0.0

    def __init__(self, n_var: int = 2, xl: float = -5.0, xu: float = 5.0) -> None:
        self.n_var = n_var
        # Bounds (identical for all decision variables in this problem)
        self.xl = xl
        self.xu = xu

    def objective(self, X: np.ndarray) -> np.ndarray:
        return np.sum(X**2, axis=1)
