from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from rsearch.foundation.exceptions import InvalidProblemError, ProblemDimensionError
from rsearch.foundation.registry import Registry

from .base import Problem
from .classic import AckleyProblem, RastriginProblem, RosenbrockProblem
from .sphere import SphereProblem

ProblemFactory = Callable[[int], Problem]


@dataclass(frozen=True)
class ProblemSpec:
    """Metadata and factory for a benchmark problem."""

    key: str
    label: str
    default_n_var: int
    factory: ProblemFactory
    min_n_var: int = 1
    description: str = ""

    def resolve_n_var(self, n_var: int | None) -> int:
        """Apply the default dimensionality and enforce the minimum."""
        actual = self.default_n_var if n_var is None else int(n_var)
        if actual < self.min_n_var:
            raise ProblemDimensionError(
                f"Problem '{self.label}' needs n_var >= {self.min_n_var}; got {actual}.",
                n_var=actual,
            )
        return actual


_PROBLEMS: Registry[ProblemSpec] | None = None


def _build_registry() -> Registry[ProblemSpec]:
    registry: Registry[ProblemSpec] = Registry("problems")
    for spec in (
        ProblemSpec(
            key="sphere",
            label="Sphere",
            default_n_var=2,
            factory=SphereProblem,
            description="Sum of squares in [-5, 5]^n; optimum 0 at the origin.",
        ),
        ProblemSpec(
            key="rastrigin",
            label="Rastrigin",
            default_n_var=2,
            factory=RastriginProblem,
            description="Multimodal cosine-modulated basin in [-5.12, 5.12]^n.",
        ),
        ProblemSpec(
            key="ackley",
            label="Ackley",
            default_n_var=2,
            factory=AckleyProblem,
            description="Flat outer plateau with a deep central hole in [-32.768, 32.768]^n.",
        ),
        ProblemSpec(
            key="rosenbrock",
            label="Rosenbrock",
            default_n_var=2,
            min_n_var=2,
            factory=RosenbrockProblem,
            description="Banana-shaped valley in [-2.048, 2.048]^n; optimum at (1, ..., 1).",
        ),
    ):
        registry.register(spec.key, spec)
    # The classic name of the squaring-sum objective.
    registry.register("basin", registry["sphere"])
    return registry


def get_problem_specs() -> Registry[ProblemSpec]:
    global _PROBLEMS
    if _PROBLEMS is None:
        _PROBLEMS = _build_registry()
    return _PROBLEMS


def available_problem_names() -> tuple[str, ...]:
    return tuple(get_problem_specs().list())


def make_problem(
    name: str,
    n_var: int | None = None,
    *,
    xl: float | None = None,
    xu: float | None = None,
) -> Problem:
    """Instantiate a registered problem, optionally overriding its bounds."""
    specs = get_problem_specs()
    key = (name or "").strip().lower()
    if key not in specs:
        raise InvalidProblemError(name, available=specs.list(), matches=specs.suggest(key))
    spec = specs[key]
    problem = spec.factory(spec.resolve_n_var(n_var))
    if xl is not None:
        problem.xl = float(xl)
    if xu is not None:
        problem.xu = float(xu)
    return problem


__all__ = ["ProblemSpec", "ProblemFactory", "available_problem_names", "get_problem_specs", "make_problem"]
