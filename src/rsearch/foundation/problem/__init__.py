from .base import Problem, resolve_bounds
from .classic import AckleyProblem, RastriginProblem, RosenbrockProblem
from .registry import ProblemSpec, available_problem_names, make_problem
from .sphere import SphereProblem
from .types import ProblemProtocol

__all__ = [
    "Problem",
    "ProblemProtocol",
    "ProblemSpec",
    "SphereProblem",
    "RastriginProblem",
    "AckleyProblem",
    "RosenbrockProblem",
    "available_problem_names",
    "make_problem",
    "resolve_bounds",
]
