from .engine.algorithm import RandomSearch, RandomSearchConfig, RandomSearchConfigData
from .foundation.core.optimize import OptimizationResult, OptimizeConfig, optimize
from .foundation.exceptions import (
    BoundsError,
    ConfigurationError,
    EvaluationError,
    InvalidProblemError,
    RSearchError,
    UnsetScoreError,
)
from .foundation.logging import configure_rsearch_logging
from .foundation.observer import Observer, RunContext
from .foundation.problem import (
    AckleyProblem,
    Problem,
    RastriginProblem,
    RosenbrockProblem,
    SphereProblem,
    available_problem_names,
    make_problem,
)
from .foundation.solution import Candidate
from .hooks import HistoryRecorder, ProgressLogger


def __getattr__(name: str):
    if name == "__version__":
        from .foundation.version import get_version

        return get_version()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "optimize",
    "OptimizeConfig",
    "OptimizationResult",
    "RandomSearch",
    "RandomSearchConfig",
    "RandomSearchConfigData",
    "Problem",
    "SphereProblem",
    "RastriginProblem",
    "AckleyProblem",
    "RosenbrockProblem",
    "available_problem_names",
    "make_problem",
    "Candidate",
    "Observer",
    "RunContext",
    "ProgressLogger",
    "HistoryRecorder",
    "configure_rsearch_logging",
    "RSearchError",
    "ConfigurationError",
    "BoundsError",
    "EvaluationError",
    "InvalidProblemError",
    "UnsetScoreError",
]
