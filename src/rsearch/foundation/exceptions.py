"""
rsearch exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All rsearch-specific exceptions inherit from RSearchError for easy catching.

Example:
    try:
        result = optimize(config)
    except RSearchError as e:
        print(f"Search failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class RSearchError(Exception):
    """
    Base exception for all rsearch errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(RSearchError):
    """Raised when configuration is invalid or incomplete."""

    pass


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" or use {config_class}.default() for sensible defaults"
        super().__init__(message, suggestion, {"field": field})


class InvalidTerminationError(ConfigurationError):
    """Raised when a termination criterion cannot be parsed."""

    def __init__(self, criterion: Any, available: list[str] | None = None) -> None:
        available = available or ["n_iter", "target"]
        message = f"Unsupported termination criterion {criterion!r}."
        suggestion = f"Use one of: {', '.join(available)}, e.g. ('n_iter', 100)"
        super().__init__(message, suggestion, {"criterion": criterion, "available": available})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(RSearchError):
    """Base class for problem-related errors."""

    pass


class InvalidProblemError(ProblemError):
    """Raised when an unknown problem is specified."""

    def __init__(self, problem: str, available: list[str] | None = None, matches: list[str] | None = None) -> None:
        message = f"Unknown problem '{problem}'."
        if matches:
            suggestion = "Did you mean: " + ", ".join(f"'{m}'" for m in matches) + "?"
        elif available:
            suggestion = f"Available problems: {', '.join(available)}."
        else:
            suggestion = "Use available_problem_names() to see registered problems."
        super().__init__(message, suggestion, {"problem": problem})


class ProblemDimensionError(ProblemError):
    """Raised when problem dimensions are invalid."""

    def __init__(self, message: str, n_var: int | None = None) -> None:
        suggestion = "n_var must be a positive integer"
        super().__init__(message, suggestion, {"n_var": n_var})


class BoundsError(ProblemError):
    """Raised when bounds are invalid or inconsistent."""

    def __init__(self, message: str) -> None:
        suggestion = "Ensure xl <= xu for all variables and bounds have correct shape"
        super().__init__(message, suggestion)


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(RSearchError):
    """Raised when a search fails during execution."""

    pass


class EvaluationError(OptimizationError):
    """Raised when objective evaluation fails."""

    def __init__(self, message: str, solution: Any = None) -> None:
        suggestion = "Check your problem's objective() function for errors"
        super().__init__(message, suggestion, {"solution": solution})


class UnsetScoreError(OptimizationError):
    """Raised when a candidate without a score takes part in a comparison."""

    def __init__(self, vector: Any = None) -> None:
        message = "Candidate has no score; comparison is undefined."
        suggestion = "Evaluate the candidate with problem.evaluate_candidate() before comparing it"
        super().__init__(message, suggestion, {"vector": vector})


__all__ = [
    "RSearchError",
    "ConfigurationError",
    "MissingConfigError",
    "InvalidTerminationError",
    "ProblemError",
    "InvalidProblemError",
    "ProblemDimensionError",
    "BoundsError",
    "OptimizationError",
    "EvaluationError",
    "UnsetScoreError",
]
