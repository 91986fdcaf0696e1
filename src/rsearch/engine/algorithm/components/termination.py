from __future__ import annotations

import math
from typing import Any

from rsearch.foundation.exceptions import ConfigurationError, InvalidTerminationError


def parse_termination(
    termination: tuple[str, Any] | None,
    default_max_iterations: int,
) -> tuple[int, float | None]:
    """
    Parse termination criterion and return (max_iterations, target or None).

    Parameters
    ----------
    termination : tuple[str, Any] | None
        Termination criterion as (type, value). Supported types:
        - "n_iter" (alias "n_eval"): value is the iteration cap
        - "target": value is a dict with "value" and optionally "max_iterations",
          or a bare number (the configured iteration cap then applies)
        ``None`` uses ``default_max_iterations`` with no target.
    default_max_iterations : int
        Iteration cap from the algorithm configuration.

    Raises
    ------
    InvalidTerminationError
        If the criterion type is unsupported.
    ConfigurationError
        If the iteration cap is not positive or the target is NaN.
    """
    target: float | None = None
    if termination is None:
        max_iter = int(default_max_iterations)
    else:
        try:
            term_type, term_val = termination
        except (TypeError, ValueError) as exc:
            raise InvalidTerminationError(termination) from exc
        if term_type in ("n_iter", "n_eval"):
            max_iter = int(term_val)
        elif term_type == "target":
            if isinstance(term_val, dict):
                if "value" not in term_val:
                    raise ConfigurationError(
                        "Target termination requires a 'value' entry.",
                        suggestion="Use ('target', {'value': 1e-3, 'max_iterations': 1000})",
                    )
                target = float(term_val["value"])
                max_iter = int(term_val.get("max_iterations", default_max_iterations))
            else:
                target = float(term_val)
                max_iter = int(default_max_iterations)
        else:
            raise InvalidTerminationError(termination)

    if max_iter <= 0:
        raise ConfigurationError(f"Iteration cap must be positive; got {max_iter}.")
    if target is not None and math.isnan(target):
        raise ConfigurationError("Target score must be a number, not NaN.")
    return max_iter, target


class TargetTracker:
    """Reports when the best score reaches a target value."""

    def __init__(self, target: float | None):
        self.enabled = target is not None
        self.target = float(target) if target is not None else math.inf

    def reached(self, score: float) -> bool:
        if not self.enabled:
            return False
        return score <= self.target


__all__ = ["parse_termination", "TargetTracker"]
