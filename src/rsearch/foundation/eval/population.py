from __future__ import annotations

import logging

import numpy as np

from rsearch.foundation.exceptions import EvaluationError

_logger = logging.getLogger(__name__)


def evaluate_population(problem, X: np.ndarray) -> np.ndarray:
    """
    Evaluate a batch of candidates and return a flat score vector of length N.
    """
    X = np.atleast_2d(np.asarray(X, dtype=float))
    out = {"F": np.empty((X.shape[0], 1))}
    try:
        problem.evaluate(X, out)
    except EvaluationError:
        raise
    except Exception as exc:
        raise EvaluationError(f"Objective evaluation raised {type(exc).__name__}: {exc}", solution=X) from exc

    F = np.asarray(out["F"], dtype=float)
    if F.size != X.shape[0]:
        raise EvaluationError(
            f"Objective returned {F.size} values for {X.shape[0]} candidates.",
            solution=X,
        )
    scores = F.reshape(-1)
    bad = np.flatnonzero(~np.isfinite(scores))
    if bad.size:
        _logger.debug("Non-finite scores at rows %s", bad.tolist())
        raise EvaluationError(
            f"Objective returned a non-finite score ({scores[bad[0]]}); scores must be finite.",
            solution=X[bad[0]],
        )
    return scores


__all__ = ["evaluate_population"]
