"""Random Search: uniform sampling of a bounded box, retaining the best candidate.

Each iteration draws one candidate uniformly at random from the search space,
scores it, and keeps it if it strictly improves on the best seen so far. The
loop stops at the iteration cap, when the problem's optimality check accepts
the retained best, or when an optional target score is reached.

Key Features:
    - Reproducible sampling through a per-run ``numpy.random.Generator``
    - Vectorised evaluation of ``batch_size`` candidates per call
    - Optimality and target-based early stopping
    - Ask/tell interface for externally evaluated objectives
    - Observer callbacks for progress reporting

References:
    J. Brownlee, "Clever Algorithms: Nature-Inspired Programming Recipes",
    2011, section 2.2 (Random Search).

Example:
    >>> from rsearch import RandomSearch, RandomSearchConfig, SphereProblem
    >>> algo = RandomSearch(RandomSearchConfig.default(max_iterations=200))
    >>> result = algo.run(SphereProblem(n_var=2), ("n_iter", 200), seed=1)
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Iterable, Mapping

import numpy as np

from rsearch.engine.algorithm.components.population import sample_uniform
from rsearch.engine.algorithm.components.termination import TargetTracker, parse_termination
from rsearch.engine.algorithm.config import RandomSearchConfigData
from rsearch.engine.algorithm.random_search_state import RandomSearchState, build_random_search_result
from rsearch.foundation.eval.population import evaluate_population
from rsearch.foundation.exceptions import EvaluationError
from rsearch.foundation.observer import ObserverList, RunContext
from rsearch.foundation.problem.base import resolve_bounds
from rsearch.foundation.solution import Candidate
from rsearch.hooks.progress import ProgressLogger

if TYPE_CHECKING:
    from rsearch.foundation.observer import Observer
    from rsearch.foundation.problem.types import ProblemProtocol

_logger = logging.getLogger(__name__)


class RandomSearch:
    """Random search over a bounded continuous search space.

    Parameters
    ----------
    config : RandomSearchConfigData or mapping
        Algorithm configuration with keys:
        - max_iterations (int): Default iteration cap
        - batch_size (int): Candidates sampled per evaluation call
        - stop_at_optimum (bool): Stop once ``problem.is_optimal(best)``
        - target (float, optional): Stop once best score <= target
        - record_history (bool): Keep best-so-far and sampled scores
        - log_interval (int): Log progress every N iterations (0 = off)

    Examples
    --------
    Basic usage:

    >>> config = RandomSearchConfig().max_iterations(1000).batch_size(100).fixed()
    >>> result = RandomSearch(config).run(problem, ("n_iter", 1000), seed=42)

    Ask/tell interface:

    >>> rs = RandomSearch(config)
    >>> rs.initialize(problem, ("n_iter", 1000), seed=42)
    >>> while not rs.should_terminate():
    ...     X = rs.ask()
    ...     F = evaluate(X)
    ...     rs.tell(X, F)
    >>> result = rs.result()
    """

    def __init__(self, config: RandomSearchConfigData | Mapping[str, Any]):
        if not isinstance(config, RandomSearchConfigData):
            config = RandomSearchConfigData.from_dict(config)
        self.cfg = config
        self._st: RandomSearchState | None = None
        self._problem: ProblemProtocol | None = None
        self._observers = ObserverList()
        self._ended = False

    # -------------------------------------------------------------------------
    # Main run method (batch mode)
    # -------------------------------------------------------------------------

    def run(
        self,
        problem: "ProblemProtocol",
        termination: tuple[str, Any] | None = None,
        seed: int | None = 0,
        observers: Iterable["Observer"] | None = None,
    ) -> dict[str, Any]:
        """Run the search loop to completion.

        Parameters
        ----------
        problem : ProblemProtocol
            Problem to minimise.
        termination : tuple, optional
            ``("n_iter", N)`` or ``("target", {"value": v, "max_iterations": N})``.
            Defaults to the configured ``max_iterations``.
        seed : int, optional
            Random seed for reproducibility.
        observers : iterable of Observer, optional
            Lifecycle callbacks.

        Returns
        -------
        dict
            Result dictionary, see :func:`build_random_search_result`.
        """
        self.initialize(problem, termination, seed, observers)
        st = self._st
        if st is None:
            raise RuntimeError("State not initialized")

        while not st.finished:
            X = self.ask()
            F = evaluate_population(problem, X)
            self.tell(X, F)

        return self.result()

    # -------------------------------------------------------------------------
    # Ask/tell interface
    # -------------------------------------------------------------------------

    def initialize(
        self,
        problem: "ProblemProtocol",
        termination: tuple[str, Any] | None = None,
        seed: int | None = 0,
        observers: Iterable["Observer"] | None = None,
    ) -> None:
        """Prepare a fresh run; must be called before :meth:`ask`."""
        max_iter, term_target = parse_termination(termination, self.cfg.max_iterations)
        target = term_target if term_target is not None else self.cfg.target
        xl, xu = resolve_bounds(problem)

        self._problem = problem
        self._st = RandomSearchState(
            rng=np.random.default_rng(seed),
            xl=xl,
            xu=xu,
            max_iterations=max_iter,
            batch_size=self.cfg.batch_size,
            stop_at_optimum=self.cfg.stop_at_optimum,
            target_tracker=TargetTracker(target),
            record_history=self.cfg.record_history,
        )

        obs = list(observers or [])
        if self.cfg.log_interval > 0:
            obs.append(ProgressLogger(interval=self.cfg.log_interval))
        self._observers = ObserverList(obs)
        self._ended = False

        _logger.debug(
            "Random search initialised: n_var=%d, max_iterations=%d, batch_size=%d, target=%s",
            xl.shape[0],
            max_iter,
            self.cfg.batch_size,
            target,
        )
        self._observers.on_start(
            RunContext(problem=problem, config=self.cfg, max_iterations=max_iter, seed=seed)
        )

    def ask(self) -> np.ndarray:
        """Sample the next batch of candidates, shape ``(k, n_var)``."""
        st = self._require_state()
        if st.finished:
            raise RuntimeError(f"Search already finished ({st.stop_reason}); call result().")
        n = min(st.batch_size, st.remaining)
        return sample_uniform(n, st.xl, st.xu, st.rng)

    def tell(self, X: np.ndarray, F: np.ndarray) -> None:
        """Take scored candidates into account, one iteration per row.

        Rows left over after the search stops are counted as evaluations but
        not as iterations.
        """
        st = self._require_state()
        problem = self._problem
        X = np.atleast_2d(np.asarray(X, dtype=float))
        F = np.asarray(F, dtype=float).reshape(-1)
        if X.shape[0] != F.shape[0]:
            raise ValueError(f"tell() got {X.shape[0]} candidates but {F.shape[0]} scores.")

        st.n_eval += F.shape[0]
        for x, f in zip(X, F):
            if st.finished:
                break
            if not math.isfinite(f):
                raise EvaluationError(f"Candidate scored {f}; scores must be finite.", solution=x)
            sample = Candidate(x.copy(), f)
            st.iteration += 1
            if st.best is None or problem.is_better(sample, st.best):
                st.best = sample
            if st.record_history:
                st.history.append(st.best.score)
                st.samples.append(sample.score)
            self._observers.on_iteration(st.iteration, st.best, sample)
            self._update_stop_reason(st)

    def should_terminate(self) -> bool:
        return self._require_state().finished

    def result(self) -> dict[str, Any]:
        st = self._require_state()
        if st.best is None:
            raise RuntimeError("No candidate has been evaluated yet; call tell() first.")
        result = build_random_search_result(st, optimal=self._problem.is_optimal(st.best))
        if not self._ended:
            self._ended = True
            self._observers.on_end(st.best, result)
        return result

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _require_state(self) -> RandomSearchState:
        if self._st is None:
            raise RuntimeError("RandomSearch.initialize() must be called first.")
        return self._st

    def _update_stop_reason(self, st: RandomSearchState) -> None:
        if st.stop_at_optimum and self._problem.is_optimal(st.best):
            st.stop_reason = "optimal"
        elif st.target_tracker.reached(st.best.score):
            st.stop_reason = "target"
        elif st.iteration >= st.max_iterations:
            st.stop_reason = "max_iterations"
        if st.stop_reason is not None:
            _logger.debug("Stopping at iteration %d: %s", st.iteration, st.stop_reason)


__all__ = ["RandomSearch"]
