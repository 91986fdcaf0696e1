from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from rsearch.foundation.solution import Candidate


@dataclass
class RunContext:
    """
    Encapsulates the static context of a search run.
    Passed to on_start events.
    """

    problem: Any  # Problem instance
    config: Any  # RandomSearchConfigData
    max_iterations: int = 0
    seed: int | None = None
    algorithm_name: str = "random_search"


@runtime_checkable
class Observer(Protocol):
    """
    Observer interface for search lifecycle events.
    """

    def on_start(self, ctx: RunContext) -> None:
        """Called once at the beginning of the run."""
        ...

    def on_iteration(self, iteration: int, best: Candidate, sample: Candidate) -> None:
        """Called after every iteration with the retained best and the latest sample."""
        ...

    def on_end(self, best: Candidate, stats: dict[str, Any] | None = None) -> None:
        """Called once at the end of the run."""
        ...


class ObserverList:
    """Fan a lifecycle event out to several observers."""

    def __init__(self, observers=None) -> None:
        self._observers: list[Observer] = list(observers or [])

    def __len__(self) -> int:
        return len(self._observers)

    def on_start(self, ctx: RunContext) -> None:
        for obs in self._observers:
            obs.on_start(ctx)

    def on_iteration(self, iteration: int, best: Candidate, sample: Candidate) -> None:
        for obs in self._observers:
            obs.on_iteration(iteration, best, sample)

    def on_end(self, best: Candidate, stats: dict[str, Any] | None = None) -> None:
        for obs in self._observers:
            obs.on_end(best, stats)


__all__ = ["RunContext", "Observer", "ObserverList"]
