"""Random search configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from rsearch.foundation.exceptions import ConfigurationError

from .base import _SerializableConfig, _require_fields


@dataclass(frozen=True)
class RandomSearchConfigData(_SerializableConfig):
    max_iterations: int
    batch_size: int = 1
    stop_at_optimum: bool = True
    target: Optional[float] = None
    record_history: bool = True
    log_interval: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RandomSearchConfigData":
        builder = RandomSearchConfig()
        for key, value in data.items():
            setter = getattr(builder, key, None)
            if key.startswith("_") or key in {"default", "fixed"} or not callable(setter):
                raise ConfigurationError(
                    f"Unknown random search option '{key}'.",
                    suggestion="Valid options: " + ", ".join(sorted(cls.__dataclass_fields__)),
                )
            setter(value)
        return builder.fixed()


class RandomSearchConfig:
    """
    Declarative configuration holder for random search settings.

    Examples:
        cfg = RandomSearchConfig.default()
        cfg = RandomSearchConfig().max_iterations(500).batch_size(50).fixed()
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(cls, max_iterations: int = 100) -> RandomSearchConfigData:
        """Create a default random search configuration."""
        return cls().max_iterations(max_iterations).fixed()

    def max_iterations(self, value: int) -> "RandomSearchConfig":
        self._cfg["max_iterations"] = int(value)
        return self

    def batch_size(self, value: int) -> "RandomSearchConfig":
        """Number of candidates sampled and evaluated per vectorised call."""
        self._cfg["batch_size"] = int(value)
        return self

    def stop_at_optimum(self, enabled: bool = True) -> "RandomSearchConfig":
        self._cfg["stop_at_optimum"] = bool(enabled)
        return self

    def target(self, value: float | None) -> "RandomSearchConfig":
        """Stop as soon as the best score is <= ``value``."""
        self._cfg["target"] = None if value is None else float(value)
        return self

    def record_history(self, enabled: bool = True) -> "RandomSearchConfig":
        self._cfg["record_history"] = bool(enabled)
        return self

    def log_interval(self, value: int) -> "RandomSearchConfig":
        """Log progress every ``value`` iterations; 0 disables progress logging."""
        self._cfg["log_interval"] = int(value)
        return self

    def fixed(self) -> RandomSearchConfigData:
        _require_fields(self._cfg, ("max_iterations",), "RandomSearchConfig")
        if self._cfg["max_iterations"] <= 0:
            raise ConfigurationError(
                f"max_iterations must be positive; got {self._cfg['max_iterations']}.",
                suggestion="Use at least one iteration, e.g. RandomSearchConfig().max_iterations(100)",
            )
        if self._cfg.get("batch_size", 1) <= 0:
            raise ConfigurationError(f"batch_size must be positive; got {self._cfg['batch_size']}.")
        if self._cfg.get("log_interval", 0) < 0:
            raise ConfigurationError(f"log_interval must be non-negative; got {self._cfg['log_interval']}.")
        target = self._cfg.get("target")
        if target is not None and math.isnan(target):
            raise ConfigurationError("target must be a number, not NaN.")
        return RandomSearchConfigData(**self._cfg)


__all__ = ["RandomSearchConfig", "RandomSearchConfigData"]
