from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict

from rsearch.foundation.exceptions import ConfigurationError

TITLE = "rsearch: random search"
DEFAULT_PROBLEM = "sphere"
DEFAULT_MAX_ITERATIONS = 100


def _default_seed() -> int:
    raw = os.environ.get("RSEARCH_SEED", "")
    try:
        return int(raw) if raw else 42
    except ValueError as exc:
        raise ConfigurationError(f"RSEARCH_SEED must be an integer; got '{raw}'.") from exc


@dataclass
class ExperimentConfig:
    title: str = TITLE
    problem: str = DEFAULT_PROBLEM
    n_var: int | None = None
    lower: float | None = None
    upper: float | None = None
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    batch_size: int = 1
    # Read at instantiation time so tests that set RSEARCH_SEED take effect.
    seed: int = field(default_factory=_default_seed)
    target: float | None = None
    stop_at_optimum: bool = True
    log_interval: int = 0
    plot: str | None = None

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "ExperimentConfig":
        known = {f.name for f in fields(cls)}
        normalized = {str(k).replace("-", "_"): v for k, v in (data or {}).items()}
        unknown = sorted(set(normalized) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown experiment option(s): {', '.join(unknown)}.",
                suggestion="Valid options: " + ", ".join(sorted(known)),
            )
        return cls(**normalized)


def load_experiment_spec(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON experiment file into a dict.

    Read and parse failures surface as ``ConfigurationError`` so the CLI can
    report them on one line.
    """
    spec_path = Path(path).expanduser().resolve()
    if not spec_path.exists():
        raise ConfigurationError(
            f"Config file '{spec_path}' does not exist.",
            suggestion="Check the path passed to --config.",
        )
    suffix = spec_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise ConfigurationError(
                "YAML config requested but PyYAML is not installed.",
                suggestion="Install with 'pip install rsearch[yaml]' or use a JSON file.",
            ) from exc
        try:
            with spec_path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"Could not read config file '{spec_path}': {exc}") from exc
    else:
        try:
            with spec_path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            raise ConfigurationError(f"Could not read config file '{spec_path}': {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file '{spec_path}' must contain a mapping at the top level.")
    return data


__all__ = [
    "ExperimentConfig",
    "load_experiment_spec",
    "DEFAULT_PROBLEM",
    "DEFAULT_MAX_ITERATIONS",
    "TITLE",
]
