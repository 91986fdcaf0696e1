from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Sequence

from rsearch.engine.algorithm.config import RandomSearchConfig
from rsearch.foundation.core.experiment_config import ExperimentConfig, load_experiment_spec
from rsearch.foundation.core.optimize import OptimizationResult, OptimizeConfig, optimize
from rsearch.foundation.exceptions import RSearchError
from rsearch.foundation.logging import configure_rsearch_logging
from rsearch.foundation.problem.registry import available_problem_names, get_problem_specs, make_problem
from rsearch.foundation.version import get_version

_logger = logging.getLogger(__name__)


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{raw}'") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def parse_args(argv: Sequence[str] | None = None, default_config: ExperimentConfig | None = None) -> argparse.Namespace:
    """Parse CLI arguments; values from ``--config`` act as defaults that flags override."""
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        help="Path to a YAML/JSON experiment specification. CLI arguments override file values.",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)

    base = default_config or ExperimentConfig()
    if pre_args.config:
        base = ExperimentConfig.from_mapping({**vars(base), **load_experiment_spec(pre_args.config)})

    parser = argparse.ArgumentParser(
        prog="rsearch",
        description="Minimise a bounded objective by uniform random sampling.",
        parents=[pre_parser],
    )
    parser.add_argument(
        "--problem",
        default=base.problem,
        help=f"Benchmark problem to minimise (default: {base.problem}). See --list-problems.",
    )
    parser.add_argument("--n-var", type=_positive_int, default=base.n_var, help="Number of decision variables.")
    parser.add_argument("--lower", type=float, default=base.lower, help="Lower bound for every variable.")
    parser.add_argument("--upper", type=float, default=base.upper, help="Upper bound for every variable.")
    parser.add_argument(
        "--max-iter",
        dest="max_iterations",
        type=_positive_int,
        default=base.max_iterations,
        help="Iteration cap; one candidate is sampled per iteration.",
    )
    parser.add_argument(
        "--batch-size",
        type=_positive_int,
        default=base.batch_size,
        help="Candidates evaluated per vectorised call.",
    )
    parser.add_argument("--seed", type=int, default=base.seed, help="Random seed.")
    parser.add_argument("--target", type=float, default=base.target, help="Stop once the best score is <= TARGET.")
    parser.add_argument(
        "--no-stop-at-optimum",
        dest="stop_at_optimum",
        action="store_false",
        default=base.stop_at_optimum,
        help="Keep sampling after the known optimum is reached.",
    )
    parser.add_argument(
        "--log-interval",
        type=_non_negative_int,
        default=base.log_interval,
        help="Log ' > iteration=i, best=score' every N iterations (0 disables).",
    )
    parser.add_argument("--plot", default=base.plot, help="Write a convergence plot to this path (needs matplotlib).")
    parser.add_argument("--list-problems", action="store_true", help="List available problems and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    args = parser.parse_args(argv)
    args.config_path = pre_args.config
    return args


def build_optimize_config(args: argparse.Namespace) -> OptimizeConfig:
    problem = make_problem(args.problem, args.n_var, xl=args.lower, xu=args.upper)
    builder = (
        RandomSearchConfig()
        .max_iterations(args.max_iterations)
        .batch_size(args.batch_size)
        .stop_at_optimum(args.stop_at_optimum)
        .target(args.target)
        .log_interval(args.log_interval)
        .record_history(True)
    )
    return OptimizeConfig(
        problem=problem,
        algorithm_config=builder.fixed(),
        termination=("n_iter", args.max_iterations),
        seed=args.seed,
    )


def _list_problems() -> None:
    specs = get_problem_specs()
    for name in available_problem_names():
        spec = specs[name]
        print(f"{name:<12} {spec.label:<12} n_var={spec.default_n_var:<3} {spec.description}")


def _maybe_plot(result: OptimizationResult, path: str | None) -> None:
    if not path:
        return
    from rsearch.ux.visualization import save_convergence_plot

    try:
        out = save_convergence_plot(result.history, path)
    except ImportError as exc:
        _logger.warning("Skipping convergence plot: %s", exc)
        return
    _logger.info("Convergence plot written to %s", out)


def _format_args(args: argparse.Namespace) -> dict[str, Any]:
    return {k: v for k, v in vars(args).items() if k not in {"list_problems", "verbose"}}


def run_from_args(args: argparse.Namespace) -> OptimizationResult:
    _logger.debug("Run arguments: %s", _format_args(args))
    cfg = build_optimize_config(args)
    result = optimize(cfg)
    print(result.summary())
    print(f"Iterations: {result.data['n_iter']} (stop reason: {result.data['stop_reason']})")
    _maybe_plot(result, args.plot)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    try:
        args = parse_args(argv)
    except RSearchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    configure_rsearch_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    if args.list_problems:
        _list_problems()
        return 0
    try:
        run_from_args(args)
    except RSearchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
