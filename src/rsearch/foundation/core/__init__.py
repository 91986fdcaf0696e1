from .experiment_config import ExperimentConfig, load_experiment_spec
from .optimize import OptimizationResult, OptimizeConfig, optimize

__all__ = ["ExperimentConfig", "load_experiment_spec", "OptimizationResult", "OptimizeConfig", "optimize"]
