from .population import sample_uniform
from .termination import TargetTracker, parse_termination

__all__ = ["sample_uniform", "TargetTracker", "parse_termination"]
