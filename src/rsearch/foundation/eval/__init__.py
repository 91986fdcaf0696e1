from .population import evaluate_population

__all__ = ["evaluate_population"]
