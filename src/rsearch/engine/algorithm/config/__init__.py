from .random_search import RandomSearchConfig, RandomSearchConfigData

__all__ = ["RandomSearchConfig", "RandomSearchConfigData"]
