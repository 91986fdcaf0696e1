from .config import RandomSearchConfig, RandomSearchConfigData
from .random_search import RandomSearch

__all__ = ["RandomSearch", "RandomSearchConfig", "RandomSearchConfigData"]
