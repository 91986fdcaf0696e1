from __future__ import annotations

import numpy as np


def sample_uniform(
    n_samples: int,
    xl: np.ndarray,
    xu: np.ndarray,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw ``n_samples`` points uniformly from the box ``[xl, xu]``."""
    if n_samples <= 0:
        raise ValueError("n_samples must be positive.")
    return rng.uniform(xl, xu, size=(n_samples, xl.shape[0]))


__all__ = ["sample_uniform"]
