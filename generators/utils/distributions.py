"""Statistical distribution helpers for realistic data generation."""

import numpy as np


def log_normal_sample(
    rng: np.random.Generator,
    mean: float,
    std: float,
    min_val: float = 0.5,
    max_val: float | None = None,
) -> float:
    value = float(rng.lognormal(mean, std))
    value = max(value, min_val)
    if max_val is not None:
        value = min(value, max_val)
    return value


def burst_offsets(rng: np.random.Generator, count: int, window_seconds: float) -> list[float]:
    """Sorted offsets (seconds) for ``count`` events packed inside one window.

    Offsets start at 0 and stay strictly below ``window_seconds``.
    """
    if count <= 0:
        return []
    offsets = np.sort(rng.uniform(0, window_seconds * 0.9, size=count - 1))
    return [0.0, *(round(float(o), 3) for o in offsets)]
